"""
Decoding of the Gemini response envelope into a ModelAssessment.
"""
import logging
import json
from collections.abc import Mapping

from pydantic import ValidationError

from ..errors import MalformedModelOutputError, UpstreamShapeError
from ..models.schemas import ModelAssessment

logger = logging.getLogger(__name__)


def extract_candidate_text(body: Mapping) -> str:
    """Return the first text part of the first candidate."""
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        logger.error(f"Gemini API response structure unexpected: {type(e).__name__}: {e}")
        logger.debug(f"Response keys: {list(body.keys()) if isinstance(body, Mapping) else type(body).__name__}")
        raise UpstreamShapeError() from e

    if not isinstance(text, str):
        logger.error(f"Candidate text has type {type(text).__name__}, expected str")
        raise UpstreamShapeError()
    return text


def strip_code_fence(text: str) -> str:
    """Remove a surrounding ```json fence, if the model added one."""
    result_text = text.strip()
    if result_text.startswith("```"):
        result_text = result_text.split("```")[1]
        if result_text.startswith("json"):
            result_text = result_text[4:]
    return result_text.strip()


def parse_model_assessment(body: Mapping) -> ModelAssessment:
    """Decode and strictly validate the model's JSON payload."""
    result_text = strip_code_fence(extract_candidate_text(body))
    logger.debug(f"Candidate text length: {len(result_text)}")

    try:
        data = json.loads(result_text)
    except json.JSONDecodeError as e:
        logger.error(f"JSON parsing failed: {e}")
        logger.debug(f"Raw response was: {result_text[:1000]}")
        raise MalformedModelOutputError() from e

    if not isinstance(data, dict):
        logger.error(f"Model output is a JSON {type(data).__name__}, expected object")
        raise MalformedModelOutputError()

    try:
        assessment = ModelAssessment.model_validate(data)
    except ValidationError as e:
        logger.error(f"Model output failed validation: {e.error_count()} error(s)")
        logger.debug(f"Validation errors: {e.errors(include_input=False)}")
        raise MalformedModelOutputError() from e

    logger.debug(f"Assessment parsed: isHighlyAlignedOrIntellectual={assessment.is_highly_aligned}")
    return assessment
