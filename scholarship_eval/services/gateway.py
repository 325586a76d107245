"""
Gemini gateway: the single outbound call made per /analyze request.
"""
import logging

import httpx
from google import genai
from google.genai import errors, types

from ..config import Settings
from ..errors import ConfigurationError, UpstreamTransportError

logger = logging.getLogger(__name__)


class GeminiGateway:
    """Thin wrapper around the google-genai client bound to one Settings value."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.model = settings.gemini_model
        self._client = None
        if settings.gemini_api_key:
            logger.debug("Initializing Gemini client...")
            self._client = genai.Client(api_key=settings.gemini_api_key)
            logger.debug("Gemini client initialized successfully")

    async def generate(self, prompt: str, schema: dict) -> dict:
        """Send the prompt with a JSON response schema and return the raw body."""
        if self._client is None:
            logger.error("GEMINI_API_KEY environment variable is not set.")
            raise ConfigurationError()

        logger.debug(f"Using model: {self.model}")
        logger.debug(f"Prompt length: {len(prompt)} characters")

        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=schema,
                )
            )
        except errors.APIError as e:
            logger.error(f"Gemini API call failed: {e.code} {e.status}: {e.message}")
            raise UpstreamTransportError(upstream_status=e.code, upstream_body=e.message) from e
        except httpx.HTTPError as e:
            logger.error(f"Gemini API transport failure: {type(e).__name__}: {e}")
            raise UpstreamTransportError(upstream_body=str(e)) from e

        logger.debug("Gemini API call successful")
        return response.model_dump(mode="json", exclude_none=True)
