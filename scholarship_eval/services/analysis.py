"""
Applicant analysis pipeline: prompt -> Gemini -> parse -> decide.
"""
import logging

from ..models.schemas import AnalysisResult, ApplicantProfile
from ..prompts import ANALYSIS_RESPONSE_SCHEMA, build_analysis_prompt
from .assessment import parse_model_assessment
from .eligibility import decide_scholarship
from .gateway import GeminiGateway

logger = logging.getLogger(__name__)


async def analyze_applicant(profile: ApplicantProfile, gateway: GeminiGateway) -> AnalysisResult:
    """Run one applicant through the full evaluation.

    Each step raises an AnalysisError subclass on failure, so a decision is
    only computed from a fully validated assessment.
    """
    logger.debug("=" * 50)
    logger.debug("STARTING APPLICANT ANALYSIS")
    logger.debug("=" * 50)
    logger.debug(f"Job role: {profile.job_role!r}, CTC: {profile.compensation} LPA")
    logger.debug(f"Resume length: {len(profile.resume_text)} characters")

    prompt = build_analysis_prompt(profile)
    body = await gateway.generate(prompt, ANALYSIS_RESPONSE_SCHEMA)
    assessment = parse_model_assessment(body)
    decision = decide_scholarship(profile.compensation, assessment.is_highly_aligned)

    logger.info(f"Analysis complete: amount={decision.amount}, status={decision.status.name}")
    return AnalysisResult.combine(assessment, decision)
