"""
Analyze router - /analyze endpoint.
"""
import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ..dependencies import get_gateway
from ..errors import ClientInputError
from ..models.schemas import AnalyzeResponse, ApplicantProfile
from ..services.analysis import analyze_applicant
from ..services.eligibility import parse_compensation
from ..services.gateway import GeminiGateway
from ..services.resume import extract_resume_text

logger = logging.getLogger(__name__)
router = APIRouter()


async def read_resume_text(resume: UploadFile | None) -> str:
    """Read the uploaded resume and extract its text; the upload is required."""
    if resume is None:
        raise ClientInputError("Resume file is required.")

    data = await resume.read()
    if not data:
        raise ClientInputError("Resume file is required.")

    logger.debug(f"Resume received: {resume.filename}, {len(data)} bytes")
    return extract_resume_text(resume.filename, data)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    job_role: str = Form("", alias="jobRole"),
    experience: str = Form(""),
    ctc: str = Form(""),
    company_name: str = Form("", alias="companyName"),
    product_interest: str = Form("", alias="productInterest"),
    reason: str = Form(""),
    email: str = Form(""),
    resume: UploadFile | None = File(None),
    gateway: GeminiGateway = Depends(get_gateway),
):
    """Evaluate an applicant and decide their bootcamp scholarship."""
    logger.info("=== ANALYZE REQUEST ===")

    resume_text = await read_resume_text(resume)
    compensation = parse_compensation(ctc)

    profile = ApplicantProfile(
        company_name=company_name,
        job_role=job_role,
        experience=experience,
        compensation=compensation,
        product_interest=product_interest,
        reason=reason,
        resume_text=resume_text,
        email=email,
    )

    result = await analyze_applicant(profile, gateway)
    return AnalyzeResponse(result=result)
