"""
Pydantic models for request/response schemas.
"""
from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


# ============================================================================
# APPLICANT MODELS
# ============================================================================

class ApplicantProfile(BaseModel):
    """Applicant details submitted through the evaluation form."""
    model_config = ConfigDict(frozen=True)

    company_name: str = ""
    job_role: str = ""
    experience: str = ""  # Years, rendered verbatim into the prompt
    compensation: Decimal  # Current CTC in LPA
    product_interest: str = ""
    reason: str = ""
    resume_text: str
    email: str = ""


# ============================================================================
# MODEL OUTPUT
# ============================================================================

ThreePoints = Annotated[list[StrictStr], Field(min_length=3, max_length=3)]


class ModelAssessment(BaseModel):
    """Qualitative assessment decoded from the Gemini response."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    benefits: ThreePoints
    alignment: ThreePoints
    resume_review: StrictStr = Field(alias="resumeReview")
    is_highly_aligned: StrictBool = Field(alias="isHighlyAlignedOrIntellectual")


# ============================================================================
# ELIGIBILITY MODELS
# ============================================================================

class EligibilityStatus(str, Enum):
    ELIGIBLE = "Eligible ✅"
    NOT_ELIGIBLE = "Not Eligible ❌"


class EligibilityDecision(BaseModel):
    """Scholarship award derived from CTC and the alignment flag."""
    model_config = ConfigDict(frozen=True)

    amount: int
    status: EligibilityStatus
    message: str


# ============================================================================
# ANALYSIS RESPONSE MODELS
# ============================================================================

class AnalysisResult(BaseModel):
    """Model assessment merged with the scholarship decision."""
    model_config = ConfigDict(populate_by_name=True)

    benefits: list[str]
    alignment: list[str]
    resume_review: str = Field(alias="resumeReview")
    is_highly_aligned: bool = Field(alias="isHighlyAlignedOrIntellectual")
    scholarship_eligibility: EligibilityStatus = Field(alias="scholarshipEligibility")
    scholarship_message: str = Field(alias="scholarshipMessage")
    scholarship_amount: int = Field(alias="scholarshipAmount")

    @classmethod
    def combine(cls, assessment: ModelAssessment, decision: EligibilityDecision) -> "AnalysisResult":
        return cls(
            benefits=list(assessment.benefits),
            alignment=list(assessment.alignment),
            resume_review=assessment.resume_review,
            is_highly_aligned=assessment.is_highly_aligned,
            scholarship_eligibility=decision.status,
            scholarship_message=decision.message,
            scholarship_amount=decision.amount,
        )


class AnalyzeResponse(BaseModel):
    """Response model for /analyze."""
    result: AnalysisResult


class ErrorReport(BaseModel):
    """Body returned for any failed request."""
    message: str
    detail: str
    type: str
