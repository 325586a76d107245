"""
Models package initialization.
"""
from .schemas import (
    # Applicant models
    ApplicantProfile,
    # Model output
    ModelAssessment,
    # Eligibility models
    EligibilityStatus,
    EligibilityDecision,
    # Analysis response models
    AnalysisResult,
    AnalyzeResponse,
    ErrorReport,
)

__all__ = [
    "ApplicantProfile",
    "ModelAssessment",
    "EligibilityStatus",
    "EligibilityDecision",
    "AnalysisResult",
    "AnalyzeResponse",
    "ErrorReport",
]
