"""
Services package initialization.
"""
from .gateway import GeminiGateway
from .assessment import parse_model_assessment
from .eligibility import decide_scholarship, parse_compensation
from .resume import extract_resume_text
from .analysis import analyze_applicant

__all__ = [
    "GeminiGateway",
    "parse_model_assessment",
    "decide_scholarship",
    "parse_compensation",
    "extract_resume_text",
    "analyze_applicant",
]
