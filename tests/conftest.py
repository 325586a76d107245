"""Shared test fixtures."""

from __future__ import annotations

import json
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from scholarship_eval.config import Settings
from scholarship_eval.dependencies import get_gateway, get_settings
from scholarship_eval.main import app
from scholarship_eval.models.schemas import ApplicantProfile
from scholarship_eval.services.gateway import GeminiGateway


def make_gemini_body(text: str) -> dict:
    """Build a generateContent response body carrying one text part."""
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finish_reason": "STOP",
            }
        ]
    }


def make_assessment_payload(highly_aligned: bool = False, **overrides) -> dict:
    payload = {
        "benefits": [
            "Data analysts in India see 30-50% salary hikes on switching.",
            "Hands-on projects with SQL, Excel, Power BI and Python.",
            "Placement support with 300+ hiring partners.",
        ],
        "alignment": [
            "Reporting work already involves structured data.",
            "Analytics skills add measurable impact to current responsibilities.",
            "Operations Executive -> Operations Analyst -> Senior Business Analyst",
        ],
        "resumeReview": "Strong SQL basics. Add a visualization tool and a portfolio project.",
        "isHighlyAlignedOrIntellectual": highly_aligned,
    }
    payload.update(overrides)
    return payload


def make_assessment_body(highly_aligned: bool = False, **overrides) -> dict:
    return make_gemini_body(json.dumps(make_assessment_payload(highly_aligned, **overrides)))


@pytest.fixture
def sample_profile() -> ApplicantProfile:
    return ApplicantProfile(
        company_name="Acme Logistics",
        job_role="Operations Executive",
        experience="3",
        compensation=Decimal("10"),
        product_interest="Data Analytics Job Bootcamp",
        reason="Move into an analyst role",
        resume_text="Operations Executive. Excel, SQL, weekly MIS reports.",
        email="applicant@example.com",
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="test-key", gemini_model="gemini-2.5-flash")


@pytest.fixture
def mock_gateway() -> GeminiGateway:
    """Create a mock Gemini gateway returning a non-aligned assessment."""
    gateway = AsyncMock(spec=GeminiGateway)
    gateway.generate = AsyncMock(return_value=make_assessment_body(highly_aligned=False))
    return gateway


@pytest.fixture
def client(mock_gateway):
    app.dependency_overrides[get_gateway] = lambda: mock_gateway
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client():
    """Client whose settings carry no Gemini credential."""
    app.dependency_overrides[get_settings] = lambda: Settings(gemini_api_key="")
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def gemini_body():
    """Factory for raw generateContent bodies with the given text."""
    return make_gemini_body


@pytest.fixture
def assessment_body():
    """Factory for bodies carrying a valid assessment JSON payload."""
    return make_assessment_body


@pytest.fixture
def assessment_payload():
    """Factory for the decoded assessment payload itself."""
    return make_assessment_payload
