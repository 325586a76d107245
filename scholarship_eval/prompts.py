"""
Centralized LLM prompts for the bootcamp scholarship evaluation.
"""
from .models.schemas import ApplicantProfile


# ============================================================================
# APPLICANT ANALYSIS PROMPT
# ============================================================================

ANALYSIS_PROMPT = """A user has submitted the following details for a Data Analytics Bootcamp evaluation:
Resume Text: {resume_text}
Current Company: {company_name}
Current Job Role: {job_role}
Experience: {experience} years
Current CTC: {compensation} LPA
Interested In: {product_interest}
Reason For Joining: {reason}
Contact Email: {email}

Based on the Data Analytics Job Bootcamp brochure, provide a JSON response with the following keys.

For 'benefits', provide exactly 3 concise points that highlight the advantages of the program, including general career growth potential and salary hike data in the Indian job industry for Data Analytics. Keep it short and to the point.

For 'alignment', provide exactly 3 concise points. The first two points should explain how Data Analytics aligns with their current job role or career aspirations. The last point should specifically outline a clear career progression path taking into account the user's current '{job_role}' after learning Data Analytics and subsequent advancements according to the Indian job industry (e.g., 'HR -> HR Analyst -> Senior HR Analyst').

For 'resumeReview', provide a single short and honest paragraph (maximum 2-3 sentences), directly to the point, highlighting current skill gaps and areas for immediate improvement relevant to a Data Analytics domain, based on the skills provided in the resume text.

For the 'isHighlyAlignedOrIntellectual' field, evaluate the user's 'Job Role' and 'Resume Text'.
Set 'isHighlyAlignedOrIntellectual' to true if the profile indicates a strong alignment with Data Analytics (e.g., currently an analyst, data-related roles) OR if the resume suggests high intellectual capacity, strong problem-solving skills, or a strong likelihood of converting a scholarship into enrollment. Otherwise, set it to false.

Return ONLY valid JSON with this EXACT structure:
{{
  "benefits": [
    "Benefit 1 (general career growth/salary hike, concise)",
    "Benefit 2 (from brochure, concise)",
    "Benefit 3 (from brochure, concise)"
  ],
  "alignment": [
    "How Data Analytics aligns with the job role (concise)",
    "How Data Analytics aligns with career aspirations (concise)",
    "Career progression for {job_role} after Data Analytics in the Indian job market (e.g., HR -> HR Analyst -> Senior HR Analyst)"
  ],
  "resumeReview": "A short and honest paragraph (maximum 2-3 sentences) highlighting current skill gaps and areas for immediate improvement.",
  "isHighlyAlignedOrIntellectual": <true or false>
}}

Ensure the entire output is valid JSON. Do not include any extra text before or after the JSON.
"""


# Passed as response_schema so Gemini is constrained to well-formed output.
ANALYSIS_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "benefits": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "minItems": 3,
            "maxItems": 3,
        },
        "alignment": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "minItems": 3,
            "maxItems": 3,
        },
        "resumeReview": {"type": "STRING"},
        "isHighlyAlignedOrIntellectual": {"type": "BOOLEAN"},
    },
    "required": ["benefits", "alignment", "resumeReview", "isHighlyAlignedOrIntellectual"],
}


def build_analysis_prompt(profile: ApplicantProfile) -> str:
    """Render the applicant profile into the analysis prompt."""
    return ANALYSIS_PROMPT.format(
        resume_text=profile.resume_text,
        company_name=profile.company_name,
        job_role=profile.job_role,
        experience=profile.experience,
        compensation=profile.compensation,
        product_interest=profile.product_interest,
        reason=profile.reason,
        email=profile.email,
    )
