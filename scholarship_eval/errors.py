"""
Error taxonomy for the analysis flow.

Every error carries the HTTP status it maps to and a `detail` string that is
safe to hand back to the caller.
"""


class AnalysisError(Exception):
    """Base class for failures that terminate an /analyze request."""
    status_code = 500
    message = "Error processing request."

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.message
        super().__init__(self.detail)


class ClientInputError(AnalysisError):
    """The submitted form is missing or carries unusable data."""
    status_code = 400
    message = "Invalid request."


class InvalidCompensationError(ClientInputError):
    message = "CTC must be a non-negative number in LPA."


class ConfigurationError(AnalysisError):
    """A required server setting (the Gemini credential) is missing."""
    status_code = 500
    message = "Server configuration error: Gemini API Key is missing."


class UpstreamTransportError(AnalysisError):
    """The call to the generative API did not succeed."""
    status_code = 502
    message = "Error: AI model request failed."

    def __init__(self, upstream_status: int | None = None, upstream_body: str | None = None):
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body or ""
        status_text = upstream_status if upstream_status is not None else "no response"
        super().__init__(f"Upstream request failed (status: {status_text})")


class UpstreamShapeError(AnalysisError):
    """The upstream envelope has no candidate text to decode."""
    status_code = 502
    message = "Error: Unexpected response from AI model."


class MalformedModelOutputError(AnalysisError):
    """The model's text is not JSON or does not match the expected fields."""
    status_code = 502
    message = "Error: AI model returned malformed output."
