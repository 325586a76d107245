"""
Scholarship Evaluation API entry point.

Run with: uvicorn scholarship_eval.main:app --port 3001
"""
import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .dependencies import get_settings
from .errors import AnalysisError, ClientInputError
from .models.schemas import ErrorReport
from .routers import analyze_router, health_router

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(title="Scholarship Evaluation", version="1.0.0")


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    if exc.status_code < 500:
        logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc.detail}")
    else:
        logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.detail}")
    report = ErrorReport(message=exc.message, detail=exc.detail, type=type(exc).__name__)
    return JSONResponse(status_code=exc.status_code, content=report.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.warning(f"Request validation failed on {request.url.path}: {problems}")
    return await analysis_error_handler(request, ClientInputError(f"Invalid form data: {problems}"))


# Custom exception handler to log all errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("=== UNHANDLED EXCEPTION ===")
    logger.error(f"Path: {request.url.path}")
    logger.error(f"Method: {request.method}")
    logger.error(f"Exception type: {type(exc).__name__}")
    logger.error(f"Exception message: {str(exc)}")
    logger.error(f"Traceback: {traceback.format_exc()}")
    report = ErrorReport(
        message="Error processing request.",
        detail="Internal server error",
        type=type(exc).__name__,
    )
    return JSONResponse(status_code=500, content=report.model_dump())


# Log all requests; bodies carry resume text and email, so only the line is logged
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.debug(f"=== INCOMING REQUEST === {request.method} {request.url.path}")
    response = await call_next(request)
    logger.debug(f"=== RESPONSE === {request.method} {request.url.path} -> {response.status_code}")
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.allowed_origins),
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(analyze_router)
