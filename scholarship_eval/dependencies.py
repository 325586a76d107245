"""
Shared dependencies: settings and the Gemini gateway.
"""
import logging
from functools import lru_cache

from fastapi import Depends

from .config import Settings, load_settings
from .services.gateway import GeminiGateway

logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return load_settings()


@lru_cache
def _build_gateway(settings: Settings) -> GeminiGateway:
    logger.debug("Creating Gemini gateway...")
    return GeminiGateway(settings)


def get_gateway(settings: Settings = Depends(get_settings)) -> GeminiGateway:
    """Return the Gemini gateway bound to the current settings."""
    return _build_gateway(settings)
