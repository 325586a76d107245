"""
Application configuration and environment variables.
"""
import os
import logging
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def resolve_log_level(raw: str | None) -> str:
    """Return a known logging level name, falling back to INFO."""
    name = (raw or "").strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return "INFO"


# Configure logging
logging.basicConfig(
    level=resolve_log_level(os.getenv("LOG_LEVEL")),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, resolved once at startup."""
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    allowed_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"


def _split_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ("*",)
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


def load_settings(environ=None) -> Settings:
    """Build Settings from the environment (or the given mapping)."""
    env = os.environ if environ is None else environ

    settings = Settings(
        gemini_api_key=(env.get("GEMINI_API_KEY") or "").strip(),
        gemini_model=env.get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
        allowed_origins=_split_origins(env.get("ALLOWED_ORIGINS")),
        log_level=resolve_log_level(env.get("LOG_LEVEL")),
    )

    logging.getLogger().setLevel(settings.log_level)

    # Log startup configuration
    logger.debug("=== STARTUP CONFIGURATION ===")
    logger.debug(f"GEMINI_API_KEY set: {bool(settings.gemini_api_key)}")
    logger.debug(f"GEMINI_MODEL: {settings.gemini_model}")
    logger.debug(f"ALLOWED_ORIGINS: {settings.allowed_origins}")
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; /analyze requests will fail")

    return settings
