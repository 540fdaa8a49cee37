import logging
import os

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("proactive_audio")

logging.basicConfig(
    level=LOG_LEVEL if LOG_LEVEL in LOG_LEVELS else "INFO",
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Suppress google_genai logs
for name in ("google_genai.models", "google_genai.types", "google_genai.live"):
    logging.getLogger(name).setLevel(logging.WARNING)


def set_log_level(level: str) -> None:
    """Set the package log level; unknown names are ignored."""
    level = level.upper()
    if level in LOG_LEVELS:
        logger.setLevel(level)


set_log_level(LOG_LEVEL)
