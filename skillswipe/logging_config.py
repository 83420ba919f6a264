"""Logging configuration for SkillSwipe."""
import logging
import logging.handlers
from pathlib import Path


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    matching_level: str | None = None,
) -> None:
    """Configure application-wide logging.

    Call once at application startup (CLI entry point, scripts).

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path for rotating file handler
        matching_level: Separate level for skillswipe.matching, e.g. DEBUG to
            trace classification and ranking without verbose SQL or HTTP logs
    """
    root = logging.getLogger()

    # Avoid duplicate handlers on repeated calls
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    root.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
        )
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    if matching_level:
        logging.getLogger("skillswipe.matching").setLevel(
            getattr(logging, matching_level.upper(), logging.INFO)
        )

    # Quiet noisy libraries
    for name in ("sqlalchemy", "aiohttp", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)
