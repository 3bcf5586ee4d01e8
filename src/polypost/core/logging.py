import logging
import sys
from pathlib import Path


def setup_logging(log_level: str = "INFO", log_file: Path | None = None):
    """
    Configures logging for the application.

    Logs go to stderr, and additionally to ``log_file`` when one is given
    (see ``polypost.core.paths.LOGS_DIR`` for the conventional location).
    """
    log_level = log_level.upper()
    if log_level not in logging.getLevelNamesMapping():
        msg = f"Unknown log level: {log_level}"
        raise ValueError(msg)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )

    # Quieten down noisy libraries
    logging.getLogger("pydantic").setLevel(logging.WARNING)
