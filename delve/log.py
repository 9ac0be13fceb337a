import logging
import os
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Path] = None,
) -> None:
    """Configure the root logger.

    ``level`` wins over the DELVE_LOG_LEVEL env var, which wins over INFO.
    When ``log_file`` is given, records are also appended there.
    """
    if level is None:
        level = os.getenv("DELVE_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    handlers = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
