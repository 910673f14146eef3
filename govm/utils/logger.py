"""Logging setup."""

import logging
from pathlib import Path
from typing import Optional

# marks handlers installed by setup_logging
_HANDLER_ATTR = "_govm_handler"


def setup_logging(verbose: bool = False, log_dir: Optional[Path] = None):
    """Setup logging configuration.

    Calling it again only adjusts the console level; handlers are added once.
    """
    logger = logging.getLogger()
    console_level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(console_level)

    installed = [h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)]
    if installed:
        for handler in installed:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(console_level)
        return

    log_dir = log_dir or (Path.home() / ".cache" / "govm")
    log_dir.mkdir(parents=True, exist_ok=True)

    # File handler keeps debug detail regardless of verbosity
    file_handler = logging.FileHandler(log_dir / "govm.log")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

    for handler in (file_handler, console_handler):
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
