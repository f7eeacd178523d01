"""Logging setup shared by the Streamlit page, the CLI and the pipeline modules."""
from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; configures root handlers on first call."""
    global _configured
    if not _configured:
        _configure()
        _configured = True
    return logging.getLogger(name)


def set_level(level_name: str) -> None:
    """Change the root and console level at runtime (CLI ``--verbose``)."""
    level = _parse_level(level_name)
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


def _parse_level(level_name: str) -> int:
    return getattr(logging, level_name.upper(), logging.INFO)


def _log_dir() -> Path:
    override = os.environ.get("JOBBOARD_LOG_DIR", "").strip()
    return Path(override) if override else DEFAULT_LOG_DIR


def _configure() -> None:
    load_dotenv()
    level = _parse_level(os.environ.get("LOG_LEVEL", "INFO"))

    root = logging.getLogger()
    root.setLevel(level)

    if root.handlers:
        return

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FMT)
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    try:
        log_dir = _log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"jobboard_{datetime.now().strftime('%Y-%m-%d')}.log"
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        root.addHandler(fh)
    except OSError:
        # read-only checkout: console only
        pass
