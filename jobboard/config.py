"""Load page settings and env configuration."""
from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from jobboard.log import get_logger
from jobboard.sorting import SortMode

log = get_logger(__name__)

load_dotenv()

ROOT: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT / "config"
DATA_DIR: Path = ROOT / "data"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"
SAMPLE_JOBS_PATH: Path = DATA_DIR / "sample_jobs.json"

DEFAULTS: dict[str, Any] = {
    "page_title": "Job Listings",
    "default_sort": None,
    "ingest": {"strict": False},
    "show_sample_loader": True,
}


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def settings_path() -> Path:
    override = get_env("JOBBOARD_SETTINGS")
    return Path(override) if override else SETTINGS_PATH


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Settings YAML merged over DEFAULTS; a missing file yields the defaults."""
    path = path or settings_path()
    if not path.exists():
        log.debug("No settings at %s, using defaults", path)
        return copy.deepcopy(DEFAULTS)

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")

    settings = _merge(DEFAULTS, data)

    sort = settings.get("default_sort")
    if sort is not None:
        try:
            SortMode(sort)
        except ValueError:
            raise ValueError(
                f"{path}: default_sort must be one of "
                f"{[m.value for m in SortMode]} or null, got {sort!r}"
            ) from None

    log.debug("Loaded settings from %s", path)
    return settings
