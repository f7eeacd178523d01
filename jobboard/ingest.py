"""Turn an uploaded JSON document into Job records."""
from __future__ import annotations

import json
from typing import Any

from jobboard.errors import InvalidUploadError
from jobboard.log import get_logger
from jobboard.models import Job

log = get_logger(__name__)

# JSON key for each Job field, in constructor order.
FIELD_KEYS: dict[str, str] = {
    "title": "Title",
    "posted": "Posted",
    "type": "Type",
    "level": "Level",
    "skill": "Skill",
    "detail": "Detail",
}

MISSING_TEXT = "undefined"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _as_text(value: Any) -> str:
    """Render a JSON value the way the page prints it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if v is None else _as_text(v) for v in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def _job_from_record(record: dict[str, Any], index: int, strict: bool) -> Job:
    fields: dict[str, str] = {}
    for attr, key in FIELD_KEYS.items():
        if key in record:
            fields[attr] = _as_text(record[key])
        elif strict:
            raise InvalidUploadError() from KeyError(f"record {index} has no {key!r}")
        else:
            fields[attr] = MISSING_TEXT
    return Job(**fields)


def _decode(raw: bytes | str) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        log.warning("Upload rejected: not UTF-8 text (%s)", exc)
        raise InvalidUploadError() from exc


def parse_jobs(raw: bytes | str, *, strict: bool = False) -> list[Job]:
    """Parse a JSON array of job objects into Jobs, in file order.

    Records missing a field get the text ``"undefined"`` for it, unless
    *strict* is set, in which case the whole upload is rejected.
    Raises InvalidUploadError for anything that is not a JSON array of
    objects; no partial list is ever returned.
    """
    text = _decode(raw)
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        log.warning("Upload rejected: invalid JSON (%s)", exc)
        raise InvalidUploadError() from exc

    if not isinstance(data, list):
        log.warning("Upload rejected: top-level %s is not an array", type(data).__name__)
        raise InvalidUploadError()

    jobs: list[Job] = []
    for i, record in enumerate(data):
        if not isinstance(record, dict):
            log.warning("Upload rejected: element %d is %s, not an object", i, type(record).__name__)
            raise InvalidUploadError()
        try:
            jobs.append(_job_from_record(record, i, strict))
        except InvalidUploadError as exc:
            log.warning("Upload rejected: %s", exc.__cause__)
            raise

    log.info("Parsed %d job(s) from upload", len(jobs))
    return jobs

