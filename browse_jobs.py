#!/usr/bin/env python3
"""Filter, sort and list jobs from a JSON file without the browser page.

Usage:
  python browse_jobs.py jobs.json --level Senior --sort latest
  python browse_jobs.py jobs.json --sort az --details 2
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobboard.config import load_settings
from jobboard.errors import InvalidUploadError
from jobboard.filters import FilterSelection
from jobboard.log import get_logger, set_level
from jobboard.session import JobSession
from jobboard.sorting import SortMode

log = get_logger(__name__)


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("file", type=Path, help="JSON array of job objects")
    p.add_argument("--level")
    p.add_argument("--type")
    p.add_argument("--skill")
    p.add_argument("--sort", choices=[m.value for m in SortMode])
    p.add_argument("--details", type=int, metavar="N", help="show details of the N-th listed job")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    if args.verbose:
        set_level("DEBUG")

    settings = load_settings()
    session = JobSession(
        strict=bool(settings["ingest"].get("strict")),
        sort_mode=args.sort or settings.get("default_sort"),
    )
    try:
        raw = args.file.read_bytes()
    except OSError as exc:
        print(f"Cannot read {args.file}: {exc}", file=sys.stderr)
        return 1
    try:
        session.load(raw)
    except InvalidUploadError as exc:
        print(exc, file=sys.stderr)
        return 1

    session.set_filters(FilterSelection(level=args.level, type=args.type, skill=args.skill))
    entries = session.entries()

    if args.details is not None:
        clickable = [e for e in entries if e.clickable]
        if not 1 <= args.details <= len(clickable):
            print(f"No job #{args.details}; {len(clickable)} job(s) listed", file=sys.stderr)
            return 2
        print(clickable[args.details - 1].details())
        return 0

    for i, entry in enumerate(entries, 1):
        print(f"{i:>3}. {entry.label}" if entry.clickable else entry.label)
    return 0


if __name__ == "__main__":
    sys.exit(main())
