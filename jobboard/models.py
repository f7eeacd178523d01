"""Job posting record and its derived values."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass

# Posted text with no recognised unit counts as the oldest possible posting.
UNKNOWN_RECENCY: float = math.inf

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

# Checked in order; the first unit found in the text wins.
_UNIT_MINUTES: tuple[tuple[str, int], ...] = (
    ("minute", 1),
    ("hour", 60),
    ("day", 1440),
)


def _leading_int(text: str) -> int | None:
    m = _LEADING_INT.match(text)
    return int(m.group(1)) if m else None


@dataclass(frozen=True)
class Job:
    title: str
    posted: str
    type: str
    level: str
    skill: str
    detail: str

    def detail_text(self) -> str:
        """Labeled multi-line summary shown when a job is selected."""
        return (
            f"Title: {self.title}\n"
            f"Type: {self.type}\n"
            f"Level: {self.level}\n"
            f"Skill: {self.skill}\n"
            f"Description: {self.detail}\n"
            f"Posted: {self.posted}"
        )

    def recency_minutes(self) -> float:
        """Minutes since posting, parsed from text like ``"3 hours ago"``.

        Returns 0 when a unit is present but no leading number parses, and
        UNKNOWN_RECENCY when no unit is present at all.
        """
        for unit, factor in _UNIT_MINUTES:
            if unit in self.posted:
                value = _leading_int(self.posted)
                return value * factor if value is not None else 0
        return UNKNOWN_RECENCY
