from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MatchMode(str, Enum):
    EXACT = "exact"
    RELAXED = "relaxed"


@dataclass(frozen=True)
class MatchCandidate:
    """A region of the working document that a SEARCH text may refer to."""

    start: int       # offset of first matched char
    end: int         # offset AFTER last matched char
    mode: MatchMode
    score: float     # 1.0 for exact matches
    start_line: int  # 1-based, inclusive
    end_line: int    # 1-based, inclusive
