# patchforge/match/disambiguate.py
from __future__ import annotations

from bisect import bisect_right
from typing import Protocol, Sequence

from ..config import DEFAULT_HINT_WINDOW
from ..errors import AmbiguousMatchError
from ..models.match import MatchCandidate
from ..utils.text import line_spans


class DisambiguationPolicy(Protocol):
    """Pick one of several candidate locations, or raise AmbiguousMatchError."""

    def choose(
        self, candidates: Sequence[MatchCandidate], hints: Sequence[str], doc: str
    ) -> MatchCandidate:
        ...


def _hint_lines(doc: str, hint: str, line_starts: list[int]) -> list[int]:
    """1-based line of every occurrence of *hint* in *doc*."""
    lines: list[int] = []
    pos = doc.find(hint)
    while pos != -1:
        lines.append(bisect_right(line_starts, pos))
        pos = doc.find(hint, pos + 1)
    return lines


def _distance(line: int, cand: MatchCandidate) -> int:
    if cand.start_line <= line <= cand.end_line:
        return 0
    return min(abs(line - cand.start_line), abs(line - cand.end_line))


class HintProximityPolicy:
    """
    Rank candidates by how many hints occur within ``window`` lines of them,
    then by the distance to the nearest such occurrence.

    The top-ranked candidate wins only if no other candidate shares its rank
    and at least one hint supports it. Anything else is a tie and fails.
    """

    def __init__(self, window: int = DEFAULT_HINT_WINDOW):
        if window < 0:
            raise ValueError("window must be >= 0")
        self.window = window

    def _rank(self, cand: MatchCandidate, hint_lines: list[list[int]]) -> tuple[int, int]:
        support = 0
        nearest: int | None = None
        for lines in hint_lines:
            near = [d for d in (_distance(n, cand) for n in lines) if d <= self.window]
            if not near:
                continue
            support += 1
            d = min(near)
            nearest = d if nearest is None else min(nearest, d)
        # Lower sorts first: more support, then closer.
        return (-support, nearest if nearest is not None else 0)

    def choose(
        self, candidates: Sequence[MatchCandidate], hints: Sequence[str], doc: str
    ) -> MatchCandidate:
        if len(candidates) == 1:
            return candidates[0]

        hints = [h for h in hints if h and h.strip()]
        line_starts = [s for s, _ in line_spans(doc)] or [0]
        hint_lines = [_hint_lines(doc, h, line_starts) for h in hints]

        ranks = [self._rank(c, hint_lines) for c in candidates]
        best = min(ranks)
        tied = [c for c, r in zip(candidates, ranks) if r == best]
        if len(tied) == 1 and best[0] < 0:
            return tied[0]
        raise AmbiguousMatchError(len(tied), [c.start_line for c in tied])


DEFAULT_POLICY = HintProximityPolicy()


def disambiguate(
    candidates: Sequence[MatchCandidate],
    hints: Sequence[str],
    doc: str,
    *,
    policy: DisambiguationPolicy | None = None,
) -> MatchCandidate:
    """
    Narrow *candidates* to one location.

    A single candidate is returned as-is. Several are handed to *policy*
    (``HintProximityPolicy`` by default), which must raise
    ``AmbiguousMatchError`` rather than guess.

    Raises:
        ValueError: if *candidates* is empty.
        AmbiguousMatchError: if the hints do not single out one candidate.
    """
    if not candidates:
        raise ValueError("disambiguate() needs at least one candidate")
    if len(candidates) == 1:
        return candidates[0]
    return (policy or DEFAULT_POLICY).choose(candidates, hints, doc)
