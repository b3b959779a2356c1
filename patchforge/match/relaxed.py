# patchforge/match/relaxed.py
from __future__ import annotations

from ..config import DEFAULT_MIN_SCORE
from ..models.match import MatchCandidate, MatchMode
from ..utils.text import line_spans, normalize_ws


def _normalized_lines(text: str, spans: list[tuple[int, int]]) -> list[str]:
    return [normalize_ws(text[s:e]) for s, e in spans]


def _aligned_ratio(doc_norm: list[str], i: int, search_norm: list[str]) -> float:
    hits = sum(1 for k, ln in enumerate(search_norm) if doc_norm[i + k] == ln)
    return hits / len(search_norm)


def _scan(doc: str, search: str):  # type: ignore[no-untyped-def]
    """Yield a scored candidate for every window of *doc* as tall as *search*."""
    search_norm = [normalize_ws(search[s:e]) for s, e in line_spans(search)]
    if not search_norm:
        return
    spans = line_spans(doc)
    doc_norm = _normalized_lines(doc, spans)
    height = len(search_norm)

    for i in range(len(spans) - height + 1):
        score = _aligned_ratio(doc_norm, i, search_norm)
        yield MatchCandidate(
            start=spans[i][0],
            end=spans[i + height - 1][1],
            mode=MatchMode.RELAXED,
            score=score,
            start_line=i + 1,
            end_line=i + height,
        )


def find_relaxed(doc: str, search: str, min_score: float = DEFAULT_MIN_SCORE) -> list[MatchCandidate]:
    """
    Windows of *doc* whose lines line up with *search* once whitespace is normalized.

    Each line is normalized by collapsing horizontal whitespace runs to a single
    space and trimming both ends. A window starting at doc line ``i`` scores the
    fraction of SEARCH lines equal to the doc line at the same relative offset.
    Windows scoring at least *min_score* are returned, best first; equal scores
    keep document order. Offsets cover the original (un-normalized) text from
    the start of the first window line to the end of the last one, without its
    line terminator.
    """
    if not 0.0 < min_score <= 1.0:
        raise ValueError("min_score must be in (0, 1]")
    kept = [c for c in _scan(doc, search) if c.score >= min_score]
    # sorted() is stable, so ties stay in document order.
    return sorted(kept, key=lambda c: -c.score)


def closest_window(doc: str, search: str) -> MatchCandidate | None:
    """
    The single best-scoring window regardless of threshold, or None when no
    window shares a single normalized line with *search*. Diagnostics only.
    """
    best: MatchCandidate | None = None
    for cand in _scan(doc, search):
        if cand.score > 0 and (best is None or cand.score > best.score):
            best = cand
    return best
