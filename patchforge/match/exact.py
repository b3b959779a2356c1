# patchforge/match/exact.py
from __future__ import annotations

from ..models.match import MatchCandidate, MatchMode
from ..utils.text import line_number


def find_exact(doc: str, search: str) -> list[MatchCandidate]:
    """
    Every verbatim, non-overlapping occurrence of *search* in *doc*, left to right.

    No normalization of any kind. An empty *search* matches nothing.
    """
    if not search:
        return []

    # A trailing terminator belongs to the last matched line, it does not open another.
    extra_lines = _eol_count(_drop_terminator(search))

    found: list[MatchCandidate] = []
    pos = doc.find(search)
    while pos != -1:
        end = pos + len(search)
        start_line = line_number(doc, pos)
        found.append(
            MatchCandidate(
                start=pos,
                end=end,
                mode=MatchMode.EXACT,
                score=1.0,
                start_line=start_line,
                end_line=start_line + extra_lines,
            )
        )
        pos = doc.find(search, end)
    return found


def _eol_count(text: str) -> int:
    # '\r\n' is one terminator; a lone '\r' or '\n' is one too.
    return text.count("\n") + text.count("\r") - text.count("\r\n")


def _drop_terminator(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith(("\n", "\r")):
        return text[:-1]
    return text
