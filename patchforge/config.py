# patchforge/config.py
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .apply.guards import LengthGuard

DEFAULT_MIN_SCORE = 0.85
DEFAULT_HINT_WINDOW = 5
DEFAULT_SNIPPET_LENGTH = 120


@dataclass(frozen=True)
class PatchOptions:
    """
    Tunables for one patch run. Every field has a working default; callers
    usually pass nothing.

    Args:
        min_score: lowest aligned line-match ratio a relaxed window may score.
        hint_window: lines on each side of a candidate searched for target hints.
        reindent: re-indent relaxed replacements to the matched region's indentation.
        reject_elided: fail a block whose SEARCH holds an elision placeholder
            instead of trying relaxed matching.
        strip_narrative_lines: drop ``/// STEP:`` style marker lines from SEARCH
            sections. REPLACE sections are never filtered.
        snippet_length: characters of SEARCH text quoted in NoMatchFound reasons.
        guard: optional post-application sanity check (see apply.guards).
    """

    min_score: float = DEFAULT_MIN_SCORE
    hint_window: int = DEFAULT_HINT_WINDOW
    reindent: bool = True
    reject_elided: bool = True
    strip_narrative_lines: bool = True
    snippet_length: int = DEFAULT_SNIPPET_LENGTH
    guard: Optional["LengthGuard"] = None

    def __post_init__(self) -> None:
        if not 0.0 < self.min_score <= 1.0:
            raise ValueError("min_score must be in (0, 1]")
        if self.hint_window < 0:
            raise ValueError("hint_window must be >= 0")
        if self.snippet_length < 1:
            raise ValueError("snippet_length must be >= 1")

    def with_(self, **changes) -> "PatchOptions":  # type: ignore[no-untyped-def]
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS = PatchOptions()
