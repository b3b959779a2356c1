# patchforge/errors/patch.py
from __future__ import annotations

from .base import PatchForgeError


class PatchFailedError(PatchForgeError):
    """A patch run could not be completed.

    ``block_index`` is the 0-based ordinal of the offending block, or ``None``
    when the failure concerns the run as a whole.
    """

    def __init__(self, reason: str, block_index: int | None = None):
        super().__init__(reason)
        self.reason = reason
        self.block_index = block_index

    def __str__(self) -> str:
        if self.block_index is None:
            return self.reason
        return f"block #{self.block_index}: {self.reason}"


class NoMatchFoundError(PatchFailedError):
    """Neither exact nor (when enabled) relaxed matching located the SEARCH text."""

    def __init__(self, block_index: int, snippet: str, closest: str | None = None):
        reason = f"SEARCH text not found: {snippet!r}"
        if closest:
            reason += f" ({closest})"
        super().__init__(reason, block_index)
        self.snippet = snippet
        self.closest = closest


class AmbiguousMatchError(PatchFailedError):
    """Several equally plausible locations and the hints did not break the tie."""

    def __init__(self, count: int, lines: list[int], block_index: int | None = None):
        self.count = count
        self.lines = list(lines)
        super().__init__(self._reason(), block_index)

    def _reason(self) -> str:
        where = ", ".join(str(n) for n in self.lines)
        return f"SEARCH text matches {self.count} locations (lines {where}); hints did not resolve the tie"

    def at_block(self, block_index: int) -> "AmbiguousMatchError":
        """Return a copy tagged with the block it was raised for."""
        return AmbiguousMatchError(self.count, self.lines, block_index)


class ElidedSearchError(PatchFailedError):
    """SEARCH text contains an elision placeholder that cannot exist in the document."""

    def __init__(self, block_index: int, placeholder: str):
        super().__init__(
            f"SEARCH text contains an elision placeholder {placeholder!r}; "
            "it must quote the original code verbatim",
            block_index,
        )
        self.placeholder = placeholder


class SuspiciousResultError(PatchFailedError):
    """The fully patched document failed a post-application sanity guard."""

    def __init__(self, reason: str):
        super().__init__(reason, None)
