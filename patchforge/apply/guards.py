# patchforge/apply/guards.py
from __future__ import annotations

from dataclasses import dataclass

from ..errors import SuspiciousResultError


@dataclass(frozen=True)
class LengthGuard:
    """
    Reject a patched document whose length drifted too far from the original.

    A run that shrinks a document to a fraction of its size usually means a
    REPLACE section was truncated; one that balloons usually means the model
    pasted the whole file into a block. Empty originals are never rejected.
    """

    min_ratio: float = 0.5
    max_ratio: float = 3.0

    def __post_init__(self) -> None:
        if self.min_ratio < 0 or self.max_ratio <= 0 or self.min_ratio > self.max_ratio:
            raise ValueError("LengthGuard needs 0 <= min_ratio <= max_ratio and max_ratio > 0")

    def check(self, original: str, patched: str) -> None:
        before, after = len(original), len(patched)
        if before == 0:
            return
        if after < before * self.min_ratio:
            raise SuspiciousResultError(
                f"patched text is {after} chars, below {self.min_ratio:g}x the original {before}"
            )
        if after > before * self.max_ratio:
            raise SuspiciousResultError(
                f"patched text is {after} chars, above {self.max_ratio:g}x the original {before}"
            )
