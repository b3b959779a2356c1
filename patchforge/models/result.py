from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from ..errors.patch import PatchFailedError
from .blocks import MalformedBlock
from .match import MatchMode


@dataclass(frozen=True)
class BlockOutcome:
    """How a single block was placed in the working document."""

    index: int
    mode: MatchMode
    score: float
    start_line: int


@dataclass
class Patched:
    """Every block applied. ``text`` is the final document."""

    text: str
    original: str
    applied: list[BlockOutcome] = field(default_factory=list)
    warnings: list[MalformedBlock] = field(default_factory=list)

    ok = True

    @property
    def changed(self) -> bool:
        # False for a whole-run no-op (e.g. every search == replace).
        return self.text != self.original

    def unwrap(self) -> str:
        return self.text


@dataclass
class Failed:
    """A block (or the whole run, when ``block_index`` is None) could not be applied.

    The partially patched working copy is never exposed.
    """

    block_index: Optional[int]
    reason: str
    error: PatchFailedError
    warnings: list[MalformedBlock] = field(default_factory=list)

    ok = False

    @classmethod
    def from_error(cls, error: PatchFailedError, warnings: list[MalformedBlock] | None = None) -> "Failed":
        return cls(
            block_index=error.block_index,
            reason=str(error),
            error=error,
            warnings=list(warnings or []),
        )

    def unwrap(self) -> str:
        raise self.error


ApplyResult = Union[Patched, Failed]
