from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EditBlock:
    """One SEARCH/REPLACE pair, in the order it appeared in the response."""

    index: int
    search: str
    replace: str
    line: int = 0  # 1-based line of the start marker in the raw text


@dataclass(frozen=True)
class MalformedBlock:
    """A rejected block; reported alongside the valid ones, never raised."""

    line: int
    reason: str
    text: str


@dataclass
class ParseResult:
    blocks: list[EditBlock] = field(default_factory=list)
    warnings: list[MalformedBlock] = field(default_factory=list)

    def __iter__(self):
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)
