# patchforge/models/narrative.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Narrative:
    """Human-facing markers found in a model response (plan, steps, analysis, summary)."""

    plan: Optional[str] = None
    steps: list[str] = field(default_factory=list)
    analysis: Optional[str] = None
    summary: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.plan or self.steps or self.analysis or self.summary)
