# patchforge/extract/narrative.py
from __future__ import annotations

import re

from ..models.narrative import Narrative
from ..utils.text import blank_out_reasoning

__all__ = ["extract_narrative", "clean_summary"]

_PLAN_OPEN_RE = re.compile(r"///\s*PLAN\s*///")
# A plan runs to the next '///' or the first SEARCH marker, whichever comes first.
_PLAN_STOP_RE = re.compile(r"///|^[ \t]*<{4,9}\s*SEARCH", re.MULTILINE)
_STEP_RE = re.compile(r"///\s*STEP:\s*(.*?)\s*///")
_ANALYSIS_RE = re.compile(r"///\s*ANALYSIS:\s*(.*?)(?:///|$)", re.DOTALL)
_SUMMARY_RE = re.compile(r"///\s*SUMMARY:\s*(.*?)(?:///|$)", re.DOTALL)

_BLOCK_IN_PROSE_RE = re.compile(r"<{4,9}\s*SEARCH.*?(?:>{4,9}[^\n]*|$)", re.DOTALL)
_CODE_FENCE_RE = re.compile(r"```.*?```", re.DOTALL)
_MARKER_RUN_RE = re.compile(r"={4,}|>{4,}|<{4,}")
_BLANK_RUN_RE = re.compile(r"\n{3,}")

_MIN_SUMMARY_LEN = 5


def clean_summary(summary: str) -> str | None:
    """
    Strip patch debris from a summary so it can be shown as a chat reply.
    Returns None when nothing meaningful is left.
    """
    s = _BLOCK_IN_PROSE_RE.sub("", summary)
    s = _CODE_FENCE_RE.sub("", s)
    s = _MARKER_RUN_RE.sub("", s)
    s = _BLANK_RUN_RE.sub("\n\n", s).strip()
    return s if len(s) >= _MIN_SUMMARY_LEN else None


def _extract_plan(text: str) -> str | None:
    m = _PLAN_OPEN_RE.search(text)
    if not m:
        return None
    stop = _PLAN_STOP_RE.search(text, m.end())
    body = text[m.end(): stop.start() if stop else len(text)].strip()
    return body or None


def extract_narrative(raw: str) -> Narrative:
    """
    Pull the presentation markers out of a model response::

        /// PLAN ///
        1. widen the sidebar
        ///
        /// STEP: Applying Changes ///
        <<<<SEARCH ... >>>>
        /// SUMMARY: Sidebar is now 320px wide ///

    The closing ``///`` of ANALYSIS and SUMMARY is optional. This never looks
    at or alters the SEARCH/REPLACE blocks themselves.
    """
    text = blank_out_reasoning(raw or "")
    narrative = Narrative(plan=_extract_plan(text))
    narrative.steps = [s for s in _STEP_RE.findall(text) if s]

    m = _ANALYSIS_RE.search(text)
    if m and m.group(1).strip():
        narrative.analysis = m.group(1).strip()

    m = _SUMMARY_RE.search(text)
    if m:
        narrative.summary = clean_summary(m.group(1))
    return narrative
