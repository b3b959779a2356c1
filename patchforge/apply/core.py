# patchforge/apply/core.py
from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from .._logging import resolve_logger
from ..config import DEFAULT_OPTIONS, PatchOptions
from ..errors import (
    AmbiguousMatchError,
    ElidedSearchError,
    NoMatchFoundError,
    PatchFailedError,
)
from ..match.disambiguate import DisambiguationPolicy, HintProximityPolicy, disambiguate
from ..match.exact import find_exact
from ..match.relaxed import closest_window, find_relaxed
from ..models.blocks import EditBlock, ParseResult
from ..models.match import MatchCandidate, MatchMode
from ..models.result import ApplyResult, BlockOutcome, Failed, Patched
from ..utils.text import first_content_line, reindent_relative, snippet

__all__ = ["apply_blocks", "find_placeholder", "PLACEHOLDER_PATTERNS"]


# Elision comments models write instead of quoting the code they stand for.
PLACEHOLDER_PATTERNS = [
    re.compile(r"//\s*\[Component:.*?\]\s*-\s*Code omitted", re.IGNORECASE),
    re.compile(r"//\s*\.\.\.\s*\d+\s*lines?\s*omitted", re.IGNORECASE),
    re.compile(r"/\*\s*\.\.\.\s*code omitted", re.IGNORECASE),
    re.compile(r"//\s*\.\.\.\s*(?:rest of|existing) code", re.IGNORECASE),
    re.compile(r"#\s*\.\.\.\s*(?:\d+\s*lines?\s*omitted|(?:rest of|existing) code)", re.IGNORECASE),
    re.compile(r"<!--\s*\.\.\.\s*(?:\d+\s*lines?\s*omitted|(?:rest of|existing) code|code omitted)", re.IGNORECASE),
]


def find_placeholder(search: str) -> str | None:
    """Return the first elision placeholder found in *search*, if any."""
    for pat in PLACEHOLDER_PATTERNS:
        m = pat.search(search)
        if m:
            return m.group(0)
    return None


def _closest_hint(doc: str, search: str) -> str | None:
    near = closest_window(doc, search)
    if near is None:
        return None
    return f"closest region at line {near.start_line}, score {near.score:.2f}"


def _locate(
    doc: str,
    block: EditBlock,
    i: int,
    hints: Sequence[str],
    relaxed: bool,
    options: PatchOptions,
    policy: DisambiguationPolicy,
    log,
) -> MatchCandidate:
    """Find the single region block *i* refers to, or raise a PatchFailedError."""
    exact = find_exact(doc, block.search)
    log.debug(f"[{i}] exact candidates: {len(exact)}")
    if exact:
        try:
            return disambiguate(exact, hints, doc, policy=policy)
        except AmbiguousMatchError as e:
            raise e.at_block(i) from None

    if options.reject_elided:
        placeholder = find_placeholder(block.search)
        if placeholder:
            raise ElidedSearchError(i, placeholder)

    if relaxed:
        windows = find_relaxed(doc, block.search, options.min_score)
        if windows:
            top = windows[0].score
            best = [w for w in windows if w.score == top]
            log.debug(f"[{i}] relaxed candidates: {len(windows)}, {len(best)} at top score {top:.2f}")
            try:
                return disambiguate(best, hints, doc, policy=policy)
            except AmbiguousMatchError as e:
                raise e.at_block(i) from None
        log.debug(f"[{i}] no relaxed window reached min_score={options.min_score}")

    raise NoMatchFoundError(
        i,
        snippet(block.search, options.snippet_length),
        _closest_hint(doc, block.search),
    )


def _replacement(doc: str, block: EditBlock, cand: MatchCandidate, options: PatchOptions) -> str:
    if cand.mode is MatchMode.RELAXED and options.reindent:
        return reindent_relative(
            block.replace,
            first_content_line(block.search),
            first_content_line(doc[cand.start:cand.end]),
        )
    return block.replace


def apply_blocks(
    doc: str,
    blocks: Iterable[EditBlock],
    hints: Sequence[str] = (),
    relaxed: bool = False,
    *,
    options: PatchOptions | None = None,
    policy: DisambiguationPolicy | None = None,
    logger=None,
    log: bool = False,
) -> ApplyResult:
    """
    Apply *blocks* to *doc* strictly in order.

    Each block is located in the working document as left by the blocks
    before it: exact occurrences first (several are narrowed with *hints*),
    then, only when there is no exact occurrence and *relaxed* is set, the
    best whitespace-normalized windows. The matched range is replaced with
    the block's REPLACE text.

    Returns ``Patched`` with the final text, or ``Failed`` naming the first
    block (by 0-based position) that could not be placed. The partially
    patched working copy is never returned.

    *blocks* may be a ``ParseResult``; its warnings are carried over to the
    result.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    options = options or DEFAULT_OPTIONS
    policy = policy or HintProximityPolicy(window=options.hint_window)
    warnings = list(blocks.warnings) if isinstance(blocks, ParseResult) else []
    hints = list(hints or ())

    working = doc
    applied: list[BlockOutcome] = []

    for i, block in enumerate(blocks):
        try:
            cand = _locate(working, block, i, hints, relaxed, options, policy, log)
        except PatchFailedError as e:
            log.info(f"Patch failed at {e}")
            return Failed.from_error(e, warnings)

        new = _replacement(working, block, cand, options)
        working = working[: cand.start] + new + working[cand.end:]
        applied.append(BlockOutcome(index=i, mode=cand.mode, score=cand.score, start_line=cand.start_line))
        log.debug(
            f"[{i}] applied {cand.mode.value} match at lines {cand.start_line}-{cand.end_line} "
            f"(score {cand.score:.2f})"
        )

    if options.guard is not None:
        try:
            options.guard.check(doc, working)
        except PatchFailedError as e:
            log.info(f"Patched text rejected: {e}")
            return Failed.from_error(e, warnings)

    if working == doc:
        log.debug("All blocks applied; document unchanged")
    return Patched(text=working, original=doc, applied=applied, warnings=warnings)
