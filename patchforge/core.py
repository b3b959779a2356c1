# patchforge/core.py
from __future__ import annotations

import logging
from typing import Sequence

from ._logging import resolve_logger
from .apply import apply_blocks
from .config import DEFAULT_OPTIONS, PatchOptions
from .extract import parse_blocks
from .match.disambiguate import DisambiguationPolicy
from .models.result import ApplyResult, Patched


def apply_patch_text(
    doc: str,
    raw: str,
    hints: Sequence[str] = (),
    relaxed: bool = False,
    *,
    options: PatchOptions | None = None,
    policy: DisambiguationPolicy | None = None,
    logger=None,
    log: bool = False,
) -> ApplyResult:
    """
    Parse a raw model response and apply its SEARCH/REPLACE blocks to *doc*.

    Malformed blocks are skipped and reported in the result's ``warnings``.
    A response with no blocks at all returns ``Patched`` with *doc* unchanged
    and an empty ``applied`` list.
    """
    options = options or DEFAULT_OPTIONS
    parsed = parse_blocks(
        raw,
        strip_narrative_lines=options.strip_narrative_lines,
        logger=logger,
        log=log,
    )
    if not parsed.blocks:
        resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG).debug(
            "No SEARCH/REPLACE blocks in response"
        )
        return Patched(text=doc, original=doc, warnings=list(parsed.warnings))
    return apply_blocks(
        doc, parsed, hints, relaxed, options=options, policy=policy, logger=logger, log=log
    )


def apply_with_fallback(
    doc: str,
    raw: str,
    hints: Sequence[str] = (),
    *,
    options: PatchOptions | None = None,
    policy: DisambiguationPolicy | None = None,
    logger=None,
    log: bool = False,
) -> ApplyResult:
    """
    Strict run first; if it fails, one retry with relaxed matching.

    The relaxed result is returned as-is, failure included. Asking the model
    for a full rewrite after that is up to the caller.
    """
    result = apply_patch_text(
        doc, raw, hints, False, options=options, policy=policy, logger=logger, log=log
    )
    if result.ok:
        return result
    resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG).info(
        f"Strict patch failed ({result.reason}); retrying with relaxed matching"
    )
    return apply_patch_text(
        doc, raw, hints, True, options=options, policy=policy, logger=logger, log=log
    )
