# patchforge/extract/blocks.py
from __future__ import annotations

import logging
import re

from .._logging import resolve_logger
from ..errors import ExtractError
from ..models.blocks import EditBlock, MalformedBlock, ParseResult
from ..utils.text import blank_out_reasoning

__all__ = ["parse_blocks", "START", "SEPARATOR", "END"]


# Markers are matched against the stripped line. Both the short chevron form
# (<<<<SEARCH / ==== / >>>>) and the 7-char conflict-marker form are accepted.
START = re.compile(r"^<{4,9}\s*SEARCH\s*>?$")
SEPARATOR = re.compile(r"^={4,9}(?:\s*REPLACE)?$")
END = re.compile(r"^>{4,9}(?:\s*REPLACE)?$")

# Only the exact marker shapes; doc comments such as "/// Step 1: ..." are code.
_NARRATIVE_LINE_RE = re.compile(r"^\s*///\s*(?:PLAN\s*///|(?:STEP|ANALYSIS|SUMMARY)\s*:)")

_SEARCH, _REPLACE = "search", "replace"


def _strip_terminator(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith(("\n", "\r")):
        return text[:-1]
    return text


def _clean_section(lines: list[str], strip_narrative: bool) -> str:
    """
    Join a section's lines, dropping blank lines adjacent to the markers and
    the terminator of the final line. Interior content is kept verbatim
    apart from narrative marker lines when *strip_narrative* is set.
    """
    if strip_narrative:
        lines = [ln for ln in lines if not _NARRATIVE_LINE_RE.match(ln)]
    lo, hi = 0, len(lines)
    while lo < hi and not lines[lo].strip():
        lo += 1
    while hi > lo and not lines[hi - 1].strip():
        hi -= 1
    return _strip_terminator("".join(lines[lo:hi]))


def parse_blocks(
    raw: str,
    *,
    strip_narrative_lines: bool = True,
    logger=None,
    log: bool = False,
) -> ParseResult:
    """
    Scan a model response for SEARCH/REPLACE blocks.

    Grammar (one marker per line, order-sensitive)::

        <<<<SEARCH
        text to find
        ====
        replacement text
        >>>>

    Everything outside a block is ignored. A malformed block (no separator or
    end marker before the next start marker or the end of text, an end marker
    before the separator, or an empty SEARCH section) is dropped and reported
    in ``ParseResult.warnings``; the remaining text is still parsed.

    ``<think>…</think>`` sections are skipped so drafted blocks inside a
    reasoning trace are never applied.

    Raises:
        ExtractError: if *raw* is not a string.
    """
    if not isinstance(raw, str):
        raise ExtractError(f"expected model output as str, got {type(raw).__name__}")

    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    result = ParseResult()

    state: str | None = None
    start_line = 0
    search_buf: list[str] = []
    replace_buf: list[str] = []
    raw_buf: list[str] = []

    def reject(reason: str) -> None:
        bad = MalformedBlock(line=start_line, reason=reason, text="".join(raw_buf))
        result.warnings.append(bad)
        log.warning(f"Skipping malformed block at line {start_line}: {reason}")

    def begin(lineno: int, line: str) -> None:
        nonlocal state, start_line, search_buf, replace_buf, raw_buf
        state = _SEARCH
        start_line = lineno
        search_buf, replace_buf, raw_buf = [], [], [line]

    def finish() -> None:
        search = _clean_section(search_buf, strip_narrative_lines)
        if not search:
            reject("empty SEARCH section")
            return
        replace = _clean_section(replace_buf, False)
        block = EditBlock(index=len(result.blocks), search=search, replace=replace, line=start_line)
        result.blocks.append(block)
        log.debug(
            f"Parsed block #{block.index} at line {start_line}: "
            f"{search.count(chr(10)) + 1} SEARCH line(s), {len(replace)} replacement chars"
        )

    for lineno, line in enumerate(blank_out_reasoning(raw).splitlines(keepends=True), 1):
        marker = line.strip()

        if state is None:
            if START.match(marker):
                begin(lineno, line)
            continue

        if START.match(marker):
            reject("missing separator marker" if state == _SEARCH else "missing end marker")
            begin(lineno, line)
            continue

        raw_buf.append(line)
        if state == _SEARCH:
            if SEPARATOR.match(marker):
                state = _REPLACE
            elif END.match(marker):
                reject("end marker before separator marker")
                state = None
            else:
                search_buf.append(line)
        else:
            if END.match(marker):
                finish()
                state = None
            else:
                replace_buf.append(line)

    if state is not None:
        reject(
            "text ended before separator marker" if state == _SEARCH else "text ended before end marker"
        )

    log.debug(f"Parsed {len(result.blocks)} block(s), {len(result.warnings)} malformed")
    return result
