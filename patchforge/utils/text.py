# patchforge/utils/text.py
from __future__ import annotations

import re

_EOL_RE = re.compile(r"\r\n|\r|\n")
_HSPACE_RE = re.compile(r"[ \t\f\v]+")
_LEADING_WS_RE = re.compile(r"^[\t ]*")
_THINK_RE = re.compile(r"<think>.*?</think>", re.DOTALL)


def line_spans(text: str) -> list[tuple[int, int]]:
    """
    Return (start, end) offsets for every line of *text*; ``end`` excludes the
    line terminator. A trailing terminator does not open an extra empty line,
    matching ``str.splitlines``.
    """
    spans: list[tuple[int, int]] = []
    pos, n = 0, len(text)
    while pos < n:
        m = _EOL_RE.search(text, pos)
        if m is None:
            spans.append((pos, n))
            break
        spans.append((pos, m.start()))
        pos = m.end()
    return spans


def line_number(text: str, offset: int) -> int:
    """1-based line number of the character at *offset*."""
    if offset <= 0:
        return 1
    return len(_EOL_RE.findall(text, 0, offset)) + 1


def normalize_ws(line: str) -> str:
    """Collapse horizontal whitespace runs to one space and trim the ends."""
    return _HSPACE_RE.sub(" ", line).strip()


def leading_ws(s: str) -> str:
    """Return the exact leading whitespace (tabs/spaces)."""
    m = _LEADING_WS_RE.match(s)
    return m.group(0) if m else ""


def first_content_line(text: str) -> str:
    for s, e in line_spans(text):
        if text[s:e].strip():
            return text[s:e]
    return ""


def reindent_relative(text: str, search_first: str, matched_first: str) -> str:
    """
    Shift the indentation of *text* so that the indentation of *search_first*
    becomes the indentation found at *matched_first*.

    Replaces the patch's base indentation unit with the target's, so
    spaces-to-tabs drift is translated as well. Blank lines are left alone.
    """
    if not text:
        return text
    ref_in = leading_ws(search_first)
    ref_out = leading_ws(matched_first)
    if ref_in == ref_out:
        return text

    out: list[str] = []
    for ln in text.splitlines(keepends=True):
        if not ln.strip():
            out.append(ln)
            continue
        ws = leading_ws(ln)
        body = ln[len(ws):]
        if not ref_in:
            out.append(ref_out + ln)
        else:
            # Handles multiple consistent levels, e.g. 8 spaces -> 2 tabs for ref_in='    ', ref_out='\t'.
            out.append(ws.replace(ref_in, ref_out) + body)
    return "".join(out)


def snippet(text: str, limit: int = 120) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def blank_out_reasoning(text: str) -> str:
    """
    Replace ``<think>…</think>`` sections with the same number of newlines.

    Reasoning models sometimes draft SEARCH/REPLACE blocks while thinking;
    those drafts must not be applied. Line numbers of the remaining text are
    preserved so parse warnings still point at the right place.
    """
    if not text or "<think>" not in text:
        return text
    return _THINK_RE.sub(lambda m: "\n" * m.group(0).count("\n"), text)
