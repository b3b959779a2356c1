"""
Opt-in logging for the patch engine.

Entry points (``parse_blocks``, ``apply_blocks``, ``apply_patch_text``,
``apply_with_fallback``) take ``logger=None, log=False`` and resolve them here:

    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    log.debug(f"[{i}] exact candidates: {len(exact)}")

What goes where once enabled:
  - DEBUG: per-block candidate counts, relaxed scores, the lines a block landed on.
  - INFO: the block that failed and why, and the strict-to-relaxed retry.
  - WARNING: malformed SEARCH/REPLACE blocks skipped by the parser.

A patch run is one call per model response and must not write to stderr on its
own, so without a logger or ``log=True`` every call goes to a NoopLogger.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802 - mirrors logging.Logger
        return False


def _ensure_default_handler(lg: logging.Logger) -> None:
    # Let records bubble to the root so pytest's caplog can capture them.
    lg.propagate = True


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to the opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger.
    - Else return a NoopLogger that ignores calls.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "patchforge")
        lg.setLevel(level)
        _ensure_default_handler(lg)
        return lg
    return NoopLogger()
