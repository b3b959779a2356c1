from .apply import LengthGuard, apply_blocks
from .config import PatchOptions
from .core import apply_patch_text, apply_with_fallback
from .errors import (
    AmbiguousMatchError,
    ElidedSearchError,
    ExtractError,
    NoMatchFoundError,
    PatchFailedError,
    PatchForgeError,
    SuspiciousResultError,
)
from .extract import extract_narrative, parse_blocks
from .match import (
    DisambiguationPolicy,
    HintProximityPolicy,
    closest_window,
    disambiguate,
    find_exact,
    find_relaxed,
)
from .models import (
    ApplyResult,
    BlockOutcome,
    EditBlock,
    Failed,
    MalformedBlock,
    MatchCandidate,
    MatchMode,
    Narrative,
    ParseResult,
    Patched,
)

__all__ = [
    "apply_patch_text",
    "apply_with_fallback",
    "apply_blocks",
    "parse_blocks",
    "extract_narrative",
    "find_exact",
    "find_relaxed",
    "closest_window",
    "disambiguate",
    "DisambiguationPolicy",
    "HintProximityPolicy",
    "LengthGuard",
    "PatchOptions",
    "EditBlock",
    "MalformedBlock",
    "ParseResult",
    "MatchCandidate",
    "MatchMode",
    "Narrative",
    "ApplyResult",
    "BlockOutcome",
    "Patched",
    "Failed",
    "PatchForgeError",
    "ExtractError",
    "PatchFailedError",
    "NoMatchFoundError",
    "AmbiguousMatchError",
    "ElidedSearchError",
    "SuspiciousResultError",
]
