from .core import PLACEHOLDER_PATTERNS, apply_blocks, find_placeholder
from .guards import LengthGuard

__all__ = [
    "apply_blocks",
    "find_placeholder",
    "PLACEHOLDER_PATTERNS",
    "LengthGuard",
]
