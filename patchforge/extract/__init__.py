from .blocks import parse_blocks
from .narrative import clean_summary, extract_narrative

__all__ = [
    "parse_blocks",
    "extract_narrative",
    "clean_summary",
]
