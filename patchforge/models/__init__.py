from .blocks import EditBlock, MalformedBlock, ParseResult
from .match import MatchCandidate, MatchMode
from .narrative import Narrative
from .result import ApplyResult, BlockOutcome, Failed, Patched

__all__ = [
    "EditBlock",
    "MalformedBlock",
    "ParseResult",
    "MatchCandidate",
    "MatchMode",
    "Narrative",
    "ApplyResult",
    "BlockOutcome",
    "Failed",
    "Patched",
]
