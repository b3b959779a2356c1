from .base import PatchForgeError
from .extract import ExtractError
from .patch import (
    AmbiguousMatchError,
    ElidedSearchError,
    NoMatchFoundError,
    PatchFailedError,
    SuspiciousResultError,
)

__all__ = [
    "PatchForgeError",
    "ExtractError",
    "PatchFailedError",
    "NoMatchFoundError",
    "AmbiguousMatchError",
    "ElidedSearchError",
    "SuspiciousResultError",
]
