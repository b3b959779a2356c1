from .base import PatchForgeError


class ExtractError(PatchForgeError):
    """Raised when a model response cannot be scanned at all (e.g. it is not text).

    Individual malformed blocks are *not* errors: they are reported as
    ``MalformedBlock`` warnings and parsing carries on.
    """
