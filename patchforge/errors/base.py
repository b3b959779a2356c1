class PatchForgeError(Exception):
    """Root of every error raised by patchforge."""
