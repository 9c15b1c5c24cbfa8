"""Weight loading exceptions."""

from .base import LoadError


class ModelLoadError(LoadError):
    """Raised when weights cannot be mapped or do not fit the declared architecture.

    Covers unreadable safetensors payloads, missing parameters, and shape
    mismatches between stored tensors and the configured model.
    """


__all__ = ["ModelLoadError"]
