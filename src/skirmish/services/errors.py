"""Service-layer exceptions."""


class SaveLoadError(Exception):
    """Raised when a persisted payload is missing fields or has the wrong shape."""
