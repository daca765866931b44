from __future__ import annotations


class ActiongenError(Exception):
    """Base class for errors raised by actiongen."""


class ModelError(ActiongenError):
    """Raised when the declaration model is malformed or cannot be read."""
