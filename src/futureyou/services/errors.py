"""Service-layer exceptions."""


class SaveLoadError(Exception):
    """Raised when a persisted payload fails validation."""


class HourLockedError(Exception):
    """Raised when a round was already played in the current hour-slot."""


class InvalidTaskError(Exception):
    """Raised when a beast task label is rejected."""


class NoMoveSelectedError(Exception):
    """Raised when a round is confirmed before a move was chosen."""
