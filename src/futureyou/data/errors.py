"""Custom exceptions for the data layer."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when the state file is unreadable or not valid JSON."""


class DataSaveError(DataError):
    """Raised when the state file cannot be written."""
