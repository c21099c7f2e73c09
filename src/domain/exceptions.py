"""
Domain exceptions shared by every layer.
Adapters translate library errors into these so callers never catch
pandas or httpx exceptions directly.
"""


class StockAppError(Exception):
    """Base class for all application errors."""


class ValidationError(StockAppError):
    """User input is incomplete; raised before any request is made."""


class MalformedInputError(StockAppError):
    """A query request is missing fields or carries unparseable values."""


class DataUnavailableError(StockAppError):
    """The dataset file is missing, unreadable or lacks required columns."""


class NetworkFailureError(StockAppError):
    """A query request failed in transport or returned a non-2xx status."""


class SubmissionInProgressError(StockAppError):
    """submit() was called while a previous submission is still running."""
