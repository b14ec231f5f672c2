"""
Error types shared by the stores and the API layer.
"""


class BookServiceError(Exception):
    """Base class for errors raised by the book service."""


class BookStoreError(BookServiceError):
    """The storage backend reported a failure. Surfaced to clients as HTTP 500."""


class ConfigurationError(BookServiceError):
    """Required configuration is missing or invalid. Fatal at startup."""
