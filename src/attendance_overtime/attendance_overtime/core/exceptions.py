from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class FormatError(ValidationError):
    """Raised when a time-of-day string is not in `H:MM AM|PM` form."""


class RangeError(ValidationError):
    """Raised when a time-of-day string has an hour outside 1-12 or a minute outside 0-59."""


class NotFoundError(DomainError):
    """Raised when a requested department timing does not exist."""


class ConfigurationError(DomainError):
    """Raised when a department shift configuration cannot be used for a calculation.

    The underlying FormatError/RangeError is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, field_name: str | None = None):
        super().__init__(message)
        self.field_name = field_name
