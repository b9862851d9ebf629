class DomainError(Exception):
    """Base exception for conversion rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or missing."""


class UnreadableFileError(ValidationError):
    """Raised when an uploaded file cannot be decoded as text."""


class ConfigurationError(DomainError):
    """Raised when settings name an unknown option."""
