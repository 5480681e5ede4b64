class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when caller input is malformed (e.g. an unparsable time string)."""


class ConfigurationError(DomainError):
    """Raised once at load time when attendance window settings are invalid."""
