"""Audit-related exceptions."""


class AuditError(Exception):
    """Base exception for all audit errors."""


class ParseError(AuditError):
    """Raised when a manifest or config file cannot be decoded."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ConfigError(AuditError):
    """Raised when audit configuration values are invalid."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors if errors is not None else [message]


class ReporterError(AuditError):
    """Raised when a finalized reporter is used again."""
