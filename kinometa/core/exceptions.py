"""
Core exception hierarchy for kinometa.

Field-level problems (bad dates, unparseable ratings, odd year text) never
raise; they degrade to absent fields. These exceptions cover the remaining
cases: programmer errors at aggregation boundaries, unknown record kinds
and payloads that cannot be validated into a raw model at all.
"""

from typing import Any, Optional


# =============================================================================
# Base Exceptions
# =============================================================================


class KinometaError(Exception):
    """Base exception for all kinometa errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class PermanentError(KinometaError):
    """
    Errors that won't be fixed by calling again with the same input.

    Examples: None passed where a list is required, unknown record kind.
    """

    pass


# =============================================================================
# Normalization Errors
# =============================================================================


class NormalizationError(PermanentError):
    """Base exception for normalization errors."""

    def __init__(
        self,
        record_kind: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.record_kind = record_kind
        super().__init__(f"[{record_kind}] {message}", details)


class NormalizationInputError(NormalizationError):
    """Raised when a required collection argument is missing."""

    pass


class UnknownRecordKindError(NormalizationError):
    """Raised when no transformer is registered for a record kind."""

    def __init__(self, record_kind: str, known_kinds: list[str]):
        super().__init__(
            record_kind,
            "No transformer registered",
            {"known_kinds": known_kinds},
        )


class PayloadValidationError(NormalizationError):
    """Raised when a raw payload does not match the expected shape."""

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PermanentError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        self.config_key = config_key
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, details)
