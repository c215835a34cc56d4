"""
Core infrastructure modules for kinometa.

Provides common utilities used across the package:
- exceptions: Standardized exception hierarchy
"""

from kinometa.core.exceptions import (
    KinometaError,
    PermanentError,
    NormalizationError,
    NormalizationInputError,
    UnknownRecordKindError,
    PayloadValidationError,
    ConfigurationError,
)

__all__ = [
    "KinometaError",
    "PermanentError",
    "NormalizationError",
    "NormalizationInputError",
    "UnknownRecordKindError",
    "PayloadValidationError",
    "ConfigurationError",
]
