"""Core companykit utilities.

This module exports core utilities for use throughout the package.
"""

from companykit.core.config import Settings, get_settings
from companykit.core.exceptions import (
    AuthorizationError,
    CompanyKitError,
    InvalidComponentStateError,
    ModelNotFoundError,
    ValidationError,
)
from companykit.core.logging import (
    LoggingContext,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)
from companykit.core.translation import Translator, default_translator

__all__ = [
    "Settings",
    "get_settings",
    "AuthorizationError",
    "CompanyKitError",
    "InvalidComponentStateError",
    "ModelNotFoundError",
    "ValidationError",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "bind_correlation_id",
    "clear_context",
    "Translator",
    "default_translator",
]
