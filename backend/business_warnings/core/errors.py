"""Error Hierarchy - typed, categorized exceptions for classification and dialog resolution.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Configuration and localization errors are fatal: surfaced, never defaulted
    - to_response() produces the REST envelope used by the API error handlers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BusinessWarningsError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFIGURATION = "configuration"
    LOCALIZATION = "localization"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    dialog_code: str | None = None
    locale: str | None = None
    entity_identifier: str | None = None
    debug_info: dict[str, Any] | None = None


class BusinessWarningsError(Exception):
    """Base exception for all business-warnings errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "dialog_code": self.context.dialog_code,
                    "locale": self.context.locale,
                    "entity_identifier": self.context.entity_identifier,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class UnsupportedLocaleError(BusinessWarningsError):
    """Requested locale is not configured."""
    def __init__(self, locale: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.locale = locale
        super().__init__(
            f"Locale '{locale}' is not supported",
            "UNSUPPORTED_LOCALE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.locale = locale


class UnknownDialogCodeError(BusinessWarningsError):
    """A client asked for a dialog code outside the closed set."""
    def __init__(self, code: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.dialog_code = code
        super().__init__(
            f"Dialog code '{code}' not found",
            "UNKNOWN_DIALOG_CODE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.dialog_code = code


# ─── Configuration Errors (500-level) ───────────────────────────

class ConfigurationError(BusinessWarningsError):
    """A lookup table is incomplete or a code has no table entry."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


class MissingTranslationError(BusinessWarningsError):
    """Localization provider has no text for a key."""
    def __init__(self, key: str, locale: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.locale = locale
        super().__init__(
            f"Missing translation for '{key}' in locale '{locale}'",
            "MISSING_TRANSLATION", ErrorCategory.LOCALIZATION,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.key = key
        self.locale = locale
