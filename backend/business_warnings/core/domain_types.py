"""Domain Types - closed enumerations shared by the classifier and the resolver.

Invariants:
    - WarningType values are stable wire identities: never renamed, renumbered or reused
    - WARNING_PRECEDENCE is a permutation of WarningType, most severe first
    - DialogCode is the closed union of WarningType and OperationFailureCode
    - All valid states encoded as Enums - no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (UI consumes the raw values)
    - Precedence kept as an explicit tuple, not derived from declaration order:
      WarningType is declared alphabetically to match the registry API
"""

from enum import Enum
from typing import Union


# ─── Warnings ────────────────────────────────────────────────────

class WarningType(str, Enum):
    """Compliance warning categories for a business entity."""
    COMPLIANCE = "COMPLIANCE"
    FUTURE_EFFECTIVE_AMALGAMATION = "FUTURE_EFFECTIVE_AMALGAMATION"
    INVOLUNTARY_DISSOLUTION = "INVOLUNTARY_DISSOLUTION"
    MISSING_REQUIRED_BUSINESS_INFO = "MISSING_REQUIRED_BUSINESS_INFO"
    NOT_IN_GOOD_STANDING = "NOT_IN_GOOD_STANDING"


# Severity policy, highest first. classify() output follows this order.
WARNING_PRECEDENCE: tuple[WarningType, ...] = (
    WarningType.INVOLUNTARY_DISSOLUTION,
    WarningType.NOT_IN_GOOD_STANDING,
    WarningType.MISSING_REQUIRED_BUSINESS_INFO,
    WarningType.FUTURE_EFFECTIVE_AMALGAMATION,
    WarningType.COMPLIANCE,
)

_SEVERITY_RANK: dict[WarningType, int] = {
    warning: rank for rank, warning in enumerate(WARNING_PRECEDENCE)
}


def warning_severity_rank(warning: WarningType) -> int:
    """0 is the most severe warning."""
    return _SEVERITY_RANK[warning]


# ─── Operational failures ────────────────────────────────────────

class OperationFailureCode(str, Enum):
    """Failures of UI operations that surface as a dialog."""
    DOWNLOAD_FILE = "DOWNLOAD_FILE"


DialogCode = Union[WarningType, OperationFailureCode]

ALL_DIALOG_CODES: tuple[DialogCode, ...] = (
    *WarningType,
    *OperationFailureCode,
)


def parse_dialog_code(raw: str) -> DialogCode | None:
    """Map a raw string to a DialogCode. Returns None when it is not in the closed set."""
    for enum_cls in (WarningType, OperationFailureCode):
        try:
            return enum_cls(raw)
        except ValueError:
            continue
    return None


# ─── Locale ──────────────────────────────────────────────────────

class Locale(str, Enum):
    """Display locales supported by the message catalog."""
    EN_CA = "en-CA"
    FR_CA = "fr-CA"


# ─── Pending transactions ────────────────────────────────────────

class FilingType(str, Enum):
    """Pending filing types relevant to warning classification."""
    AMALGAMATION_APPLICATION = "amalgamationApplication"
    ANNUAL_REPORT = "annualReport"
    CHANGE_OF_ADDRESS = "changeOfAddress"
    CHANGE_OF_DIRECTORS = "changeOfDirectors"
    DISSOLUTION = "dissolution"
    OTHER = "other"
