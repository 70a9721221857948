"""Warning Classification - maps an entity status snapshot to its applicable warnings.

Invariants:
    - All functions are PURE: no IO, no clock, no side effects
    - One independent predicate per WarningType; several may match at once
    - Output follows WARNING_PRECEDENCE, never predicate evaluation order
    - No duplicates; classify(e)[0] is the primary warning
    - Zero matches returns an empty tuple (valid outcome, not an error)

Design Decisions:
    - Predicate table (dict) over if/elif chain: classification, not dispatch,
      and adding a WarningType means adding one entry
    - validate_predicate_table() runs at import: a WarningType without a predicate
      fails when the module loads, not when an entity happens to hit the gap
"""

from typing import Callable

from business_warnings.core.domain_types import WarningType, WARNING_PRECEDENCE
from business_warnings.core.entity_status import BusinessEntityStatus
from business_warnings.core.errors import ConfigurationError

WarningPredicate = Callable[[BusinessEntityStatus], bool]

_WARNING_PREDICATES: dict[WarningType, WarningPredicate] = {
    WarningType.INVOLUNTARY_DISSOLUTION: (
        lambda e: e.dissolution_initiated_by_registry
    ),
    WarningType.NOT_IN_GOOD_STANDING: lambda e: not e.good_standing,
    WarningType.MISSING_REQUIRED_BUSINESS_INFO: (
        lambda e: e.is_missing_required_info
    ),
    WarningType.FUTURE_EFFECTIVE_AMALGAMATION: (
        lambda e: e.has_future_effective_amalgamation
    ),
    WarningType.COMPLIANCE: lambda e: e.compliance_filing_outstanding,
}


def validate_predicate_table(
    predicates: dict[WarningType, WarningPredicate] = _WARNING_PREDICATES,
    precedence: tuple[WarningType, ...] = WARNING_PRECEDENCE,
) -> None:
    """Raise ConfigurationError unless both tables cover WarningType exactly once."""
    missing = [w.value for w in WarningType if w not in predicates]
    if missing:
        raise ConfigurationError(f"No classification predicate for: {missing}")
    if len(precedence) != len(set(precedence)) or set(precedence) != set(WarningType):
        raise ConfigurationError(
            "Warning precedence must list every WarningType exactly once",
        )


validate_predicate_table()


def classify(entity: BusinessEntityStatus) -> tuple[WarningType, ...]:
    """Applicable warnings for the entity, most severe first."""
    return tuple(
        warning for warning in WARNING_PRECEDENCE
        if _WARNING_PREDICATES[warning](entity)
    )


def primary_of(warnings: tuple[WarningType, ...]) -> WarningType | None:
    """The most severe of already-classified warnings, or None."""
    return warnings[0] if warnings else None


def primary_warning(entity: BusinessEntityStatus) -> WarningType | None:
    """The single warning the UI should surface, or None."""
    return primary_of(classify(entity))
