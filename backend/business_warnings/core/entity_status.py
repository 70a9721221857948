"""Entity Status - read-only snapshot of the business fields the classifier inspects.

Invariants:
    - Snapshots are frozen: classification never mutates its input
    - as_of is the capture time of the snapshot; core never reads the clock
    - Future-effective means effective_date strictly after as_of

Design Decisions:
    - Frozen dataclasses over Pydantic models: core stays framework-free,
      schemas/notice.py converts the wire shape into this type
    - Predicates are methods on the snapshot so the classifier table stays one-liners
"""

from dataclasses import dataclass, field
from datetime import datetime

from business_warnings.core.domain_types import FilingType


@dataclass(frozen=True)
class PendingFiling:
    """A filing the registry has accepted but not yet made effective."""
    filing_type: FilingType
    effective_date: datetime | None = None

    def is_future_effective(self, as_of: datetime) -> bool:
        return self.effective_date is not None and self.effective_date > as_of


@dataclass(frozen=True)
class BusinessEntityStatus:
    """Status fields of one business entity at a point in time."""
    identifier: str
    as_of: datetime
    good_standing: bool = True
    dissolution_initiated_by_registry: bool = False
    compliance_filing_outstanding: bool = False
    missing_required_fields: tuple[str, ...] = ()
    pending_filings: tuple[PendingFiling, ...] = field(default_factory=tuple)

    @property
    def is_missing_required_info(self) -> bool:
        return len(self.missing_required_fields) > 0

    @property
    def has_future_effective_amalgamation(self) -> bool:
        return any(
            f.filing_type == FilingType.AMALGAMATION_APPLICATION
            and f.is_future_effective(self.as_of)
            for f in self.pending_filings
        )
