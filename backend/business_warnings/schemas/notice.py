"""Notice Schemas - Pydantic contracts for classification and dialog endpoints.

Invariants:
    - Wire names are camelCase (web client convention); Python names are snake_case
    - as_of / effectiveDate are normalized to timezone-aware UTC
    - as_of defaults to the request time: the shell owns the clock, core never reads it
    - DialogOptionsOut mirrors core DialogOptions.to_dict() exactly (action omitted when None)

Design Decisions:
    - alias_generator=to_camel + populate_by_name: accepts both spellings in tests
    - to_entity_status() is the single conversion into the frozen core snapshot
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer
from pydantic.alias_generators import to_camel

from business_warnings.core.dialog_options import DialogOptions
from business_warnings.core.domain_types import FilingType, WarningType
from business_warnings.core.entity_status import BusinessEntityStatus, PendingFiling


def _as_utc(v: datetime | None) -> datetime | None:
    if v is None:
        return None
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PendingFilingIn(_CamelModel):
    """A pending transaction as the business API reports it."""
    filing_type: FilingType
    effective_date: datetime | None = None

    @field_validator("effective_date")
    @classmethod
    def normalize_effective_date(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)


class BusinessStatusRequest(_CamelModel):
    """Entity status snapshot sent by the UI layer."""
    identifier: str = Field(min_length=1, max_length=20)
    as_of: datetime | None = None
    good_standing: bool = True
    dissolution_initiated_by_registry: bool = False
    compliance_filing_outstanding: bool = False
    missing_required_fields: list[str] = Field(default_factory=list)
    pending_filings: list[PendingFilingIn] = Field(default_factory=list)

    @field_validator("identifier")
    @classmethod
    def strip_identifier(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("identifier cannot be empty or whitespace")
        return v

    @field_validator("as_of")
    @classmethod
    def normalize_as_of(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)

    def to_entity_status(self, now: datetime | None = None) -> BusinessEntityStatus:
        as_of = self.as_of or _as_utc(now) or datetime.now(timezone.utc)
        return BusinessEntityStatus(
            identifier=self.identifier,
            as_of=as_of,
            good_standing=self.good_standing,
            dissolution_initiated_by_registry=self.dissolution_initiated_by_registry,
            compliance_filing_outstanding=self.compliance_filing_outstanding,
            missing_required_fields=tuple(self.missing_required_fields),
            pending_filings=tuple(
                PendingFiling(f.filing_type, f.effective_date)
                for f in self.pending_filings
            ),
        )


class ClassificationResponse(BaseModel):
    warnings: list[WarningType]
    primary: WarningType | None


class DialogButtonOut(_CamelModel):
    text: str
    on_click_close: bool
    action: str | None = None

    @model_serializer(mode="wrap")
    def omit_absent_action(self, handler):
        data = handler(self)
        if self.action is None:
            data.pop("action", None)
        return data


class DialogOptionsOut(BaseModel):
    title: str
    text: str
    buttons: list[DialogButtonOut]

    @classmethod
    def from_options(cls, options: DialogOptions) -> "DialogOptionsOut":
        return cls(
            title=options.title,
            text=options.text,
            buttons=[
                DialogButtonOut(
                    text=b.text, on_click_close=b.on_click_close, action=b.action,
                )
                for b in options.buttons
            ],
        )


class NoticeResponse(BaseModel):
    warnings: list[WarningType]
    primary: WarningType | None
    dialog: DialogOptionsOut | None
