"""Notice Service tests - per-locale resolvers and the classify-then-resolve flow.

Tests cover:
    - build_notice_service builds one resolver per supported locale
    - locale=None uses the default; unknown/unconfigured locales raise 400-level errors
    - build_notice returns the primary warning's dialog, or None
    - Startup validation surfaces catalog gaps
"""

from datetime import datetime, timezone

import pytest

from business_warnings.config import Settings
from business_warnings.core.domain_types import (
    Locale, OperationFailureCode, WarningType,
)
from business_warnings.core.entity_status import BusinessEntityStatus
from business_warnings.core.errors import MissingTranslationError, UnsupportedLocaleError
from business_warnings.core.resolve_dialog import DialogResolver
from business_warnings.infrastructure.catalog_translator import CatalogTranslator
from business_warnings.services.notice_service import (
    NoticeService, build_notice_service,
)

AS_OF = datetime(2026, 10, 1, tzinfo=timezone.utc)


@pytest.fixture
def service() -> NoticeService:
    return build_notice_service(Settings())


def _entity(**overrides) -> BusinessEntityStatus:
    return BusinessEntityStatus(identifier="BC7654321", as_of=AS_OF, **overrides)


# ─── Construction ────────────────────────────────────────────────

def test_builds_resolver_per_supported_locale(service):
    assert set(service.locales) == {Locale.EN_CA, Locale.FR_CA}
    assert service.default_locale == Locale.EN_CA


def test_single_locale_settings():
    service = build_notice_service(
        Settings(supported_locales=[Locale.FR_CA], default_locale=Locale.FR_CA),
    )
    assert service.locales == (Locale.FR_CA,)


def test_default_locale_must_have_resolver():
    resolvers = {Locale.EN_CA: DialogResolver(CatalogTranslator(Locale.EN_CA))}
    with pytest.raises(UnsupportedLocaleError):
        NoticeService(resolvers, Locale.FR_CA)


def test_startup_validation_surfaces_catalog_gap(monkeypatch):
    monkeypatch.setattr(
        "business_warnings.infrastructure.catalog_translator.MESSAGES",
        {Locale.EN_CA: {}, Locale.FR_CA: {}},
    )
    with pytest.raises(MissingTranslationError):
        build_notice_service(Settings())


def test_startup_validation_can_be_disabled(monkeypatch):
    monkeypatch.setattr(
        "business_warnings.infrastructure.catalog_translator.MESSAGES",
        {Locale.EN_CA: {}, Locale.FR_CA: {}},
    )
    service = build_notice_service(Settings(validate_catalog_on_startup=False))
    with pytest.raises(MissingTranslationError):
        service.resolve(OperationFailureCode.DOWNLOAD_FILE)


# ─── Locale selection ────────────────────────────────────────────

def test_resolve_uses_default_locale(service):
    options = service.resolve(OperationFailureCode.DOWNLOAD_FILE)
    assert options.buttons[0].text == "OK"
    assert options.title == "Unable to Download Document"


def test_resolve_accepts_locale_string(service):
    options = service.resolve(WarningType.COMPLIANCE, "fr-CA")
    assert options.title == "Dépôt requis"


def test_unknown_locale_raises(service):
    with pytest.raises(UnsupportedLocaleError) as exc_info:
        service.resolver_for("de-DE")
    assert exc_info.value.http_status == 400


def test_known_but_unconfigured_locale_raises():
    service = build_notice_service(
        Settings(supported_locales=[Locale.EN_CA], default_locale=Locale.EN_CA),
    )
    with pytest.raises(UnsupportedLocaleError):
        service.resolver_for(Locale.FR_CA)


# ─── Notices ─────────────────────────────────────────────────────

def test_codes_come_from_default_resolver(service):
    assert service.codes == service.resolver_for().codes
    assert OperationFailureCode.DOWNLOAD_FILE in service.codes


def test_notice_for_clean_entity_has_no_dialog(service):
    notice = service.build_notice(_entity())
    assert notice.warnings == ()
    assert notice.primary is None
    assert notice.dialog is None


def test_notice_resolves_primary_warning(service):
    notice = service.build_notice(
        _entity(dissolution_initiated_by_registry=True, good_standing=False),
    )
    assert notice.warnings == (
        WarningType.INVOLUNTARY_DISSOLUTION, WarningType.NOT_IN_GOOD_STANDING,
    )
    assert notice.primary == WarningType.INVOLUNTARY_DISSOLUTION
    assert notice.dialog == service.resolve(WarningType.INVOLUNTARY_DISSOLUTION)


def test_notice_in_french(service):
    notice = service.build_notice(_entity(compliance_filing_outstanding=True), Locale.FR_CA)
    assert notice.dialog.title == "Dépôt requis"
    assert notice.dialog.buttons[0].action == "file-annual-report"


def test_notice_checks_locale_before_classifying(service):
    with pytest.raises(UnsupportedLocaleError):
        service.build_notice(_entity(), "xx")
