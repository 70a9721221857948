"""Notice Service - per-locale resolvers plus the classify-then-resolve flow.

Invariants:
    - One DialogResolver per supported locale, built once at startup
    - locale=None means the configured default locale
    - Unsupported locale raises UnsupportedLocaleError (400 at the API)
    - build_notice returns dialog=None when no warning applies

Design Decisions:
    - Built by build_notice_service(settings) in the app lifespan: table and
      catalog gaps abort startup instead of surfacing on a live request
    - Service logs outcomes; core stays silent
"""

import logging
from dataclasses import dataclass

from business_warnings.config import Settings
from business_warnings.core.classify_warnings import classify, primary_of
from business_warnings.core.dialog_options import DialogOptions
from business_warnings.core.domain_types import DialogCode, Locale, WarningType
from business_warnings.core.entity_status import BusinessEntityStatus
from business_warnings.core.errors import UnsupportedLocaleError
from business_warnings.core.resolve_dialog import DialogResolver
from business_warnings.infrastructure.catalog_translator import CatalogTranslator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notice:
    """Classification result plus the dialog for its primary warning."""
    warnings: tuple[WarningType, ...]
    dialog: DialogOptions | None

    @property
    def primary(self) -> WarningType | None:
        return primary_of(self.warnings)


class NoticeService:
    """Classify entities and resolve dialogs in a requested locale."""

    def __init__(self, resolvers: dict[Locale, DialogResolver], default_locale: Locale):
        if default_locale not in resolvers:
            raise UnsupportedLocaleError(default_locale.value)
        self._resolvers = resolvers
        self.default_locale = default_locale

    @property
    def locales(self) -> tuple[Locale, ...]:
        return tuple(self._resolvers)

    @property
    def codes(self) -> tuple[DialogCode, ...]:
        return self._resolvers[self.default_locale].codes

    def resolver_for(self, locale: Locale | str | None = None) -> DialogResolver:
        if locale is None:
            return self._resolvers[self.default_locale]
        try:
            key = Locale(locale)
        except ValueError:
            raise UnsupportedLocaleError(str(locale))
        resolver = self._resolvers.get(key)
        if resolver is None:
            raise UnsupportedLocaleError(key.value)
        return resolver

    def classify(self, entity: BusinessEntityStatus) -> tuple[WarningType, ...]:
        warnings = classify(entity)
        logger.debug(
            "Classified entity",
            extra={
                "entity_identifier": entity.identifier,
                "warning_count": len(warnings),
            },
        )
        return warnings

    def resolve(
        self, code: DialogCode, locale: Locale | str | None = None,
    ) -> DialogOptions:
        return self.resolver_for(locale).resolve(code)

    def build_notice(
        self, entity: BusinessEntityStatus, locale: Locale | str | None = None,
    ) -> Notice:
        resolver = self.resolver_for(locale)
        warnings = self.classify(entity)
        if not warnings:
            return Notice(warnings=(), dialog=None)
        primary = primary_of(warnings)
        dialog = resolver.resolve(primary)
        logger.info(
            "Resolved warning notice",
            extra={
                "entity_identifier": entity.identifier,
                "warning_type": primary.value,
            },
        )
        return Notice(warnings=warnings, dialog=dialog)


def build_notice_service(settings: Settings) -> NoticeService:
    """Build one resolver per supported locale; validate translations if configured."""
    resolvers: dict[Locale, DialogResolver] = {}
    for locale in settings.supported_locales:
        resolver = DialogResolver(CatalogTranslator(locale))
        if settings.validate_catalog_on_startup:
            resolver.validate_translations()
        resolvers[locale] = resolver
    logger.info(
        f"Dialog resolvers ready for {', '.join(loc.value for loc in resolvers)}",
    )
    return NoticeService(resolvers, settings.default_locale)
