"""Catalog Translator - LocalizationProvider backed by the in-process message catalog.

Invariants:
    - One translator per locale; the locale never changes after construction
    - A missing key is logged and raised (MissingTranslationError), never masked

Design Decisions:
    - Catalog injected (defaults to MESSAGES) so tests can supply a partial catalog
    - Satisfies core.provider_protocols.LocalizationProvider structurally
"""

import logging

from business_warnings.core.domain_types import Locale
from business_warnings.core.errors import MissingTranslationError
from business_warnings.core.message_catalog import MESSAGES, get_message

logger = logging.getLogger(__name__)


class CatalogTranslator:
    """Translate logical keys for one locale."""

    def __init__(
        self, locale: Locale, catalog: dict[Locale, dict[str, str]] | None = None,
    ):
        self.locale = locale
        self._catalog = MESSAGES if catalog is None else catalog

    def translate(self, key: str) -> str:
        try:
            return get_message(self.locale, key, self._catalog)
        except MissingTranslationError:
            logger.error(
                "Missing translation key",
                extra={"locale": self.locale.value, "translation_key": key},
            )
            raise
