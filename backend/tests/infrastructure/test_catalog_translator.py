"""Catalog Translator tests - the concrete LocalizationProvider.

Tests cover:
    - Translates keys for its own locale only
    - Missing key raises MissingTranslationError and logs an ERROR record
    - Works as the DialogResolver provider for every locale
"""

import logging

import pytest

from business_warnings.core.domain_types import Locale, OperationFailureCode
from business_warnings.core.errors import MissingTranslationError
from business_warnings.core.resolve_dialog import DialogResolver
from business_warnings.infrastructure.catalog_translator import CatalogTranslator


def test_translate_english():
    assert CatalogTranslator(Locale.EN_CA).translate("label.general.close") == "Close"


def test_translate_french():
    assert CatalogTranslator(Locale.FR_CA).translate("label.general.close") == "Fermer"


def test_missing_key_raises_and_logs(caplog):
    translator = CatalogTranslator(Locale.EN_CA, catalog={Locale.EN_CA: {}})
    with caplog.at_level(logging.ERROR):
        with pytest.raises(MissingTranslationError):
            translator.translate("label.general.ok")
    record = caplog.records[-1]
    assert record.translation_key == "label.general.ok"
    assert record.locale == "en-CA"


@pytest.mark.parametrize("locale", list(Locale))
def test_resolver_validates_with_catalog_translator(locale):
    resolver = DialogResolver(CatalogTranslator(locale))
    resolver.validate_translations()


def test_download_dialog_in_english():
    resolver = DialogResolver(CatalogTranslator(Locale.EN_CA))
    options = resolver.resolve(OperationFailureCode.DOWNLOAD_FILE)
    assert options.title == "Unable to Download Document"
    assert options.buttons[0].text == "OK"
    assert options.buttons[0].on_click_close is True


def test_resolution_differs_by_locale_only_in_text():
    en = DialogResolver(CatalogTranslator(Locale.EN_CA)).resolve(
        OperationFailureCode.DOWNLOAD_FILE,
    )
    fr = DialogResolver(CatalogTranslator(Locale.FR_CA)).resolve(
        OperationFailureCode.DOWNLOAD_FILE,
    )
    assert en.title != fr.title
    assert [b.on_click_close for b in en.buttons] == [b.on_click_close for b in fr.buttons]
