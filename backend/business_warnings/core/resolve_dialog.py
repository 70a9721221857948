"""Dialog Resolution - turns a warning or failure code into localized DialogOptions.

Invariants:
    - The template table covers every DialogCode exactly once (checked at construction)
    - resolve() of a code outside the table raises ConfigurationError, builds nothing
    - Localization misses propagate from the provider unchanged
    - Blank text from a provider is a MissingTranslationError, never shown
    - Same code + same provider locale -> value-equal DialogOptions
    - Only side effect is the provider's read-only translate() call

Design Decisions:
    - Provider injected through the constructor: testable with a dict-backed fake
    - Table validated once at construction so a gap fails at startup, not per request
    - Only enum members are accepted: raw strings are parsed at the API boundary
      (parse_dialog_code), because a str Enum would otherwise match by value
"""

from business_warnings.core.dialog_options import DialogButton, DialogOptions
from business_warnings.core.dialog_templates import DIALOG_TEMPLATES, DialogTemplate
from business_warnings.core.domain_types import (
    ALL_DIALOG_CODES, DialogCode, OperationFailureCode, WarningType,
)
from business_warnings.core.errors import (
    ConfigurationError, ErrorContext, MissingTranslationError,
)
from business_warnings.core.provider_protocols import LocalizationProvider


def validate_template_table(templates: dict[DialogCode, DialogTemplate]) -> None:
    """Raise ConfigurationError unless templates has one entry per DialogCode."""
    missing = [c.value for c in ALL_DIALOG_CODES if c not in templates]
    if missing:
        raise ConfigurationError(f"No dialog template for: {missing}")
    extra = [
        str(c) for c in templates
        if not isinstance(c, (WarningType, OperationFailureCode))
    ]
    if extra:
        raise ConfigurationError(f"Dialog templates for unknown codes: {extra}")
    for code, template in templates.items():
        if not template.buttons:
            raise ConfigurationError(
                f"Dialog template for {code.value} has no buttons",
                ErrorContext(dialog_code=code.value),
            )


class DialogResolver:
    """Resolves DialogCodes against a template table using one localization provider."""

    def __init__(
        self,
        provider: LocalizationProvider,
        templates: dict[DialogCode, DialogTemplate] | None = None,
    ):
        self._templates = DIALOG_TEMPLATES if templates is None else templates
        validate_template_table(self._templates)
        self._provider = provider

    @property
    def codes(self) -> tuple[DialogCode, ...]:
        return tuple(c for c in ALL_DIALOG_CODES if c in self._templates)

    def resolve(self, code: DialogCode) -> DialogOptions:
        if not isinstance(code, (WarningType, OperationFailureCode)):
            raise ConfigurationError(
                f"Unrecognized dialog code: {code!r}",
                ErrorContext(dialog_code=str(code)),
            )
        template = self._templates.get(code)
        if template is None:
            raise ConfigurationError(
                f"No dialog template for: {code.value}",
                ErrorContext(dialog_code=code.value),
            )
        t = self._translate
        return DialogOptions(
            title=t(template.title_key),
            text=t(template.text_key),
            buttons=tuple(
                DialogButton(
                    text=t(b.text_key),
                    on_click_close=b.on_click_close,
                    action=b.action,
                )
                for b in template.buttons
            ),
        )

    def _translate(self, key: str) -> str:
        text = self._provider.translate(key)
        if not text or not text.strip():
            raise MissingTranslationError(key, self._provider.locale.value)
        return text

    def validate_translations(self) -> None:
        """Resolve every code once so missing keys fail at startup."""
        for code in self._templates:
            self.resolve(code)
