"""Dialog Templates - one localization-key template per DialogCode.

Invariants:
    - Pure data: keys and flags only, no translated text
    - Exactly one entry per DialogCode (checked by DialogResolver at construction)
    - Download failure: a single OK button that closes the dialog, no action

Design Decisions:
    - Open for extension: a new code is one new entry, existing entries untouched
    - Action identifiers are opaque strings; the UI layer wires them to navigation
"""

from dataclasses import dataclass

from business_warnings.core.domain_types import (
    DialogCode, OperationFailureCode, WarningType,
)


@dataclass(frozen=True)
class ButtonTemplate:
    text_key: str
    on_click_close: bool
    action: str | None = None


@dataclass(frozen=True)
class DialogTemplate:
    title_key: str
    text_key: str
    buttons: tuple[ButtonTemplate, ...]


# --- Shared buttons -----------------------------------------------------------

OK_BUTTON = ButtonTemplate("label.general.ok", on_click_close=True)
CLOSE_BUTTON = ButtonTemplate("label.general.close", on_click_close=True)
CONTACT_REGISTRY_BUTTON = ButtonTemplate(
    "label.dialog.contactRegistry", on_click_close=False, action="contact-registry",
)


# --- Table --------------------------------------------------------------------

DIALOG_TEMPLATES: dict[DialogCode, DialogTemplate] = {
    OperationFailureCode.DOWNLOAD_FILE: DialogTemplate(
        title_key="title.dialog.error.download",
        text_key="text.dialog.error.download",
        buttons=(OK_BUTTON,),
    ),
    WarningType.INVOLUNTARY_DISSOLUTION: DialogTemplate(
        title_key="title.dialog.warning.involuntaryDissolution",
        text_key="text.dialog.warning.involuntaryDissolution",
        buttons=(CONTACT_REGISTRY_BUTTON, CLOSE_BUTTON),
    ),
    WarningType.NOT_IN_GOOD_STANDING: DialogTemplate(
        title_key="title.dialog.warning.notInGoodStanding",
        text_key="text.dialog.warning.notInGoodStanding",
        buttons=(CONTACT_REGISTRY_BUTTON, CLOSE_BUTTON),
    ),
    WarningType.MISSING_REQUIRED_BUSINESS_INFO: DialogTemplate(
        title_key="title.dialog.warning.missingRequiredBusinessInfo",
        text_key="text.dialog.warning.missingRequiredBusinessInfo",
        buttons=(
            ButtonTemplate(
                "label.dialog.updateBusinessInfo",
                on_click_close=False, action="update-business-info",
            ),
            CLOSE_BUTTON,
        ),
    ),
    WarningType.FUTURE_EFFECTIVE_AMALGAMATION: DialogTemplate(
        title_key="title.dialog.warning.futureEffectiveAmalgamation",
        text_key="text.dialog.warning.futureEffectiveAmalgamation",
        buttons=(
            ButtonTemplate(
                "label.dialog.viewAmalgamation",
                on_click_close=False, action="view-amalgamation",
            ),
            OK_BUTTON,
        ),
    ),
    WarningType.COMPLIANCE: DialogTemplate(
        title_key="title.dialog.warning.compliance",
        text_key="text.dialog.warning.compliance",
        buttons=(
            ButtonTemplate(
                "label.dialog.fileAnnualReport",
                on_click_close=False, action="file-annual-report",
            ),
            CLOSE_BUTTON,
        ),
    ),
}


def required_translation_keys(
    templates: dict[DialogCode, DialogTemplate] = DIALOG_TEMPLATES,
) -> frozenset[str]:
    """Every localization key the given templates reference."""
    keys: set[str] = set()
    for template in templates.values():
        keys.add(template.title_key)
        keys.add(template.text_key)
        keys.update(b.text_key for b in template.buttons)
    return frozenset(keys)
