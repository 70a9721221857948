"""Dialog Options - value semantics and the UI wire shape."""

import dataclasses

import pytest

from business_warnings.core.dialog_options import DialogButton, DialogOptions


def _options(action: str | None = None) -> DialogOptions:
    return DialogOptions(
        title="Unable to Download Document",
        text="Try again later.",
        buttons=(
            DialogButton(text="Contact", on_click_close=False, action=action),
            DialogButton(text="OK", on_click_close=True),
        ),
    )


def test_options_are_immutable():
    options = _options()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.title = "changed"


def test_options_compare_by_value():
    assert _options("contact-registry") == _options("contact-registry")
    assert _options("contact-registry") != _options("other")


def test_to_dict_uses_camel_case_and_keeps_button_order():
    data = _options("contact-registry").to_dict()
    assert data == {
        "title": "Unable to Download Document",
        "text": "Try again later.",
        "buttons": [
            {"text": "Contact", "onClickClose": False, "action": "contact-registry"},
            {"text": "OK", "onClickClose": True},
        ],
    }


def test_to_dict_omits_absent_action():
    data = DialogButton(text="OK", on_click_close=True).to_dict()
    assert "action" not in data
