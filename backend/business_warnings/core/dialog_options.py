"""Dialog Options - immutable description of a presentable dialog.

Invariants:
    - Fully populated on construction: the caller never fills in a field
    - Button order is significant (primary first, rendered left-to-right)
    - on_click_close=True means activating the button dismisses the dialog
    - Value equality: resolving the same code twice compares equal

Design Decisions:
    - Frozen dataclasses with tuple buttons: hashable, no mutation after construction
    - to_dict() emits the UI wire shape (camelCase onClickClose, action omitted when None)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DialogButton:
    text: str
    on_click_close: bool
    action: str | None = None

    def to_dict(self) -> dict:
        data: dict = {"text": self.text, "onClickClose": self.on_click_close}
        if self.action is not None:
            data["action"] = self.action
        return data


@dataclass(frozen=True)
class DialogOptions:
    """Title, body text and ordered action buttons of one dialog."""
    title: str
    text: str
    buttons: tuple[DialogButton, ...]

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "text": self.text,
            "buttons": [b.to_dict() for b in self.buttons],
        }
