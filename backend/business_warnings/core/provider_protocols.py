"""Boundary Protocols - contracts between core and the localization collaborator.

Invariants:
    - Core NEVER imports a concrete provider; it receives one by injection
    - translate() is read-only and synchronous from the core's point of view
    - A missing key raises (MissingTranslationError); it never returns blank text

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Explicit injection replaces an ambient, application-wide translation handle
"""

from typing import Protocol

from business_warnings.core.domain_types import Locale


class LocalizationProvider(Protocol):
    """Maps a logical text key (e.g. 'label.general.ok') to display text."""
    locale: Locale

    def translate(self, key: str) -> str: ...
