"""Language utilities for vetdesk.

Availability messages, order annotations and reports are rendered in
English or Spanish. Keeping the enum in the domain layer lets both the CLI
and the services share it without circular imports.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def from_bool(cls, spanish: bool) -> "Language":
        """Derive a language value from a boolean flag."""

        return cls.SPANISH if spanish else cls.ENGLISH

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return "Spanish" if self is Language.SPANISH else "English"

    def pick(self, english: str, spanish: str) -> str:
        """Return the variant of a message that matches this language."""

        return spanish if self is Language.SPANISH else english
