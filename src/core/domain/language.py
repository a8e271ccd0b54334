"""Language utilities for fetchlab.

This module centralizes the language options supported for user-facing
labels. Keeping it in the domain layer lets both the CLI and the config
share a single source of truth without circular imports.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    INDONESIAN = "id"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return "Indonesian" if self is Language.INDONESIAN else "English"
