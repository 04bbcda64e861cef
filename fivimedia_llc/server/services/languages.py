"""
Rules for the site language table.
"""

from __future__ import annotations

from typing import Sequence

from fivimedia_llc.core.errors import ValidationError
from fivimedia_llc.core.models.io.languages import LanguageUpdateItem


def validate_language_settings(languages: Sequence[LanguageUpdateItem]) -> None:
    """
    Check a submitted language table.

    At least one language must stay active and exactly one must be the
    default.

    Raises:
        ValidationError: With the first rule that is broken
    """
    if not any(language.is_active for language in languages):
        raise ValidationError("At least one language must be active")
    defaults = sum(1 for language in languages if language.is_default)
    if defaults == 0:
        raise ValidationError("One language must be set as default")
    if defaults > 1:
        raise ValidationError("Only one language can be default")
