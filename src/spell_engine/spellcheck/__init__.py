"""Spell checker façade and the correction flow built on it."""

from .checker import SpellChecker, SpellCheckerError
from .correction import (
    CorrectionCandidate,
    apply_correction,
    inspect_caret,
    replace_misspelling,
)
from .provider import SpellProvider

__all__ = [
    "CorrectionCandidate",
    "SpellChecker",
    "SpellCheckerError",
    "SpellProvider",
    "apply_correction",
    "inspect_caret",
    "replace_misspelling",
]
