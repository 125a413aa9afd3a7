"""Grapheme segmentation and character classification.

Length and composition checks count user-perceived characters (extended
grapheme clusters), not code points or bytes: "é" written as "e" plus a
combining accent is one character, as is a flag emoji.

Classification uses the Unicode general category of a cluster's first code point:

    Ll      → lower_case
    Lu, Lt  → upper_case
    Nd      → numbers
    other   → special (caseless letters, other numerics, punctuation,
              symbols, whitespace, emoji)
"""

import unicodedata

import regex

from password_validator.validators.models import CharacterClass

_GRAPHEME = regex.compile(r"\X")

_CATEGORY_CLASSES = {
    "Ll": CharacterClass.LOWER_CASE,
    "Lu": CharacterClass.UPPER_CASE,
    "Lt": CharacterClass.UPPER_CASE,
    "Nd": CharacterClass.NUMBERS,
}


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def grapheme_length(text: str) -> int:
    return len(graphemes(text))


def classify(grapheme: str) -> CharacterClass:
    """Return the single character class a grapheme cluster belongs to."""
    if not grapheme:
        raise ValueError("Cannot classify an empty string")
    category = unicodedata.category(grapheme[0])
    return _CATEGORY_CLASSES.get(category, CharacterClass.SPECIAL)


def count_classes(text: str) -> dict[CharacterClass, int]:
    """Count graphemes per character class. Every class is present in the result."""
    counts = {character_class: 0 for character_class in CharacterClass}
    for grapheme in graphemes(text):
        counts[classify(grapheme)] += 1
    return counts
