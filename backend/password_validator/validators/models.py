"""Validation models: character classes, error kinds, findings and the result structure.

All validation is deterministic: same input → same output, no hidden state.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CharacterClass(str, Enum):
    """Character classes, listed in canonical reporting order."""

    LOWER_CASE = "lower_case"
    UPPER_CASE = "upper_case"
    NUMBERS = "numbers"
    SPECIAL = "special"


class ErrorKind(str, Enum):
    """Symbolic error kinds reported by the built-in validators.

    Naming convention: too_<few|many>_<character class>
    """

    # Length errors
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"

    # Character set errors
    TOO_FEW_LOWER_CASE = "too_few_lower_case"
    TOO_MANY_LOWER_CASE = "too_many_lower_case"
    TOO_FEW_UPPER_CASE = "too_few_upper_case"
    TOO_MANY_UPPER_CASE = "too_many_upper_case"
    TOO_FEW_NUMBERS = "too_few_numbers"
    TOO_MANY_NUMBERS = "too_many_numbers"
    TOO_FEW_SPECIAL = "too_few_special"
    TOO_MANY_SPECIAL = "too_many_special"
    INVALID_SPECIAL_CHARACTERS = "invalid_special_characters"

    @classmethod
    def too_few(cls, character_class: CharacterClass) -> "ErrorKind":
        return cls(f"too_few_{character_class.value}")

    @classmethod
    def too_many(cls, character_class: CharacterClass) -> "ErrorKind":
        return cls(f"too_many_{character_class.value}")


class ValidationError(BaseModel):
    """A single validation finding."""

    model_config = ConfigDict(frozen=True)

    message: str
    validator: str                    # Name of the rule that produced it
    error_type: Optional[str] = None  # Symbolic kind; custom rules may omit it

    @property
    def metadata(self) -> dict[str, Any]:
        """Rule identity and kind, as attached to changeset errors."""
        return {"validator": self.validator, "error_type": self.error_type}


class ValidationResult(BaseModel):
    """Outcome of one validation call: every finding, in rule order."""

    model_config = ConfigDict(frozen=True)

    errors: tuple[ValidationError, ...] = Field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        """Plain message strings, dropping rule and kind metadata."""
        return [error.message for error in self.errors]

    def as_tuples(self) -> list[tuple[str, dict[str, Any]]]:
        """(message, metadata) pairs for collaborators that attach errors to a field."""
        return [(error.message, error.metadata) for error in self.errors]
