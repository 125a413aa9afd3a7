"""Validator options — parses and normalizes the policy before any rule runs.

A policy is a mapping with the keys understood by the built-in validators:

    {
        "length": {"min": 8, "max": 64},
        "character_set": {
            "lower_case": 1,               # at least one
            "upper_case": [3, "infinity"], # at least three
            "numbers": [0, 4],             # at most four
            "special": [0, 0],             # none allowed
        },
        "additional_validators": [MyValidator()],
    }

Absent keys mean the matching validator is skipped. Any other top-level key is
kept on the parsed policy for custom validators (see ``PasswordPolicy.option``).
Malformed or contradictory options raise ConfigurationError.
"""

import math
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, NonNegativeInt, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
import structlog

from password_validator.exceptions import ConfigurationError
from password_validator.validators.models import CharacterClass

logger = structlog.get_logger()

# Spellings accepted for an open upper bound
UNBOUNDED_ALIASES = {"infinity", "unbounded", "inf"}


class Bound(BaseModel):
    """An inclusive {min, max} constraint. ``max=None`` means unbounded.

    Shorthands: ``n`` → at least n; ``[min, max]`` → both ends.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min: NonNegativeInt = 0
    max: Optional[NonNegativeInt] = None

    @model_validator(mode="before")
    @classmethod
    def expand_shorthand(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return {"min": value}
        if isinstance(value, (list, tuple)):
            if len(value) != 2:
                raise ValueError(f"Expected [min, max], got {list(value)!r}")
            return {"min": value[0], "max": value[1]}
        return value

    @field_validator("max", mode="before")
    @classmethod
    def normalize_unbounded(cls, value: Any) -> Any:
        if isinstance(value, str) and value.lower() in UNBOUNDED_ALIASES:
            return None
        if isinstance(value, float) and math.isinf(value):
            return None
        return value

    @property
    def is_inverted(self) -> bool:
        return self.max is not None and self.min > self.max

    def is_below(self, count: int) -> bool:
        return count < self.min

    def is_above(self, count: int) -> bool:
        return self.max is not None and count > self.max


class LengthOptions(Bound):
    """Options for LengthValidator."""

    @model_validator(mode="after")
    def check_order(self) -> "LengthOptions":
        if self.is_inverted:
            raise ConfigurationError("Min length cannot be greater than the max")
        return self


class CharacterSetOptions(BaseModel):
    """Options for CharacterSetValidator: one optional bound per character class."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    lower_case: Optional[Bound] = None
    upper_case: Optional[Bound] = None
    numbers: Optional[Bound] = None
    special: Optional[Bound] = None
    allowed_special_characters: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value

        known = {c.value for c in CharacterClass} | {"allowed_special_characters"}
        normalized = {}
        for key, bound in value.items():
            name = key.value if isinstance(key, CharacterClass) else key
            if name not in known:
                raise ConfigurationError(
                    f"Unknown character class {name!r}, expected one of: "
                    f"{', '.join(c.value for c in CharacterClass)}"
                )
            normalized[name] = bound
        return normalized

    @model_validator(mode="after")
    def check_order(self) -> "CharacterSetOptions":
        for character_class, bound in self.bounds():
            if bound.is_inverted:
                raise ConfigurationError(f"Min {character_class.value} cannot be greater than the max")
        return self

    def bounds(self) -> list[tuple[CharacterClass, Bound]]:
        """Configured bounds in canonical class order."""
        configured = []
        for character_class in CharacterClass:
            bound = getattr(self, character_class.value)
            if bound is not None:
                configured.append((character_class, bound))
        return configured


class PasswordPolicy(BaseModel):
    """Parsed, immutable validator options for one validation call."""

    model_config = ConfigDict(frozen=True, extra="allow", arbitrary_types_allowed=True)

    length: Optional[LengthOptions] = None
    character_set: Optional[CharacterSetOptions] = None
    additional_validators: tuple[Any, ...] = ()

    @field_validator("additional_validators", mode="before")
    @classmethod
    def require_list(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            raise ConfigurationError(f"Expected a list of validators, instead received {value!r}")
        return tuple(value)

    def option(self, name: str, default: Any = None) -> Any:
        """Read an option that no built-in validator understands."""
        return (self.model_extra or {}).get(name, default)


def parse_policy(opts: Any = None) -> PasswordPolicy:
    """Parse raw options into a PasswordPolicy.

    Args:
        opts: A mapping of options, an already parsed PasswordPolicy, or None
              for the empty policy

    Returns:
        PasswordPolicy

    Raises:
        ConfigurationError: If the options are malformed or contradictory
    """
    if opts is None:
        return PasswordPolicy()
    if isinstance(opts, PasswordPolicy):
        return opts
    if not isinstance(opts, Mapping):
        raise ConfigurationError(f"Expected a mapping of validator options, instead received {opts!r}")

    try:
        policy = PasswordPolicy.model_validate(dict(opts))
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid password validator options: {e}") from e

    # Nothing but a custom validator reads extra keys
    if policy.model_extra and not policy.additional_validators:
        logger.warning("unknown_policy_options", options=sorted(policy.model_extra))

    return policy
