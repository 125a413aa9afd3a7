"""Character Set Validator: per-class character counts and allowed special characters.

Every character is classified into exactly one of lower_case, upper_case,
numbers or special (see characters.py). Only classes present in the options
are checked; findings follow the canonical class order, not the order of the
options or of the input.
"""

from password_validator.validators.base import BaseValidator
from password_validator.validators.characters import classify, count_classes, graphemes
from password_validator.validators.models import CharacterClass, ErrorKind, ValidationError
from password_validator.validators.options import Bound, CharacterSetOptions, PasswordPolicy


class CharacterSetValidator(BaseValidator):
    """Validates character class composition against ``character_set`` options."""

    def validate(self, password: str, policy: PasswordPolicy) -> list[ValidationError]:
        options = policy.character_set
        if options is None:
            return []

        errors = []
        counts = count_classes(password)

        # ── 1. Class counts ──
        for character_class, bound in options.bounds():
            errors.extend(self._check_count(character_class, counts[character_class], bound))

        # ── 2. Allowed special characters ──
        if options.allowed_special_characters is not None:
            errors.extend(self._check_special_characters(password, options))

        return errors

    def _check_count(self, character_class: CharacterClass, count: int, bound: Bound) -> list[ValidationError]:
        name = character_class.value

        if bound.is_below(count):
            return [self._error(
                ErrorKind.too_few(character_class),
                f"Not enough {name} characters (only {count} instead of at least {bound.min})",
            )]

        if bound.is_above(count):
            return [self._error(
                ErrorKind.too_many(character_class),
                f"Too many {name} ({count} but maximum is {bound.max})",
            )]

        return []

    def _check_special_characters(self, password: str, options: CharacterSetOptions) -> list[ValidationError]:
        """Report each distinct special character missing from the allowed set, in input order."""
        allowed = set(graphemes(options.allowed_special_characters))
        errors = []
        seen = set()

        for grapheme in graphemes(password):
            if classify(grapheme) is not CharacterClass.SPECIAL:
                continue
            if grapheme in allowed or grapheme in seen:
                continue
            seen.add(grapheme)
            errors.append(self._error(
                ErrorKind.INVALID_SPECIAL_CHARACTERS,
                f"Invalid character: {grapheme}",
            ))

        return errors
