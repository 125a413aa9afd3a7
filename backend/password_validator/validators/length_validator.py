"""Length Validator: minimum and maximum length in characters."""

from password_validator.validators.base import BaseValidator
from password_validator.validators.characters import grapheme_length
from password_validator.validators.models import ErrorKind, ValidationError
from password_validator.validators.options import PasswordPolicy


class LengthValidator(BaseValidator):
    """Validates the number of characters against ``length: {min, max}``."""

    def validate(self, password: str, policy: PasswordPolicy) -> list[ValidationError]:
        options = policy.length
        if options is None:
            return []

        length = grapheme_length(password)

        if options.is_below(length):
            return [self._error(
                ErrorKind.TOO_SHORT,
                f"String is too short. Only {length} characters instead of {options.min}",
            )]

        if options.is_above(length):
            return [self._error(
                ErrorKind.TOO_LONG,
                f"String is too long. {length} but maximum is {options.max}",
            )]

        return []
