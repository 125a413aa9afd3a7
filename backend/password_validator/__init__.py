"""Password Validator: reports every violated password rule, not just the first.

The two main entry points are ``validate_password`` and ``validate``:

    >>> validate_password("too_long", {"length": {"max": 6}})
    ['String is too long. 8 but maximum is 6']

    >>> changeset = Changeset({"password": "Simple_pass12345"})
    >>> changeset = validate(changeset, "password", {
    ...     "length": {"min": 5, "max": 30},
    ...     "character_set": {
    ...         "lower_case": 1,                # at least one lower case letter
    ...         "upper_case": [3, "infinity"],  # at least three upper case letters
    ...         "numbers": [0, 4],              # at most 4 numbers
    ...         "special": [0, 0],              # no special characters allowed
    ...     },
    ... })
    >>> changeset.errors_on("password")
    ['Not enough upper_case characters (only 1 instead of at least 3)', 'Too many numbers (5 but maximum is 4)', 'Too many special (1 but maximum is 0)']
"""

from password_validator.changeset import Changeset, ErrorRecord, validate
from password_validator.exceptions import ConfigurationError, PolicyFileError
from password_validator.fields import PasswordPolicyValidator
from password_validator.validators import (
    BaseValidator,
    CharacterClass,
    ErrorKind,
    PasswordPolicy,
    ValidationEngine,
    ValidationError,
    ValidationResult,
    load_policy,
    validate_password,
    validation_engine,
)

__version__ = "0.1.0"

__all__ = [
    "validate_password",
    "validate",
    "Changeset",
    "ErrorRecord",
    "PasswordPolicyValidator",
    "BaseValidator",
    "ValidationEngine",
    "validation_engine",
    "ValidationError",
    "ValidationResult",
    "CharacterClass",
    "ErrorKind",
    "PasswordPolicy",
    "load_policy",
    "ConfigurationError",
    "PolicyFileError",
]
