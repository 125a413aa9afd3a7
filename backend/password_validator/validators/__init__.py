"""Composable password rules for length and character-class composition.

Usage:
    from password_validator.validators import validation_engine

    result = validation_engine.validate(password, opts)
    if not result.passed:
        # Show result.messages, or branch on each error.error_type
"""

from password_validator.validators.base import BaseValidator, FunctionValidator
from password_validator.validators.character_set_validator import CharacterSetValidator
from password_validator.validators.engine import ValidationEngine, validate_password, validation_engine
from password_validator.validators.length_validator import LengthValidator
from password_validator.validators.models import CharacterClass, ErrorKind, ValidationError, ValidationResult
from password_validator.validators.options import Bound, PasswordPolicy, parse_policy
from password_validator.validators.policy_loader import load_policy

__all__ = [
    "BaseValidator",
    "FunctionValidator",
    "LengthValidator",
    "CharacterSetValidator",
    "ValidationEngine",
    "validation_engine",
    "validate_password",
    "ValidationError",
    "ValidationResult",
    "CharacterClass",
    "ErrorKind",
    "Bound",
    "PasswordPolicy",
    "parse_policy",
    "load_policy",
]
