"""Pydantic field adapter.

Use it in request schemas either through ``Annotated``:

    StrongPassword = Annotated[str, AfterValidator(PasswordPolicyValidator(POLICY))]

or from a ``field_validator``:

    _password_policy = PasswordPolicyValidator(POLICY)

    @field_validator("password")
    @classmethod
    def password_strength(cls, value):
        return _password_policy(value)

Failures are raised as a single ``password_policy`` error whose context lists
every finding, so API error bodies keep the rule and kind of each one.
"""

from typing import Any, Optional

from pydantic_core import PydanticCustomError

from password_validator.validators.engine import ValidationEngine, validation_engine
from password_validator.validators.options import parse_policy


class PasswordPolicyValidator:
    """Callable that checks a field value against a fixed policy."""

    def __init__(self, opts: Any = None, engine: Optional[ValidationEngine] = None):
        # Parse eagerly so a bad policy fails when the schema is defined
        self.policy = parse_policy(opts)
        self.engine = engine

    def __call__(self, value: str) -> str:
        result = (self.engine or validation_engine).validate(value, self.policy)
        if not result.passed:
            raise PydanticCustomError(
                "password_policy",
                "{summary}",
                {
                    "summary": "; ".join(result.messages),
                    "errors": [error.model_dump() for error in result.errors],
                },
            )
        return value
