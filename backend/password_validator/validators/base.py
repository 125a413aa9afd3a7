"""Base validator — abstract class implementing the Strategy Pattern.

Each validator is a standalone, independently testable unit.
New validators are added without modifying the engine.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Callable, Optional, Union

from password_validator.validators.models import ErrorKind, ValidationError
from password_validator.validators.options import PasswordPolicy

# A raw finding as returned by a validator, before the engine normalizes it
Finding = Union[ValidationError, str, tuple[str, Any]]


class BaseValidator(ABC):
    """Abstract base for all password validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() never mutates the password, the policy or shared state
        - validate() returns findings (None or empty = no issues)
        - Misconfiguration is raised as ConfigurationError, never returned
    """

    @property
    def name(self) -> str:
        """Identifier attached to every finding this validator reports."""
        return type(self).__name__

    @abstractmethod
    def validate(self, password: str, policy: PasswordPolicy) -> Optional[Iterable[Finding]]:
        """Run validation checks against the password.

        Args:
            password: The string being checked
            policy: The full parsed policy for this call

        Returns:
            Findings (empty or None if no issues)
        """
        ...

    # ── Helper Methods ──

    def _error(self, kind: ErrorKind, message: str) -> ValidationError:
        """Convenience method to create a ValidationError owned by this validator."""
        return ValidationError(message=message, validator=self.name, error_type=kind.value)


class FunctionValidator(BaseValidator):
    """Adapts a plain ``(password, policy) -> findings`` callable to the validator contract."""

    def __init__(self, func: Callable[[str, PasswordPolicy], Optional[Iterable[Finding]]], name: Optional[str] = None):
        self.func = func
        self._name = name or getattr(func, "__name__", type(func).__name__)

    @property
    def name(self) -> str:
        return self._name

    def validate(self, password: str, policy: PasswordPolicy) -> Optional[Iterable[Finding]]:
        return self.func(password, policy)

    def __repr__(self) -> str:
        return f"FunctionValidator({self._name})"
