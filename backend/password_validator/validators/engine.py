"""Validation Engine — orchestrates all validators and aggregates their findings.

This is the main entry point for password validation. It parses the policy,
runs every registered validator against the password and produces a
ValidationResult holding every finding, not just the first one.

Usage:
    engine = ValidationEngine()
    result = engine.validate(password, {"length": {"min": 8}})
    if not result.passed:
        # Show result.messages, or branch on error.error_type in result.errors
"""

import time
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Optional

import structlog

from password_validator.config import get_settings
from password_validator.exceptions import ConfigurationError
from password_validator.validators.base import BaseValidator, Finding, FunctionValidator
from password_validator.validators.models import ValidationError, ValidationResult
from password_validator.validators.options import PasswordPolicy, parse_policy

# Import built-in validators
from password_validator.validators.length_validator import LengthValidator
from password_validator.validators.character_set_validator import CharacterSetValidator

logger = structlog.get_logger()


class ValidationEngine:
    """Runs validators in registration order and collects every finding.

    Design principles:
        - Deterministic: same input → same output
        - Complete: every validator runs, every violation is reported
        - Fail fast on misconfiguration: the policy is parsed before any validator runs
        - Extensible: custom validators are injected per call or registered once
    """

    def __init__(self, validators: Optional[list[BaseValidator]] = None):
        """Initialize with the built-in validators or a custom list.

        Args:
            validators: Optional list of validators. If None, uses the built-ins.
        """
        self.validators = list(validators) if validators is not None else self._default_validators()

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        """Create the built-in validator chain in execution order."""
        return [
            LengthValidator(),
            CharacterSetValidator(),
        ]

    def validators_for(self, policy: PasswordPolicy) -> list[BaseValidator]:
        """Validators for one call: the policy's additional validators first, then the chain."""
        return [self._resolve(item) for item in policy.additional_validators] + list(self.validators)

    def validate(self, password: str, opts: Any = None) -> ValidationResult:
        """Run all validators against the password and produce a result.

        Args:
            password: The string being checked
            opts: Validator options (mapping, PasswordPolicy or None)

        Returns:
            ValidationResult with every finding, in validator order

        Raises:
            ConfigurationError: If the options are malformed, before any validator runs
        """
        if not isinstance(password, str):
            raise TypeError(f"Expected a string to validate, instead received {type(password).__name__}")

        start_time = time.perf_counter()

        try:
            policy = parse_policy(opts)
            validators = self.validators_for(policy)
        except ConfigurationError as e:
            logger.error("invalid_policy", error=str(e))
            raise

        all_errors: list[ValidationError] = []
        validator_timings: dict[str, float] = {}

        for validator in validators:
            v_start = time.perf_counter()
            try:
                findings = validator.validate(password, policy)
            except Exception as e:
                logger.error(
                    "validator_failed",
                    validator=validator.name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            finally:
                v_duration = (time.perf_counter() - v_start) * 1000
                validator_timings[validator.name] = round(v_duration, 3)

            all_errors.extend(self._normalize(findings, validator))

        result = ValidationResult(errors=tuple(all_errors))

        settings = get_settings()
        if not (settings.DEBUG or settings.LOG_TIMINGS):
            return result

        total_duration = (time.perf_counter() - start_time) * 1000
        log_context = {}
        if settings.LOG_TIMINGS:
            log_context["validator_timings"] = validator_timings

        logger.debug(
            "validation_complete",
            passed=result.passed,
            total_errors=len(all_errors),
            error_types=[error.error_type for error in all_errors],
            validators=[validator.name for validator in validators],
            duration_ms=round(total_duration, 3),
            **log_context,
        )

        return result

    def add_validator(self, validator: BaseValidator) -> None:
        """Add a custom validator to the end of the chain."""
        self.validators.append(self._resolve(validator))

    def remove_validator(self, validator_name: str) -> None:
        """Remove a validator by name."""
        self.validators = [v for v in self.validators if v.name != validator_name]

    # ── Helper Methods ──

    @staticmethod
    def _resolve(item: Any) -> BaseValidator:
        """Turn a validator instance, validator class or plain callable into a validator."""
        if isinstance(item, BaseValidator):
            return item
        if isinstance(item, type) and issubclass(item, BaseValidator):
            return item()
        if callable(item) and not isinstance(item, type):
            return FunctionValidator(item)
        raise ConfigurationError(f"Expected a validator, instead received {item!r}")

    def _normalize(self, findings: Optional[Iterable[Finding]], validator: BaseValidator) -> list[ValidationError]:
        """Convert whatever a validator returned into ValidationError records."""
        if findings is None:
            return []
        if isinstance(findings, (str, ValidationError)) or self._is_pair(findings):
            findings = [findings]
        return [self._normalize_one(finding, validator) for finding in findings]

    @staticmethod
    def _is_pair(value: Any) -> bool:
        """A (message, metadata) pair, metadata being a mapping or a list of key/value pairs."""
        return (
            isinstance(value, tuple)
            and len(value) == 2
            and isinstance(value[0], str)
            and (
                isinstance(value[1], Mapping)
                or (
                    isinstance(value[1], (list, tuple))
                    and all(isinstance(pair, tuple) and len(pair) == 2 for pair in value[1])
                )
            )
        )

    @staticmethod
    def _normalize_one(finding: Finding, validator: BaseValidator) -> ValidationError:
        if isinstance(finding, ValidationError):
            return finding

        if isinstance(finding, str):
            return ValidationError(message=finding, validator=validator.name)

        if ValidationEngine._is_pair(finding):
            message, metadata = finding
            metadata = dict(metadata)

            owner = metadata.get("validator", validator.name)
            error_type = metadata.get("error_type")
            if isinstance(error_type, Enum):
                error_type = error_type.value
            if error_type is not None and not isinstance(error_type, str):
                raise TypeError(f"Validator '{validator.name}' returned an unsupported finding: {finding!r}")

            return ValidationError(
                message=message,
                validator=owner if isinstance(owner, str) else getattr(owner, "__name__", str(owner)),
                error_type=error_type,
            )

        raise TypeError(f"Validator '{validator.name}' returned an unsupported finding: {finding!r}")


# Module-level singleton
validation_engine = ValidationEngine()


def validate_password(password: str, opts: Any = None) -> list[str]:
    """Validate a password and return plain messages.

    Returns an empty list when the password satisfies every configured rule,
    otherwise every violation message in validator order.

    Example:
        >>> validate_password("too_long", {"length": {"max": 6}})
        ['String is too long. 8 but maximum is 6']
    """
    return validation_engine.validate(password, opts).messages
