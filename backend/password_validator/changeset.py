"""Changeset adapter — attaches validation findings to a field of a mutable record.

The engine never depends on a form or ORM library. Anything with
``get_field(field)`` and ``add_error(field, message, **metadata)`` can be
validated; ``Changeset`` is a minimal in-memory implementation.

Usage:
    changeset = Changeset({"password": "Simple_pass12345"})
    validate(changeset, "password", {"length": {"min": 5, "max": 30}})
    if not changeset.valid:
        print(changeset.errors_on("password"))
"""

from collections.abc import Mapping
from typing import Any, Optional, Protocol, TypeVar, runtime_checkable

from password_validator.validators.engine import ValidationEngine, validation_engine
from password_validator.validators.options import parse_policy


@runtime_checkable
class ErrorRecord(Protocol):
    """The two operations the adapter needs from a host record."""

    def get_field(self, field: str) -> Any:
        ...

    def add_error(self, field: str, message: str, **metadata: Any) -> Any:
        ...


RecordT = TypeVar("RecordT", bound=ErrorRecord)


class Changeset:
    """Original data, pending changes and the errors found while validating them."""

    def __init__(self, data: Optional[Mapping[str, Any]] = None, changes: Optional[Mapping[str, Any]] = None):
        self.data = dict(data or {})
        self.changes = dict(changes or {})
        self.errors: list[tuple[str, tuple[str, dict[str, Any]]]] = []

    def get_field(self, field: str, default: Any = None) -> Any:
        """Current value of a field: the pending change if any, else the original data."""
        if field in self.changes:
            return self.changes[field]
        return self.data.get(field, default)

    def add_error(self, field: str, message: str, **metadata: Any) -> "Changeset":
        self.errors.append((field, (message, metadata)))
        return self

    @property
    def valid(self) -> bool:
        return not self.errors

    def errors_on(self, field: str) -> list[str]:
        """Error messages recorded for one field, in the order they were added."""
        return [message for name, (message, _) in self.errors if name == field]

    def __repr__(self) -> str:
        return f"Changeset(changes={list(self.changes)}, errors={len(self.errors)}, valid={self.valid})"


def validate(
    record: RecordT,
    field: str,
    opts: Any = None,
    engine: Optional[ValidationEngine] = None,
) -> RecordT:
    """Validate one field of a record and add an error per finding.

    Each error carries ``validator`` and ``error_type`` metadata. A field with no
    value is left alone, but the options are still checked.

    Args:
        record: Host record implementing ErrorRecord
        field: Name of the field holding the password
        opts: Validator options
        engine: Engine to use instead of the module-level one

    Returns:
        The same record, with errors added when validation failed

    Raises:
        ConfigurationError: If the options are malformed
    """
    engine = engine or validation_engine
    policy = parse_policy(opts)

    password = record.get_field(field)
    if password is None:
        return record

    result = engine.validate(password, policy)
    for error in result.errors:
        record.add_error(field, error.message, validator=error.validator, error_type=error.error_type)

    return record
