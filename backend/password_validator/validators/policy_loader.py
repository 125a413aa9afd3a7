"""Policy loader — reads password policies from JSON files.

A policy file holds the built-in validator options only; custom validators are
code and are passed as ``additional_validators`` by the caller:

    {
        "length": {"min": 12, "max": 128},
        "character_set": {"upper_case": 1, "numbers": [1, "infinity"]}
    }
"""

import copy
import json
from pathlib import Path
from typing import Any, Union

import structlog

from password_validator.exceptions import PolicyFileError
from password_validator.validators.options import parse_policy

logger = structlog.get_logger()

# Cache loaded policy files to avoid re-reading from disk
_policy_cache: dict[Path, dict[str, Any]] = {}


def load_policy(path: Union[str, Path], use_cache: bool = True) -> dict[str, Any]:
    """Load a policy file and check that its options parse.

    Args:
        path: Path to a JSON policy file
        use_cache: Reuse a previously loaded copy of the same file

    Returns:
        Policy options mapping, usable as ``opts`` for validation

    Raises:
        PolicyFileError: If the file is missing, not JSON or not a JSON object
        ConfigurationError: If the options themselves are invalid
    """
    path = Path(path).resolve()
    if use_cache and path in _policy_cache:
        return copy.deepcopy(_policy_cache[path])

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PolicyFileError(path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise PolicyFileError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e

    if not isinstance(data, dict):
        raise PolicyFileError(path, "top-level value must be an object")
    if "additional_validators" in data:
        raise PolicyFileError(path, "additional_validators cannot be declared in a policy file")

    parse_policy(data)

    _policy_cache[path] = data
    logger.info("policy_loaded", path=str(path), rules=sorted(data.keys()))
    return copy.deepcopy(data)


def clear_policy_cache() -> None:
    """Forget every cached policy file."""
    _policy_cache.clear()
