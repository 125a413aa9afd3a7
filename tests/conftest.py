"""Test configuration and fixtures."""

import pytest
import structlog

from password_validator.config import get_settings
from password_validator.validators.base import BaseValidator
from password_validator.validators.engine import ValidationEngine
from password_validator.validators.policy_loader import clear_policy_cache


class AlwaysInvalidValidator(BaseValidator):
    """Custom validator that rejects every password."""

    def validate(self, password, policy):
        return ["Invalid password"]


@pytest.fixture(autouse=True)
def reset_caches():
    """Isolate settings, policy file caches and logging config between tests."""
    get_settings.cache_clear()
    clear_policy_cache()
    yield
    get_settings.cache_clear()
    clear_policy_cache()
    structlog.reset_defaults()


@pytest.fixture
def engine() -> ValidationEngine:
    """A fresh engine with the built-in validators."""
    return ValidationEngine()


@pytest.fixture
def always_invalid() -> type[BaseValidator]:
    return AlwaysInvalidValidator
