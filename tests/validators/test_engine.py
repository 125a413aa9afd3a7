"""Tests for ValidationEngine and validate_password."""

import pytest
from structlog.testing import capture_logs

from password_validator.exceptions import ConfigurationError
from password_validator.validators.base import BaseValidator, FunctionValidator
from password_validator.validators.engine import ValidationEngine, validate_password
from password_validator.validators.length_validator import LengthValidator
from password_validator.validators.models import ErrorKind, ValidationError

STRONG_PASSWORD = "shine coin desert"


class RecordingValidator(BaseValidator):
    """Custom validator that remembers every call and reports nothing."""

    def __init__(self):
        self.calls = []

    def validate(self, password, policy):
        self.calls.append(password)
        return None


def no_digits_only(password, policy):
    if password.isdigit():
        return [("Password cannot be only digits", {"error_type": "digits_only"})]
    return []


class TestValidatePassword:
    """Plain message mode."""

    def test_empty_options_always_pass(self):
        assert validate_password(STRONG_PASSWORD) == []
        assert validate_password("", {}) == []

    def test_too_long(self):
        assert validate_password("too_long", {"length": {"max": 6}}) == ["String is too long. 8 but maximum is 6"]

    def test_too_short(self):
        assert "String is too short. Only 5 characters instead of 8" in validate_password("short", {"length": {"min": 8}})

    def test_errors_on_multiple_validators_in_validator_order(self):
        opts = {"length": {"min": 7}, "character_set": {"upper_case": 1}}
        assert validate_password("short", opts) == [
            "String is too short. Only 5 characters instead of 7",
            "Not enough upper_case characters (only 0 instead of at least 1)",
        ]

    def test_length_and_character_set_errors_together(self):
        opts = {"length": {"min": 9}, "character_set": {"numbers": 3}}
        assert validate_password("S3cr3t", opts) == [
            "String is too short. Only 6 characters instead of 9",
            "Not enough numbers characters (only 2 instead of at least 3)",
        ]

    def test_inverted_length_bounds_raise(self):
        with pytest.raises(ConfigurationError, match="^Min length cannot be greater than the max$"):
            validate_password("some password", {"length": {"min": 20, "max": 10}})

    @pytest.mark.parametrize("password", ["", "x", "a much longer password than the bounds allow"])
    def test_inverted_length_bounds_raise_regardless_of_input(self, password):
        with pytest.raises(ConfigurationError, match="Min length cannot be greater than the max"):
            validate_password(password, {"length": {"min": 20, "max": 10}})

    def test_invalid_additional_validators_raise(self):
        with pytest.raises(ConfigurationError, match="^Expected a list of validators, instead received 'invalid'$"):
            validate_password("short", {"additional_validators": "invalid"})

    def test_custom_validator(self, always_invalid):
        assert validate_password(STRONG_PASSWORD, {"additional_validators": [always_invalid]}) == ["Invalid password"]

    def test_custom_validator_ignores_input(self, always_invalid):
        for password in ["", "Str0ng!Passw0rd", STRONG_PASSWORD]:
            assert validate_password(password, {"additional_validators": [always_invalid()]}) == ["Invalid password"]


class TestValidationEngine:
    """Structured result mode and the validator registry."""

    def test_result_passed(self, engine):
        result = engine.validate(STRONG_PASSWORD, {"length": {"min": 8}})
        assert result.passed
        assert result.errors == ()
        assert result.messages == []

    def test_result_carries_rule_and_kind(self, engine):
        result = engine.validate("too_long", {"length": {"max": 6}})
        assert not result.passed
        assert result.errors == (
            ValidationError(
                message="String is too long. 8 but maximum is 6",
                validator="LengthValidator",
                error_type=ErrorKind.TOO_LONG.value,
            ),
        )
        assert result.as_tuples() == [
            ("String is too long. 8 but maximum is 6", {"validator": "LengthValidator", "error_type": "too_long"}),
        ]

    def test_validation_is_idempotent(self, engine):
        opts = {"length": {"min": 10, "max": 12}, "character_set": {"numbers": 2, "special": [0, 0]}}
        assert engine.validate("pass_word", opts) == engine.validate("pass_word", opts)

    def test_custom_validators_run_before_built_ins(self, engine):
        opts = {"length": {"min": 10}, "additional_validators": [no_digits_only]}
        result = engine.validate("12345", opts)
        assert [(e.validator, e.error_type) for e in result.errors] == [
            ("no_digits_only", "digits_only"),
            ("LengthValidator", "too_short"),
        ]

    def test_custom_validators_keep_their_order(self, engine):
        first = FunctionValidator(lambda password, policy: ["first"], name="first")
        second = FunctionValidator(lambda password, policy: ["second"], name="second")
        result = engine.validate("x", {"additional_validators": [first, second]})
        assert result.messages == ["first", "second"]

    def test_configuration_error_aborts_before_any_validator_runs(self, engine):
        recorder = RecordingValidator()
        with pytest.raises(ConfigurationError):
            engine.validate("x", {"additional_validators": [recorder], "length": {"min": 3, "max": 1}})
        assert recorder.calls == []

    def test_custom_validator_reads_extra_options(self, engine):
        def forbidden_words(password, policy):
            return [f"Contains '{word}'" for word in policy.option("forbidden_words", []) if word in password]

        result = engine.validate("acme-rocks", {"forbidden_words": ["acme"], "additional_validators": [forbidden_words]})
        assert result.messages == ["Contains 'acme'"]

    def test_unsupported_validator_item(self, engine):
        with pytest.raises(ConfigurationError, match="Expected a validator, instead received 42"):
            engine.validate("x", {"additional_validators": [42]})

    def test_non_string_input(self, engine):
        with pytest.raises(TypeError, match="Expected a string to validate"):
            engine.validate(12345678, {})

    def test_validator_exceptions_propagate(self, engine):
        def broken(password, policy):
            raise KeyError("boom")

        with capture_logs() as logs:
            with pytest.raises(KeyError):
                engine.validate("x", {"additional_validators": [broken]})

        assert logs[0]["event"] == "validator_failed"
        assert logs[0]["validator"] == "broken"

    def test_add_and_remove_validator(self, always_invalid):
        engine = ValidationEngine()
        engine.add_validator(always_invalid)
        assert engine.validate("x").messages == ["Invalid password"]

        engine.remove_validator("AlwaysInvalidValidator")
        assert engine.validate("x").passed

    def test_empty_chain(self):
        engine = ValidationEngine(validators=[])
        assert engine.validate("x", {"length": {"min": 5}}).passed

    def test_custom_chain(self):
        engine = ValidationEngine(validators=[LengthValidator()])
        result = engine.validate("abc", {"length": {"min": 5}, "character_set": {"numbers": 1}})
        assert [e.error_type for e in result.errors] == ["too_short"]

    def test_custom_chain_is_copied(self, always_invalid):
        chain = [LengthValidator()]
        engine = ValidationEngine(validators=chain)
        engine.add_validator(always_invalid)

        assert len(chain) == 1
        assert len(engine.validators) == 2


class TestFindingNormalization:
    """Every finding shape becomes a ValidationError."""

    @pytest.mark.parametrize(
        "finding, expected",
        [
            ("Plain message", ValidationError(message="Plain message", validator="custom")),
            (
                ("With metadata", {"error_type": "weak"}),
                ValidationError(message="With metadata", validator="custom", error_type="weak"),
            ),
            (
                ("With pairs", [("validator", "Other"), ("error_type", ErrorKind.TOO_SHORT)]),
                ValidationError(message="With pairs", validator="Other", error_type="too_short"),
            ),
            (
                ("Owner class", {"validator": LengthValidator}),
                ValidationError(message="Owner class", validator="LengthValidator"),
            ),
            (
                ValidationError(message="Record", validator="Elsewhere", error_type="x"),
                ValidationError(message="Record", validator="Elsewhere", error_type="x"),
            ),
        ],
    )
    def test_shapes(self, engine, finding, expected):
        custom = FunctionValidator(lambda password, policy: [finding], name="custom")
        assert engine.validate("x", {"additional_validators": [custom]}).errors == (expected,)

    def test_single_string_return(self, engine):
        custom = FunctionValidator(lambda password, policy: "Only one", name="custom")
        assert engine.validate("x", {"additional_validators": [custom]}).messages == ["Only one"]

    def test_unsupported_finding(self, engine):
        custom = FunctionValidator(lambda password, policy: [42], name="custom")
        with pytest.raises(TypeError, match="unsupported finding"):
            engine.validate("x", {"additional_validators": [custom]})

    def test_single_pair_return(self, engine):
        custom = FunctionValidator(lambda password, policy: ("Bad", {"error_type": "x"}), name="custom")
        result = engine.validate("x", {"additional_validators": [custom]})
        assert result.errors == (ValidationError(message="Bad", validator="custom", error_type="x"),)

    def test_tuple_of_messages_is_not_a_pair(self, engine):
        custom = FunctionValidator(lambda password, policy: ("First", "Second"), name="custom")
        assert engine.validate("x", {"additional_validators": [custom]}).messages == ["First", "Second"]

    def test_non_string_error_type(self, engine):
        custom = FunctionValidator(lambda password, policy: [("Bad", {"error_type": 3})], name="custom")
        with pytest.raises(TypeError, match="unsupported finding"):
            engine.validate("x", {"additional_validators": [custom]})


class TestLogging:
    """Completion logs never contain the password."""

    def test_quiet_by_default(self):
        with capture_logs() as logs:
            validate_password("hunter2", {"length": {"min": 8}})
        assert logs == []

    def test_nothing_written_to_stdout_by_default(self, capsys):
        assert validate_password("too_long", {"length": {"max": 6}}) == ["String is too long. 8 but maximum is 6"]
        assert capsys.readouterr().out == ""

    def test_validation_complete_logged(self, engine, monkeypatch):
        monkeypatch.setenv("PASSWORD_VALIDATOR_DEBUG", "true")
        with capture_logs() as logs:
            engine.validate("hunter2", {"length": {"min": 8}})

        event = logs[-1]
        assert event["event"] == "validation_complete"
        assert event["log_level"] == "debug"
        assert event["passed"] is False
        assert event["error_types"] == ["too_short"]
        assert "hunter2" not in repr(logs)

    def test_timings_logged_when_enabled(self, engine, monkeypatch):
        monkeypatch.setenv("PASSWORD_VALIDATOR_LOG_TIMINGS", "true")
        with capture_logs() as logs:
            engine.validate("hunter2", {})
        assert set(logs[-1]["validator_timings"]) == {"LengthValidator", "CharacterSetValidator"}

    def test_invalid_policy_logged(self, engine):
        with capture_logs() as logs:
            with pytest.raises(ConfigurationError):
                engine.validate("x", {"length": {"min": 2, "max": 1}})
        assert logs[0]["event"] == "invalid_policy"
