"""Password validator exceptions.

Configuration errors signal caller misuse (inverted bounds, malformed options,
a custom validator list that is not a list). They abort the whole validation
call. Validation findings are never raised; they are returned as data.
"""


class ConfigurationError(RuntimeError):
    """Raised when validator options are malformed or contradictory."""


class PolicyFileError(ConfigurationError):
    """Raised when a policy file cannot be read or parsed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load password policy from '{path}': {reason}")
