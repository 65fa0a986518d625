"""Errors raised while building the application config."""


class ConfigError(Exception):
    """Base class for configuration failures that should abort startup."""


class InvalidIntegerError(ConfigError):
    """Raised when an integer-typed variable is set but not a base-10 integer."""

    def __init__(self, key: str, raw_value: str):
        self.key = key
        self.raw_value = raw_value
        super().__init__(f"{key} must be a base-10 integer, got {raw_value!r}")


class MissingRequiredError(ConfigError):
    """Raised when a required variable resolves to an empty string."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"{key} is required but empty; set it in .env or environment"
        )
