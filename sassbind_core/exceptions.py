from typing import Any, Optional


class SassBindError(Exception):
    """Base exception for the binding layer."""

    pass


class RuntimeUnavailableError(SassBindError):
    """Raised when the native libsass runtime could not be loaded."""

    pass


class DisposedError(SassBindError):
    """Raised when an options handle is used after it was released."""

    pass


class InvalidOptionError(SassBindError, ValueError):
    """Raised when a configuration value cannot be applied to an options handle."""

    def __init__(self, key: str, value: Any, expected: Optional[str] = None):
        self.key = key
        self.value = value
        message = f"Unexpected value '{value}' for {key}"
        if expected:
            message = f"{message}: expected {expected}"
        super().__init__(message)


class InvalidStyleError(InvalidOptionError):
    def __init__(self, value: Any):
        super().__init__("style", value)


class InvalidPrecisionError(InvalidOptionError):
    def __init__(self, value: Any):
        super().__init__("precision", value, "a non-negative integer")
