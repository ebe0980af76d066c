"""Custom exceptions for optscan."""


class OptscanError(Exception):
    """Base exception for optscan errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidOptionSpecError(OptscanError):
    """Raised when a short option string or long option table is malformed."""

    def __init__(self, spec: str, message: str = "Invalid option specification"):
        super().__init__(f"Invalid option specification '{spec}': {message}")
        self.spec = spec


class ArgumentParseError(OptscanError):
    """Raised when argument parsing fails."""

    def __init__(self, argument: str, message: str):
        super().__init__(f"Failed to parse argument '{argument}': {message}")
        self.argument = argument


class UsageError(OptscanError):
    """Raised when the optscan command itself is invoked incorrectly."""

    def __init__(self, message: str):
        super().__init__(f"Usage error: {message}")
