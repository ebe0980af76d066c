"""Error messages for scan results, in the wording GNU tools use."""

import logging

from .result import ScanResult, TokenKind


def _dashes(result: ScanResult) -> str:
    return "--" if (result.argument or "").startswith("--") else "-"


def describe(result: ScanResult) -> str:
    """Describe an error result without the program prefix."""
    option = result.option
    if result.kind is TokenKind.UNKNOWN_OPTION:
        if result.is_long:
            return f"unrecognized option '{result.argument}'"
        return f"invalid option -- '{option}'"
    if result.kind is TokenKind.AMBIGUOUS_OPTION:
        dashes = _dashes(result)
        message = f"option '{dashes}{option}' is ambiguous"
        if result.candidates:
            names = " ".join(f"'{dashes}{name}'" for name in result.candidates)
            message += f"; possibilities: {names}"
        return message
    if result.kind is TokenKind.MISSING_VALUE:
        if result.is_long:
            return f"option '{_dashes(result)}{option}' requires an argument"
        return f"option requires an argument -- '{option}'"
    if result.kind is TokenKind.MISPLACED_VALUE:
        return f"option '{_dashes(result)}{option}' doesn't allow an argument"
    raise ValueError(f"not an error result: {result.kind.name}")


def format_error(result: ScanResult, program: str) -> str:
    """Format an error result as ``program: message``."""
    return f"{program}: {describe(result)}"


class ErrorReporter:
    """Logs scan errors unless diagnostics are turned off."""

    def __init__(self, program: str, quiet: bool = False):
        self.program = program
        self.quiet = quiet
        self.error_count = 0

    def report(self, result: ScanResult) -> bool:
        """
        Record an error result and log its message.

        Colon mode silences messages the same way quiet mode does. Returns
        True if the result was an error.
        """
        if not result.is_error:
            return False
        self.error_count += 1
        if not self.quiet and not result.colon_mode:
            logging.error(format_error(result, self.program))
        return True
