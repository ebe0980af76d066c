"""Environment variable operations for optscan."""

import os
import sys

TRUTHY_VALUES = ("1", "true", "yes", "on")


def debug_log(message: str) -> None:
    """Log debug message when OPTSCAN_DEBUG=1 is set."""
    if EnvironmentHelper.is_debug_enabled():
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def is_posixly_correct() -> bool:
        """Check if POSIXLY_CORRECT asks for options to stop at the first operand."""
        # Presence alone counts, matching the GNU convention.
        return "POSIXLY_CORRECT" in os.environ

    @staticmethod
    def is_debug_enabled() -> bool:
        """Check if debug output was requested."""
        return os.environ.get("OPTSCAN_DEBUG", "").lower() in TRUTHY_VALUES
