"""Scan results returned by the option scanner."""

from dataclasses import dataclass
from enum import Enum
from typing import MutableMapping, Optional, Tuple

from .types import FlagSetting, OptionValue


class TokenKind(Enum):
    """Classification of a single scanner step."""

    OPTION = "option"
    OPERAND = "operand"
    END = "end"
    UNKNOWN_OPTION = "unknown_option"
    AMBIGUOUS_OPTION = "ambiguous_option"
    MISSING_VALUE = "missing_value"
    MISPLACED_VALUE = "misplaced_value"


ERROR_KINDS = frozenset(
    {
        TokenKind.UNKNOWN_OPTION,
        TokenKind.AMBIGUOUS_OPTION,
        TokenKind.MISSING_VALUE,
        TokenKind.MISPLACED_VALUE,
    }
)


@dataclass(frozen=True)
class ScanResult:
    """
    One token produced by :meth:`OptionScanner.next_token`.

    * `kind` – what the step produced.
    * `option` – the short option character or the long option's return
      value. ``None`` for operands, end of options, and long options that
      set a flag. For errors it is the offending short character or, for
      long options, the name as typed (or the resolved name for
      missing/misplaced values).
    * `value` – the option's value, or the operand under RETURN_IN_ORDER.
    * `optind` – scanner index after the step; for END it is the index of
      the first operand.
    * `long_index` – index of the matched record in the long option table.
    * `flag_setting` – ``(flag, val)`` for long options with a flag.
    * `argument` – the argument element the token came from, for messages.
    * `is_long` – whether the token came from a long option.
    * `colon_mode` – whether the short spec selected colon mode.
    * `candidates` – the long option names an ambiguous prefix matched.
    """

    kind: TokenKind
    optind: int
    option: Optional[OptionValue] = None
    value: Optional[str] = None
    long_index: Optional[int] = None
    flag_setting: Optional[FlagSetting] = None
    argument: Optional[str] = None
    is_long: bool = False
    colon_mode: bool = False
    candidates: Tuple[str, ...] = ()

    @property
    def is_error(self) -> bool:
        return self.kind in ERROR_KINDS

    @property
    def sentinel(self) -> Optional[str]:
        """The character getopt would return for an error: ':' or '?'."""
        if not self.is_error:
            return None
        if self.kind is TokenKind.MISSING_VALUE and self.colon_mode:
            return ":"
        return "?"

    def apply_flag(self, flags: MutableMapping[str, OptionValue]) -> bool:
        """Store the flag setting in `flags`. Returns False if there is none."""
        if self.flag_setting is None:
            return False
        name, val = self.flag_setting
        flags[name] = val
        return True
