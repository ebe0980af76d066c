"""Option specifications: short option strings and long option tables."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .exceptions import InvalidOptionSpecError
from .types import OptionValue


class Ordering(Enum):
    """How options that follow operands are handled."""

    REQUIRE_ORDER = "require_order"
    """Stop at the first operand (selected by a leading '+')."""

    PERMUTE = "permute"
    """Move operands behind the options as they are scanned (the default)."""

    RETURN_IN_ORDER = "return_in_order"
    """Report operands interleaved with options (selected by a leading '-')."""


class ArgRequirement(Enum):
    """Whether an option takes a value."""

    NONE = 0
    REQUIRED = 1
    OPTIONAL = 2

    @classmethod
    def from_colons(cls, colons: int) -> "ArgRequirement":
        """Map the number of colons following an option character to its arity."""
        return (cls.NONE, cls.REQUIRED, cls.OPTIONAL)[colons]


@dataclass(frozen=True)
class LongOption:
    """
    A long option record.

    * `name` – the option name without the leading dashes.
    * `has_arg` – whether the option takes no, a required or an optional value.
    * `flag` – when set, matching the option assigns `val` to this flag instead
      of reporting an option value; the scan result carries the setting.
    * `val` – the value reported on a match (typically the equivalent short
      option character). When omitted the option name itself is reported.
    """

    name: str
    has_arg: ArgRequirement = ArgRequirement.NONE
    flag: Optional[str] = None
    val: Optional[OptionValue] = None

    def __post_init__(self):
        if not self.name:
            raise InvalidOptionSpecError(self.name, "long option name is empty")
        if "=" in self.name:
            raise InvalidOptionSpecError(
                self.name, "long option name must not contain '='"
            )
        if self.flag is not None and self.val is None:
            raise InvalidOptionSpecError(
                self.name, "a flag option needs a value to assign"
            )

    @property
    def return_value(self) -> OptionValue:
        """Value reported when the option matches without a flag."""
        return self.name if self.val is None else self.val


@dataclass
class ShortSpec:
    """A parsed short option string such as ``"+:ab:c::"``."""

    source: str
    ordering: Ordering = Ordering.PERMUTE
    missing_arg_return_colon: bool = False
    arity: Dict[str, ArgRequirement] = field(default_factory=dict)

    @classmethod
    def parse(cls, optstring: str, posixly_correct: bool = False) -> "ShortSpec":
        """
        Parse a short option string.

        A leading '+' selects REQUIRE_ORDER, a leading '-' RETURN_IN_ORDER;
        without either the ordering is PERMUTE, or REQUIRE_ORDER when
        `posixly_correct` is set. A ':' after the ordering prefix selects
        colon mode. Each option character may be followed by ':' (value
        required) or '::' (value optional).

        Raises:
            InvalidOptionSpecError: If the string is malformed
        """
        if optstring is None:
            raise InvalidOptionSpecError("None", "short option string is required")

        spec = cls(source=optstring)
        body = optstring
        if body.startswith("-"):
            spec.ordering = Ordering.RETURN_IN_ORDER
            body = body[1:]
        elif body.startswith("+"):
            spec.ordering = Ordering.REQUIRE_ORDER
            body = body[1:]
        elif posixly_correct:
            spec.ordering = Ordering.REQUIRE_ORDER

        if body.startswith(":"):
            spec.missing_arg_return_colon = True
            body = body[1:]

        i = 0
        while i < len(body):
            char = body[i]
            if char == ":":
                raise InvalidOptionSpecError(
                    optstring, f"unexpected ':' at offset {i}"
                )
            if char == "-":
                raise InvalidOptionSpecError(optstring, "'-' is not an option character")
            colons = 0
            i += 1
            while i < len(body) and body[i] == ":" and colons < 2:
                colons += 1
                i += 1
            spec.arity[char] = ArgRequirement.from_colons(colons)
        return spec

    def __contains__(self, char: str) -> bool:
        return char in self.arity

    def lookup(self, char: str) -> Optional[ArgRequirement]:
        """Return the arity of a short option, or None if it is not recognized."""
        return self.arity.get(char)


def parse_long_spec(text: str) -> List[LongOption]:
    """
    Parse a comma separated long option list such as ``"file:,verbose,color::"``.

    Whitespace around names is ignored and empty entries are skipped.
    """
    options: List[LongOption] = []
    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name = entry.rstrip(":")
        colons = len(entry) - len(name)
        if colons > 2:
            raise InvalidOptionSpecError(entry, "more than two colons")
        options.append(LongOption(name, ArgRequirement.from_colons(colons)))
    return options
