"""Incremental option scanner with in-place argument permutation."""

from typing import Iterator, List, Optional, Sequence, Tuple

from .environment_helper import EnvironmentHelper, debug_log
from .options import ArgRequirement, LongOption, Ordering, ShortSpec
from .permutation import exchange
from .result import ScanResult, TokenKind
from .types import ArgsList

LongOptions = Optional[Sequence[LongOption]]


class OptionScanner:
    """
    Scanner state for one traversal of an argument vector.

    Call :meth:`next_token` repeatedly with the same `argv` and option
    specifications until it reports ``TokenKind.END``; at that point
    `optind` is the index of the first operand. ``argv[0]`` is the program
    name and is never examined.

    Under PERMUTE ordering the scanner reorders the slots of `argv` as it
    goes so that, once the end is reported, options and their values occupy
    ``argv[1:optind]`` and operands ``argv[optind:]`` in their original
    relative order. Call :meth:`reset` to scan another vector with the same
    instance.
    """

    def __init__(self, honor_posixly_correct: bool = True):
        self.honor_posixly_correct = honor_posixly_correct
        self.reset()

    def reset(self) -> None:
        """Forget all scan state; the next call starts a new scan."""
        self.optind = 0
        self.optarg: Optional[str] = None
        self.optopt = "?"
        self.first_nonopt = 0
        self.last_nonopt = 0
        self.ordering = Ordering.PERMUTE
        self.spec: Optional[ShortSpec] = None
        self.initialized = False
        self.finished = False
        # Argument being unpacked and the offset of its next character.
        self._cluster: Optional[str] = None
        self._cursor = 0

    def next_token(
        self,
        argv: ArgsList,
        shortopts: str,
        longopts: LongOptions = None,
        long_only: bool = False,
    ) -> ScanResult:
        """Advance the scan by one token."""
        if not self.initialized:
            self._initialize(shortopts)
        self.optarg = None
        if self.finished:
            return self._result(TokenKind.END)

        if not self._cluster_pending():
            result = self._advance_to_next_argv(argv, longopts)
            if result is not None:
                return result

            arg = self._cluster
            if longopts is not None and (
                arg[1] == "-"
                or (long_only and (len(arg) > 2 or arg[1] not in self.spec))
            ):
                result = self._handle_long_opt(argv, longopts, long_only)
                if result is not None:
                    return result

        return self._handle_short_opt(argv)

    def iter_tokens(
        self,
        argv: ArgsList,
        shortopts: str,
        longopts: LongOptions = None,
        long_only: bool = False,
    ) -> Iterator[ScanResult]:
        """Yield tokens until the end of options; `optind` then marks the operands."""
        while True:
            result = self.next_token(argv, shortopts, longopts, long_only)
            if result.kind is TokenKind.END:
                return
            yield result

    @property
    def colon_mode(self) -> bool:
        return self.spec is not None and self.spec.missing_arg_return_colon

    def _initialize(self, shortopts: str) -> None:
        posixly_correct = (
            self.honor_posixly_correct and EnvironmentHelper.is_posixly_correct()
        )
        self.spec = ShortSpec.parse(shortopts, posixly_correct)
        self.ordering = self.spec.ordering
        if self.optind == 0:
            self.optind = 1
        self.first_nonopt = self.last_nonopt = self.optind
        self._finish_cluster()
        self.initialized = True
        debug_log(
            f"initialize: ordering={self.ordering.name}, "
            f"colon_mode={self.spec.missing_arg_return_colon}"
        )

    def _result(self, kind: TokenKind, **fields) -> ScanResult:
        return ScanResult(
            kind=kind, optind=self.optind, colon_mode=self.colon_mode, **fields
        )

    def _cluster_pending(self) -> bool:
        return self._cluster is not None and self._cursor < len(self._cluster)

    def _finish_cluster(self) -> None:
        self._cluster = None
        self._cursor = 0

    @staticmethod
    def _is_operand(arg: str) -> bool:
        return not arg.startswith("-") or arg == "-"

    def _exchange(self, argv: ArgsList) -> None:
        """Move the skipped operands behind the options scanned since."""
        debug_log(
            f"exchange: operands [{self.first_nonopt}:{self.last_nonopt}] "
            f"behind options [{self.last_nonopt}:{self.optind}]"
        )
        self.first_nonopt, self.last_nonopt = exchange(
            argv, self.first_nonopt, self.last_nonopt, self.optind
        )

    def _advance_to_next_argv(
        self, argv: ArgsList, longopts: LongOptions
    ) -> Optional[ScanResult]:
        """
        Position the scanner on the next option argument.

        Returns a result when the step ends without reaching an option:
        end of options, or an operand under RETURN_IN_ORDER.
        """
        argc = len(argv)
        if self.ordering is Ordering.PERMUTE:
            if self.first_nonopt != self.last_nonopt and self.last_nonopt != self.optind:
                self._exchange(argv)
            elif self.last_nonopt != self.optind:
                self.first_nonopt = self.optind

            while self.optind < argc and self._is_operand(argv[self.optind]):
                self.optind += 1
            self.last_nonopt = self.optind

        # '--' is scanned like an option, then everything after it is an operand.
        if self.optind < argc and argv[self.optind] == "--":
            self.optind += 1
            if self.first_nonopt != self.last_nonopt and self.last_nonopt != self.optind:
                self._exchange(argv)
            elif self.first_nonopt == self.last_nonopt:
                self.first_nonopt = self.optind
            self.last_nonopt = argc
            self.optind = argc

        if self.optind >= argc:
            # Point back at the operands that were skipped and moved.
            if self.first_nonopt != self.last_nonopt:
                self.optind = self.first_nonopt
            debug_log(f"end of options: first operand at {self.optind}")
            self.finished = True
            return self._result(TokenKind.END)

        arg = argv[self.optind]
        if self._is_operand(arg):
            if self.ordering is Ordering.REQUIRE_ORDER:
                self.finished = True
                return self._result(TokenKind.END)
            self.optarg = arg
            self.optind += 1
            return self._result(TokenKind.OPERAND, value=arg, argument=arg)

        self._cluster = arg
        self._cursor = 1 + (longopts is not None and arg[1] == "-")
        return None

    def _handle_short_opt(self, argv: ArgsList) -> ScanResult:
        cluster = self._cluster
        char = cluster[self._cursor]
        self._cursor += 1
        # optind moves past the argument once its last character is taken.
        if self._cursor >= len(cluster):
            self.optind += 1

        arity = self.spec.lookup(char)
        if arity is None:
            self.optopt = char
            return self._result(
                TokenKind.UNKNOWN_OPTION, option=char, argument=cluster
            )

        value = None
        if arity is not ArgRequirement.NONE:
            rest = cluster[self._cursor :]
            self._finish_cluster()
            if rest:
                value = rest
                self.optind += 1
            elif arity is ArgRequirement.REQUIRED:
                if self.optind >= len(argv):
                    self.optopt = char
                    return self._result(
                        TokenKind.MISSING_VALUE, option=char, argument=cluster
                    )
                value = argv[self.optind]
                self.optind += 1

        self.optarg = value
        return self._result(
            TokenKind.OPTION, option=char, value=value, argument=cluster
        )

    @staticmethod
    def _find_long_option(
        longopts: Sequence[LongOption], name: str
    ) -> Tuple[Optional[LongOption], Optional[int], Tuple[str, ...]]:
        """
        Return ``(option, index, candidates)``; an exact name always wins.

        ``candidates`` lists every prefix match when there is more than one.
        The empty name is a prefix of every option name.
        """
        found: Optional[LongOption] = None
        found_index: Optional[int] = None
        matches: List[str] = []
        for index, option in enumerate(longopts):
            if option.name == name:
                return option, index, ()
            if option.name.startswith(name):
                if found is None:
                    found, found_index = option, index
                matches.append(option.name)
        if len(matches) > 1:
            return None, None, tuple(matches)
        return found, found_index, ()

    def _handle_long_opt(
        self, argv: ArgsList, longopts: Sequence[LongOption], long_only: bool
    ) -> Optional[ScanResult]:
        """
        Resolve the current argument as a long option.

        Returns None only in long-only mode when the text is not a long
        option but starts with a valid short option character; the caller
        then scans it as a short cluster.
        """
        arg = self._cluster
        text = arg[self._cursor :]
        name, eq, inline = text.partition("=")

        option, index, candidates = self._find_long_option(longopts, name)
        if candidates:
            self._finish_cluster()
            self.optind += 1
            self.optopt = ""
            return self._result(
                TokenKind.AMBIGUOUS_OPTION,
                option=name,
                argument=arg,
                is_long=True,
                candidates=candidates,
            )
        if option is not None:
            return self._update_long_opt(argv, option, index, eq == "=", inline)

        if not long_only or arg[1] == "-" or text[0] not in self.spec:
            self._finish_cluster()
            self.optind += 1
            self.optopt = ""
            return self._result(
                TokenKind.UNKNOWN_OPTION, option=name, argument=arg, is_long=True
            )
        return None

    def _update_long_opt(
        self,
        argv: ArgsList,
        option: LongOption,
        index: int,
        has_inline: bool,
        inline: str,
    ) -> ScanResult:
        arg = self._cluster
        self._finish_cluster()
        self.optind += 1

        value = None
        if has_inline:
            if option.has_arg is ArgRequirement.NONE:
                self.optopt = ""
                return self._result(
                    TokenKind.MISPLACED_VALUE,
                    option=option.name,
                    value=inline,
                    long_index=index,
                    argument=arg,
                    is_long=True,
                )
            value = inline
        elif option.has_arg is ArgRequirement.REQUIRED:
            if self.optind >= len(argv):
                self.optopt = ""
                return self._result(
                    TokenKind.MISSING_VALUE,
                    option=option.name,
                    long_index=index,
                    argument=arg,
                    is_long=True,
                )
            value = argv[self.optind]
            self.optind += 1

        self.optarg = value
        if option.flag is not None:
            return self._result(
                TokenKind.OPTION,
                value=value,
                long_index=index,
                flag_setting=(option.flag, option.val),
                argument=arg,
                is_long=True,
            )
        return self._result(
            TokenKind.OPTION,
            option=option.return_value,
            value=value,
            long_index=index,
            argument=arg,
            is_long=True,
        )
