"""Argument parsing helpers built on the option scanner."""

from typing import Optional

from .diagnostics import describe
from .exceptions import ArgumentParseError
from .result import ScanResult, TokenKind
from .scanner import LongOptions, OptionScanner
from .types import ArgsList, OptionPair, ParsedArgs, SplitResult


class ArgumentProcessor:
    """Handles argument parsing and manipulation."""

    @staticmethod
    def render_option(result: ScanResult, longopts: LongOptions = None) -> str:
        """Render a matched option as it would be written on a command line."""
        if result.is_long and longopts is not None and result.long_index is not None:
            return "--" + longopts[result.long_index].name
        return f"-{result.option}"

    @staticmethod
    def getopt_long(
        args: ArgsList,
        shortopts: str,
        longopts: LongOptions = None,
        long_only: bool = False,
        scanner: Optional[OptionScanner] = None,
    ) -> ParsedArgs:
        """
        Scan `args` completely and return ``(options, operands)``.

        `args` excludes the program name. Options are ``(rendered, value)``
        pairs in the order they were found. Operands keep their original
        relative order; under RETURN_IN_ORDER they are collected as found.

        Raises:
            ArgumentParseError: On the first unknown, ambiguous, missing or
                misplaced option
        """
        scanner = scanner or OptionScanner()
        argv = [""] + list(args)
        options: list[OptionPair] = []
        in_order: ArgsList = []

        for result in scanner.iter_tokens(argv, shortopts, longopts, long_only):
            if result.is_error:
                raise ArgumentParseError(result.argument or "", describe(result))
            if result.kind is TokenKind.OPERAND:
                in_order.append(result.value)
                continue
            options.append(
                (ArgumentProcessor.render_option(result, longopts), result.value)
            )

        return options, in_order + argv[scanner.optind :]

    @staticmethod
    def separate_options_and_operands(
        args: ArgsList, shortopts: str, longopts: LongOptions = None
    ) -> SplitResult:
        """
        Permute `args` in place and split it into (option arguments, operands).

        Unknown options are kept with the option arguments. Returns two
        slices of the permuted list.
        """
        argv = [""] + args
        scanner = OptionScanner()
        for _ in scanner.iter_tokens(argv, shortopts, longopts):
            pass
        args[:] = argv[1:]
        boundary = scanner.optind - 1
        return args[:boundary], args[boundary:]
