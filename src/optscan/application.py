#!/usr/bin/env python3
"""The optscan command: parse shell script parameters the getopt(1) way."""

import logging
import sys
from typing import Callable, List, Optional, Sequence

from .argument_processor import ArgumentProcessor
from .diagnostics import ErrorReporter, describe
from .environment_helper import debug_log
from .exceptions import OptscanError, UsageError
from .options import ArgRequirement, LongOption, parse_long_spec
from .result import ScanResult, TokenKind
from .scanner import OptionScanner
from .types import ArgsList, ExitCode

PROGRAM = "optscan"

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE = 2
EXIT_INTERNAL = 3
EXIT_TEST = 4

OWN_SHORTOPTS = "+ahl:n:o:qTu"
OWN_LONGOPTS = [
    LongOption("alternative", ArgRequirement.NONE, val="a"),
    LongOption("help", ArgRequirement.NONE, val="h"),
    LongOption("longoptions", ArgRequirement.REQUIRED, val="l"),
    LongOption("long", ArgRequirement.REQUIRED, val="l"),
    LongOption("name", ArgRequirement.REQUIRED, val="n"),
    LongOption("options", ArgRequirement.REQUIRED, val="o"),
    LongOption("quiet", ArgRequirement.NONE, val="q"),
    LongOption("test", ArgRequirement.NONE, val="T"),
    LongOption("unquoted", ArgRequirement.NONE, val="u"),
]


def print_help() -> None:
    """Print concise help message about optscan usage."""
    help_text = """optscan - parse command options for shell scripts
Usage:
  optscan -o ab:c -- -a file1 -b val file2      # prints: -a -b 'val' -- 'file1' 'file2'
  optscan -o f: -l file:,verbose -- --verb -f x # long options may be abbreviated
  optscan -o +v -- -v cmd -x                    # '+' stops at the first operand
  optscan ab:c -a -b val                        # first parameter is the short options

Options:
  -o, --options SHORTOPTS    short options ('x:' requires a value, 'x::' optional)
  -l, --longoptions LONGOPTS comma separated long options, same colon notation
  -n, --name PROG            name used in error messages
  -a, --alternative          allow long options with a single '-'
  -q, --quiet                do not report errors
  -u, --unquoted             do not quote the output
  -T, --test                 exit with status 4
  -h, --help                 show this help

  Honors POSIXLY_CORRECT; set OPTSCAN_DEBUG=1 for debug output
"""
    print(help_text)


def quote(value: str, unquoted: bool = False) -> str:
    """Quote a value for the shell with single quotes."""
    if unquoted:
        return value
    return "'" + value.replace("'", "'\\''") + "'"


class Settings:
    """Options given to optscan itself."""

    def __init__(self):
        self.shortopts: Optional[str] = None
        self.longopts: List[LongOption] = []
        self.name = PROGRAM
        self.long_only = False
        self.quiet = False
        self.unquoted = False
        self.test = False
        self.help = False
        self.params: ArgsList = []


class Application:
    """Main application orchestrator."""

    def __init__(self, scanner_factory: Optional[Callable[[], OptionScanner]] = None):
        self.scanner_factory = scanner_factory or OptionScanner

    def run(self, args: ArgsList) -> ExitCode:
        """Run the application with the given arguments."""
        try:
            settings = self.parse_settings(args)
        except OptscanError as e:
            logging.error(f"{PROGRAM}: {e.message}")
            return EXIT_USAGE

        if settings.test:
            return EXIT_TEST
        if settings.help:
            print_help()
            return EXIT_OK

        try:
            line, errors = self.scan_parameters(settings)
        except OptscanError as e:
            logging.error(f"{PROGRAM}: {e.message}")
            return EXIT_USAGE

        print(line)
        return EXIT_PARSE_ERROR if errors else EXIT_OK

    def parse_settings(self, args: ArgsList) -> Settings:
        """Parse optscan's own options; stops at the first parameter."""
        settings = Settings()
        argv = [PROGRAM] + list(args)
        scanner = OptionScanner(honor_posixly_correct=False)

        for result in scanner.iter_tokens(argv, OWN_SHORTOPTS, OWN_LONGOPTS):
            if result.is_error:
                raise UsageError(describe(result))
            self._apply_setting(settings, result)

        settings.params = argv[scanner.optind :]
        if settings.shortopts is None and not (settings.help or settings.test):
            if not settings.params:
                raise UsageError("missing optstring argument")
            settings.shortopts = settings.params.pop(0)
        debug_log(
            f"parse_settings: shortopts={settings.shortopts!r}, "
            f"longopts={[o.name for o in settings.longopts]}, params={settings.params}"
        )
        return settings

    @staticmethod
    def _apply_setting(settings: Settings, result: ScanResult) -> None:
        option = result.option
        if option == "o":
            settings.shortopts = result.value
        elif option == "l":
            settings.longopts.extend(parse_long_spec(result.value))
        elif option == "n":
            settings.name = result.value
        elif option == "a":
            settings.long_only = True
        elif option == "q":
            settings.quiet = True
        elif option == "u":
            settings.unquoted = True
        elif option == "T":
            settings.test = True
        elif option == "h":
            settings.help = True

    def scan_parameters(self, settings: Settings) -> tuple[str, int]:
        """
        Scan the parameters and build the normalized output line.

        Returns the line and the number of errors reported.
        """
        argv = [settings.name] + settings.params
        longopts = settings.longopts or None
        scanner = self.scanner_factory()
        reporter = ErrorReporter(settings.name, quiet=settings.quiet)
        words: ArgsList = []

        for result in scanner.iter_tokens(
            argv, settings.shortopts, longopts, settings.long_only
        ):
            if reporter.report(result):
                continue
            if result.kind is TokenKind.OPERAND:
                words.append(quote(result.value, settings.unquoted))
                continue
            words.append(ArgumentProcessor.render_option(result, longopts))
            if result.value is not None:
                words.append(quote(result.value, settings.unquoted))
            elif self._takes_optional_value(result, scanner, longopts):
                words.append(quote("", settings.unquoted))

        words.append("--")
        words.extend(quote(arg, settings.unquoted) for arg in argv[scanner.optind :])
        return " " + " ".join(words), reporter.error_count

    @staticmethod
    def _takes_optional_value(
        result: ScanResult,
        scanner: OptionScanner,
        longopts: Optional[Sequence[LongOption]],
    ) -> bool:
        if result.is_long:
            option = longopts[result.long_index]
            return option.has_arg is ArgRequirement.OPTIONAL
        return scanner.spec.lookup(result.option) is ArgRequirement.OPTIONAL


def main() -> ExitCode:
    """Main entry point."""
    logging.basicConfig(format="%(message)s")
    try:
        app = Application()
        return app.run(sys.argv[1:])
    except OptscanError as e:
        logging.error(str(e))
        return EXIT_USAGE
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return EXIT_INTERNAL
