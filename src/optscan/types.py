"""
Type aliases for optscan.

This module provides centralized type definitions used throughout the package
to keep signatures consistent.

Type Aliases:
    ArgsList: List of string arguments (an argument vector)
    OptionPair: Tuple of a rendered option and its optional value
    ParsedArgs: Tuple of option pairs and operands
    SplitResult: Tuple of option arguments and the operands that follow them
    FlagSetting: Tuple of a flag name and the value it is set to
    ExitCode: Integer representing exit codes
"""

from typing import List, Optional, Tuple, Union

ArgsList = List[str]
"""Mutable argument vector; the scanner reorders its slots in place."""

OptionValue = Union[str, int]
"""Return value of a long option record (usually the equivalent short character)."""

OptionPair = Tuple[str, Optional[str]]
"""Rendered option and its value (e.g., ('-b', 'val') or ('--verbose', None))."""

ParsedArgs = Tuple[List[OptionPair], ArgsList]
"""Result of a complete scan (options, operands)."""

SplitResult = Tuple[ArgsList, ArgsList]
"""Result of splitting a scanned vector (option arguments, operands)."""

FlagSetting = Tuple[str, OptionValue]
"""Flag name and the value a long option assigns to it."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""
