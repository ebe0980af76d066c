"""Tests for scan results."""

import pytest

from optscan.result import ERROR_KINDS, ScanResult, TokenKind


class TestScanResultUnit:
    """Unit tests for the ScanResult container."""

    @pytest.mark.parametrize("kind", list(TokenKind))
    def test_is_error(self, kind):
        result = ScanResult(kind=kind, optind=1)
        assert result.is_error == (kind in ERROR_KINDS)

    @pytest.mark.parametrize(
        "kind,colon_mode,expected",
        [
            (TokenKind.OPTION, False, None),
            (TokenKind.END, True, None),
            (TokenKind.UNKNOWN_OPTION, False, "?"),
            (TokenKind.UNKNOWN_OPTION, True, "?"),
            (TokenKind.AMBIGUOUS_OPTION, True, "?"),
            (TokenKind.MISPLACED_VALUE, True, "?"),
            (TokenKind.MISSING_VALUE, False, "?"),
            (TokenKind.MISSING_VALUE, True, ":"),
        ],
    )
    def test_sentinel(self, kind, colon_mode, expected):
        result = ScanResult(kind=kind, optind=1, colon_mode=colon_mode)
        assert result.sentinel == expected

    def test_results_are_immutable(self):
        result = ScanResult(kind=TokenKind.OPTION, optind=2, option="a")
        with pytest.raises(AttributeError):
            result.option = "b"

    def test_apply_flag_overwrites_existing_value(self):
        result = ScanResult(
            kind=TokenKind.OPTION, optind=2, flag_setting=("verbose_flag", 1)
        )
        flags = {"verbose_flag": 0}
        assert result.apply_flag(flags)
        assert flags["verbose_flag"] == 1
