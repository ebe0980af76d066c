import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the caller's POSIXLY_CORRECT and OPTSCAN_DEBUG out of every test."""
    monkeypatch.delenv("POSIXLY_CORRECT", raising=False)
    monkeypatch.delenv("OPTSCAN_DEBUG", raising=False)


@pytest.fixture
def scanner():
    """Fixture for a fresh option scanner."""
    from optscan.scanner import OptionScanner

    return OptionScanner()


@pytest.fixture
def scan_all():
    """
    Fixture that scans an argument vector to completion.

    Usage:
        def test_scan(scan_all):
            tokens, argv, optind = scan_all(["prog", "-a"], "a")

    `tokens` holds every result including the final END, `argv` is the
    (possibly permuted) vector and `optind` the index of the first operand.
    """
    from optscan.result import TokenKind
    from optscan.scanner import OptionScanner

    def _scan(argv, shortopts, longopts=None, long_only=False, limit=100):
        scanner = OptionScanner()
        argv = list(argv)
        tokens = []
        for _ in range(limit):
            result = scanner.next_token(argv, shortopts, longopts, long_only)
            tokens.append(result)
            if result.kind is TokenKind.END:
                break
        else:
            pytest.fail("scan did not reach the end of options")
        return tokens, argv, scanner.optind

    return _scan
