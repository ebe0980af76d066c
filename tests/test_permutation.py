"""Tests for the block exchange used to permute argument vectors."""

import pytest

from optscan.permutation import exchange, rotate_blocks


class TestExchangeUnit:
    """Unit tests for in-place exchange."""

    @pytest.mark.parametrize(
        "argv,bottom,middle,top,expected",
        [
            (["n1", "o1"], 0, 1, 2, ["o1", "n1"]),
            (["n1", "n2", "o1"], 0, 2, 3, ["o1", "n1", "n2"]),
            (["n1", "o1", "o2", "o3"], 0, 1, 4, ["o1", "o2", "o3", "n1"]),
            (
                ["p", "n1", "n2", "n3", "o1", "o2"],
                1,
                4,
                6,
                ["p", "o1", "o2", "n1", "n2", "n3"],
            ),
            (["p", "a", "b"], 1, 1, 3, ["p", "a", "b"]),
            (["p", "a", "b"], 1, 3, 3, ["p", "a", "b"]),
        ],
    )
    def test_exchange_swaps_runs_preserving_order(
        self, argv, bottom, middle, top, expected
    ):
        exchange(argv, bottom, middle, top)
        assert argv == expected

    def test_exchange_returns_new_boundaries_of_first_run(self):
        argv = ["p", "f1", "f2", "-a", "-b", "v"]
        first, last = exchange(argv, 1, 3, 6)
        assert (first, last) == (4, 6)
        assert argv[first:last] == ["f1", "f2"]

    def test_exchange_keeps_the_same_string_objects(self):
        items = [object() for _ in range(5)]
        argv = list(items)
        exchange(argv, 0, 2, 5)
        assert sorted(map(id, argv)) == sorted(map(id, items))
        assert argv[3] is items[0]

    def test_exchange_rejects_invalid_bounds(self):
        with pytest.raises(IndexError):
            exchange(["a", "b"], 0, 2, 1)


class TestRotateBlocksUnit:
    """Unit tests for the pure rotation helper."""

    def test_rotate_blocks_returns_copy(self):
        seq = ["x", "a", "b", "c", "d"]
        result = rotate_blocks(seq, range(1, 2), range(2, 5))
        assert result == ["x", "b", "c", "d", "a"]
        assert seq == ["x", "a", "b", "c", "d"]

    def test_rotate_blocks_requires_adjacent_ranges(self):
        with pytest.raises(ValueError):
            rotate_blocks(["a", "b", "c"], range(0, 1), range(2, 3))

    @pytest.mark.parametrize("split", range(0, 8))
    def test_rotate_blocks_matches_slicing(self, split):
        seq = list("abcdefg")
        result = rotate_blocks(seq, range(0, split), range(split, 7))
        assert result == seq[split:] + seq[:split]
