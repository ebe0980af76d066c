"""Block exchange of argument runs used when permuting an argument vector."""

from typing import List, MutableSequence, Sequence, Tuple, TypeVar

T = TypeVar("T")


def exchange(
    argv: MutableSequence[T], bottom: int, middle: int, top: int
) -> Tuple[int, int]:
    """
    Exchange the adjacent runs ``argv[bottom:middle]`` and ``argv[middle:top]``.

    The runs are swapped in place by repeatedly exchanging the shorter run
    with the far end of the longer one, so no element is copied out of the
    sequence. Relative order inside each run is preserved.

    Returns the new ``(bottom, middle)`` boundaries of the run that started
    at `bottom`, which now ends at `top`.
    """
    if not 0 <= bottom <= middle <= top <= len(argv):
        raise IndexError(f"invalid runs [{bottom}:{middle}] [{middle}:{top}]")

    first, last = bottom + (top - middle), top
    while top > middle > bottom:
        if top - middle > middle - bottom:
            # Bottom run is shorter: swap it with the top end of the top run.
            length = middle - bottom
            for i in range(length):
                j = top - length + i
                argv[bottom + i], argv[j] = argv[j], argv[bottom + i]
            top -= length
        else:
            # Top run is shorter: swap it with the bottom of the bottom run.
            length = top - middle
            for i in range(length):
                argv[bottom + i], argv[middle + i] = argv[middle + i], argv[bottom + i]
            bottom += length
    return first, last


def rotate_blocks(seq: Sequence[T], first: range, second: range) -> List[T]:
    """Return a copy of `seq` with the adjacent ranges `first` and `second` swapped."""
    if first.stop != second.start:
        raise ValueError("ranges must be adjacent")
    result = list(seq)
    exchange(result, first.start, first.stop, second.stop)
    return result
