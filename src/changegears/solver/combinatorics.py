"""
Change Gear Solver - Combinatorics

Lazy enumeration of index subsets and driving/driven splits.

All sequences are produced in lexicographic order of ascending index tuples.
The ranking step relies on this order to break ties reproducibly (first
candidate found wins).
"""

from itertools import combinations
from math import comb
from typing import Iterator, List, Sequence, Tuple

IndexTuple = Tuple[int, ...]
Split = Tuple[IndexTuple, IndexTuple]


class InvariantViolation(AssertionError):
    """Internal consistency failure.

    Raised only when the solver is wired incorrectly (never for bad user
    input), so callers should let it propagate.
    """


def count_combinations(length: int, base: int) -> int:
    """
    Number of subsets of size `length` drawn from `base` items.

    Equivalent to base! / (length! * (base - length)!) but computed with
    integer arithmetic, so it is exact for any size.

    Raises:
        InvariantViolation: If length > base or either argument is negative
    """
    _check_bounds(length, base)
    return comb(base, length)


class Combinations:
    """
    Restartable lazy sequence of ascending index subsets.

    Every iteration yields all C(base, length) subsets of range(base) with
    `length` members, in lexicographic order.

    Example:
        >>> list(Combinations(2, 3))
        [(0, 1), (0, 2), (1, 2)]
        >>> len(Combinations(2, 4))
        6
    """

    def __init__(self, length: int, base: int):
        _check_bounds(length, base)
        self.length = length
        self.base = base

    def __iter__(self) -> Iterator[IndexTuple]:
        return combinations(range(self.base), self.length)

    def __len__(self) -> int:
        return comb(self.base, self.length)

    def __repr__(self) -> str:
        return f"Combinations(length={self.length}, base={self.base})"


def generate_combinations(length: int, base: int) -> Iterator[IndexTuple]:
    """Iterate every size-`length` subset of range(base) (see Combinations)."""
    return iter(Combinations(length, base))


def remaining_set(full_set: Sequence[int], already_taken: Sequence[int]) -> IndexTuple:
    """Members of `full_set` not in `already_taken`, in original order."""
    taken = set(already_taken)
    return tuple(i for i in full_set if i not in taken)


def split_positions(length: int) -> List[Split]:
    """
    All ways to divide `length` positions into equal driving/driven halves.

    Args:
        length: Number of positions (must be even)

    Returns:
        C(length, length/2) pairs of (driving_positions, driven_positions),
        ordered lexicographically by the driving positions

    Raises:
        InvariantViolation: If length is odd or negative
    """
    if length < 0 or length % 2 != 0:
        raise InvariantViolation(f"cannot split {length} positions into two equal halves")

    positions = tuple(range(length))
    return [
        (driving, remaining_set(positions, driving))
        for driving in combinations(positions, length // 2)
    ]


def partition_subset(subset: Sequence[int]) -> Iterator[Split]:
    """
    Yield every (driving, driven) split of a concrete index subset.

    Each pair is disjoint and together covers `subset` exactly.
    """
    for driving_pos, driven_pos in split_positions(len(subset)):
        yield (
            tuple(subset[p] for p in driving_pos),
            tuple(subset[p] for p in driven_pos),
        )


def _check_bounds(length: int, base: int) -> None:
    if length < 0 or base < 0:
        raise InvariantViolation(f"negative combination size (length={length}, base={base})")
    if length > base:
        raise InvariantViolation(f"cannot choose {length} items from {base}")
