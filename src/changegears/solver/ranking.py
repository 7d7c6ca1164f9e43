"""
Change Gear Solver - Best-N Ranking

Fixed-capacity, insertion-sorted list of the best results seen so far.

Candidates stream in from the search one at a time and the full candidate
set is never held in memory, so ranking happens on insert rather than by
sorting at the end.
"""

from typing import List, Optional

from ..constants import SENTINEL_SCORE
from ..io import SolveResult
from .ratio import result_score


class RankedResults:
    """
    Best-N collector ordered by ascending score (absolute percent error).

    All slots start out holding an infinitely bad sentinel score.  Ties keep
    the earlier entry ahead, so with a deterministic search order the first
    candidate found wins.

    Example:
        >>> ranked = RankedResults(capacity=3)
        >>> ranked.offer(result)
        True
        >>> ranked.results()[0] is result
        True
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._scores: List[float] = [SENTINEL_SCORE] * capacity
        self._slots: List[Optional[SolveResult]] = [None] * capacity

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def worst_score(self) -> float:
        """Score a new candidate has to beat to get in"""
        return self._scores[-1]

    def accepts(self, score: float) -> bool:
        """Cheap pre-check: would a result with this score be ranked?"""
        return score < self._scores[-1]

    def offer(self, result: SolveResult) -> bool:
        """
        Insert `result` at its ranked position if it beats the worst slot.

        Returns:
            True if the result was inserted, False if it was rejected
            (not good enough, or a duplicate of a ranked result)
        """
        score = result_score(result)
        if not self.accepts(score):
            return False

        if self._is_duplicate(result, score):
            return False

        # Insert after every entry that scores the same or better
        position = 0
        while self._scores[position] <= score:
            position += 1

        self._scores.insert(position, score)
        self._slots.insert(position, result)
        del self._scores[-1]
        del self._slots[-1]
        return True

    def results(self) -> List[SolveResult]:
        """Ranked results, best first (unfilled slots omitted)."""
        return [r for r in self._slots if r is not None]

    def __len__(self) -> int:
        return sum(1 for r in self._slots if r is not None)

    def __iter__(self):
        return iter(self.results())

    def _is_duplicate(self, result: SolveResult, score: float) -> bool:
        driving = sorted(result.driving_gears)
        driven = sorted(result.driven_gears)
        for existing_score, existing in zip(self._scores, self._slots):
            if existing is None:
                break
            if (existing_score == score
                    and sorted(existing.driving_gears) == driving
                    and sorted(existing.driven_gears) == driven):
                return True
        return False
