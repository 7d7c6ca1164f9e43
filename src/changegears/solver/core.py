"""
Change Gear Solver - Search Driver

Exhaustive search for the change gear trains that best approximate a
desired thread pitch.

For each number of reduction stages k, every 2k-gear subset of the
inventory is split every possible way into k driving and k driven gears,
and each resulting train is scored and offered to a best-N ranking.
"""

import logging
from typing import List, Optional, Sequence

from ..constants import MIN_SYNTHETIC_GEAR_TEETH
from ..enums import SolveMode
from ..io import SolverConfig, SolveResult
from .combinatorics import Combinations, count_combinations, split_positions
from .ranking import RankedResults
from .ratio import (
    compute_actual_pitch,
    compute_actual_ratio,
    compute_desired_ratio,
    error_score,
    evaluate,
)

logger = logging.getLogger(__name__)


def usable_reductions(num_gears: int, max_reductions: int) -> int:
    """Largest stage count that can be built from `num_gears` gears."""
    return min(max_reductions, num_gears // 2)


def estimate_candidate_count(num_gears: int, max_reductions: int) -> int:
    """Number of gear trains one search pass over `num_gears` gears evaluates."""
    return sum(
        count_combinations(2 * k, num_gears) * count_combinations(k, 2 * k)
        for k in range(1, usable_reductions(num_gears, max_reductions) + 1)
    )


class RatioSolver:
    """
    Change gear search for one lathe configuration.

    The config is assumed to have passed validate_config; nothing is
    re-checked here.

    Example:
        >>> solver = RatioSolver(config)
        >>> best = solver.solve_available(1.5)
        >>> best[0].driving_gears, best[0].driven_gears
        ((20,), (100,))
    """

    def __init__(self, config: SolverConfig):
        self.config = config

    def solve(self, desired_pitch_mm: float, mode: SolveMode = SolveMode.AVAILABLE) -> List[SolveResult]:
        """Run a single search mode (AVAILABLE or PLUS)."""
        if mode == SolveMode.AVAILABLE:
            return self.solve_available(desired_pitch_mm)
        if mode == SolveMode.PLUS:
            return self.solve_available_plus(desired_pitch_mm)
        raise ValueError(f"solve() runs one search at a time, got {mode}")

    def solve_available(self, desired_pitch_mm: float) -> List[SolveResult]:
        """
        Best gear trains using only the configured gears.

        Args:
            desired_pitch_mm: Thread pitch to cut (mm/thread), > 0

        Returns:
            Up to show_best_count results, best first
        """
        desired_ratio = compute_desired_ratio(desired_pitch_mm, self.config.lead)
        ranked = RankedResults(self.config.show_best_count)

        self.find_best(desired_ratio, self.config.available_gears, ranked,
                       desired_pitch_mm=desired_pitch_mm)

        results = self._rederive(ranked.results(), desired_pitch_mm)
        logger.info(
            f"Available-gear search for {desired_pitch_mm} mm: "
            f"{len(results)} result(s) from {len(self.config.available_gears)} gears"
        )
        return results

    def solve_available_plus(self, desired_pitch_mm: float) -> List[SolveResult]:
        """
        Best gear trains using the configured gears plus one extra gear.

        Every extra gear size from MIN_SYNTHETIC_GEAR_TEETH to max_gear_teeth
        is tried, and all passes share one ranking, so the results are the
        global best over every extra size.

        Args:
            desired_pitch_mm: Thread pitch to cut (mm/thread), > 0

        Returns:
            Up to show_best_count results, best first
        """
        desired_ratio = compute_desired_ratio(desired_pitch_mm, self.config.lead)
        ranked = RankedResults(self.config.show_best_count)
        extra_sizes = self.extra_gear_sizes()

        for extra_teeth in extra_sizes:
            logger.debug(f"Searching with extra {extra_teeth}T gear")
            gears = tuple(self.config.available_gears) + (extra_teeth,)
            self.find_best(desired_ratio, gears, ranked, extra_gear_index=len(gears) - 1,
                           desired_pitch_mm=desired_pitch_mm)

        results = self._rederive(ranked.results(), desired_pitch_mm)
        logger.info(
            f"Available-plus-one search for {desired_pitch_mm} mm: "
            f"{len(extra_sizes)} extra gear size(s), {len(results)} result(s)"
        )
        return results

    def extra_gear_sizes(self) -> range:
        """Tooth counts tried for the synthesized gear in plus mode."""
        return range(MIN_SYNTHETIC_GEAR_TEETH, self.config.max_gear_teeth + 1)

    def find_best(
        self,
        desired_ratio: float,
        available_gears: Sequence[int],
        ranked: RankedResults,
        extra_gear_index: Optional[int] = None,
        desired_pitch_mm: Optional[float] = None
    ) -> RankedResults:
        """
        Offer every gear train buildable from `available_gears` to `ranked`.

        Args:
            desired_ratio: Target driven/driving ratio
            available_gears: Tooth counts to choose from
            ranked: Collector accumulating the best results (mutated)
            extra_gear_index: Index of the synthesized gear within
                available_gears, if any; trains that use it are tagged
                with its tooth count
            desired_pitch_mm: Pitch the ratio was computed from; rebuilt
                from desired_ratio when omitted

        Returns:
            The same collector, for chaining
        """
        gears = tuple(available_gears)
        lead = self.config.lead
        if desired_pitch_mm is None:
            desired_pitch_mm = compute_actual_pitch(desired_ratio, lead)
        extra_teeth = gears[extra_gear_index] if extra_gear_index is not None else None

        max_k = usable_reductions(len(gears), self.config.max_reductions)
        if max_k < self.config.max_reductions:
            logger.debug(
                f"Only {len(gears)} gears available; limiting search to "
                f"{max_k} of {self.config.max_reductions} reductions"
            )

        for num_reductions in range(1, max_k + 1):
            subsets = Combinations(2 * num_reductions, len(gears))
            splits = split_positions(2 * num_reductions)
            logger.debug(
                f"{num_reductions} reduction(s): {len(subsets)} gear subsets x "
                f"{len(splits)} driving/driven splits"
            )

            for subset in subsets:
                uses_extra = extra_gear_index is not None and extra_gear_index in subset
                for driving_pos, driven_pos in splits:
                    driving = tuple(gears[subset[p]] for p in driving_pos)
                    driven = tuple(gears[subset[p]] for p in driven_pos)

                    ratio = compute_actual_ratio(driving, driven)
                    if not ranked.accepts(error_score(ratio, desired_pitch_mm, lead)):
                        continue

                    ranked.offer(evaluate(
                        driving,
                        driven,
                        desired_pitch_mm,
                        lead,
                        extra_gear_teeth=extra_teeth if uses_extra else None,
                    ))

        return ranked

    def _rederive(self, results: List[SolveResult], desired_pitch_mm: float) -> List[SolveResult]:
        # Recompute pitch and errors from the final gears against the caller's pitch
        return [
            evaluate(
                r.driving_gears,
                r.driven_gears,
                desired_pitch_mm,
                self.config.lead,
                extra_gear_teeth=r.extra_gear_teeth,
            )
            for r in results
        ]
