"""Aggregates swap recommendations across goals."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from nutrient_swap.domain.meals import Meal
from nutrient_swap.domain.swaps import SwapCandidate, SwapGoal
from nutrient_swap.services.selector import StrategySelector

_logger = logging.getLogger(__name__)


@dataclass
class RecommendationService:
    """Runs the strategy for each goal and merges the results."""

    selector: StrategySelector
    max_swaps_per_goal: int = 5
    min_impact_score: float = 0.1

    def recommend(self, meal: Meal, goals: Iterable[SwapGoal]) -> list[SwapCandidate]:
        """Return deduplicated swaps for all goals, highest impact first."""
        pooled: list[SwapCandidate] = []
        for goal in goals:
            strategy = self.selector.select(goal)
            if strategy is None:
                _logger.warning("No swap strategy for goal %s", goal.goal_type)
                continue
            try:
                swaps = strategy.generate_swaps(meal, goal)
            except Exception:
                _logger.exception(
                    "Failed to generate swaps for goal %s", goal.goal_type
                )
                continue
            kept = self._filter_and_limit(swaps)
            _logger.info(
                "Generated swaps for goal %s: candidates=%s kept=%s",
                goal.goal_type,
                len(swaps),
                len(kept),
            )
            pooled.extend(kept)

        unique = _deduplicate(pooled)
        return sorted(unique, key=lambda swap: swap.impact_score, reverse=True)

    def _filter_and_limit(self, swaps: list[SwapCandidate]) -> list[SwapCandidate]:
        meaningful = [
            swap
            for swap in swaps
            if swap.is_valid() and swap.impact_score > self.min_impact_score
        ]
        return meaningful[: self.max_swaps_per_goal]


def _deduplicate(swaps: list[SwapCandidate]) -> list[SwapCandidate]:
    """Drop swaps whose unordered food pair was already seen."""
    seen: set[frozenset[str]] = set()
    unique: list[SwapCandidate] = []
    for swap in swaps:
        if swap.pair_key in seen:
            continue
        seen.add(swap.pair_key)
        unique.append(swap)
    return unique
