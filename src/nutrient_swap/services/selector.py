"""Maps swap goals to the strategy that handles them."""

import logging
from dataclasses import dataclass, field

from nutrient_swap.domain.nutrition import Nutrient
from nutrient_swap.domain.swaps import Direction, SwapGoal, goal_key, parse_goal_key
from nutrient_swap.services.resolver import NutrientResolver
from nutrient_swap.services.strategies import NutrientSwapStrategy
from nutrient_swap.services.substitutions import SubstitutionTable

_logger = logging.getLogger(__name__)


@dataclass
class StrategySelector:
    """Registry of strategies keyed by ``<direction>_<nutrient>``."""

    strategies: dict[str, NutrientSwapStrategy] = field(default_factory=dict)

    def select(self, goal: SwapGoal | None) -> NutrientSwapStrategy | None:
        """Return the strategy for a goal, or None if none is registered."""
        if goal is None:
            return None
        return self.strategies.get(goal.goal_type)

    def select_for(
        self, nutrient: str | Nutrient, direction: str | Direction
    ) -> NutrientSwapStrategy | None:
        """Return the strategy for a nutrient and direction pair."""
        try:
            key = goal_key(Nutrient.parse(nutrient), Direction.parse(direction))
        except ValueError:
            _logger.debug("Unknown goal: nutrient=%s direction=%s", nutrient, direction)
            return None
        return self.strategies.get(key)

    def select_key(self, key: str | None) -> NutrientSwapStrategy | None:
        """Return the strategy for a combined key such as ``decrease_fat``."""
        if key is None or not key.strip():
            return None
        try:
            nutrient, direction = parse_goal_key(key)
        except ValueError:
            _logger.debug("Unknown goal key: %s", key)
            return None
        return self.strategies.get(goal_key(nutrient, direction))

    def register(self, strategy: NutrientSwapStrategy) -> None:
        """Add or replace the strategy for its goal type."""
        self.strategies[strategy.goal_type] = strategy

    def remove(self, nutrient: str | Nutrient, direction: str | Direction) -> None:
        """Remove the strategy for a nutrient and direction, if present."""
        key = goal_key(Nutrient.parse(nutrient), Direction.parse(direction))
        self.strategies.pop(key, None)

    def available_goal_types(self) -> list[str]:
        """Return registered goal keys alphabetically."""
        return sorted(self.strategies)


def build_default_selector(
    resolver: NutrientResolver, substitutions: SubstitutionTable
) -> StrategySelector:
    """Register one strategy for every pair the substitution table covers."""
    selector = StrategySelector()
    for nutrient, direction in substitutions.goal_pairs():
        selector.register(
            NutrientSwapStrategy(
                nutrient=nutrient,
                direction=direction,
                resolver=resolver,
                substitutions=substitutions,
            )
        )
    return selector
