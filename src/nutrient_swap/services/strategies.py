"""Goal-driven swap strategy, parameterized by nutrient and direction."""

import logging
from dataclasses import dataclass, replace

from nutrient_swap.domain.meals import Meal
from nutrient_swap.domain.nutrition import Nutrient, NutrientProfile
from nutrient_swap.domain.swaps import Direction, SwapCandidate, SwapGoal, goal_key
from nutrient_swap.services.resolver import NutrientResolver
from nutrient_swap.services.substitutions import SubstitutionTable

# Scored against the goal's target delta in grams rather than relative change.
ABSOLUTE_TARGET_NUTRIENTS = frozenset({Nutrient.PROTEIN, Nutrient.FIBER})

_NUTRIENT_LABELS = {
    Nutrient.CALORIES: "calorie",
    Nutrient.PROTEIN: "protein",
    Nutrient.CARBS: "carbohydrate",
    Nutrient.FAT: "fat",
    Nutrient.FIBER: "fiber",
    Nutrient.SUGAR: "sugar",
}

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NutrientSwapStrategy:
    """Generates, scores and ranks swaps moving one nutrient in one direction."""

    nutrient: Nutrient
    direction: Direction
    resolver: NutrientResolver
    substitutions: SubstitutionTable

    @property
    def goal_type(self) -> str:
        return goal_key(self.nutrient, self.direction)

    @property
    def reason(self) -> str:
        adjective = "Lower" if self.direction is Direction.DECREASE else "Higher"
        return f"{adjective} {_NUTRIENT_LABELS[self.nutrient]} alternative"

    @property
    def description(self) -> str:
        verb = "Decreases" if self.direction is Direction.DECREASE else "Increases"
        label = _NUTRIENT_LABELS[self.nutrient]
        return f"{verb} {label} content while maintaining nutritional balance"

    def can_handle(self, goal: SwapGoal | None) -> bool:
        return (
            goal is not None
            and goal.nutrient is self.nutrient
            and goal.direction is self.direction
        )

    def find_swaps(self, food_name: str, goal: SwapGoal) -> list[SwapCandidate]:
        """Return ranked swaps for a single ingredient."""
        if not food_name or not food_name.strip():
            return []
        return self.rank(self._candidates_for(food_name, goal))

    def generate_swaps(self, meal: Meal, goal: SwapGoal) -> list[SwapCandidate]:
        """Return ranked swaps pooled across every ingredient in a meal."""
        swaps: list[SwapCandidate] = []
        for ingredient in meal.ingredients:
            if not ingredient.strip():
                continue
            swaps.extend(self._candidates_for(ingredient, goal))
        _logger.debug(
            "Strategy %s generated %s swaps for meal %s",
            self.goal_type,
            len(swaps),
            meal.id,
        )
        return self.rank(swaps)

    def calculate_impact_score(self, candidate: SwapCandidate, goal: SwapGoal) -> float:
        """Score in [0, 1] for how far the swap moves the target nutrient."""
        original = candidate.original.value_of(self.nutrient)
        change = candidate.delta.value_of(self.nutrient)
        if self.direction is Direction.DECREASE:
            change = -change
        if change <= 0:
            return 0.0
        if self.nutrient in ABSOLUTE_TARGET_NUTRIENTS and goal.target_delta > 0:
            return min(1.0, change / goal.target_delta)
        if original <= 0:
            return 1.0
        return min(1.0, change / original * 2.0)

    def rank(self, candidates: list[SwapCandidate]) -> list[SwapCandidate]:
        """Order swaps by nutrient change, strongest move toward the goal first."""
        return sorted(
            candidates,
            key=lambda candidate: candidate.delta.value_of(self.nutrient),
            reverse=self.direction is Direction.INCREASE,
        )

    def _moves_toward_goal(
        self, original: NutrientProfile, replacement: NutrientProfile
    ) -> bool:
        before = original.value_of(self.nutrient)
        after = replacement.value_of(self.nutrient)
        if self.direction is Direction.DECREASE:
            return after < before
        return after > before

    def _candidates_for(self, food_name: str, goal: SwapGoal) -> list[SwapCandidate]:
        original = self.resolver.lookup(food_name)
        normalized = food_name.strip().lower()
        swaps: list[SwapCandidate] = []
        for replacement_name in self.substitutions.candidates_for(
            food_name, self.nutrient, self.direction
        ):
            if replacement_name.lower() == normalized:
                continue
            replacement = self.resolver.lookup(replacement_name)
            if not self._moves_toward_goal(original, replacement):
                continue
            candidate = SwapCandidate(
                original_food=food_name,
                replacement_food=replacement_name,
                reason=self.reason,
                goal_type=self.goal_type,
                impact_score=0.0,
                original=original,
                replacement=replacement,
            )
            swaps.append(
                replace(
                    candidate,
                    impact_score=self.calculate_impact_score(candidate, goal),
                )
            )
        return swaps
