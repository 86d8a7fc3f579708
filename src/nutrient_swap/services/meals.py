"""Meal logging service that recomputes nutrient totals."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID, uuid4

from nutrient_swap.domain.meals import Meal
from nutrient_swap.domain.nutrition import ZERO_PROFILE, NutrientProfile
from nutrient_swap.services.resolver import NutrientResolver


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id."""

    def save_meal(self, meal: Meal) -> None:
        """Insert or replace a meal."""


@dataclass
class MealLogService:
    """Builds meals with totals resolved from ingredient names."""

    resolver: NutrientResolver
    repository: MealRepository

    def compute_totals(
        self, ingredients: Sequence[str], quantities: Sequence[float]
    ) -> NutrientProfile:
        """Sum per-100 g profiles scaled by each ingredient's grams."""
        if len(ingredients) != len(quantities):
            raise ValueError("ingredients and quantities must have the same length")
        total = ZERO_PROFILE
        for ingredient, grams in zip(ingredients, quantities, strict=True):
            total = total + _portion(self.resolver.lookup(ingredient), grams)
        return total

    def log_meal(  # noqa: PLR0913
        self,
        profile_id: UUID,
        ingredients: Sequence[str],
        quantities: Sequence[float],
        meal_type: str = "meal",
        logged_on: date | None = None,
    ) -> Meal:
        """Create a meal with recomputed totals and persist it."""
        meal = Meal(
            id=uuid4(),
            profile_id=profile_id,
            logged_on=logged_on or date.today(),
            meal_type=meal_type,
            ingredients=tuple(ingredients),
            quantities=tuple(quantities),
            nutrients=self.compute_totals(ingredients, quantities),
        )
        self.repository.save_meal(meal)
        return meal

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a stored meal."""
        return self.repository.get_meal(meal_id)


def _portion(base: NutrientProfile, grams: float) -> NutrientProfile:
    if grams <= 0:
        return ZERO_PROFILE
    return base.scaled(grams / 100.0)
