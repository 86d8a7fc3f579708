"""Process-local repositories for meals and applied swaps."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from nutrient_swap.domain.meals import Meal
from nutrient_swap.domain.swaps import AppliedSwap
from nutrient_swap.services.meals import MealRepository
from nutrient_swap.services.swaps import SwapHistoryRepository


@dataclass
class InMemoryMealRepository(MealRepository):
    """Meal storage kept in a dict."""

    meals: dict[UUID, Meal] = field(default_factory=dict)

    def get_meal(self, meal_id: UUID) -> Meal | None:
        return self.meals.get(meal_id)

    def save_meal(self, meal: Meal) -> None:
        self.meals[meal.id] = meal


@dataclass
class InMemorySwapHistoryRepository(SwapHistoryRepository):
    """Applied swap history kept in a list."""

    swaps: list[AppliedSwap] = field(default_factory=list)

    def record_swap(self, swap: AppliedSwap) -> None:
        self.swaps.append(swap)

    def list_swaps(self, start: date, end: date) -> list[AppliedSwap]:
        return sorted(
            (swap for swap in self.swaps if start <= swap.applied_on <= end),
            key=lambda swap: swap.created_at,
        )
