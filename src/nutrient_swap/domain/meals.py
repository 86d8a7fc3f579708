"""Domain models for logged meals."""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import date
from uuid import UUID

from nutrient_swap.domain.nutrition import ZERO_PROFILE, NutrientProfile


@dataclass(frozen=True)
class Meal:
    """Logged meal with ingredient names, grams and nutrient totals."""

    id: UUID
    profile_id: UUID
    logged_on: date
    meal_type: str
    ingredients: tuple[str, ...]
    quantities: tuple[float, ...]
    nutrients: NutrientProfile = ZERO_PROFILE

    def __post_init__(self) -> None:
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        object.__setattr__(
            self, "quantities", tuple(float(value) for value in self.quantities)
        )
        if len(self.ingredients) != len(self.quantities):
            raise ValueError(
                "Meal ingredients and quantities must have the same length "
                f"({len(self.ingredients)} != {len(self.quantities)})"
            )

    def with_changes(
        self,
        *,
        ingredients: Sequence[str] | None = None,
        quantities: Sequence[float] | None = None,
        nutrients: NutrientProfile | None = None,
    ) -> "Meal":
        """Return a copy of the meal with the given fields replaced."""
        return replace(
            self,
            ingredients=tuple(
                self.ingredients if ingredients is None else ingredients
            ),
            quantities=tuple(self.quantities if quantities is None else quantities),
            nutrients=self.nutrients if nutrients is None else nutrients,
        )
