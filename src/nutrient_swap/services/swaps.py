"""Previewing, applying and listing ingredient swaps."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID, uuid4

from nutrient_swap.domain.meals import Meal
from nutrient_swap.domain.swaps import AppliedSwap, SwapCandidate, SwapResult
from nutrient_swap.services.meals import MealRepository

_logger = logging.getLogger(__name__)


class SwapValidationError(ValueError):
    """Raised when a swap request cannot be applied to a meal."""


class MealNotFoundError(SwapValidationError):
    """Raised when a swap targets a meal that does not exist."""


class SwapHistoryRepository(Protocol):
    """Persistence interface for applied swaps."""

    def record_swap(self, swap: AppliedSwap) -> None:
        """Store an applied swap."""

    def list_swaps(self, start: date, end: date) -> list[AppliedSwap]:
        """Return applied swaps dated within ``[start, end]``."""


def nutrient_changes(candidate: SwapCandidate) -> list[dict[str, float]]:
    """Return the per-nutrient change of a swap as a list of delta maps."""
    return [candidate.nutrient_changes()]


def apply_to_meal(meal: Meal | None, candidate: SwapCandidate | None) -> Meal:
    """Return a copy of ``meal`` with the candidate's original food replaced.

    Only the first ingredient whose name contains the original food
    (case-insensitive) is replaced. Totals are shifted by the candidate's
    nutrient delta instead of being resolved again. The delta is per 100 g
    whatever the logged grams, so totals of a small portion can go negative.
    """
    if meal is None or candidate is None:
        raise SwapValidationError("Meal and swap candidate are required")
    if not candidate.is_valid():
        raise SwapValidationError(f"Invalid swap candidate: {candidate.summary()}")

    ingredients = list(meal.ingredients)
    target = candidate.original_food.strip().lower()
    for index, ingredient in enumerate(ingredients):
        if target in ingredient.lower():
            ingredients[index] = candidate.replacement_food
            break
    else:
        raise SwapValidationError(
            f"Meal {meal.id} has no ingredient matching {candidate.original_food!r}"
        )

    return meal.with_changes(
        ingredients=ingredients,
        quantities=list(meal.quantities),
        nutrients=meal.nutrients.shifted(candidate.delta),
    )


@dataclass
class SwapService:
    """Facade for previewing and committing swaps against stored meals."""

    meal_repository: MealRepository
    history_repository: SwapHistoryRepository

    def preview_swap(
        self, meal_id: UUID | None, candidate: SwapCandidate | None
    ) -> SwapResult:
        """Return the effect of a swap without changing the stored meal."""
        meal = self._require_meal(meal_id, candidate)
        updated = apply_to_meal(meal, candidate)
        _logger.info(
            "Previewed swap for meal %s: %s -> %s",
            meal.id,
            candidate.original_food,
            candidate.replacement_food,
        )
        return SwapResult(
            candidate=candidate,
            nutrient_changes=nutrient_changes(candidate),
            meal=updated,
        )

    def apply_swap(
        self, meal_id: UUID | None, candidate: SwapCandidate | None
    ) -> SwapResult:
        """Apply a swap, persist the meal and record it in the history."""
        meal = self._require_meal(meal_id, candidate)
        updated = apply_to_meal(meal, candidate)
        self.meal_repository.save_meal(updated)

        applied = replace(candidate, history_id=uuid4())
        self.history_repository.record_swap(
            AppliedSwap(
                id=applied.history_id,
                meal_id=meal.id,
                profile_id=meal.profile_id,
                applied_on=meal.logged_on,
                created_at=datetime.now(tz=UTC),
                candidate=applied,
            )
        )
        _logger.info(
            "Applied swap for meal %s: %s -> %s (history_id=%s)",
            meal.id,
            applied.original_food,
            applied.replacement_food,
            applied.history_id,
        )
        return SwapResult(
            candidate=applied,
            nutrient_changes=nutrient_changes(applied),
            meal=updated,
        )

    def list_applied_swaps(self, start: date, end: date) -> list[SwapCandidate]:
        """Return swaps applied to meals dated within ``[start, end]``."""
        if start > end:
            start, end = end, start
        records = self.history_repository.list_swaps(start, end)
        return [record.candidate for record in records]

    def _require_meal(
        self, meal_id: UUID | None, candidate: SwapCandidate | None
    ) -> Meal:
        if meal_id is None or candidate is None:
            raise SwapValidationError("Meal id and swap candidate are required")
        meal = self.meal_repository.get_meal(meal_id)
        if meal is None:
            raise MealNotFoundError(f"Meal not found: {meal_id}")
        return meal
