"""Tests for meal totals and logging."""

from datetime import date
from uuid import uuid4

import pytest

from nutrient_swap.services.meals import MealLogService


def test_compute_totals_scales_per_100_grams(
    fallback_resolver, meal_repository
) -> None:
    service = MealLogService(fallback_resolver, meal_repository)

    totals = service.compute_totals(["beef", "rice"], [200, 100])

    assert totals.calories == pytest.approx(630)
    assert totals.protein_g == pytest.approx(52 + 2.7)
    assert totals.carbs_g == pytest.approx(28)


def test_non_positive_quantities_contribute_nothing(
    fallback_resolver, meal_repository
) -> None:
    service = MealLogService(fallback_resolver, meal_repository)

    totals = service.compute_totals(["beef", "rice"], [0, -50])

    assert totals.calories == 0
    assert totals.fat_g == 0


def test_compute_totals_rejects_mismatched_lengths(
    fallback_resolver, meal_repository
) -> None:
    service = MealLogService(fallback_resolver, meal_repository)

    with pytest.raises(ValueError, match="same length"):
        service.compute_totals(["beef", "rice"], [100])


def test_log_meal_saves_with_totals(dataset_resolver, meal_repository) -> None:
    service = MealLogService(dataset_resolver, meal_repository)
    profile_id = uuid4()

    meal = service.log_meal(
        profile_id,
        ["Cheese, blue", "Kiwifruit, raw"],
        [50, 200],
        meal_type="snack",
        logged_on=date(2024, 5, 1),
    )

    assert service.get_meal(meal.id) == meal
    assert meal.profile_id == profile_id
    assert meal.meal_type == "snack"
    assert meal.logged_on == date(2024, 5, 1)
    assert meal.nutrients.calories == pytest.approx(353 / 2 + 61 * 2)
    assert meal.nutrients.fiber_g == pytest.approx(6.0)
