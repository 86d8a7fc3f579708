"""Tests for the substitution table."""

import json

import pytest
from pydantic import ValidationError

from nutrient_swap.domain.nutrition import Nutrient
from nutrient_swap.domain.swaps import Direction
from nutrient_swap.services.substitutions import SubstitutionTable


def test_default_table_covers_every_goal(substitutions) -> None:
    pairs = set(substitutions.goal_pairs())

    assert pairs == {
        (nutrient, direction) for nutrient in Nutrient for direction in Direction
    }


def test_first_matching_rule_wins(substitutions) -> None:
    candidates = substitutions.candidates_for(
        "Ground Beef", Nutrient.CALORIES, Direction.DECREASE
    )

    assert candidates == ("chicken breast", "turkey", "fish", "tofu")


def test_defaults_when_no_rule_matches(substitutions) -> None:
    candidates = substitutions.candidates_for(
        "rice", Nutrient.CALORIES, Direction.DECREASE
    )

    assert candidates == ("vegetables", "fruits", "lean protein", "whole grains")


def test_unknown_pair_has_no_candidates() -> None:
    table = SubstitutionTable.from_mapping({"decrease_fat": {"defaults": ["tofu"]}})

    assert table.candidates_for("beef", Nutrient.SUGAR, Direction.INCREASE) == ()
    assert table.candidates_for("beef", Nutrient.FAT, Direction.DECREASE) == ("tofu",)


def test_from_mapping_normalizes_keys_and_values() -> None:
    table = SubstitutionTable.from_mapping(
        {
            " Decrease_Carbs ": {
                "rules": [{"keywords": [" Rice "], "candidates": ["Cauliflower Rice"]}],
                "defaults": ["vegetables"],
            }
        }
    )

    assert table.goal_pairs() == [(Nutrient.CARBS, Direction.DECREASE)]
    assert table.candidates_for("White RICE", Nutrient.CARBS, Direction.DECREASE) == (
        "cauliflower rice",
    )


@pytest.mark.parametrize(
    "payload",
    [
        {"decrease_unicorns": {"defaults": ["tofu"]}},
        {"decrease_fat": {"rules": [{"keywords": [], "candidates": ["tofu"]}]}},
        {"decrease_fat": {"rules": [{"keywords": ["  "], "candidates": ["tofu"]}]}},
    ],
)
def test_from_mapping_rejects_invalid_documents(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        SubstitutionTable.from_mapping(payload)


def test_from_file(tmp_path) -> None:
    path = tmp_path / "substitutions.json"
    path.write_text(
        json.dumps(
            {
                "increase_fiber": {
                    "rules": [{"keywords": ["bread"], "candidates": ["rye bread"]}],
                    "defaults": ["beans"],
                }
            }
        ),
        encoding="utf-8",
    )

    table = SubstitutionTable.from_file(path)

    assert table.candidates_for("bread", Nutrient.FIBER, Direction.INCREASE) == (
        "rye bread",
    )
    assert table.candidates_for("soup", Nutrient.FIBER, Direction.INCREASE) == (
        "beans",
    )
