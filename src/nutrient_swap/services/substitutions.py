"""Keyword-driven substitution candidates shared by all swap strategies."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from nutrient_swap.domain.nutrition import Nutrient
from nutrient_swap.domain.swaps import Direction, goal_key, parse_goal_key

DEFAULT_TABLE_PATH = (
    Path(__file__).resolve().parents[1] / "data" / "substitutions.json"
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubstitutionRule:
    """Candidates offered when any keyword appears in the ingredient name."""

    keywords: tuple[str, ...]
    candidates: tuple[str, ...]

    def matches(self, food_name: str) -> bool:
        lowered = food_name.lower()
        return any(keyword in lowered for keyword in self.keywords)


@dataclass(frozen=True)
class SubstitutionSet:
    """Ordered rules plus default candidates for one nutrient and direction."""

    rules: tuple[SubstitutionRule, ...]
    defaults: tuple[str, ...]

    def candidates_for(self, food_name: str) -> tuple[str, ...]:
        for rule in self.rules:
            if rule.matches(food_name):
                return rule.candidates
        return self.defaults


class SubstitutionTable:
    """Substitution sets keyed by nutrient and direction."""

    def __init__(self, sets: dict[tuple[Nutrient, Direction], SubstitutionSet]) -> None:
        self._sets = dict(sets)

    def candidates_for(
        self, food_name: str, nutrient: Nutrient, direction: Direction
    ) -> tuple[str, ...]:
        """Return candidate replacements for ``food_name``."""
        substitution_set = self._sets.get((nutrient, direction))
        if substitution_set is None:
            return ()
        return substitution_set.candidates_for(food_name)

    def goal_pairs(self) -> list[tuple[Nutrient, Direction]]:
        """Return every nutrient/direction pair with a substitution set."""
        return list(self._sets)

    @classmethod
    def default(cls) -> "SubstitutionTable":
        """Return the table shipped with the package."""
        return cls.from_file(DEFAULT_TABLE_PATH)

    @classmethod
    def from_mapping(cls, payload: dict[str, object]) -> "SubstitutionTable":
        """Build a table from a ``{"decrease_fat": {...}}`` style mapping."""
        document = SubstitutionDocument.model_validate({"goals": payload})
        sets: dict[tuple[Nutrient, Direction], SubstitutionSet] = {}
        for key, goal in document.goals.items():
            nutrient, direction = parse_goal_key(key)
            sets[(nutrient, direction)] = SubstitutionSet(
                rules=tuple(
                    SubstitutionRule(
                        keywords=tuple(rule.keywords),
                        candidates=tuple(rule.candidates),
                    )
                    for rule in goal.rules
                ),
                defaults=tuple(goal.defaults),
            )
        return cls(sets)

    @classmethod
    def from_file(cls, path: Path) -> "SubstitutionTable":
        """Load a table from a JSON file."""
        with path.open(encoding="utf-8") as handle:
            payload = json.load(handle)
        table = cls.from_mapping(payload)
        _logger.info(
            "Loaded substitution table from %s: goals=%s", path, len(table.goal_pairs())
        )
        return table


class RuleModel(BaseModel):
    """Validated substitution rule from a table file."""

    keywords: list[str] = Field(min_length=1)
    candidates: list[str] = Field(min_length=1)

    @field_validator("keywords", "candidates")
    @classmethod
    def _normalize(cls, values: list[str]) -> list[str]:
        cleaned = [value.strip().lower() for value in values if value.strip()]
        if not cleaned:
            raise ValueError("must contain at least one non-blank value")
        return cleaned


class GoalSubstitutionsModel(BaseModel):
    """Rules and defaults for one goal key."""

    rules: list[RuleModel] = Field(default_factory=list)
    defaults: list[str] = Field(default_factory=list)


class SubstitutionDocument(BaseModel):
    """Top-level substitution table document."""

    goals: dict[str, GoalSubstitutionsModel]

    @field_validator("goals")
    @classmethod
    def _check_keys(
        cls, goals: dict[str, GoalSubstitutionsModel]
    ) -> dict[str, GoalSubstitutionsModel]:
        normalized: dict[str, GoalSubstitutionsModel] = {}
        for key, goal in goals.items():
            nutrient, direction = parse_goal_key(key)
            normalized[goal_key(nutrient, direction)] = goal
        return normalized
