"""Domain models for swap goals and candidates."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID

from nutrient_swap.domain.meals import Meal
from nutrient_swap.domain.nutrition import Nutrient, NutrientDelta, NutrientProfile

POSITIVE_SWAP_THRESHOLD = 0.5


class Direction(StrEnum):
    """Direction a goal wants a nutrient to move."""

    INCREASE = "increase"
    DECREASE = "decrease"

    @classmethod
    def parse(cls, raw: "str | Direction") -> "Direction":
        """Parse a direction name case-insensitively."""
        if isinstance(raw, Direction):
            return raw
        cleaned = str(raw).strip().lower()
        if cleaned in {"reduce", "lower"}:
            return cls.DECREASE
        try:
            return cls(cleaned)
        except ValueError as exc:
            raise ValueError(f"Unknown direction: {raw!r}") from exc


def goal_key(nutrient: Nutrient, direction: Direction) -> str:
    """Build the combined key used to register strategies."""
    return f"{direction.value}_{nutrient.legacy_name}"


def parse_goal_key(key: str) -> tuple[Nutrient, Direction]:
    """Split a combined key such as ``decrease_fat`` into its parts."""
    cleaned = key.strip().lower()
    action, _, target = cleaned.partition("_")
    if not target:
        raise ValueError(f"Invalid goal key: {key!r}")
    return Nutrient.parse(target), Direction.parse(action)


@dataclass(frozen=True)
class SwapGoal:
    """Target nutrient, direction and intensity for a swap request."""

    nutrient: Nutrient
    direction: Direction
    intensity: float = 0.5
    target_delta: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "nutrient", Nutrient.parse(self.nutrient))
        object.__setattr__(self, "direction", Direction.parse(self.direction))
        object.__setattr__(self, "intensity", min(1.0, max(0.0, self.intensity)))
        object.__setattr__(self, "target_delta", max(0.0, self.target_delta))

    @classmethod
    def parse(
        cls, key: str, intensity: float = 0.5, target_delta: float = 0.0
    ) -> "SwapGoal":
        """Create a goal from a combined key such as ``increase_fiber``."""
        nutrient, direction = parse_goal_key(key)
        return cls(nutrient, direction, intensity, target_delta)

    @property
    def goal_type(self) -> str:
        """Combined key for the goal."""
        return goal_key(self.nutrient, self.direction)

    @property
    def is_decrease(self) -> bool:
        return self.direction is Direction.DECREASE

    @property
    def is_increase(self) -> bool:
        return self.direction is Direction.INCREASE

    @property
    def intensity_level(self) -> str:
        """Severity label derived from intensity."""
        if self.intensity < 0.33:  # noqa: PLR2004
            return "Low"
        if self.intensity < 0.67:  # noqa: PLR2004
            return "Moderate"
        return "High"


@dataclass(frozen=True)
class SwapCandidate:
    """Proposed ingredient substitution with before/after nutrients."""

    original_food: str
    replacement_food: str
    reason: str
    goal_type: str
    impact_score: float
    original: NutrientProfile
    replacement: NutrientProfile
    history_id: UUID | None = None

    @property
    def delta(self) -> NutrientDelta:
        """Nutrient change caused by the swap."""
        return self.replacement.minus(self.original)

    @property
    def is_positive(self) -> bool:
        return self.impact_score > POSITIVE_SWAP_THRESHOLD

    @property
    def pair_key(self) -> frozenset[str]:
        """Unordered (original, replacement) pair."""
        return frozenset((self.original_food, self.replacement_food))

    def is_valid(self) -> bool:
        """Return True when both names are set, differ, and a goal is attached."""
        original = self.original_food.strip()
        replacement = self.replacement_food.strip()
        return (
            bool(original)
            and bool(replacement)
            and bool(self.goal_type.strip())
            and original != replacement
        )

    def nutrient_changes(self) -> dict[str, float]:
        """Return the signed change per nutrient."""
        return self.delta.as_dict()

    def summary(self) -> str:
        """Human-readable one-line summary."""
        delta = self.delta
        parts = [f"Replace {self.original_food} with {self.replacement_food}"]
        if delta.calories:
            parts.append(f"Calories: {delta.calories:+.0f}")
        if delta.fiber_g:
            parts.append(f"Fiber: {delta.fiber_g:+.1f}g")
        if delta.protein_g:
            parts.append(f"Protein: {delta.protein_g:+.1f}g")
        return " | ".join(parts)


@dataclass(frozen=True)
class SwapResult:
    """Outcome of previewing or applying a swap."""

    candidate: SwapCandidate
    nutrient_changes: list[dict[str, float]]
    meal: Meal


@dataclass(frozen=True)
class AppliedSwap:
    """History record for a committed swap."""

    id: UUID
    meal_id: UUID
    profile_id: UUID
    applied_on: date
    created_at: datetime
    candidate: SwapCandidate = field(repr=False)
