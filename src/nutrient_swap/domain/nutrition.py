"""Nutrition domain models."""

from dataclasses import dataclass, field
from enum import StrEnum


class Nutrient(StrEnum):
    """Nutrients that can be targeted by a swap goal."""

    CALORIES = "calories"
    PROTEIN = "protein"
    CARBS = "carbs"
    FAT = "fat"
    FIBER = "fiber"
    SUGAR = "sugar"

    @classmethod
    def parse(cls, raw: "str | Nutrient") -> "Nutrient":
        """Parse a nutrient name, accepting common aliases."""
        if isinstance(raw, Nutrient):
            return raw
        cleaned = str(raw).strip().lower()
        cleaned = _NUTRIENT_ALIASES.get(cleaned, cleaned)
        try:
            return cls(cleaned)
        except ValueError as exc:
            raise ValueError(f"Unknown nutrient: {raw!r}") from exc

    @property
    def unit(self) -> str:
        """Display unit for the nutrient."""
        return "kcal" if self is Nutrient.CALORIES else "g"

    @property
    def legacy_name(self) -> str:
        """Name used in combined goal keys such as ``decrease_carbohydrates``."""
        return "carbohydrates" if self is Nutrient.CARBS else self.value


_NUTRIENT_ALIASES = {
    "carbohydrates": "carbs",
    "carbohydrate": "carbs",
    "carb": "carbs",
    "kcal": "calories",
    "energy": "calories",
    "fibre": "fiber",
    "sugars": "sugar",
}


@dataclass(frozen=True)
class NutrientDelta:
    """Signed change per nutrient between two profiles."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sugar_g: float = 0.0

    def value_of(self, nutrient: Nutrient) -> float:
        """Return the change for one nutrient."""
        return getattr(self, _FIELD_BY_NUTRIENT[nutrient])

    def as_dict(self) -> dict[str, float]:
        """Return the delta keyed by display nutrient name."""
        return {
            "calories": self.calories,
            "protein": self.protein_g,
            "carbohydrates": self.carbs_g,
            "fat": self.fat_g,
            "fiber": self.fiber_g,
            "sugar": self.sugar_g,
        }


@dataclass(frozen=True)
class NutrientProfile:
    """Nutrient amounts for a food or a meal.

    Catalog profiles are expressed per 100 g; meal totals are the sum of
    the per-ingredient profiles scaled by logged grams.
    """

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sugar_g: float = 0.0

    def value_of(self, nutrient: Nutrient) -> float:
        """Return the amount for one nutrient."""
        return getattr(self, _FIELD_BY_NUTRIENT[nutrient])

    def scaled(self, factor: float) -> "NutrientProfile":
        """Return the profile multiplied by ``factor``."""
        return NutrientProfile(
            calories=self.calories * factor,
            protein_g=self.protein_g * factor,
            carbs_g=self.carbs_g * factor,
            fat_g=self.fat_g * factor,
            fiber_g=self.fiber_g * factor,
            sugar_g=self.sugar_g * factor,
        )

    def minus(self, other: "NutrientProfile") -> NutrientDelta:
        """Return the signed change from ``other`` to this profile."""
        return NutrientDelta(
            calories=self.calories - other.calories,
            protein_g=self.protein_g - other.protein_g,
            carbs_g=self.carbs_g - other.carbs_g,
            fat_g=self.fat_g - other.fat_g,
            fiber_g=self.fiber_g - other.fiber_g,
            sugar_g=self.sugar_g - other.sugar_g,
        )

    def shifted(self, delta: NutrientDelta) -> "NutrientProfile":
        """Return the profile moved by ``delta``."""
        return NutrientProfile(
            calories=self.calories + delta.calories,
            protein_g=self.protein_g + delta.protein_g,
            carbs_g=self.carbs_g + delta.carbs_g,
            fat_g=self.fat_g + delta.fat_g,
            fiber_g=self.fiber_g + delta.fiber_g,
            sugar_g=self.sugar_g + delta.sugar_g,
        )

    def __add__(self, other: object) -> "NutrientProfile":
        if not isinstance(other, NutrientProfile):
            return NotImplemented
        return NutrientProfile(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fat_g=self.fat_g + other.fat_g,
            fiber_g=self.fiber_g + other.fiber_g,
            sugar_g=self.sugar_g + other.sugar_g,
        )

    def __mul__(self, factor: object) -> "NutrientProfile":
        if not isinstance(factor, int | float):
            return NotImplemented
        return self.scaled(float(factor))

    __rmul__ = __mul__


ZERO_PROFILE = NutrientProfile()

_FIELD_BY_NUTRIENT = {
    Nutrient.CALORIES: "calories",
    Nutrient.PROTEIN: "protein_g",
    Nutrient.CARBS: "carbs_g",
    Nutrient.FAT: "fat_g",
    Nutrient.FIBER: "fiber_g",
    Nutrient.SUGAR: "sugar_g",
}


@dataclass(frozen=True)
class CatalogEntry:
    """Food entry from the nutrient dataset after name normalization."""

    food_id: int
    name: str
    group_id: int | None


@dataclass(frozen=True)
class NutrientCatalog:
    """In-memory indices built from the nutrient dataset tables."""

    groups: dict[int, str] = field(default_factory=dict)
    entries: dict[int, CatalogEntry] = field(default_factory=dict)
    ids_by_name: dict[str, int] = field(default_factory=dict)
    profiles: dict[int, NutrientProfile] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """Return True when no food profiles were loaded."""
        return not self.profiles

    def profiles_by_name(self) -> dict[str, NutrientProfile]:
        """Return profiles keyed by normalized food name."""
        return {
            name: self.profiles[food_id]
            for name, food_id in self.ids_by_name.items()
            if food_id in self.profiles
        }
