"""Request and response models for the HTTP API."""

from datetime import date  # noqa: TC003
from uuid import UUID  # noqa: TC003

from pydantic import BaseModel, Field, field_validator, model_validator

from nutrient_swap.domain.meals import Meal
from nutrient_swap.domain.nutrition import Nutrient, NutrientProfile
from nutrient_swap.domain.swaps import Direction, SwapCandidate, SwapGoal, SwapResult


class NutrientsModel(BaseModel):
    """Nutrient amounts, per 100 g for ingredients or totals for meals."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sugar_g: float = 0.0

    @classmethod
    def from_profile(cls, profile: NutrientProfile) -> "NutrientsModel":
        return cls(
            calories=profile.calories,
            protein_g=profile.protein_g,
            carbs_g=profile.carbs_g,
            fat_g=profile.fat_g,
            fiber_g=profile.fiber_g,
            sugar_g=profile.sugar_g,
        )

    def to_profile(self) -> NutrientProfile:
        return NutrientProfile(
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fat_g=self.fat_g,
            fiber_g=self.fiber_g,
            sugar_g=self.sugar_g,
        )


class IngredientResponse(BaseModel):
    """Resolved ingredient with the key it matched."""

    query: str
    matched_key: str | None
    food_id: int | None
    nutrients: NutrientsModel


class MealCreateRequest(BaseModel):
    """Meal to log; totals are computed by the server."""

    profile_id: UUID
    ingredients: list[str] = Field(min_length=1)
    quantities: list[float]
    meal_type: str = "meal"
    logged_on: date | None = None

    @model_validator(mode="after")
    def _check_lengths(self) -> "MealCreateRequest":
        if len(self.ingredients) != len(self.quantities):
            raise ValueError("ingredients and quantities must have the same length")
        return self


class MealResponse(BaseModel):
    id: UUID
    profile_id: UUID
    logged_on: date
    meal_type: str
    ingredients: list[str]
    quantities: list[float]
    nutrients: NutrientsModel

    @classmethod
    def from_meal(cls, meal: Meal) -> "MealResponse":
        return cls(
            id=meal.id,
            profile_id=meal.profile_id,
            logged_on=meal.logged_on,
            meal_type=meal.meal_type,
            ingredients=list(meal.ingredients),
            quantities=list(meal.quantities),
            nutrients=NutrientsModel.from_profile(meal.nutrients),
        )


class GoalModel(BaseModel):
    """Swap goal as sent by clients; out-of-range values are clamped."""

    nutrient: str
    direction: str
    intensity: float = 0.5
    target_delta: float = 0.0

    @field_validator("nutrient")
    @classmethod
    def _check_nutrient(cls, value: str) -> str:
        return Nutrient.parse(value).value

    @field_validator("direction")
    @classmethod
    def _check_direction(cls, value: str) -> str:
        return Direction.parse(value).value

    def to_goal(self) -> SwapGoal:
        return SwapGoal(
            nutrient=Nutrient.parse(self.nutrient),
            direction=Direction.parse(self.direction),
            intensity=self.intensity,
            target_delta=self.target_delta,
        )


class RecommendationRequest(BaseModel):
    meal_id: UUID
    goals: list[GoalModel] = Field(min_length=1)


class SwapCandidateModel(BaseModel):
    """Swap candidate exchanged between recommend, preview and apply."""

    original_food: str
    replacement_food: str
    reason: str = ""
    goal_type: str
    impact_score: float = Field(default=0.0, ge=0.0, le=1.0)
    original: NutrientsModel
    replacement: NutrientsModel
    history_id: UUID | None = None
    summary: str | None = None

    @classmethod
    def from_candidate(cls, candidate: SwapCandidate) -> "SwapCandidateModel":
        return cls(
            original_food=candidate.original_food,
            replacement_food=candidate.replacement_food,
            reason=candidate.reason,
            goal_type=candidate.goal_type,
            impact_score=candidate.impact_score,
            original=NutrientsModel.from_profile(candidate.original),
            replacement=NutrientsModel.from_profile(candidate.replacement),
            history_id=candidate.history_id,
            summary=candidate.summary(),
        )

    def to_candidate(self) -> SwapCandidate:
        return SwapCandidate(
            original_food=self.original_food,
            replacement_food=self.replacement_food,
            reason=self.reason,
            goal_type=self.goal_type,
            impact_score=self.impact_score,
            original=self.original.to_profile(),
            replacement=self.replacement.to_profile(),
            history_id=self.history_id,
        )


class RecommendationResponse(BaseModel):
    meal_id: UUID
    swaps: list[SwapCandidateModel]


class SwapRequest(BaseModel):
    meal_id: UUID
    swap: SwapCandidateModel


class SwapResultResponse(BaseModel):
    """Swap outcome with the updated meal."""

    swap: SwapCandidateModel
    nutrient_changes: list[dict[str, float]]
    meal: MealResponse

    @classmethod
    def from_result(cls, result: SwapResult) -> "SwapResultResponse":
        return cls(
            swap=SwapCandidateModel.from_candidate(result.candidate),
            nutrient_changes=result.nutrient_changes,
            meal=MealResponse.from_meal(result.meal),
        )


class SwapHistoryResponse(BaseModel):
    start: date
    end: date
    swaps: list[SwapCandidateModel]
