"""FastAPI application factory."""

import logging
from datetime import date  # noqa: TC003
from uuid import UUID  # noqa: TC003

from fastapi import FastAPI, HTTPException, Request, status

from nutrient_swap.api.schemas import (
    IngredientResponse,
    MealCreateRequest,
    MealResponse,
    NutrientsModel,
    RecommendationRequest,
    RecommendationResponse,
    SwapCandidateModel,
    SwapHistoryResponse,
    SwapRequest,
    SwapResultResponse,
)
from nutrient_swap.app_logging import configure_logging
from nutrient_swap.containers import AppContainer
from nutrient_swap.services.swaps import MealNotFoundError, SwapValidationError


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/ingredients")
    async def list_ingredients(
        request: Request,
        query: str = "",
        group: str | None = None,
        limit: int = 20,
    ) -> dict[str, list[str]]:
        """Search known ingredient keys, prefix matches first."""
        state_container: AppContainer = request.app.state.container
        resolver = state_container.resolver
        limit = max(limit, 1)
        if group:
            names = resolver.ingredients_by_group(group)
            if query.strip():
                needle = query.strip().lower()
                names = [name for name in names if needle in name]
            return {"ingredients": names[:limit]}
        if query.strip():
            return {"ingredients": resolver.search(query, limit=limit)}
        return {"ingredients": resolver.all_ingredients()[:limit]}

    @app.get("/ingredients/{name}")
    async def get_ingredient(name: str, request: Request) -> IngredientResponse:
        """Resolve one ingredient to its per-100 g profile."""
        state_container: AppContainer = request.app.state.container
        resolver = state_container.resolver
        return IngredientResponse(
            query=name,
            matched_key=resolver.closest_match(name),
            food_id=resolver.food_id(name),
            nutrients=NutrientsModel.from_profile(resolver.lookup(name)),
        )

    @app.get("/food-groups")
    async def list_food_groups(request: Request) -> dict[str, list[str]]:
        """Return dataset food group names."""
        state_container: AppContainer = request.app.state.container
        return {"food_groups": state_container.resolver.food_groups()}

    @app.get("/goals")
    async def list_goals(request: Request) -> dict[str, list[dict[str, str]]]:
        """Return the goal types that have a registered strategy."""
        state_container: AppContainer = request.app.state.container
        selector = state_container.selector
        goals = []
        for goal_type in selector.available_goal_types():
            strategy = selector.select_key(goal_type)
            if strategy is None:
                continue
            goals.append(
                {"goal_type": goal_type, "description": strategy.description}
            )
        return {"goals": goals}

    @app.post("/meals", status_code=status.HTTP_201_CREATED)
    async def create_meal(payload: MealCreateRequest, request: Request) -> MealResponse:
        """Log a meal and compute its nutrient totals."""
        state_container: AppContainer = request.app.state.container
        meal = state_container.meal_log_service.log_meal(
            profile_id=payload.profile_id,
            ingredients=payload.ingredients,
            quantities=payload.quantities,
            meal_type=payload.meal_type,
            logged_on=payload.logged_on,
        )
        logger.info(
            "Logged meal %s with %s ingredients", meal.id, len(meal.ingredients)
        )
        return MealResponse.from_meal(meal)

    @app.get("/meals/{meal_id}")
    async def get_meal(meal_id: UUID, request: Request) -> MealResponse:
        """Return a logged meal."""
        state_container: AppContainer = request.app.state.container
        meal = state_container.meal_log_service.get_meal(meal_id)
        if meal is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return MealResponse.from_meal(meal)

    @app.post("/swaps/recommendations")
    async def recommend_swaps(
        payload: RecommendationRequest, request: Request
    ) -> RecommendationResponse:
        """Recommend ingredient swaps for a logged meal."""
        state_container: AppContainer = request.app.state.container
        meal = state_container.meal_log_service.get_meal(payload.meal_id)
        if meal is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        swaps = state_container.recommendation_service.recommend(
            meal, [goal.to_goal() for goal in payload.goals]
        )
        return RecommendationResponse(
            meal_id=meal.id,
            swaps=[SwapCandidateModel.from_candidate(swap) for swap in swaps],
        )

    @app.post("/swaps/preview")
    async def preview_swap(
        payload: SwapRequest, request: Request
    ) -> SwapResultResponse:
        """Show the effect of a swap without saving it."""
        state_container: AppContainer = request.app.state.container
        try:
            result = state_container.swap_service.preview_swap(
                payload.meal_id, payload.swap.to_candidate()
            )
        except SwapValidationError as exc:
            raise _swap_error(exc) from exc
        return SwapResultResponse.from_result(result)

    @app.post("/swaps/apply")
    async def apply_swap(payload: SwapRequest, request: Request) -> SwapResultResponse:
        """Apply a swap to a logged meal and record it."""
        state_container: AppContainer = request.app.state.container
        try:
            result = state_container.swap_service.apply_swap(
                payload.meal_id, payload.swap.to_candidate()
            )
        except SwapValidationError as exc:
            raise _swap_error(exc) from exc
        return SwapResultResponse.from_result(result)

    @app.get("/swaps/history")
    async def swap_history(
        start: date, end: date, request: Request
    ) -> SwapHistoryResponse:
        """Return swaps applied to meals dated within the range."""
        state_container: AppContainer = request.app.state.container
        swaps = state_container.swap_service.list_applied_swaps(start, end)
        return SwapHistoryResponse(
            start=min(start, end),
            end=max(start, end),
            swaps=[SwapCandidateModel.from_candidate(swap) for swap in swaps],
        )

    return app


def _swap_error(exc: SwapValidationError) -> HTTPException:
    if isinstance(exc, MealNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
