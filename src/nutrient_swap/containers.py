"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrient_swap.adapters.cnf_dataset import CnfDatasetLoader
from nutrient_swap.adapters.in_memory_repositories import (
    InMemoryMealRepository,
    InMemorySwapHistoryRepository,
)
from nutrient_swap.config import Settings
from nutrient_swap.services.meals import MealLogService
from nutrient_swap.services.recommendations import RecommendationService
from nutrient_swap.services.resolver import NutrientResolver, ResolverProvider
from nutrient_swap.services.selector import StrategySelector, build_default_selector
from nutrient_swap.services.substitutions import SubstitutionTable
from nutrient_swap.services.swaps import SwapService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    resolver_provider: ResolverProvider
    substitutions: SubstitutionTable
    selector: StrategySelector
    meal_repository: InMemoryMealRepository
    history_repository: InMemorySwapHistoryRepository
    meal_log_service: MealLogService
    recommendation_service: RecommendationService
    swap_service: SwapService

    @property
    def resolver(self) -> NutrientResolver:
        return self.resolver_provider.get()


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    loader = CnfDatasetLoader(
        data_path=resolved_settings.cnf_data_path,
        food_group_file=resolved_settings.food_group_file,
        food_name_file=resolved_settings.food_name_file,
        nutrient_amount_file=resolved_settings.nutrient_amount_file,
        encoding=resolved_settings.cnf_encoding,
    )
    resolver_provider = ResolverProvider(loader.load)
    if resolved_settings.substitution_table_path is not None:
        substitutions = SubstitutionTable.from_file(
            resolved_settings.substitution_table_path
        )
    else:
        substitutions = SubstitutionTable.default()

    resolver = resolver_provider.get()
    selector = build_default_selector(resolver, substitutions)
    meal_repository = InMemoryMealRepository()
    history_repository = InMemorySwapHistoryRepository()
    return AppContainer(
        settings=resolved_settings,
        resolver_provider=resolver_provider,
        substitutions=substitutions,
        selector=selector,
        meal_repository=meal_repository,
        history_repository=history_repository,
        meal_log_service=MealLogService(resolver=resolver, repository=meal_repository),
        recommendation_service=RecommendationService(
            selector=selector,
            max_swaps_per_goal=resolved_settings.max_swaps_per_goal,
            min_impact_score=resolved_settings.min_impact_score,
        ),
        swap_service=SwapService(
            meal_repository=meal_repository,
            history_repository=history_repository,
        ),
    )
