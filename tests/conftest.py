"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from datetime import date
from pathlib import Path
from uuid import uuid4

import pytest

from nutrient_swap.adapters.cnf_dataset import CnfDatasetLoader
from nutrient_swap.adapters.in_memory_repositories import (
    InMemoryMealRepository,
    InMemorySwapHistoryRepository,
)
from nutrient_swap.config import Settings
from nutrient_swap.containers import AppContainer
from nutrient_swap.domain.meals import Meal
from nutrient_swap.domain.nutrition import Nutrient
from nutrient_swap.domain.swaps import Direction, SwapGoal
from nutrient_swap.services.meals import MealLogService
from nutrient_swap.services.recommendations import RecommendationService
from nutrient_swap.services.resolver import NutrientResolver, ResolverProvider
from nutrient_swap.services.selector import StrategySelector, build_default_selector
from nutrient_swap.services.substitutions import SubstitutionTable
from nutrient_swap.services.swaps import SwapService

FOOD_GROUP_CSV = """FoodGroupID,FoodGroupCode,FoodGroupName,FoodGroupNameF
1,1,Dairy and Egg Products,Produits laitiers et oeufs
9,9,Fruits and fruit juices,Fruits et jus de fruits
14,14,Beverages,Boissons
"""

FOOD_NAME_CSV = """FoodID,FoodCode,FoodGroupID,FoodSourceID,FoodDescription,FoodDescriptionF
1,1,1,1,"Cheese, blue","Fromage, bleu"
2,2,14,1,"Beverages, coffee, brewed","Café, infusé"
3,3,9,1,"Kiwifruit, raw","Kiwi, cru"
4,4,1,1,"Cheese, blue","Fromage, bleu, doublon"
5,5,9,1,Quokka berry,Baie quokka
bad,6,9,1,Broken row,Ligne brisée
"""

NUTRIENT_AMOUNT_CSV = """FoodID,NutrientID,NutrientValue,StandardError
1,208,353,
1,203,21.4,
1,204,28.7,
1,205,2.3,
2,203,0.1,
2,205,0.5,
2,204,0,
3,291,abc,
3,208,61,
3,203,1.1,
3,204,0.5,
3,204,-1.0,
3,205,14.7,
3,291,3.0,
3,269,9.0,
4,208,999,
5,301,12.0,
x,208,5,
3,203
"""


def write_cnf_dataset(directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "FOOD GROUP.csv").write_text(FOOD_GROUP_CSV, encoding="latin-1")
    (directory / "FOOD NAME.csv").write_text(FOOD_NAME_CSV, encoding="latin-1")
    (directory / "NUTRIENT AMOUNT.csv").write_text(
        NUTRIENT_AMOUNT_CSV, encoding="latin-1"
    )
    return directory


def make_meal(
    ingredients: list[str], quantities: list[float] | None = None
) -> Meal:
    return Meal(
        id=uuid4(),
        profile_id=uuid4(),
        logged_on=date(2024, 3, 14),
        meal_type="lunch",
        ingredients=tuple(ingredients),
        quantities=tuple(quantities or [100.0] * len(ingredients)),
    )


def goal(nutrient: Nutrient, direction: Direction, **kwargs: float) -> SwapGoal:
    return SwapGoal(nutrient=nutrient, direction=direction, **kwargs)


@pytest.fixture(autouse=True)
def propagate_app_logs() -> Iterator[None]:
    logger = logging.getLogger("nutrient_swap")
    previous = logger.propagate
    logger.propagate = True
    yield
    logger.propagate = previous


@pytest.fixture
def cnf_dir(tmp_path: Path) -> Path:
    return write_cnf_dataset(tmp_path / "cnf")


@pytest.fixture
def settings(cnf_dir: Path) -> Settings:
    return Settings(cnf_data_path=cnf_dir, environment="test")


@pytest.fixture
def fallback_resolver() -> NutrientResolver:
    return NutrientResolver()


@pytest.fixture
def dataset_resolver(cnf_dir: Path) -> NutrientResolver:
    return NutrientResolver(CnfDatasetLoader(cnf_dir).load())


@pytest.fixture
def substitutions() -> SubstitutionTable:
    return SubstitutionTable.default()


@pytest.fixture
def selector(
    fallback_resolver: NutrientResolver, substitutions: SubstitutionTable
) -> StrategySelector:
    return build_default_selector(fallback_resolver, substitutions)


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def history_repository() -> InMemorySwapHistoryRepository:
    return InMemorySwapHistoryRepository()


@pytest.fixture
def container(
    settings: Settings,
    substitutions: SubstitutionTable,
    meal_repository: InMemoryMealRepository,
    history_repository: InMemorySwapHistoryRepository,
) -> AppContainer:
    loader = CnfDatasetLoader(settings.cnf_data_path)
    resolver_provider = ResolverProvider(loader.load)
    resolver = resolver_provider.get()
    selector = build_default_selector(resolver, substitutions)
    return AppContainer(
        settings=settings,
        resolver_provider=resolver_provider,
        substitutions=substitutions,
        selector=selector,
        meal_repository=meal_repository,
        history_repository=history_repository,
        meal_log_service=MealLogService(resolver=resolver, repository=meal_repository),
        recommendation_service=RecommendationService(selector=selector),
        swap_service=SwapService(
            meal_repository=meal_repository,
            history_repository=history_repository,
        ),
    )
