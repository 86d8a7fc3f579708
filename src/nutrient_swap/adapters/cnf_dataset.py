"""Loader for the Canada Nutrient File CSV export."""

import csv
import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from nutrient_swap.domain.nutrition import (
    CatalogEntry,
    NutrientCatalog,
    NutrientProfile,
)
from nutrient_swap.services.normalizer import ingredient_key

_NUTRIENT_CODES = {
    208: "calories",
    203: "protein",
    204: "fat",
    205: "carbs",
    291: "fiber",
    269: "sugar",
}

_logger = logging.getLogger(__name__)


@dataclass
class CnfDatasetLoader:
    """Builds a nutrient catalog from the food group, food name and amount tables."""

    data_path: Path
    food_group_file: str = "FOOD GROUP.csv"
    food_name_file: str = "FOOD NAME.csv"
    nutrient_amount_file: str = "NUTRIENT AMOUNT.csv"
    encoding: str = "latin-1"

    def load(self) -> NutrientCatalog:
        """Load all three tables; missing or malformed data is skipped.

        Foods with no amount for a tracked nutrient get no profile, so the
        resolver falls back to its built-in values for them.
        """
        groups = self._load_groups()
        entries, ids_by_name = self._load_foods()
        amounts = self._load_amounts()
        profiles = {
            food_id: _assemble_profile(values)
            for food_id, values in amounts.items()
            if values
        }
        _logger.info(
            "Loaded nutrient dataset: groups=%s foods=%s profiles=%s",
            len(groups),
            len(entries),
            len(profiles),
        )
        return NutrientCatalog(
            groups=groups,
            entries=entries,
            ids_by_name=ids_by_name,
            profiles=profiles,
        )

    def _load_groups(self) -> dict[int, str]:
        groups: dict[int, str] = {}
        for row in self._read_rows(self.food_group_file):
            if len(row) < 3:  # noqa: PLR2004
                continue
            group_id = _parse_int(row[0])
            if group_id is None:
                _logger.debug("Skipping food group row: %s", row)
                continue
            groups[group_id] = row[2].strip()
        return groups

    def _load_foods(self) -> tuple[dict[int, CatalogEntry], dict[str, int]]:
        entries: dict[int, CatalogEntry] = {}
        ids_by_name: dict[str, int] = {}
        for row in self._read_rows(self.food_name_file):
            if len(row) < 5:  # noqa: PLR2004
                continue
            food_id = _parse_int(row[0])
            if food_id is None:
                _logger.debug("Skipping food name row: %s", row)
                continue
            name = ingredient_key(row[4])
            if not name:
                continue
            entries[food_id] = CatalogEntry(
                food_id=food_id, name=name, group_id=_parse_int(row[2])
            )
            if name in ids_by_name:
                _logger.debug(
                    "Duplicate food name %r: keeping id=%s, ignoring id=%s",
                    name,
                    ids_by_name[name],
                    food_id,
                )
                continue
            ids_by_name[name] = food_id
        return entries, ids_by_name

    def _load_amounts(self) -> dict[int, dict[int, float]]:
        amounts: dict[int, dict[int, float]] = {}
        for row in self._read_rows(self.nutrient_amount_file):
            if len(row) < 3:  # noqa: PLR2004
                continue
            food_id = _parse_int(row[0])
            code = _parse_int(row[1])
            value = _parse_amount(row[2])
            if food_id is None or code is None or value is None:
                _logger.debug("Skipping nutrient amount row: %s", row)
                continue
            if code not in _NUTRIENT_CODES:
                continue
            amounts.setdefault(food_id, {})[code] = value
        return amounts

    def _read_rows(self, filename: str) -> Iterator[list[str]]:
        path = self.data_path / filename
        if not path.is_file():
            _logger.warning("Nutrient dataset file not found: %s", path)
            return
        with path.open(newline="", encoding=self.encoding) as handle:
            reader = csv.reader(handle)
            next(reader, None)
            yield from reader


def _assemble_profile(values: dict[int, float]) -> NutrientProfile:
    """Map nutrient codes to a profile, deriving calories when absent."""
    mapped = {
        _NUTRIENT_CODES[code]: value
        for code, value in values.items()
        if code in _NUTRIENT_CODES
    }
    protein = mapped.get("protein", 0.0)
    carbs = mapped.get("carbs", 0.0)
    fat = mapped.get("fat", 0.0)
    calories = mapped.get("calories")
    if calories is None:
        calories = 4 * protein + 4 * carbs + 9 * fat
    return NutrientProfile(
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
        fiber_g=mapped.get("fiber", 0.0),
        sugar_g=mapped.get("sugar", 0.0),
    )


def _parse_int(value: str) -> int | None:
    try:
        return int(value.strip())
    except ValueError:
        return None


def _parse_amount(value: str) -> float | None:
    """Parse a nutrient value; empty, zero and non-numeric values are skipped."""
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        amount = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount
