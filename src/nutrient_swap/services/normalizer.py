"""Ingredient name normalization for catalog lookups.

Dataset names are written category-first, for example ``"Cheese, blue"`` or
``"Beverages, coffee, brewed"``. The rules below turn them into keys that
read the way people type ingredients. The heuristic is lossy but
deterministic:

1. A name without a comma is returned trimmed.
2. If the first segment contains a known category prefix, that segment is
   dropped and the rest is joined with ``", "``.
3. If there are exactly two segments and the first is a reversible noun,
   the segments are swapped (``"Cheese, blue"`` -> ``"blue cheese"``).
4. Anything else is returned trimmed.
"""

CATEGORY_PREFIXES = (
    "dairy",
    "vegetables",
    "meat",
    "cereals",
    "beverages",
    "fruits",
    "nuts",
    "legumes",
    "poultry",
    "sweets",
    "snacks",
    "soups",
    "fats",
    "spices",
    "baked products",
    "finfish",
    "shellfish",
)

_PAIR = 2

REVERSIBLE_NOUNS = frozenset(
    {
        "cheese",
        "milk",
        "bread",
        "rice",
        "potato",
        "meat",
        "fish",
        "chicken",
        "beef",
        "turkey",
        "pork",
    }
)


def normalize_food_name(raw: str) -> str:
    """Return a readable name for a category-first dataset name."""
    name = raw.strip()
    if "," not in name:
        return name

    segments = [segment.strip() for segment in name.split(",")]
    first = segments[0].lower()
    if any(prefix in first for prefix in CATEGORY_PREFIXES):
        remainder = [segment for segment in segments[1:] if segment]
        return ", ".join(remainder) if remainder else name

    if len(segments) == _PAIR and first in REVERSIBLE_NOUNS and segments[1]:
        return f"{segments[1]} {segments[0]}"

    return name


def ingredient_key(name: str) -> str:
    """Return the resolver lookup key for an ingredient name."""
    return " ".join(normalize_food_name(name).lower().split())
