"""Built-in nutrient values for common ingredients (per 100 g).

Used to fill gaps when the nutrient dataset is missing or has no entry for a
frequently logged ingredient. Dataset entries always take precedence.
"""

from types import MappingProxyType

from nutrient_swap.domain.nutrition import NutrientProfile


def _profile(  # noqa: PLR0913
    calories: float,
    protein: float,
    carbs: float,
    fat: float,
    fiber: float,
    sugar: float = 0.0,
) -> NutrientProfile:
    return NutrientProfile(
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
        fiber_g=fiber,
        sugar_g=sugar,
    )


PLACEHOLDER_PROFILE = _profile(50, 2, 5, 1, 0.5)

FALLBACK_PROFILES = MappingProxyType(
    {
        # proteins
        "chicken breast": _profile(165, 31, 0, 3.6, 0),
        "chicken thigh": _profile(209, 26, 0, 10.9, 0),
        "chicken": _profile(239, 27, 0, 14, 0),
        "turkey": _profile(135, 30, 0, 1, 0),
        "beef": _profile(250, 26, 0, 15, 0),
        "pork": _profile(242, 27, 0, 14, 0),
        "lamb": _profile(294, 25, 0, 21, 0),
        "salmon": _profile(208, 20, 0, 13, 0),
        "fish": _profile(136, 24, 0, 4, 0),
        "tuna": _profile(132, 28, 0, 1, 0),
        "egg": _profile(155, 13, 1.1, 11, 0, 1.1),
        "egg whites": _profile(52, 11, 0.7, 0.2, 0, 0.7),
        "tofu": _profile(76, 8, 1.9, 4.8, 0.3, 0.6),
        # dairy
        "milk": _profile(61, 3.2, 4.8, 3.3, 0, 5.1),
        "skim milk": _profile(34, 3.4, 5, 0.1, 0, 5),
        "almond milk": _profile(17, 0.6, 0.6, 1.1, 0.2, 0),
        "cheese": _profile(402, 25, 1.3, 33, 0, 0.5),
        "low-fat cheese": _profile(173, 24.4, 1.9, 7, 0, 0.5),
        "cottage cheese": _profile(98, 11, 3.4, 4.3, 0, 2.7),
        "yogurt": _profile(61, 3.5, 4.7, 3.3, 0, 4.7),
        "greek yogurt": _profile(59, 10, 3.6, 0.4, 0, 3.2),
        "butter": _profile(717, 0.9, 0.1, 81, 0, 0.1),
        "cream": _profile(340, 2.8, 2.7, 36, 0, 2.9),
        # grains
        "rice": _profile(130, 2.7, 28, 0.3, 0.4, 0.1),
        "white rice": _profile(130, 2.7, 28, 0.3, 0.4, 0.1),
        "brown rice": _profile(112, 2.6, 23, 0.9, 1.8, 0.4),
        "pasta": _profile(131, 5, 25, 1.1, 1.8, 0.6),
        "bread": _profile(265, 9, 49, 3.2, 2.7, 5),
        "white bread": _profile(266, 7.6, 50, 3.3, 2.4, 5.7),
        "whole wheat bread": _profile(247, 13, 41, 3.4, 7, 6),
        "oats": _profile(389, 16.9, 66, 6.9, 10.6, 1),
        "quinoa": _profile(120, 4.4, 21, 1.9, 2.8, 0.9),
        # vegetables
        "vegetables": _profile(65, 2.5, 13, 0.3, 3.5, 4),
        "broccoli": _profile(34, 2.8, 7, 0.4, 2.6, 1.7),
        "spinach": _profile(23, 2.9, 3.6, 0.4, 2.2, 0.4),
        "lettuce": _profile(15, 1.4, 2.9, 0.2, 1.3, 0.8),
        "carrots": _profile(41, 0.9, 10, 0.2, 2.8, 4.7),
        "potato": _profile(77, 2, 17, 0.1, 2.2, 0.8),
        "sweet potato": _profile(86, 1.6, 20, 0.1, 3, 4.2),
        "cauliflower rice": _profile(25, 1.9, 5, 0.3, 2, 1.9),
        # fruits
        "fruit": _profile(60, 0.8, 15, 0.2, 2, 10),
        "apple": _profile(52, 0.3, 14, 0.2, 2.4, 10),
        "banana": _profile(89, 1.1, 23, 0.3, 2.6, 12),
        "berries": _profile(57, 0.7, 14, 0.3, 2.4, 10),
        "avocado": _profile(160, 2, 8.5, 14.7, 6.7, 0.7),
        # nuts and seeds
        "nuts": _profile(607, 20, 21, 54, 7, 4.2),
        "almonds": _profile(579, 21, 22, 50, 12.5, 4.4),
        "peanut butter": _profile(588, 25, 20, 50, 6, 9),
        "seeds": _profile(570, 20, 20, 49, 10, 2),
        # oils
        "olive oil": _profile(884, 0, 0, 100, 0),
        # legumes
        "beans": _profile(127, 8.7, 22.8, 0.5, 6.4, 0.3),
        "lentils": _profile(116, 9, 20, 0.4, 7.9, 1.8),
        "chickpeas": _profile(164, 8.9, 27, 2.6, 7.6, 4.8),
    }
)
