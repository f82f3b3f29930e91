"""Recipe recommendations by ingredient availability.

A recipe ingredient counts as available when the pantry holds an item with
the same name (compared case-insensitively, no other normalization) and a
quantity above zero. Recipes are ranked by the share of their ingredients
that are available.

Percentages are rounded half-up: 33.33 -> 33, 66.67 -> 67, 12.5 -> 13,
79.5 -> 80. A recipe without ingredients is 0%.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Iterable, Sequence


DEFAULT_TOP_K = 3
FULL_THRESHOLD = 80
HALF_THRESHOLD = 50

LABEL_FULL = "fully available"
LABEL_HALF = "half available"
LABEL_INSUFFICIENT = "insufficient"

SEVERITY_POSITIVE = "positive"
SEVERITY_WARNING = "warning"
SEVERITY_NEGATIVE = "negative"


@dataclass(frozen=True)
class PantryItem:
    name: str
    quantity: float
    unit: str = ""
    category: str = "OTHER"
    expiry_date: dt.date | None = None


@dataclass(frozen=True)
class RecipeIngredient:
    name: str
    quantity: float | None = None
    unit: str | None = None


@dataclass(frozen=True)
class Recipe:
    id: int | str
    name: str
    ingredients: tuple[RecipeIngredient, ...] = ()
    image_url: str | None = None
    difficulty: int = 1
    cooking_time: int = 0
    servings: int | None = None
    author: str | None = None


@dataclass(frozen=True)
class AvailabilityResult:
    recipe: Recipe
    available_count: int
    total_count: int
    percentage: int
    missing_ingredients: tuple[RecipeIngredient, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AvailabilityBadge:
    label: str
    severity: str


def _key(name: str | None) -> str:
    return (name or "").lower()


def _is_available(ingredient: RecipeIngredient, pantry: Sequence[PantryItem]) -> bool:
    wanted = _key(ingredient.name)
    if not wanted:
        return False
    return any(_key(item.name) == wanted and (item.quantity or 0) > 0 for item in pantry)


def percentage_of(available: int, total: int) -> int:
    if total <= 0:
        return 0
    # round-half-up of available / total * 100 in integers
    return (available * 200 + total) // (2 * total)


def compute_availability(recipe: Recipe, pantry: Iterable[PantryItem]) -> AvailabilityResult:
    pantry = list(pantry)
    missing = []
    available = 0
    for ingredient in recipe.ingredients:
        if _is_available(ingredient, pantry):
            available += 1
        else:
            missing.append(ingredient)

    total = len(recipe.ingredients)
    return AvailabilityResult(
        recipe=recipe,
        available_count=available,
        total_count=total,
        percentage=percentage_of(available, total),
        missing_ingredients=tuple(missing),
    )


def rank_recipes(
    recipes: Iterable[Recipe],
    pantry: Iterable[PantryItem],
    top_k: int = DEFAULT_TOP_K,
) -> list[AvailabilityResult]:
    """Best `top_k` recipes by availability, highest percentage first.

    Recipes with equal percentages keep their catalog order.
    """
    if top_k <= 0:
        return []
    pantry = list(pantry)
    results = [compute_availability(recipe, pantry) for recipe in recipes]
    results.sort(key=lambda r: r.percentage, reverse=True)
    return results[:top_k]


def classify_availability(
    percentage: int,
    full: int = FULL_THRESHOLD,
    half: int = HALF_THRESHOLD,
) -> AvailabilityBadge:
    if percentage >= full:
        return AvailabilityBadge(LABEL_FULL, SEVERITY_POSITIVE)
    if percentage >= half:
        return AvailabilityBadge(LABEL_HALF, SEVERITY_WARNING)
    return AvailabilityBadge(LABEL_INSUFFICIENT, SEVERITY_NEGATIVE)


def difficulty_label(difficulty: int) -> str:
    if difficulty <= 2:
        return "easy"
    if difficulty == 3:
        return "normal"
    return "hard"
