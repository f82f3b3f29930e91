"""Inventory and catalog sources feeding the availability ranker.

Rows from the database are coerced into the plain types the ranker works
on. Names pass through as stored (the API trims them on write); a missing
name becomes an empty string, which never matches.
"""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fridge import crud
from fridge.errors import ServiceError, Unauthorized
from fridge.models.ingredient import Ingredient as IngredientRow
from fridge.models.recipe import Recipe as RecipeRow
from fridge.services.availability import PantryItem, Recipe, RecipeIngredient


logger = logging.getLogger("fridge_api")


def _pantry_item(row: IngredientRow) -> PantryItem:
    quantity = row.quantity if row.quantity is not None else 1
    return PantryItem(
        name=row.name or "",
        quantity=max(float(quantity), 0.0),
        unit=row.unit or "",
        category=row.category or "OTHER",
        expiry_date=row.expires_at,
    )


def to_recipe(row: RecipeRow) -> Recipe:
    return Recipe(
        id=row.id,
        name=row.name or "",
        image_url=row.image_url,
        difficulty=min(max(int(row.difficulty or 1), 1), 5),
        cooking_time=max(int(row.cooking_time_min or 0), 0),
        servings=row.servings,
        author=row.author,
        ingredients=tuple(
            RecipeIngredient(name=ing.name or "", quantity=ing.quantity, unit=ing.unit)
            for ing in row.ingredients
        ),
    )


def list_pantry_items(db: Session, user_id: int | None) -> list[PantryItem]:
    if user_id is None:
        raise Unauthorized("No authenticated user")
    try:
        rows = crud.list_ingredients(db, user_id)
    except SQLAlchemyError as exc:
        raise ServiceError("Failed to load ingredients") from exc
    return [_pantry_item(row) for row in rows]


def list_recipes(db: Session) -> list[Recipe]:
    try:
        rows = crud.list_recipes(db)
    except SQLAlchemyError as exc:
        raise ServiceError("Failed to load recipes") from exc
    return [to_recipe(row) for row in rows]
