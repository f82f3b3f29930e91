from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from fridge import crud
from fridge.api.deps import get_current_user, require_api_key
from fridge.db import get_db
from fridge.errors import ServiceError, Unauthorized
from fridge.schemas.recipes import AvailabilityOut, BadgeOut, RecipeIngredientOut, RecipeOut
from fridge.services import sources
from fridge.services.availability import Recipe, RecipeIngredient, difficulty_label
from fridge.services.recommend import Recommendation, recommend_for_user

router = APIRouter(prefix="/recipes", tags=["recipes"], dependencies=[Depends(require_api_key)])

logger = logging.getLogger("fridge_api")


def _ingredient_out(ing: RecipeIngredient) -> RecipeIngredientOut:
    return RecipeIngredientOut(name=ing.name, quantity=ing.quantity, unit=ing.unit)


def recipe_out(recipe: Recipe) -> RecipeOut:
    return RecipeOut(
        id=recipe.id,
        name=recipe.name,
        image_url=recipe.image_url,
        difficulty=recipe.difficulty,
        difficulty_label=difficulty_label(recipe.difficulty),
        cooking_time=recipe.cooking_time,
        servings=recipe.servings,
        author=recipe.author,
        ingredients=[_ingredient_out(i) for i in recipe.ingredients],
    )


def availability_out(rec: Recommendation) -> AvailabilityOut:
    result = rec.result
    return AvailabilityOut(
        rank=rec.rank,
        recipe=recipe_out(result.recipe),
        available_count=result.available_count,
        total_count=result.total_count,
        percentage=result.percentage,
        missing_ingredients=[_ingredient_out(i) for i in result.missing_ingredients],
        badge=BadgeOut(label=rec.badge.label, severity=rec.badge.severity),
    )


@router.get("", response_model=list[RecipeOut])
def list_recipes(db: Session = Depends(get_db)):
    try:
        recipes = sources.list_recipes(db)
    except ServiceError:
        logger.exception("[GET /recipes] catalog unavailable")
        raise HTTPException(status_code=500, detail="Server error")
    return [recipe_out(r) for r in recipes]


@router.get("/recommended", response_model=list[AvailabilityOut])
def recommended(
    top_k: int | None = Query(default=None, ge=1, le=50),
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    try:
        recs = recommend_for_user(db, user.id, top_k=top_k)
    except Unauthorized:
        raise HTTPException(status_code=401, detail="Login required")
    except ServiceError:
        logger.exception("[GET /recipes/recommended] ranking failed")
        raise HTTPException(status_code=500, detail="Server error")
    return [availability_out(r) for r in recs]


@router.get("/{recipe_id}", response_model=RecipeOut)
def get_recipe(recipe_id: int, db: Session = Depends(get_db)):
    row = crud.get_recipe(db, recipe_id)
    if not row:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe_out(sources.to_recipe(row))
