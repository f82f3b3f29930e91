from __future__ import annotations

import datetime as dt

from sqlalchemy import select, and_
from sqlalchemy.orm import Session, selectinload

from fridge import security
from fridge.models.ingredient import Ingredient
from fridge.models.recipe import Recipe, RecipeIngredient
from fridge.models.user import User
from fridge.schemas.ingredients import IngredientCreate, IngredientUpdate
from fridge.schemas.recipes import RecipeSeed


# Users

def get_or_create_user_by_email(db: Session, email: str, display_name: str | None = None) -> User:
    email = email.strip().lower()
    user = db.execute(select(User).where(User.email == email)).scalar_one_or_none()
    if user:
        return user
    user = User(email=email, display_name=display_name)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def update_user_fields(db: Session, user_id: int, **fields) -> User | None:
    user = get_user(db, user_id)
    if not user:
        return None
    for k, v in fields.items():
        setattr(user, k, v)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def rotate_user_api_key(db: Session, user_id: int) -> str:
    user = get_user(db, user_id)
    if not user:
        raise ValueError(f"Unknown user: {user_id}")
    raw_key = security.generate_api_key()
    user.api_key_hash = security.hash_api_key(raw_key)
    user.api_key_prefix = security.api_key_prefix(raw_key)
    user.api_key_last_rotated_at = dt.datetime.utcnow()
    db.add(user)
    db.commit()
    return raw_key


def get_user_by_api_key(db: Session, raw_key: str) -> User | None:
    key_hash = security.hash_api_key(raw_key)
    return db.execute(select(User).where(User.api_key_hash == key_hash)).scalar_one_or_none()


# Ingredients

def list_ingredients(db: Session, user_id: int) -> list[Ingredient]:
    return list(
        db.execute(
            select(Ingredient)
            .where(Ingredient.user_id == user_id)
            .order_by(
                Ingredient.expires_at.asc().nulls_last(),
                Ingredient.created_at.desc(),
                Ingredient.id.desc(),
            )
        ).scalars()
    )


def list_expiring_ingredients(db: Session, user_id: int, today: dt.date, within_days: int) -> list[Ingredient]:
    horizon = today + dt.timedelta(days=within_days)
    return list(
        db.execute(
            select(Ingredient)
            .where(
                and_(
                    Ingredient.user_id == user_id,
                    Ingredient.expires_at.is_not(None),
                    Ingredient.expires_at <= horizon,
                )
            )
            .order_by(Ingredient.expires_at.asc(), Ingredient.id.asc())
        ).scalars()
    )


def get_ingredient(db: Session, user_id: int, ingredient_id: int) -> Ingredient | None:
    return db.execute(
        select(Ingredient).where(and_(Ingredient.id == ingredient_id, Ingredient.user_id == user_id))
    ).scalar_one_or_none()


def create_ingredient(db: Session, user_id: int, data: IngredientCreate) -> Ingredient:
    item = Ingredient(
        user_id=user_id,
        name=data.name.strip(),
        category=data.category,
        quantity=float(data.quantity),
        unit=data.unit.strip(),
        purchased_at=data.purchase_date,
        expires_at=data.expiry_date,
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def update_ingredient(db: Session, user_id: int, ingredient_id: int, patch: IngredientUpdate) -> Ingredient | None:
    """Apply a partial update. Raises ValueError when the merged dates are out of order."""
    item = get_ingredient(db, user_id, ingredient_id)
    if not item:
        return None
    data = patch.model_dump(exclude_unset=True)
    purchased = data.get("purchase_date", item.purchased_at)
    expires = data.get("expiry_date", item.expires_at)
    if purchased and expires and expires < purchased:
        raise ValueError("expiry_date must not be before purchase_date")
    renamed = {"purchase_date": "purchased_at", "expiry_date": "expires_at"}
    for k, v in data.items():
        setattr(item, renamed.get(k, k), v)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def delete_ingredient(db: Session, user_id: int, ingredient_id: int) -> bool:
    item = get_ingredient(db, user_id, ingredient_id)
    if not item:
        return False
    db.delete(item)
    db.commit()
    return True


# Recipes

def list_recipes(db: Session) -> list[Recipe]:
    return list(
        db.execute(
            select(Recipe).options(selectinload(Recipe.ingredients)).order_by(Recipe.id.asc())
        ).scalars()
    )


def get_recipe(db: Session, recipe_id: int) -> Recipe | None:
    return db.execute(
        select(Recipe).options(selectinload(Recipe.ingredients)).where(Recipe.id == recipe_id)
    ).scalar_one_or_none()


def upsert_recipe(db: Session, seed: RecipeSeed) -> Recipe:
    recipe = db.execute(select(Recipe).where(Recipe.slug == seed.slug)).scalar_one_or_none()
    if recipe is None:
        recipe = Recipe(slug=seed.slug)

    recipe.name = seed.name.strip()
    recipe.image_url = seed.image_url
    recipe.difficulty = seed.difficulty
    recipe.cooking_time_min = seed.cooking_time
    recipe.servings = seed.servings
    recipe.author = seed.author
    recipe.ingredients = [
        RecipeIngredient(position=pos, name=ing.name, quantity=ing.quantity, unit=ing.unit)
        for pos, ing in enumerate(seed.ingredients)
    ]
    db.add(recipe)
    db.commit()
    db.refresh(recipe)
    return recipe
