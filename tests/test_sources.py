import datetime as dt

import pytest
from sqlalchemy.exc import OperationalError

from fridge import crud
from fridge.errors import ServiceError, Unauthorized
from fridge.models.ingredient import Ingredient
from fridge.models.recipe import Recipe, RecipeIngredient
from fridge.services import sources


def test_list_pantry_items_requires_user(test_app):
    _, SessionLocal = test_app
    with SessionLocal() as db:
        with pytest.raises(Unauthorized):
            sources.list_pantry_items(db, None)


def test_pantry_rows_are_coerced(test_app):
    _, SessionLocal = test_app
    with SessionLocal() as db:
        user = crud.get_or_create_user_by_email(db, "cook@example.com")
        db.add_all(
            [
                Ingredient(user_id=user.id, name="Egg", unit="pcs", quantity=None, expires_at=dt.date(2026, 1, 2)),
                Ingredient(user_id=user.id, name="milk", unit="ml", quantity=-3),
            ]
        )
        db.commit()

        items = sources.list_pantry_items(db, user.id)

    by_name = {i.name: i for i in items}
    assert by_name["Egg"].quantity == 1
    assert by_name["Egg"].expiry_date == dt.date(2026, 1, 2)
    assert by_name["milk"].quantity == 0


def test_recipe_rows_are_clamped(test_app):
    _, SessionLocal = test_app
    with SessionLocal() as db:
        row = Recipe(slug="odd", name="Odd", difficulty=9, cooking_time_min=-5)
        row.ingredients = [RecipeIngredient(position=0, name="salt")]
        db.add(row)
        db.commit()

        recipes = sources.list_recipes(db)

    assert recipes[0].difficulty == 5
    assert recipes[0].cooking_time == 0
    assert recipes[0].ingredients[0].name == "salt"


def test_storage_failure_becomes_service_error(test_app, monkeypatch):
    _, SessionLocal = test_app

    def boom(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(crud, "list_recipes", boom)
    monkeypatch.setattr(crud, "list_ingredients", boom)

    with SessionLocal() as db:
        with pytest.raises(ServiceError):
            sources.list_recipes(db)
        with pytest.raises(ServiceError):
            sources.list_pantry_items(db, 1)


def test_recommended_maps_storage_failure_to_500(client, auth_headers, monkeypatch):
    def boom(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(crud, "list_recipes", boom)

    resp = client.get("/recipes/recommended", headers=auth_headers)
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Server error"}


def test_names_are_not_normalized(test_app):
    _, SessionLocal = test_app
    with SessionLocal() as db:
        user = crud.get_or_create_user_by_email(db, "legacy@example.com")
        db.add(Ingredient(user_id=user.id, name=" Egg ", unit="pcs", quantity=2))
        row = Recipe(slug="omelette", name="Omelette")
        row.ingredients = [RecipeIngredient(position=0, name="egg ")]
        db.add(row)
        db.commit()

        pantry = sources.list_pantry_items(db, user.id)
        recipes = sources.list_recipes(db)

    assert [i.name for i in pantry] == [" Egg "]
    assert recipes[0].ingredients[0].name == "egg "
