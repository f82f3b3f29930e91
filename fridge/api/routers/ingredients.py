from __future__ import annotations

import datetime as dt
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fridge import crud
from fridge.api.deps import get_current_user, require_api_key
from fridge.dates import days_left, ymd
from fridge.db import get_db
from fridge.models.ingredient import Ingredient
from fridge.schemas.ingredients import IngredientCreate, IngredientList, IngredientOut, IngredientUpdate
from fridge.settings import settings

router = APIRouter(prefix="/ingredients", tags=["ingredients"], dependencies=[Depends(require_api_key)])

logger = logging.getLogger("fridge_api")


def ingredient_out(item: Ingredient, today: dt.date) -> IngredientOut:
    return IngredientOut(
        id=item.id,
        name=item.name,
        category=item.category or "OTHER",
        quantity=item.quantity if item.quantity is not None else 1,
        unit=item.unit,
        purchase_date=ymd(item.purchased_at),
        expiry_date=ymd(item.expires_at),
        days_left=days_left(today, item.expires_at),
    )


def _server_error(db: Session, route: str) -> HTTPException:
    logger.exception("[%s] storage failure", route)
    db.rollback()
    return HTTPException(status_code=500, detail="Server error")


@router.get("", response_model=IngredientList)
def list_ingredients(db: Session = Depends(get_db), user=Depends(get_current_user)):
    try:
        rows = crud.list_ingredients(db, user.id)
    except SQLAlchemyError:
        raise _server_error(db, "GET /ingredients")
    today = dt.date.today()
    return IngredientList(items=[ingredient_out(r, today) for r in rows])


@router.post("", response_model=IngredientOut, status_code=201)
def create_ingredient(payload: IngredientCreate, db: Session = Depends(get_db), user=Depends(get_current_user)):
    try:
        created = crud.create_ingredient(db, user.id, payload)
    except SQLAlchemyError:
        raise _server_error(db, "POST /ingredients")
    logger.info("Ingredient %s created for user %s", created.id, user.id)
    return ingredient_out(created, dt.date.today())


@router.get("/expiring", response_model=IngredientList)
def list_expiring(
    days: int | None = Query(default=None, ge=0, le=365, description="Window in days"),
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    today = dt.date.today()
    window = settings.EXPIRING_SOON_DAYS if days is None else days
    try:
        rows = crud.list_expiring_ingredients(db, user.id, today, window)
    except SQLAlchemyError:
        raise _server_error(db, "GET /ingredients/expiring")
    return IngredientList(items=[ingredient_out(r, today) for r in rows])


@router.patch("/{ingredient_id}", response_model=IngredientOut)
def patch_ingredient(
    ingredient_id: int,
    payload: IngredientUpdate,
    db: Session = Depends(get_db),
    user=Depends(get_current_user),
):
    try:
        item = crud.update_ingredient(db, user.id, ingredient_id, payload)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except SQLAlchemyError:
        raise _server_error(db, "PATCH /ingredients")
    if not item:
        raise HTTPException(status_code=404, detail="Ingredient not found")
    return ingredient_out(item, dt.date.today())


@router.delete("/{ingredient_id}")
def delete_ingredient(ingredient_id: int, db: Session = Depends(get_db), user=Depends(get_current_user)):
    try:
        ok = crud.delete_ingredient(db, user.id, ingredient_id)
    except SQLAlchemyError:
        raise _server_error(db, "DELETE /ingredients")
    if not ok:
        raise HTTPException(status_code=404, detail="Ingredient not found")
    return {"ok": True}
