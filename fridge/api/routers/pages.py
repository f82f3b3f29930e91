from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fridge import crud
from fridge.api.deps import get_current_user, require_api_key
from fridge.api.routers.ingredients import ingredient_out
from fridge.db import get_db
from fridge.errors import ServiceError, Unauthorized
from fridge.services.availability import difficulty_label
from fridge.services.recommend import recommend_for_user

router = APIRouter(prefix="/pages", tags=["pages"], dependencies=[Depends(require_api_key)])

templates_dir = (Path(__file__).resolve().parents[2] / "templates").resolve()
templates = Jinja2Templates(directory=str(templates_dir))
templates.env.globals["difficulty_label"] = difficulty_label

logger = logging.getLogger("fridge_api")


@router.get("/recipes", response_class=HTMLResponse)
def recipes_page(request: Request, db: Session = Depends(get_db), user=Depends(get_current_user)):
    try:
        recommendations = recommend_for_user(db, user.id)
    except Unauthorized:
        raise HTTPException(status_code=401, detail="Login required")
    except ServiceError:
        logger.exception("[GET /pages/recipes] ranking failed")
        raise HTTPException(status_code=500, detail="Server error")
    return templates.TemplateResponse(
        request,
        "recipes.html",
        {"recommendations": recommendations},
    )


@router.get("/fridge", response_class=HTMLResponse)
def fridge_page(request: Request, db: Session = Depends(get_db), user=Depends(get_current_user)):
    today = dt.date.today()
    try:
        rows = crud.list_ingredients(db, user.id)
    except SQLAlchemyError:
        logger.exception("[GET /pages/fridge] storage failure")
        db.rollback()
        raise HTTPException(status_code=500, detail="Server error")
    items = [ingredient_out(row, today) for row in rows]
    return templates.TemplateResponse(
        request,
        "fridge.html",
        {"items": items, "today": today.isoformat()},
    )
