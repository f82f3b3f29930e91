from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fridge.api.deps import get_current_user, require_api_key
from fridge.db import get_db
from fridge.schemas.profile import ApiKeyOut, ProfileOut, ProfilePatch
from fridge import crud, security

router = APIRouter(prefix="/profile", tags=["profile"], dependencies=[Depends(require_api_key)])

logger = logging.getLogger("fridge_api")


@router.get("", response_model=ProfileOut)
def get_profile(user=Depends(get_current_user)):
    return user


@router.patch("", response_model=ProfileOut)
def patch_profile(payload: ProfilePatch, db: Session = Depends(get_db), user=Depends(get_current_user)):
    data = payload.model_dump(exclude_unset=True)
    user = crud.update_user_fields(db, user.id, **data)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/api-key", response_model=ApiKeyOut)
def rotate_api_key(db: Session = Depends(get_db), user=Depends(get_current_user)):
    raw_key = crud.rotate_user_api_key(db, user.id)
    logger.info("API key rotated for user %s", user.id)
    return ApiKeyOut(api_key=raw_key, prefix=security.api_key_prefix(raw_key))
