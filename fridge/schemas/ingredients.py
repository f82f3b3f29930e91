from __future__ import annotations

import datetime as dt
from pydantic import BaseModel, Field, field_validator, model_validator

from fridge.models.ingredient import INGREDIENT_CATEGORIES


def _validate_category(value: str | None) -> str | None:
    if value is None:
        return None
    v = value.strip().upper()
    if v not in INGREDIENT_CATEGORIES:
        raise ValueError(f"category must be one of: {list(INGREDIENT_CATEGORIES)}")
    return v


def _validate_text(value: str | None, field_name: str) -> str | None:
    if value is None:
        return None
    v = value.strip()
    if not v:
        raise ValueError(f"{field_name} must not be empty")
    return v


def _not_null(value: str | None, field_name: str) -> str:
    # Only runs for fields present in the payload; omitted fields keep their default.
    if value is None:
        raise ValueError(f"{field_name} must not be null")
    return value


class IngredientCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    category: str = Field(description="VEGETABLE|MEAT|DAIRY|SEASONING|OTHER")
    quantity: float = Field(gt=0)
    unit: str = Field(min_length=1, max_length=20)
    purchase_date: dt.date | None = None
    expiry_date: dt.date | None = None

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return _validate_text(v, "name")

    @field_validator("unit")
    @classmethod
    def _unit(cls, v: str) -> str:
        return _validate_text(v, "unit")

    @field_validator("category")
    @classmethod
    def _category(cls, v: str) -> str:
        return _validate_category(v)

    @model_validator(mode="after")
    def _validate_dates(self) -> "IngredientCreate":
        if self.purchase_date and self.expiry_date and self.expiry_date < self.purchase_date:
            raise ValueError("expiry_date must not be before purchase_date")
        return self


class IngredientUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    category: str | None = None
    quantity: float | None = Field(default=None, ge=0)
    unit: str | None = Field(default=None, min_length=1, max_length=20)
    purchase_date: dt.date | None = None
    expiry_date: dt.date | None = None

    @field_validator("name")
    @classmethod
    def _name(cls, v: str | None) -> str:
        return _validate_text(_not_null(v, "name"), "name")

    @field_validator("unit")
    @classmethod
    def _unit(cls, v: str | None) -> str:
        return _validate_text(_not_null(v, "unit"), "unit")

    @field_validator("category")
    @classmethod
    def _category(cls, v: str | None) -> str:
        return _validate_category(_not_null(v, "category"))


class IngredientOut(BaseModel):
    id: int
    name: str
    category: str
    quantity: float
    unit: str
    purchase_date: str | None
    expiry_date: str | None
    days_left: int | None


class IngredientList(BaseModel):
    items: list[IngredientOut]
