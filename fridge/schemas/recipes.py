from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class RecipeIngredientSeed(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    quantity: float | None = Field(default=None, ge=0)
    unit: str | None = Field(default=None, max_length=20)

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v


class RecipeSeed(BaseModel):
    """One record of the recipe catalog file."""

    slug: str = Field(min_length=1, max_length=120)
    name: str = Field(min_length=1, max_length=200)
    image_url: str | None = Field(default=None, max_length=500)
    difficulty: int = Field(default=1, ge=1, le=5)
    cooking_time: int = Field(default=0, ge=0)
    servings: int | None = Field(default=None, ge=1)
    author: str | None = Field(default=None, max_length=120)
    ingredients: list[RecipeIngredientSeed] = Field(default_factory=list)

    @field_validator("slug")
    @classmethod
    def _slug(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("slug must not be empty")
        return v


class RecipeIngredientOut(BaseModel):
    name: str
    quantity: float | None = None
    unit: str | None = None


class RecipeOut(BaseModel):
    id: int
    name: str
    image_url: str | None
    difficulty: int
    difficulty_label: str
    cooking_time: int
    servings: int | None
    author: str | None
    ingredients: list[RecipeIngredientOut]


class BadgeOut(BaseModel):
    label: str
    severity: str


class AvailabilityOut(BaseModel):
    rank: int
    recipe: RecipeOut
    available_count: int
    total_count: int
    percentage: int
    missing_ingredients: list[RecipeIngredientOut]
    badge: BadgeOut
