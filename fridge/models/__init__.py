from .base import Base
from .ingredient import Ingredient
from .recipe import Recipe, RecipeIngredient
from .user import User

__all__ = [
    "Base",
    "User",
    "Ingredient",
    "Recipe",
    "RecipeIngredient",
]
