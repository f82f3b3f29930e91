from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from fridge.services import sources
from fridge.services.availability import (
    AvailabilityBadge,
    AvailabilityResult,
    classify_availability,
    rank_recipes,
)
from fridge.settings import settings


@dataclass(frozen=True)
class Recommendation:
    rank: int
    result: AvailabilityResult
    badge: AvailabilityBadge


def recommend_for_user(db: Session, user_id: int | None, top_k: int | None = None) -> list[Recommendation]:
    """Rank the whole catalog against the user's current pantry.

    Always recomputed from fresh rows.
    """
    pantry = sources.list_pantry_items(db, user_id)
    recipes = sources.list_recipes(db)
    ranked = rank_recipes(recipes, pantry, top_k=settings.RECOMMEND_TOP_K if top_k is None else top_k)
    return [
        Recommendation(
            rank=idx,
            result=result,
            badge=classify_availability(
                result.percentage,
                full=settings.AVAILABILITY_FULL_PCT,
                half=settings.AVAILABILITY_HALF_PCT,
            ),
        )
        for idx, result in enumerate(ranked, start=1)
    ]
