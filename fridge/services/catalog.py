from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError
from sqlalchemy.orm import Session

from fridge import crud
from fridge.schemas.recipes import RecipeSeed


logger = logging.getLogger("fridge_catalog")


@dataclass
class SeedReport:
    loaded: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def read_catalog(path: str | Path) -> list[RecipeSeed]:
    """Parse a catalog file, dropping records that fail validation."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if isinstance(data, dict):
        data = data.get("recipes", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of recipes")

    seeds: list[RecipeSeed] = []
    for idx, record in enumerate(data):
        try:
            seeds.append(RecipeSeed.model_validate(record))
        except ValidationError as exc:
            logger.warning("Skipping recipe #%s in %s: %s", idx, path.name, exc.errors()[0].get("msg"))
    return seeds


def seed_recipes(db: Session, path: str | Path) -> SeedReport:
    report = SeedReport()
    seeds = read_catalog(path)
    seen: set[str] = set()
    for seed in seeds:
        if seed.slug in seen:
            logger.warning("Duplicate recipe slug %s, keeping the first", seed.slug)
            report.skipped.append(seed.slug)
            continue
        seen.add(seed.slug)
        crud.upsert_recipe(db, seed)
        report.loaded.append(seed.slug)
    logger.info("Recipe catalog seeded (loaded=%s, skipped=%s)", len(report.loaded), len(report.skipped))
    return report
