from __future__ import annotations

import argparse

from fridge.db import session_scope
from fridge.logging_utils import configure_logging
from fridge.services.catalog import seed_recipes
from fridge.settings import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Load the recipe catalog into the database.")
    parser.add_argument("path", nargs="?", default=settings.RECIPE_CATALOG_PATH)
    args = parser.parse_args()

    configure_logging(settings.LOG_LEVEL)
    with session_scope() as db:
        report = seed_recipes(db, args.path)
    print(f"Recipes loaded: {len(report.loaded)}, skipped: {len(report.skipped)}")


if __name__ == "__main__":
    main()
