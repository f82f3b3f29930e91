from __future__ import annotations

import argparse
from pathlib import Path

from alembic import command
from alembic.config import Config

from fridge.db import session_scope
from fridge.services.catalog import seed_recipes
from fridge.settings import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Migrate the database and load the recipe catalog.")
    parser.add_argument("--no-seed", action="store_true", help="Only run migrations")
    args = parser.parse_args()

    project_root = Path(__file__).resolve().parents[1]
    alembic_ini = project_root / "alembic.ini"
    if not alembic_ini.exists():
        raise RuntimeError(f"alembic.ini not found at: {alembic_ini}")

    cfg = Config(str(alembic_ini))
    cfg.set_main_option("script_location", str(project_root / "alembic"))
    command.upgrade(cfg, "head")
    print("DB migrated (alembic upgrade head).")

    if args.no_seed:
        return
    with session_scope() as db:
        report = seed_recipes(db, settings.RECIPE_CATALOG_PATH)
    print(f"Recipe catalog loaded ({len(report.loaded)} recipes).")


if __name__ == "__main__":
    main()
