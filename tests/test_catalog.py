import json

from fridge import crud
from fridge.services.catalog import read_catalog, seed_recipes
from fridge.settings import DEFAULT_CATALOG


def test_bundled_catalog_is_valid():
    seeds = read_catalog(DEFAULT_CATALOG)
    assert seeds
    assert all(seed.ingredients for seed in seeds)
    assert len({seed.slug for seed in seeds}) == len(seeds)


def test_malformed_records_are_skipped(tmp_path, caplog):
    path = tmp_path / "recipes.json"
    path.write_text(
        json.dumps(
            [
                {"slug": "ok", "name": "Fine", "difficulty": 2, "ingredients": [{"name": "egg"}]},
                {"slug": "bad-difficulty", "name": "Too hard", "difficulty": 9},
                {"name": "no slug"},
                {"slug": "blank-ingredient", "name": "Blank", "ingredients": [{"name": "  "}]},
            ]
        ),
        encoding="utf-8",
    )

    with caplog.at_level("WARNING", logger="fridge_catalog"):
        seeds = read_catalog(path)

    assert [s.slug for s in seeds] == ["ok"]
    assert len([r for r in caplog.records if "Skipping recipe" in r.getMessage()]) == 3


def test_seed_is_idempotent_and_keeps_ingredient_order(test_app, tmp_path):
    _, SessionLocal = test_app
    path = tmp_path / "recipes.json"
    path.write_text(
        json.dumps(
            {
                "recipes": [
                    {"slug": "Stew", "name": "Stew", "ingredients": [{"name": "onion"}, {"name": "beef", "quantity": 300, "unit": "g"}]},
                    {"slug": "stew", "name": "Duplicate", "ingredients": []},
                ]
            }
        ),
        encoding="utf-8",
    )

    with SessionLocal() as db:
        first = seed_recipes(db, path)
        second = seed_recipes(db, path)
        recipes = crud.list_recipes(db)

        assert first.loaded == ["stew"]
        assert first.skipped == ["stew"]
        assert second.loaded == ["stew"]
        assert len(recipes) == 1
        assert recipes[0].name == "Stew"
        assert [i.name for i in recipes[0].ingredients] == ["onion", "beef"]
        assert recipes[0].ingredients[1].unit == "g"
