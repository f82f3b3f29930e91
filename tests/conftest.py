import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fridge import crud
from fridge.db import get_db
from fridge.main import create_app
from fridge.models.base import Base
from fridge.rate_limit import reset_rate_limiter
from fridge.schemas.recipes import RecipeSeed
from fridge.settings import settings


@pytest.fixture(autouse=True)
def _fresh_rate_limiter():
    reset_rate_limiter()
    yield
    reset_rate_limiter()


@pytest.fixture()
def test_app():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    Base.metadata.create_all(engine)

    app = create_app()

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return app, TestingSessionLocal


@pytest.fixture()
def client(test_app):
    app, _ = test_app
    return TestClient(app)


@pytest.fixture()
def auth_headers(test_app):
    app, TestingSessionLocal = test_app
    settings.API_KEY_SECRET = "test-secret"
    settings.API_KEY = None
    with TestingSessionLocal() as db:
        user = crud.get_or_create_user_by_email(db, email="test@example.com")
        token = crud.rotate_user_api_key(db, user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def seed_catalog(test_app):
    """Insert recipes given as (name, [ingredient names]) in catalog order."""
    _, TestingSessionLocal = test_app

    def _seed(*recipes):
        with TestingSessionLocal() as db:
            for idx, (name, ingredients) in enumerate(recipes):
                crud.upsert_recipe(
                    db,
                    RecipeSeed(
                        slug=f"recipe-{idx}",
                        name=name,
                        difficulty=2,
                        cooking_time=15,
                        ingredients=[{"name": n} for n in ingredients],
                    ),
                )

    return _seed
