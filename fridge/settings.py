from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_FILES = [PROJECT_ROOT / ".env", ".env"]
DEFAULT_CATALOG = Path(__file__).resolve().parent / "data" / "recipes.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILES, extra="ignore")

    # DB
    DATABASE_URL: str = "sqlite:///./data/fridge.db"

    # App
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # API
    API_KEY: str | None = None
    API_KEY_SECRET: str | None = None
    API_RATE_LIMIT_PER_MIN: int = 120
    API_RATE_WINDOW_SEC: int = 60
    REDIS_URL: str | None = None

    # Catalog
    RECIPE_CATALOG_PATH: str = str(DEFAULT_CATALOG)

    # Recommendations
    RECOMMEND_TOP_K: int = 3
    AVAILABILITY_FULL_PCT: int = 80
    AVAILABILITY_HALF_PCT: int = 50

    # Inventory
    EXPIRING_SOON_DAYS: int = 3


settings = Settings()
