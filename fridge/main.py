from fastapi import FastAPI

from fridge.api.routers.ingredients import router as ingredients_router
from fridge.api.routers.pages import router as pages_router
from fridge.api.routers.profile import router as profile_router
from fridge.api.routers.recipes import router as recipes_router


def create_app() -> FastAPI:
    app = FastAPI(title="Fridge Recipes API")

    app.include_router(ingredients_router)
    app.include_router(recipes_router)
    app.include_router(profile_router)
    app.include_router(pages_router)

    @app.get("/health")
    def health():
        return {"ok": True}

    return app
