"""
FastAPI dependencies shared by the v1 endpoints.
"""

from fastapi import Request

from recipe_store_api.app.services.recipe_service import RecipeStore


def get_recipe_store(request: Request) -> RecipeStore:
    """Return the store owned by the running application.

    The store is attached to ``app.state`` during startup (see
    ``main.lifespan``); a request arriving outside of that window is a
    wiring error and fails loudly.
    """
    store = getattr(request.app.state, "recipe_store", None)
    if store is None:
        raise RuntimeError("Recipe store is not initialised; was the application started?")
    return store
