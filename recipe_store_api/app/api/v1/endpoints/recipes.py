"""
Recipe endpoints for API v1.

These routes expose a CRUD API over the in-memory recipe collection:
list, retrieve, create, replace and delete.  Request bodies are
validated by pydantic before any handler runs; failures are reported
as HTTP 400 by the handlers in ``core.exceptions``.  Unknown ids are
reported as HTTP 404 for retrieve, replace and delete alike.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from recipe_store_api.app.api.deps import get_recipe_store
from recipe_store_api.app.schemas.recipe import RecipeCreate, RecipeRead, RecipeUpdate
from recipe_store_api.app.services.recipe_service import RecipeStore

router = APIRouter()


@router.get("", response_model=List[RecipeRead])
async def list_recipes(store: RecipeStore = Depends(get_recipe_store)) -> List[RecipeRead]:
    """Return all recipes in the order they were created."""
    return store.list_recipes()


@router.get("/{recipe_id}", response_model=RecipeRead)
async def get_recipe(recipe_id: str, store: RecipeStore = Depends(get_recipe_store)) -> RecipeRead:
    """Retrieve a single recipe by id."""
    return store.get_recipe(recipe_id)


@router.post("", response_model=RecipeRead, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    recipe_in: RecipeCreate,
    store: RecipeStore = Depends(get_recipe_store),
) -> RecipeRead:
    """Create a new recipe.

    The server assigns the id; the full record, id included, is
    returned.
    """
    return store.create_recipe(recipe_in)


@router.put("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_recipe(
    recipe_id: str,
    recipe_in: RecipeUpdate,
    store: RecipeStore = Depends(get_recipe_store),
) -> None:
    """Replace name and ingredients of an existing recipe.

    The body must repeat the id from the path.  Responds with an empty
    body on success.
    """
    store.update_recipe(recipe_id, recipe_in)
    return None


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(recipe_id: str, store: RecipeStore = Depends(get_recipe_store)) -> None:
    """Delete a recipe."""
    store.delete_recipe(recipe_id)
    return None
