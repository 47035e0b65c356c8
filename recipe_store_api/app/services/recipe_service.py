"""
Service layer for recipes.

``RecipeStore`` owns an ordered, in-memory collection of recipes.  An
instance is created when the application starts and discarded when it
stops; nothing is persisted.  Handlers receive the store through
dependency injection rather than importing a module level collection,
so every application (and every test) works on its own store.

All operations, reads included, run under a single lock.  A listing
therefore never observes a half applied create, replace or delete.
Records leave the store only as ``RecipeRead`` copies.
"""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from recipe_store_api.app.core.exceptions import InvalidInputError, RecipeNotFoundError
from recipe_store_api.app.schemas.recipe import RecipeCreate, RecipeRead, RecipeUpdate


logger = logging.getLogger(__name__)


# Sample recipes loaded on startup when ``Settings.seed_recipes`` is set.
SEED_RECIPES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("boiled white rice", ("1 cup white rice", "2 cups water", "pinch of salt")),
    ("milkshake", ("2 tbsp cocoa", "2 cups vanilla ice cream", "1 cup milk")),
)


def generate_recipe_id() -> str:
    return uuid.uuid4().hex


@dataclass
class _StoredRecipe:
    id: str
    name: str
    ingredients: List[str] = field(default_factory=list)


class RecipeStore:
    """In-memory ordered collection of recipes."""

    def __init__(self, id_factory: Callable[[], str] = generate_recipe_id) -> None:
        self._id_factory = id_factory
        self._lock = threading.Lock()
        self._recipes: List[_StoredRecipe] = []

    @classmethod
    def with_seed_data(cls, seed: Optional[Iterable[Tuple[str, Iterable[str]]]] = None) -> "RecipeStore":
        """Return a store pre-populated with ``seed`` (defaults to ``SEED_RECIPES``)."""
        store = cls()
        for name, ingredients in SEED_RECIPES if seed is None else seed:
            store.create_recipe(RecipeCreate(name=name, ingredients=list(ingredients)))
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._recipes)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def list_recipes(self) -> List[RecipeRead]:
        """Return every recipe in insertion order."""
        with self._lock:
            return [self._to_read(recipe) for recipe in self._recipes]

    def get_recipe(self, recipe_id: str) -> RecipeRead:
        """Return a single recipe or raise ``RecipeNotFoundError``."""
        with self._lock:
            return self._to_read(self._find(recipe_id))

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def create_recipe(self, data: RecipeCreate) -> RecipeRead:
        """Append a new recipe and return it with its generated id."""
        with self._lock:
            recipe = _StoredRecipe(
                id=self._new_id(),
                name=data.name,
                ingredients=list(data.ingredients),
            )
            self._recipes.append(recipe)
            logger.info("Created recipe %s (%s)", recipe.id, recipe.name)
            return self._to_read(recipe)

    def update_recipe(self, recipe_id: str, data: RecipeUpdate) -> RecipeRead:
        """Overwrite name and ingredients of an existing recipe.

        The recipe keeps its id and its position in the collection.
        ``data.id`` must match ``recipe_id`` exactly.
        """
        if data.id != recipe_id:
            raise InvalidInputError(
                f"Request path id ({recipe_id}) and request body id ({data.id}) must match"
            )
        with self._lock:
            recipe = self._find(recipe_id)
            recipe.name = data.name
            recipe.ingredients = list(data.ingredients)
            logger.info("Updated recipe %s", recipe_id)
            return self._to_read(recipe)

    def delete_recipe(self, recipe_id: str) -> None:
        """Remove a recipe; unknown ids raise ``RecipeNotFoundError``."""
        with self._lock:
            recipe = self._find(recipe_id)
            self._recipes.remove(recipe)
            logger.info("Deleted recipe %s", recipe_id)

    def clear(self) -> None:
        with self._lock:
            self._recipes.clear()

    # ------------------------------------------------------------------
    # Helpers (callers hold the lock)
    # ------------------------------------------------------------------
    def _find(self, recipe_id: str) -> _StoredRecipe:
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        raise RecipeNotFoundError(recipe_id)

    def _new_id(self) -> str:
        existing = {recipe.id for recipe in self._recipes}
        recipe_id = self._id_factory()
        while recipe_id in existing:
            recipe_id = self._id_factory()
        return recipe_id

    @staticmethod
    def _to_read(recipe: _StoredRecipe) -> RecipeRead:
        # Validation builds a fresh ingredients list, detached from the store.
        return RecipeRead.model_validate(recipe)
