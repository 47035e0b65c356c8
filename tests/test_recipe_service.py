"""Tests for the in-memory recipe store (recipe_store_api.app.services)."""

from __future__ import annotations

import threading
from itertools import chain, repeat

import pytest

from recipe_store_api.app.core.exceptions import InvalidInputError, RecipeNotFoundError
from recipe_store_api.app.schemas.recipe import RecipeCreate, RecipeUpdate
from recipe_store_api.app.services.recipe_service import SEED_RECIPES, RecipeStore


@pytest.fixture()
def store() -> RecipeStore:
    return RecipeStore()


def _create(store: RecipeStore, name: str, *ingredients: str):
    return store.create_recipe(RecipeCreate(name=name, ingredients=list(ingredients)))


class TestCreate:
    def test_create_appends_and_assigns_id(self, store):
        recipe = _create(store, "toast", "bread", "butter")

        assert recipe.id
        assert recipe.name == "toast"
        assert recipe.ingredients == ["bread", "butter"]
        assert len(store) == 1
        assert store.list_recipes() == [recipe]

    def test_ids_are_unique(self, store):
        ids = {_create(store, f"dish {i}").id for i in range(50)}
        assert len(ids) == 50

    def test_colliding_id_is_redrawn(self):
        ids = chain(["same", "same", "other"], repeat("unused"))
        store = RecipeStore(id_factory=lambda: next(ids))

        first = _create(store, "one")
        second = _create(store, "two")

        assert first.id == "same"
        assert second.id == "other"

    def test_empty_ingredients_allowed(self, store):
        recipe = _create(store, "water")
        assert recipe.ingredients == []

    def test_insertion_order_preserved(self, store):
        names = ["a", "b", "c", "d"]
        for name in names:
            _create(store, name)
        assert [recipe.name for recipe in store.list_recipes()] == names


class TestRead:
    def test_get_recipe(self, store):
        created = _create(store, "soup", "water", "salt")
        assert store.get_recipe(created.id) == created

    def test_get_unknown_recipe(self, store):
        with pytest.raises(RecipeNotFoundError) as excinfo:
            store.get_recipe("missing")
        assert excinfo.value.status_code == 404
        assert excinfo.value.detail == "Recipe missing not found"

    def test_returned_records_are_copies(self, store):
        created = _create(store, "salad", "lettuce")
        listed = store.list_recipes()[0]
        listed.ingredients.append("croutons")
        created.ingredients.append("olives")

        assert store.get_recipe(created.id).ingredients == ["lettuce"]


class TestUpdate:
    def test_update_in_place(self, store):
        first = _create(store, "first", "x")
        second = _create(store, "second", "y")

        updated = store.update_recipe(
            first.id, RecipeUpdate(id=first.id, name="pancakes", ingredients=["eggs", "milk"])
        )

        assert updated.id == first.id
        assert [r.id for r in store.list_recipes()] == [first.id, second.id]
        assert store.get_recipe(first.id).name == "pancakes"
        assert store.get_recipe(first.id).ingredients == ["eggs", "milk"]

    def test_update_with_same_fields_keeps_length(self, store):
        recipe = _create(store, "rice", "rice", "water")
        store.update_recipe(recipe.id, RecipeUpdate(**recipe.model_dump()))
        assert len(store) == 1
        assert store.get_recipe(recipe.id) == recipe

    def test_update_id_mismatch(self, store):
        recipe = _create(store, "rice")
        with pytest.raises(InvalidInputError):
            store.update_recipe(recipe.id, RecipeUpdate(id="other", name="x", ingredients=[]))
        assert store.get_recipe(recipe.id).name == "rice"

    def test_update_unknown_id(self, store):
        _create(store, "rice")
        with pytest.raises(RecipeNotFoundError):
            store.update_recipe("missing", RecipeUpdate(id="missing", name="x", ingredients=[]))
        assert [r.name for r in store.list_recipes()] == ["rice"]


class TestDelete:
    def test_delete_removes_exactly_one(self, store):
        a = _create(store, "a")
        b = _create(store, "b")
        c = _create(store, "c")

        store.delete_recipe(b.id)

        assert len(store) == 2
        assert [r.id for r in store.list_recipes()] == [a.id, c.id]

    def test_delete_unknown_id(self, store):
        _create(store, "a")
        with pytest.raises(RecipeNotFoundError):
            store.delete_recipe("missing")
        assert len(store) == 1

    def test_delete_twice(self, store):
        recipe = _create(store, "a")
        store.delete_recipe(recipe.id)
        with pytest.raises(RecipeNotFoundError):
            store.delete_recipe(recipe.id)


def test_with_seed_data():
    store = RecipeStore.with_seed_data()
    recipes = store.list_recipes()
    assert [r.name for r in recipes] == [name for name, _ in SEED_RECIPES]
    assert recipes[0].ingredients == ["1 cup white rice", "2 cups water", "pinch of salt"]


def test_clear():
    store = RecipeStore.with_seed_data()
    store.clear()
    assert store.list_recipes() == []


def test_concurrent_creates_keep_every_record(store):
    def worker(n):
        for i in range(25):
            _create(store, f"{n}-{i}", "x")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    recipes = store.list_recipes()
    assert len(recipes) == 200
    assert len({r.id for r in recipes}) == 200
    assert all(r.ingredients == ["x"] for r in recipes)
