"""Shared fixtures for the Recipe Store API tests."""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from recipe_store_api.app.core.config import Settings
from recipe_store_api.app.main import create_app


@pytest.fixture()
def empty_app() -> FastAPI:
    return create_app(Settings(seed_recipes=False))


@pytest.fixture()
def seeded_app() -> FastAPI:
    return create_app(Settings(seed_recipes=True))


@pytest.fixture()
def client(empty_app: FastAPI) -> Iterator[TestClient]:
    # Entering the client runs application startup, which creates the store.
    with TestClient(empty_app) as test_client:
        yield test_client


@pytest.fixture()
def seeded_client(seeded_app: FastAPI) -> Iterator[TestClient]:
    with TestClient(seeded_app) as test_client:
        yield test_client


@pytest.fixture()
def carbonara() -> dict:
    return {
        "name": "Pasta carbonara",
        "ingredients": ["penne", "bacon", "eggs", "grated hard cheese"],
    }


@pytest.fixture()
def pancakes() -> dict:
    return {
        "name": "pancakes",
        "ingredients": ["eggs", "milk", "pinch of salt", "sugar"],
    }
