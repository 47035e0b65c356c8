"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service can be started without any configuration at all.  Tests and
embedding applications may build their own ``Settings`` instance and
pass it to ``create_app`` instead of relying on the module level
``settings`` object.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Recipe Store API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG", "false"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Address used by ``run.py`` and ``run_server`` when none is given.
    # A port of 0 lets the operating system pick a free port.
    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))

    # Prefix under which the v1 routers are mounted.  Empty by default so
    # that the recipe collection lives at ``/recipes``.
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", ""))

    # Populate the store with a couple of sample recipes on startup.
    seed_recipes: bool = field(default_factory=lambda: _env_flag("SEED_RECIPES", "true"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
