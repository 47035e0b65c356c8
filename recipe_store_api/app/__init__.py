"""
Application package initializer.

The project is organised into a few small pieces: ``core`` holds
configuration, logging and the error taxonomy, ``schemas`` the
pydantic models, ``services`` the recipe store and ``api`` the
versioned routers that expose it over HTTP.
"""

from .main import app, create_app  # noqa: F401
