"""
Top‑level package for the Recipe Store API.

The web application lives under ``app``; ``server`` starts and stops
it as a unit, for example around an integration test run.
"""

__all__ = []
