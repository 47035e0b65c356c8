"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store's internal records so that the
API representation can evolve independently.
"""
