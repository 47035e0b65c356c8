"""
Pydantic models for recipe data.

``RecipeBase`` holds the fields a client controls; ``RecipeCreate``
is the body of ``POST /recipes``, ``RecipeUpdate`` the body of
``PUT /recipes/{id}`` (which must repeat the id) and ``RecipeRead``
the representation returned to clients.

Fields are strict: a number is not accepted where a string is
expected, and ``ingredients`` must be a list of strings.  Unknown
keys are ignored, so a client supplied ``id`` in a create body has
no effect.
"""

from typing import List

from pydantic import BaseModel, Field, StrictStr


class RecipeBase(BaseModel):
    name: StrictStr = Field(..., min_length=1, examples=["Pasta carbonara"])
    ingredients: List[StrictStr] = Field(
        ...,
        examples=[["penne", "bacon", "eggs", "grated hard cheese"]],
    )


class RecipeCreate(RecipeBase):
    """Schema for creating a recipe."""
    pass


class RecipeUpdate(RecipeBase):
    """Schema for replacing a recipe.

    ``id`` must equal the id in the request path.
    """

    id: StrictStr = Field(..., min_length=1)


class RecipeRead(RecipeBase):
    """Schema for reading a recipe from the API."""

    id: str

    model_config = {
        "from_attributes": True,
    }
