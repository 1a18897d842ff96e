"""
Pydantic models for recipe data.

``RecipeBase`` holds the fields a client supplies; ``RecipeCreate`` is
the body of ``POST /recipes`` and ``RecipeUpdate`` the body of
``PUT /recipes/{id}``, which additionally repeats the id.  ``RecipeRead``
is the only shape ever returned to clients.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator


class RecipeBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["hot tea"])
    ingredients: List[str] = Field(..., examples=[["tea bag", "hot water", "honey"]])

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class RecipeCreate(RecipeBase):
    """Schema for creating a recipe.

    Any ``id`` sent by the client is ignored; identifiers are always
    assigned by the service.
    """
    pass


class RecipeUpdate(RecipeBase):
    """Schema for replacing a recipe.

    The ``id`` must repeat the identifier from the request path.
    """

    id: str = Field(..., examples=["3f2b8c9e-5d4a-4e1f-9b7c-2a6d8e0f1c3b"])


class RecipeRead(BaseModel):
    """Schema for reading a recipe from the API."""

    id: str
    name: str
    ingredients: List[str]

    model_config = {
        "from_attributes": True,
    }
