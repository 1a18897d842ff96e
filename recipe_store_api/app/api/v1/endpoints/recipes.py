"""
Recipe endpoints for API v1.

These routes expose the recipe collection over HTTP:

* ``GET /recipes`` lists every stored recipe;
* ``POST /recipes`` creates a recipe and returns it with its new id;
* ``PUT /recipes/{recipe_id}`` replaces name and ingredients;
* ``DELETE /recipes/{recipe_id}`` removes a recipe.

Handlers do no business logic of their own; validation failures and
missing records are raised by the schemas and ``RecipeStore`` and
rendered by the exception handlers registered in ``main``.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from recipe_store_api.app.schemas.recipe import RecipeCreate, RecipeRead, RecipeUpdate
from recipe_store_api.app.services.recipe_service import RecipeStore

router = APIRouter()


def get_recipe_store(request: Request) -> RecipeStore:
    """Return the store owned by the running application."""
    return request.app.state.recipes


@router.get("", response_model=List[RecipeRead])
@router.get("/", response_model=List[RecipeRead], include_in_schema=False)
async def list_recipes(store: RecipeStore = Depends(get_recipe_store)) -> List[RecipeRead]:
    """Return all recipes in insertion order."""
    return store.list()


@router.post("", response_model=RecipeRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=RecipeRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_recipe(
    recipe_in: RecipeCreate,
    store: RecipeStore = Depends(get_recipe_store),
) -> RecipeRead:
    """Create a new recipe.

    Returns HTTP 400 naming the field if ``name`` or ``ingredients``
    is missing.
    """
    return store.create(recipe_in)


@router.put("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def replace_recipe(
    recipe_id: str,
    recipe_in: RecipeUpdate,
    store: RecipeStore = Depends(get_recipe_store),
) -> None:
    """Replace an existing recipe.

    The body ``id`` must equal ``recipe_id`` (HTTP 400 otherwise).
    Returns HTTP 404 if the recipe is not found.
    """
    store.replace(recipe_id, recipe_in)
    return None


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(
    recipe_id: str,
    store: RecipeStore = Depends(get_recipe_store),
) -> None:
    """Delete a recipe.

    Always responds with HTTP 204, whether or not the recipe existed.
    """
    store.delete(recipe_id)
    return None
