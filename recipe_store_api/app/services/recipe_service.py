"""
Business logic for recipes.

``RecipeStore`` keeps the recipe collection in memory, keyed by id and
ordered by insertion.  One store is created per application by
``create_app`` and handed to request handlers through a dependency, so
nothing outside this module touches the underlying dictionary.

Every public method holds the store's lock for its whole
read‑modify‑write, which keeps id generation collision free and
prevents lost updates when handlers run concurrently (e.g. in
uvicorn's thread pool or across several event loop tasks).
"""

import logging
import threading
import uuid
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.exceptions import NotFoundError, ValidationError
from ..schemas.recipe import RecipeCreate, RecipeRead, RecipeUpdate

logger = logging.getLogger(__name__)


SEED_RECIPES: Tuple[Tuple[str, List[str]], ...] = (
    ("boiled white rice", ["1 cup white rice", "2 cups water", "pinch of salt"]),
    ("milkshake", ["2 tbsp cocoa", "2 cups vanilla ice cream", "1 cup milk"]),
)


class RecipeStore:
    """In‑memory recipe collection.

    The store exposes four operations matching the HTTP surface
    (``list``, ``create``, ``replace`` and ``delete``) plus ``get`` for
    internal use.  Records are copied on the way in and out, so callers
    can never mutate stored state behind the lock.
    """

    def __init__(self) -> None:
        self._items: Dict[str, RecipeRead] = {}
        self._lock = threading.Lock()

    @classmethod
    def with_seed(cls, recipes: Iterable[Tuple[str, List[str]]] = SEED_RECIPES) -> "RecipeStore":
        """Return a store pre‑populated with ``recipes``."""
        store = cls()
        for name, ingredients in recipes:
            store.create(RecipeCreate(name=name, ingredients=list(ingredients)))
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, recipe_id: object) -> bool:
        with self._lock:
            return recipe_id in self._items

    def list(self) -> List[RecipeRead]:
        with self._lock:
            return [recipe.model_copy(deep=True) for recipe in self._items.values()]

    def get(self, recipe_id: str) -> RecipeRead:
        with self._lock:
            recipe = self._items.get(recipe_id)
            if recipe is None:
                raise NotFoundError(f"Recipe `{recipe_id}` not found", field="id")
            return recipe.model_copy(deep=True)

    def create(self, data: RecipeCreate) -> RecipeRead:
        """Store a new recipe under a freshly generated id and return it."""
        with self._lock:
            recipe_id = self._new_id()
            recipe = RecipeRead(id=recipe_id, name=data.name, ingredients=list(data.ingredients))
            self._items[recipe_id] = recipe
        logger.info("Created recipe %s (%s)", recipe_id, data.name)
        return recipe.model_copy(deep=True)

    def replace(self, recipe_id: str, data: RecipeUpdate) -> RecipeRead:
        """Replace name and ingredients of an existing recipe.

        Raises ``ValidationError`` when the body id does not match
        ``recipe_id`` and ``NotFoundError`` when no such recipe exists.
        The collection is left untouched in both cases.
        """
        if data.id != recipe_id:
            raise ValidationError(
                f"Request path id `{recipe_id}` and request body `id` `{data.id}` must match",
                field="id",
            )
        with self._lock:
            if recipe_id not in self._items:
                raise NotFoundError(f"Recipe `{recipe_id}` not found", field="id")
            # Assigning to an existing key keeps the recipe's position.
            recipe = RecipeRead(id=recipe_id, name=data.name, ingredients=list(data.ingredients))
            self._items[recipe_id] = recipe
        logger.info("Updated recipe %s", recipe_id)
        return recipe.model_copy(deep=True)

    def delete(self, recipe_id: str) -> bool:
        """Remove a recipe if present.

        Returns ``True`` if a record was removed.  Deleting an unknown
        id is not an error.
        """
        with self._lock:
            removed: Optional[RecipeRead] = self._items.pop(recipe_id, None)
        if removed is not None:
            logger.info("Deleted recipe %s", recipe_id)
        else:
            logger.info("Delete of unknown recipe %s ignored", recipe_id)
        return removed is not None

    def _new_id(self) -> str:
        # Caller holds the lock.
        while True:
            recipe_id = str(uuid.uuid4())
            if recipe_id not in self._items:
                return recipe_id
