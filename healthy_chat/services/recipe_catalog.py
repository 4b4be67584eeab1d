# healthy_chat/services/recipe_catalog.py
import json
import logging
import os
from typing import Any, Dict, Iterable, List, Optional

from healthy_chat.models.recipe import RecipeCandidate

logger = logging.getLogger(__name__)

RECIPES_KEY = "recipes"


class RecipeCatalog:
    """Read side of the recipe store. Subclasses only provide all()."""

    def all(self) -> List[RecipeCandidate]:
        raise NotImplementedError

    def query(
        self,
        exclude_ingredients: Iterable[str] = (),
        max_prep_minutes: Optional[int] = None,
    ) -> List[RecipeCandidate]:
        """
        Recipes whose ingredients text contains none of exclude_ingredients
        (case-insensitive) and, when max_prep_minutes is given, whose
        preparation time does not exceed it. Catalog order is preserved.
        """
        excluded = [e.lower() for e in exclude_ingredients if e]
        out: List[RecipeCandidate] = []
        for r in self.all():
            ingredients = (r.ingredients or "").lower()
            if any(e in ingredients for e in excluded):
                continue
            if max_prep_minutes is not None and r.prep_minutes > max_prep_minutes:
                continue
            out.append(r)
        return out


class InMemoryRecipeCatalog(RecipeCatalog):
    def __init__(self, recipes: Optional[Iterable[RecipeCandidate]] = None):
        self._recipes = list(recipes or [])

    def all(self) -> List[RecipeCandidate]:
        return list(self._recipes)


class RedisRecipeCatalog(RecipeCatalog):
    """Recipes kept as JSON documents in a single Redis hash keyed by id."""

    def __init__(self, redis_client, key: str = RECIPES_KEY):
        self.redis = redis_client
        self.key = key

    def all(self) -> List[RecipeCandidate]:
        raw = self.redis.hgetall(self.key) or {}
        recipes = [RecipeCandidate.model_validate_json(v) for v in raw.values()]
        recipes.sort(key=lambda r: r.id)
        return recipes

    def upsert(self, recipes: Iterable[RecipeCandidate]) -> Dict[str, Any]:
        mapping = {str(r.id): r.model_dump_json() for r in recipes}
        if not mapping:
            return {"ok": True, "count": 0}
        self.redis.hset(self.key, mapping=mapping)
        logger.info("Upserted %d recipes into %s", len(mapping), self.key)
        return {"ok": True, "count": len(mapping)}


def load_recipes(path: str) -> List[RecipeCandidate]:
    """Read the JSON seed file: a list of recipe objects."""
    if not os.path.exists(path):
        logger.warning("Recipe seed file %s not found, starting with an empty catalog", path)
        return []
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("recipes", [])
    return [RecipeCandidate.model_validate(r) for r in data]


def load_catalog(path: str) -> InMemoryRecipeCatalog:
    return InMemoryRecipeCatalog(load_recipes(path))
