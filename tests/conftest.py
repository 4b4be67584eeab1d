# tests/conftest.py
"""Shared fixtures for the assistant tests."""
import pytest

from healthy_chat.models.recipe import RecipeCandidate
from healthy_chat.services.recipe_catalog import InMemoryRecipeCatalog


class InMemoryRedis:
    """Just the redis-py commands the stores use, kept in dicts."""

    def __init__(self):
        self.strings = {}
        self.hashes = {}
        self.lists = {}

    def incr(self, key):
        self.strings[key] = int(self.strings.get(key, 0)) + 1
        return self.strings[key]

    def hset(self, key, field=None, value=None, mapping=None):
        h = self.hashes.setdefault(key, {})
        if field is not None:
            h[field] = value
        if mapping:
            h.update(mapping)
        return 1

    def hgetall(self, key):
        return dict(self.hashes.get(key, {}))

    def exists(self, key):
        return int(key in self.hashes or key in self.lists or key in self.strings)

    def rpush(self, key, *values):
        items = self.lists.setdefault(key, [])
        items.extend(values)
        return len(items)

    def lrange(self, key, start, end):
        items = self.lists.get(key, [])
        if end == -1:
            return list(items[start:])
        return list(items[start:end + 1])


@pytest.fixture
def fake_redis():
    return InMemoryRedis()


@pytest.fixture
def recipes():
    return [
        RecipeCandidate(id=1, title="Porridge", calories=380, prep_minutes=10, ingredients="avoine, lait, banane"),
        RecipeCandidate(id=2, title="Omelette", calories=320, prep_minutes=10, ingredients="oeuf, épinards"),
        RecipeCandidate(id=3, title="Salade de pois chiches", calories=480, prep_minutes=15, ingredients="pois chiches, tomate"),
        RecipeCandidate(id=4, title="Couscous", calories=650, prep_minutes=45, ingredients="semoule (gluten), légumes"),
        RecipeCandidate(id=5, title="Saumon au four", calories=680, prep_minutes=30, ingredients="poisson, patate douce"),
        RecipeCandidate(id=6, title="Pâtes au pesto", calories=720, prep_minutes=15, ingredients="pâtes (GLUTEN), basilic"),
        RecipeCandidate(id=7, title="Soupe de légumes", calories=180, prep_minutes=30, ingredients="carottes, poireau"),
    ]


@pytest.fixture
def catalog(recipes):
    return InMemoryRecipeCatalog(recipes)
