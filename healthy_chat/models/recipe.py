# healthy_chat/models/recipe.py
from typing import List, Literal
from pydantic import BaseModel, Field

NO_MATCH_TITLE = "no match found"

FilterTier = Literal["strict", "relaxed"]


class RecipeCandidate(BaseModel):
    id: int
    title: str
    calories: int = 0
    prep_minutes: int = 0
    ingredients: str = Field("", description="Free ingredients text, only used for exclusion")


class RecipeSummary(BaseModel):
    id: int
    title: str
    calories: int
    prep_minutes: int

    @classmethod
    def from_candidate(cls, r: RecipeCandidate) -> "RecipeSummary":
        return cls(id=r.id, title=r.title, calories=r.calories, prep_minutes=r.prep_minutes)


class MealSelection(BaseModel):
    id: int
    title: str
    calories: int
    # False only for the "no match" sentinel, so a real recipe with id 0 stays distinguishable
    matched: bool = True

    @classmethod
    def no_match(cls) -> "MealSelection":
        return cls(id=0, title=NO_MATCH_TITLE, calories=0, matched=False)


class DailyPlan(BaseModel):
    breakfast: MealSelection
    lunch: MealSelection
    dinner: MealSelection
    tier: FilterTier = "strict"


class WeeklyPlan(BaseModel):
    days: List[DailyPlan] = Field(..., min_length=7, max_length=7)
