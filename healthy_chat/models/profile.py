# healthy_chat/models/profile.py
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

Goal = Literal["weight_loss", "muscle_gain", "healthy"]
CookingLevel = Literal["beginner", "intermediate", "advanced"]
Budget = Literal["low", "medium", "high"]

ALLERGEN_VOCABULARY = [
    "gluten",
    "lactose",
    "lait",
    "noix",
    "arachide",
    "oeuf",
    "soja",
    "poisson",
    "crustacé",
]

DEFAULT_GOAL: Goal = "healthy"
DEFAULT_TIME_MINUTES = 30
DEFAULT_COOKING_LEVEL: CookingLevel = "beginner"
DEFAULT_BUDGET: Budget = "medium"


class ProfileObservation(BaseModel):
    """Fields the conversation actually stated, before any default is applied."""
    goal: Optional[Goal] = None
    allergies: List[str] = Field(default_factory=list)
    time_available_minutes: Optional[int] = None
    cooking_level: Optional[CookingLevel] = None
    budget: Optional[Budget] = None


class UserProfile(BaseModel):
    goal: Goal = DEFAULT_GOAL
    # Insertion-ordered, no duplicates
    allergies: List[str] = Field(default_factory=list, description="Allergens to exclude")
    time_available_minutes: Optional[int] = Field(DEFAULT_TIME_MINUTES, description="Max preparation time")
    cooking_level: CookingLevel = DEFAULT_COOKING_LEVEL
    budget: Budget = DEFAULT_BUDGET

    @classmethod
    def from_observation(cls, obs: ProfileObservation) -> "UserProfile":
        return cls(
            goal=obs.goal or DEFAULT_GOAL,
            allergies=list(obs.allergies),
            time_available_minutes=(
                obs.time_available_minutes
                if obs.time_available_minutes is not None
                else DEFAULT_TIME_MINUTES
            ),
            cooking_level=obs.cooking_level or DEFAULT_COOKING_LEVEL,
            budget=obs.budget or DEFAULT_BUDGET,
        )
