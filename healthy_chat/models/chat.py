# healthy_chat/models/chat.py
from datetime import datetime
from typing import List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from healthy_chat.models.profile import UserProfile
from healthy_chat.models.recipe import DailyPlan, RecipeCandidate, RecipeSummary

Role = Literal["system", "user", "assistant"]


class ConversationMessage(BaseModel):
    role: Role
    content: str
    created_at: datetime


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    context_id: Optional[Union[int, str]] = Field(None, alias="contextId")
    weekly: bool = False


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reply: str
    context_id: int = Field(..., alias="contextId")
    profile: UserProfile
    suggestions: List[RecipeSummary]
    weekly: Optional[bool] = None
    days: Optional[List[DailyPlan]] = None


class PlanRequest(BaseModel):
    messages: List[str] = Field(default_factory=list, description="User messages, oldest first")
    weekly: bool = False
    max_suggestions: int = Field(3, ge=1, le=20)


class SeedRequest(BaseModel):
    recipes: List[RecipeCandidate]
