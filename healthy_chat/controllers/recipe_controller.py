# healthy_chat/controllers/recipe_controller.py
from typing import Any, Dict

from fastapi import HTTPException

from healthy_chat.models.chat import PlanRequest, SeedRequest
from healthy_chat.services.meal_planner import build_weekly_plan
from healthy_chat.services.profile_extractor import extract
from healthy_chat.services.recipe_catalog import RecipeCatalog, RedisRecipeCatalog
from healthy_chat.services.suggestion_service import suggest


class RecipeController:

    @staticmethod
    def plan(request: PlanRequest, catalog: RecipeCatalog) -> Dict[str, Any]:
        """ Suggestions (and optionally a week of meals) from an explicit message list, no model call """
        profile = extract(request.messages)
        result = {
            "profile": profile.model_dump(),
            "suggestions": [s.model_dump() for s in suggest(profile, request.max_suggestions, catalog)],
        }
        if request.weekly:
            result["weekly"] = True
            result["days"] = [d.model_dump() for d in build_weekly_plan(profile, catalog).days]
        return result

    @staticmethod
    def seed(request: SeedRequest, catalog: RedisRecipeCatalog) -> Dict[str, Any]:
        if not request.recipes:
            raise HTTPException(status_code=400, detail="No recipes provided")
        return catalog.upsert(request.recipes)
