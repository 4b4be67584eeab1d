# healthy_chat/routes/recipe_routes.py
from fastapi import APIRouter, Depends

from healthy_chat.controllers.recipe_controller import RecipeController
from healthy_chat.dependencies import get_recipe_catalog
from healthy_chat.models.chat import PlanRequest, SeedRequest

router = APIRouter()


@router.post("/plan")
def plan(request: PlanRequest, catalog=Depends(get_recipe_catalog)):
    """Recommendations for a message list, without calling the model"""
    return RecipeController.plan(request, catalog)


@router.post("/seed")
def seed(request: SeedRequest, catalog=Depends(get_recipe_catalog)):
    return RecipeController.seed(request, catalog)
