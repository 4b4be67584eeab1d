# healthy_chat/services/meal_planner.py
import logging
from typing import Dict, Optional, Tuple

from healthy_chat.models.profile import UserProfile
from healthy_chat.models.recipe import DailyPlan, WeeklyPlan
from healthy_chat.services.recipe_catalog import RecipeCatalog
from healthy_chat.services.recipe_selector import filter_with_relaxation, select_closest

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7

GOAL_DAILY_CALORIES: Dict[str, int] = {
    "weight_loss": 1800,
    "muscle_gain": 2500,
}
DEFAULT_DAILY_CALORIES = 2200

BREAKFAST_SHARE = 0.25
LUNCH_SHARE = 0.40


def daily_calories_for_goal(goal: Optional[str]) -> int:
    return GOAL_DAILY_CALORIES.get(goal or "", DEFAULT_DAILY_CALORIES)


def split_daily_target(daily_target: int) -> Tuple[int, int, int]:
    """(breakfast, lunch, dinner) targets; dinner absorbs rounding so they sum to daily_target."""
    breakfast = int(daily_target * BREAKFAST_SHARE)
    lunch = int(daily_target * LUNCH_SHARE)
    dinner = daily_target - breakfast - lunch
    return breakfast, lunch, dinner


def build_daily_plan(profile: UserProfile, daily_target_calories: int, catalog: RecipeCatalog) -> DailyPlan:
    """
    Choose breakfast, lunch and dinner from one shared candidate pool.

    The pool is the allergy/time filtered catalog (time dropped if that leaves
    nothing), restricted to recipes with calories, sorted ascending. Each meal
    is picked independently, so a recipe may show up more than once.
    """
    breakfast_target, lunch_target, dinner_target = split_daily_target(daily_target_calories)

    candidates, tier = filter_with_relaxation(profile, catalog)
    pool = sorted((r for r in candidates if r.calories > 0), key=lambda r: r.calories)
    if not pool:
        logger.warning("Empty candidate pool for allergies=%s", profile.allergies)

    return DailyPlan(
        breakfast=select_closest(pool, breakfast_target),
        lunch=select_closest(pool, lunch_target),
        dinner=select_closest(pool, dinner_target),
        tier=tier,
    )


def build_weekly_plan(profile: UserProfile, catalog: RecipeCatalog) -> WeeklyPlan:
    daily_target = daily_calories_for_goal(profile.goal)
    days = [build_daily_plan(profile, daily_target, catalog) for _ in range(DAYS_PER_WEEK)]
    return WeeklyPlan(days=days)
