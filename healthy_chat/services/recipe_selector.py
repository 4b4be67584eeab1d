# healthy_chat/services/recipe_selector.py
import logging
from typing import Iterable, List, Tuple

from healthy_chat.models.profile import UserProfile
from healthy_chat.models.recipe import FilterTier, MealSelection, RecipeCandidate
from healthy_chat.services.recipe_catalog import RecipeCatalog

logger = logging.getLogger(__name__)


def select_closest(candidates: Iterable[RecipeCandidate], target_calories: int) -> MealSelection:
    """
    Pick the candidate whose calories are nearest to target_calories.
    Ties go to the first candidate in input order; no candidates gives the
    "no match" sentinel. No filtering happens here.
    """
    best = None
    best_distance = None
    for r in candidates:
        distance = abs(r.calories - target_calories)
        if best is None or distance < best_distance:
            best, best_distance = r, distance
    if best is None:
        return MealSelection.no_match()
    return MealSelection(id=best.id, title=best.title, calories=best.calories)


def strict_filter(profile: UserProfile, catalog: RecipeCatalog) -> List[RecipeCandidate]:
    """Allergy exclusion plus the time budget when the profile has one."""
    return catalog.query(
        exclude_ingredients=profile.allergies,
        max_prep_minutes=profile.time_available_minutes,
    )


def relaxed_filter(profile: UserProfile, catalog: RecipeCatalog) -> List[RecipeCandidate]:
    """Allergy exclusion only. Allergies are never relaxed."""
    return catalog.query(exclude_ingredients=profile.allergies)


def filter_with_relaxation(
    profile: UserProfile, catalog: RecipeCatalog
) -> Tuple[List[RecipeCandidate], FilterTier]:
    candidates = strict_filter(profile, catalog)
    if candidates or profile.time_available_minutes is None:
        return candidates, "strict"

    logger.info(
        "No recipe fits %s minutes, dropping the time constraint",
        profile.time_available_minutes,
    )
    return relaxed_filter(profile, catalog), "relaxed"
