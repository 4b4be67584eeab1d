# healthy_chat/services/suggestion_service.py
from typing import List

from healthy_chat.models.profile import UserProfile
from healthy_chat.models.recipe import RecipeSummary
from healthy_chat.services.recipe_catalog import RecipeCatalog
from healthy_chat.services.recipe_selector import strict_filter

DEFAULT_MAX_SUGGESTIONS = 3
OVERSAMPLE_FACTOR = 3


def suggest(profile: UserProfile, max_results: int = DEFAULT_MAX_SUGGESTIONS, catalog: RecipeCatalog = None) -> List[RecipeSummary]:
    """Lowest-calorie recipes that respect the profile's allergies and time budget."""
    if catalog is None or max_results <= 0:
        return []

    ranked = sorted(strict_filter(profile, catalog), key=lambda r: r.calories)
    # Oversampled pool, left wider than needed so variety rules can be added later
    pool = ranked[: max_results * OVERSAMPLE_FACTOR]
    return [RecipeSummary.from_candidate(r) for r in pool[:max_results]]
