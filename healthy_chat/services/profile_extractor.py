# healthy_chat/services/profile_extractor.py
"""
Heuristic profile extraction from the user's side of a conversation.

The profile is never stored: it is recomputed from the full, ordered list of
user messages on every request, so the same history always yields the same
profile.

Per message (lower-cased) the checks run in this order:
  1. goal        first detection across the whole history wins
  2. allergies   only scanned behind a trigger ("sans ", "allergie", "intolérant");
                 the set only ever grows
  3. time        regex on "<n> <unit>", hours converted to minutes, last match wins
  4. PREFERENCE_RULES, top to bottom; every matching rule writes its field,
     so within a message the last matching rule wins, and across messages
     the latest message wins
"""
import logging
import re
from typing import Iterable, List, Optional, Tuple

from healthy_chat.models.profile import (
    ALLERGEN_VOCABULARY,
    Goal,
    ProfileObservation,
    UserProfile,
)

logger = logging.getLogger(__name__)

GOAL_RULES: List[Tuple[Tuple[str, ...], Goal]] = [
    (("perdre", "maigrir", "perte de poids"), "weight_loss"),
    (("muscle", "prise de masse", "prendre du muscle"), "muscle_gain"),
]

ALLERGY_TRIGGERS = ("sans ", "allergie", "intolérant")

TIME_PATTERN = re.compile(r"(\d{1,3})\s*(minutes|min|mn|heure|heures|h)")
HOUR_UNITS = {"heure", "heures", "h"}

# (keywords, field, value). "moyen" appears twice on purpose: it sets the
# cooking level and then the budget. "pas cher" also contains "cher", so a
# message saying "pas cher" ends on budget=high.
PREFERENCE_RULES: List[Tuple[Tuple[str, ...], str, str]] = [
    (("débutant", "facile", "simple"), "cooking_level", "beginner"),
    (("moyen", "intermédiaire"), "cooking_level", "intermediate"),
    (("avancé", "difficile", "expert"), "cooking_level", "advanced"),
    (("pas cher", "bon marché", "économique", "cheap"), "budget", "low"),
    (("moyen", "normal"), "budget", "medium"),
    (("cher", "lux"), "budget", "high"),
]


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(k in text for k in keywords)


def detect_goal(message: str) -> Optional[Goal]:
    """Return the goal stated in a message, or None if it states none."""
    m = (message or "").lower()
    for keywords, goal in GOAL_RULES:
        if _contains_any(m, keywords):
            return goal
    return None


def detect_allergies(message: str) -> List[str]:
    m = (message or "").lower()
    if not _contains_any(m, ALLERGY_TRIGGERS):
        return []
    return [a for a in ALLERGEN_VOCABULARY if a in m]


def detect_time_minutes(message: str) -> Optional[int]:
    m = (message or "").lower()
    match = TIME_PATTERN.search(m)
    if not match:
        return None
    try:
        value = int(match.group(1))
    except ValueError:
        logger.debug("Ignoring unparsable time expression %r", match.group(0))
        return None
    if match.group(2) in HOUR_UNITS:
        value *= 60
    return value


def apply_preference_rules(message: str, obs: ProfileObservation) -> None:
    m = (message or "").lower()
    for keywords, field, value in PREFERENCE_RULES:
        if _contains_any(m, keywords):
            setattr(obs, field, value)


def observe(messages: Iterable[str]) -> ProfileObservation:
    """Scan user messages oldest first and collect what they explicitly state."""
    obs = ProfileObservation()
    for message in messages:
        if not message or not message.strip():
            continue

        if obs.goal is None:
            obs.goal = detect_goal(message)

        for allergen in detect_allergies(message):
            if allergen not in obs.allergies:
                obs.allergies.append(allergen)

        minutes = detect_time_minutes(message)
        if minutes is not None:
            obs.time_available_minutes = minutes

        apply_preference_rules(message, obs)
    return obs


def extract(messages: Iterable[str]) -> UserProfile:
    """Build the full profile for a conversation, defaults included."""
    return UserProfile.from_observation(observe(messages))
