# healthy_chat/services/prompt.py
from typing import Dict, Iterable, List, Optional

from healthy_chat.models.chat import ConversationMessage
from healthy_chat.models.profile import ProfileObservation, UserProfile

PROFILE_FIELDS = ["goal", "allergies", "time", "cooking_level", "budget"]

FOLLOW_UP_QUESTIONS = {
    "goal": "Quel est ton objectif ? (perdre du poids / prendre du muscle / mode de vie sain)",
    "allergies": "As-tu des allergies ou aliments à éviter ? (par ex. sans gluten, sans lait)",
    "time": "Combien de minutes as-tu pour préparer chaque plat en général ?",
    "cooking_level": "Ton niveau en cuisine ? (débutant / moyen / avancé)",
    "budget": "Quel est ton budget ? (pas cher / moyen / élevé)",
}
DEFAULT_QUESTION = "Peux-tu préciser s'il te plaît ?"


def missing_fields(obs: ProfileObservation) -> List[str]:
    """Profile fields the user has not stated yet, in asking order."""
    missing = []
    if not obs.goal:
        missing.append("goal")
    if not obs.allergies:
        missing.append("allergies")
    if obs.time_available_minutes is None:
        missing.append("time")
    if not obs.cooking_level:
        missing.append("cooking_level")
    if not obs.budget:
        missing.append("budget")
    return missing


def follow_up_question(field: str) -> str:
    return FOLLOW_UP_QUESTIONS.get(field, DEFAULT_QUESTION)


def build_system_prompt(profile: UserProfile, obs: Optional[ProfileObservation] = None) -> str:
    allergies = ", ".join(profile.allergies) if profile.allergies else "aucune"
    time = (
        f"{profile.time_available_minutes} minutes"
        if profile.time_available_minutes is not None
        else "~30 minutes"
    )

    lines = [
        "Tu es l'assistant du site HealthyRecipes. Réponds toujours en français, avec un ton court et amical, "
        "et ajoute parfois des expressions tunisiennes familières.",
        f"Propose des recettes rapides et saines adaptées à l'utilisateur: allergies = {allergies}; "
        f"temps de préparation ≤ {time}; niveau = {profile.cooking_level}; budget = {profile.budget}.",
        "Lorsque c'est possible, fournis jusqu'à 3 suggestions de recettes avec titre, calories approximatives "
        "et temps de préparation, formatées clairement.",
        "Si l'utilisateur demande un plan hebdomadaire, fournis une réponse JSON structurée avec 7 jours, "
        "chaque jour ayant petit-déj/déjeuner/dîner et calories.",
        "Ne deviens pas trop verbeux; garde les réponses concises et utiles.",
        "Si une information manque (allergies, temps, budget ou niveau), pose une question courte et directe "
        "pour la récupérer.",
    ]

    if obs is not None:
        missing = missing_fields(obs)
        if missing:
            lines.append(f"Question à poser en priorité si pertinent: {follow_up_question(missing[0])}")

    return "\n".join(lines) + "\n"


def build_messages(
    profile: UserProfile,
    history: Iterable[ConversationMessage],
    window: int,
    obs: Optional[ProfileObservation] = None,
) -> List[Dict[str, str]]:
    """System prompt followed by the last `window` stored messages, oldest first."""
    messages = [{"role": "system", "content": build_system_prompt(profile, obs)}]
    ordered = sorted(history, key=lambda m: m.created_at)
    recent = ordered[-window:] if window > 0 else []
    for m in recent:
        messages.append({
            "role": "assistant" if m.role == "assistant" else "user",
            "content": m.content,
        })
    return messages
