"""
MedInfer — Health utilities

Small presentation helpers around a Ranking.
"""

from typing import Iterable, Optional

from medinfer.rule_scorer import round_half_up
from medinfer.schemas import Ranking


HIGH_RISK_SYMPTOMS = frozenset({
    "chest_pain",
    "shortness_breath",
    "seizures",
    "confusion",
    "coughing_blood",
})

MODERATE_RISK_SYMPTOMS = frozenset({
    "fever",
    "severe_headache",
    "abdominal_pain",
})

MAX_RISK_SCORE = 10

TRIAGE_RECOMMENDATIONS = {
    "EMERGENCY": "Seek emergency care immediately.",
    "HIGH": "Seek medical attention within 24 hours.",
    "MEDIUM": "Schedule an appointment within a few days.",
    "LOW": "Monitor your symptoms and rest.",
}


def format_symptom_name(symptom_id: str) -> str:
    """shortness_breath -> Shortness Breath"""
    return " ".join(word[:1].upper() + word[1:] for word in symptom_id.split("_"))


def calculate_risk_score(symptoms: Iterable[str], age: Optional[int] = None) -> int:
    """
    Rough 0..10 risk score.

    Age adds 2 over 65 and 1 over 45; each high-risk symptom adds 3, each
    moderate one 2, any other 1.
    """
    score = 0

    if age is not None:
        if age > 65:
            score += 2
        elif age > 45:
            score += 1

    for symptom in symptoms:
        if symptom in HIGH_RISK_SYMPTOMS:
            score += 3
        elif symptom in MODERATE_RISK_SYMPTOMS:
            score += 2
        else:
            score += 1

    return min(score, MAX_RISK_SCORE)


def generate_health_summary(ranking: Optional[Ranking]) -> str:
    """One-paragraph summary of the primary prediction"""
    if ranking is None or not ranking.predictions:
        return (
            "Based on your symptoms, we recommend consulting with a "
            "healthcare provider for proper evaluation."
        )

    primary = ranking.primary
    percent = round_half_up(primary.probability * 100)
    recommendation = TRIAGE_RECOMMENDATIONS.get(primary.triage.upper(), "")
    specialist = primary.specialist
    if not specialist or specialist.startswith("Unknown"):
        specialist = "healthcare provider"

    parts = [f"Based on your symptoms, there's a {percent}% likelihood of {primary.disease_name}."]
    if recommendation:
        parts.append(recommendation)
    parts.append(f"Consider consulting with a {specialist}.")
    return " ".join(parts)
