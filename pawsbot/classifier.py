"""Deterministic keyword classifier: message -> category, urgency, confidence."""
from dataclasses import dataclass
from enum import Enum


class Category(str, Enum):
    EMERGENCY = "emergency"
    HEALTH = "health"
    BEHAVIOR = "behavior"
    NUTRITION = "nutrition"
    GENERAL = "general"


class Urgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass(frozen=True)
class Classification:
    category: Category
    urgency: Urgency
    confidence: float


# Case-insensitive substring match against the lower-cased message.
EMERGENCY_KEYWORDS = (
    "emergency", "urgent", "dying", "bleeding", "poison", "seizure",
    "unconscious", "choking", "accident", "can't breathe", "hit by car",
)
HEALTH_KEYWORDS = (
    "sick", "ill", "vomiting", "pain", "fever", "wound", "injured", "disease",
    "symptoms", "medicine", "hurt", "diarrhea", "limping", "lethargic", "blood", "cough",
)
BEHAVIOR_KEYWORDS = (
    "aggressive", "biting", "barking", "anxiety", "training", "behavior",
    "destructive", "scared", "socialization", "discipline",
)
NUTRITION_KEYWORDS = (
    "food", "feed", "diet", "appetite", "weight", "nutrition", "treats", "hungry",
)

URGENCY_BY_CATEGORY = {
    Category.EMERGENCY: Urgency.CRITICAL,
    Category.HEALTH: Urgency.HIGH,
    Category.BEHAVIOR: Urgency.MEDIUM,
    Category.NUTRITION: Urgency.LOW,
    Category.GENERAL: Urgency.LOW,
}

# Fixed scores; every specific category outranks GENERAL.
CONFIDENCE_BY_CATEGORY = {
    Category.EMERGENCY: 0.95,
    Category.HEALTH: 0.85,
    Category.BEHAVIOR: 0.80,
    Category.NUTRITION: 0.75,
    Category.GENERAL: 0.60,
}

# First match wins. EMERGENCY must stay first.
_RULES = (
    (Category.EMERGENCY, EMERGENCY_KEYWORDS),
    (Category.HEALTH, HEALTH_KEYWORDS),
    (Category.BEHAVIOR, BEHAVIOR_KEYWORDS),
    (Category.NUTRITION, NUTRITION_KEYWORDS),
)


def _normalize(message) -> str:
    if not message or not isinstance(message, str):
        return ""
    return message.lower()


def _result(category: Category) -> Classification:
    return Classification(
        category=category,
        urgency=URGENCY_BY_CATEGORY[category],
        confidence=CONFIDENCE_BY_CATEGORY[category],
    )


def classify(message: str) -> Classification:
    """Classify a user message. Never raises; unmatched or empty input is GENERAL."""
    text = _normalize(message)
    for category, keywords in _RULES:
        if any(kw in text for kw in keywords):
            return _result(category)
    return _result(Category.GENERAL)


def mentions_emergency(message: str) -> bool:
    """True when the raw message contains any emergency keyword."""
    text = _normalize(message)
    return any(kw in text for kw in EMERGENCY_KEYWORDS)
