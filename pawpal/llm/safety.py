from __future__ import annotations

# Raw substrings, not words: "mg" also trips on e.g. "omg".
BANNED_WORDS = ("mg", "tablet", "dose", "paracetamol", "ibuprofen", "aspirin", "tylenol")

SAFETY_ALERT = (
    "⚠️ SAFETY ALERT: For safety reasons, please consult a veterinarian before giving any medication. "
    "Would you like help finding a nearby vet?"
)


def contains_banned_term(text: str) -> bool:
    lowered = (text or "").lower()
    return any(word in lowered for word in BANNED_WORDS)


def safety_filter(text: str) -> str:
    if contains_banned_term(text):
        return SAFETY_ALERT
    return text
