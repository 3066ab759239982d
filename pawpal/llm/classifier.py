from __future__ import annotations

from pawpal.schemas import Mode

# Checked in order; the first mode with a matching keyword wins.
MODE_KEYWORDS: tuple[tuple[Mode, tuple[str, ...]], ...] = (
    ("EMERGENCY", ("bleeding", "unconscious", "accident", "seizure", "poison", "hit by car")),
    ("DIET", ("food", "diet", "eat", "treat")),
    ("GROOMING", ("bath", "groom", "hair", "brush", "nail")),
    ("BEHAVIOR", ("biting", "aggressive", "behavior", "barking", "scared")),
)

DEFAULT_MODE: Mode = "HEALTH"


def detect_mode(user_message: str) -> Mode:
    lowered = (user_message or "").lower()
    for mode, keywords in MODE_KEYWORDS:
        if any(word in lowered for word in keywords):
            return mode
    return DEFAULT_MODE
