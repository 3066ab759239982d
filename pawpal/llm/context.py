"""Fixed-format text blocks describing the pet and the conversation so far."""

from __future__ import annotations

from typing import Iterable, Sequence

from pawpal.schemas import ConversationMessage, MedicalHistoryItem, PetProfile

NO_MEDICAL_HISTORY = "MEDICAL HISTORY: No major past issues recorded."


def format_pet_profile(pet: PetProfile) -> str:
    # Values are substituted as given; "32kg" renders as "32kg kg".
    return (
        "\nPET PROFILE:\n"
        f"Name: {pet.name}\n"
        f"Species: {pet.species}\n"
        f"Breed: {pet.breed}\n"
        f"Age: {pet.age} years\n"
        f"Weight: {pet.weight} kg\n"
        f"Gender: {pet.gender}\n"
        f"Activity Level: {pet.activity_level}\n"
    )


def format_medical_history(history: Sequence[MedicalHistoryItem] | None) -> str:
    if not history:
        return NO_MEDICAL_HISTORY
    lines = []
    for item in history:
        line = f"- {item.date}: {item.event}"
        if item.description:
            line += f" ({item.description})"
        lines.append(line)
    return "\nMEDICAL HISTORY:\n" + "\n".join(lines) + "\n"


def format_conversation_memory(memory: Sequence[ConversationMessage] | None) -> str:
    if not memory:
        return ""
    lines = [f"- {message}" for message in memory]
    return "\nRECENT CONVERSATION CONTEXT:\n" + "\n".join(lines) + "\n"


def format_conversation_turns(turns: Iterable[dict] | None) -> list[ConversationMessage]:
    """
    Turn chat-UI history ({"role", "content"} dicts) into memory lines.

    Only user and assistant turns with text are kept, in order.
    """
    speakers = {"user": "User", "assistant": "Bot"}
    messages: list[ConversationMessage] = []
    for turn in turns or []:
        role = str(turn.get("role", "")).strip().lower()
        if role not in speakers:
            continue
        content = str(turn.get("content") or "").strip()
        if content:
            messages.append(f"{speakers[role]}: {content}")
    return messages
