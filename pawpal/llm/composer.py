from __future__ import annotations

from pawpal.llm.classifier import detect_mode
from pawpal.llm.context import (
    format_conversation_memory,
    format_medical_history,
    format_pet_profile,
)
from pawpal.llm.prompts import (
    CLOSING_REMINDER,
    DAILY_TIP_INSTRUCTION,
    DAILY_TIP_RULES,
    MODE_INSTRUCTIONS,
    SYSTEM_PROMPT,
)
from pawpal.schemas import Mode, PetProfile, PromptRequest


def build_mode_instruction(mode: Mode) -> str:
    return MODE_INSTRUCTIONS.get(mode, MODE_INSTRUCTIONS["HEALTH"])


def build_final_prompt(request: PromptRequest, mode: Mode | None = None) -> str:
    """
    Assemble the full chat prompt for one user turn.

    Order: persona/policy block, mode instruction, pet profile, medical
    history, recent conversation, quoted user question, closing reminder.
    The mode is detected from the user message unless the caller passes it.
    Raises ValueError when the request carries no pet profile.
    """
    if request.pet is None:
        raise ValueError("PromptRequest.pet is required")
    mode = mode or detect_mode(request.user_message)
    sections = [
        SYSTEM_PROMPT,
        build_mode_instruction(mode),
        format_pet_profile(request.pet),
        format_medical_history(request.history),
        format_conversation_memory(request.memory),
        f'USER QUESTION:\n"{request.user_message}"\n{CLOSING_REMINDER}',
    ]
    return "\n" + "\n\n".join(sections)


def build_daily_tip_prompt(pet: PetProfile) -> str:
    sections = [
        SYSTEM_PROMPT,
        DAILY_TIP_INSTRUCTION.strip("\n"),
        "Target Pet:\n" + format_pet_profile(pet),
        DAILY_TIP_RULES.lstrip("\n"),
    ]
    return "\n" + "\n\n".join(sections)
