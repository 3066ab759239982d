from __future__ import annotations

import asyncio
from typing import Sequence

from pawpal.config import settings
from pawpal.llm.classifier import detect_mode
from pawpal.llm.client import TextGenerator, build_text_generator
from pawpal.llm.composer import build_daily_tip_prompt, build_final_prompt
from pawpal.llm.safety import safety_filter
from pawpal.schemas import ConversationMessage, MedicalHistoryItem, PetProfile, PromptRequest
from pawpal.services.pet_store import PetStore


class PawPalChatService:
    def __init__(self, generator: TextGenerator | None = None, pet_store: PetStore | None = None) -> None:
        self.generator = generator or build_text_generator()
        self.pet_store = pet_store or PetStore()
        self.debug = settings.debug_log

    async def generate_response(self, request: PromptRequest) -> str:
        if request.pet is None:
            # Payloads without a pet talk about the stored default pet.
            request = request.model_copy(update={"pet": self.pet_store.get_pet_profile()})
        mode = detect_mode(request.user_message)
        if self.debug and request.pet is not None:
            print(f"[DEBUG][SERVICE] pet='{request.pet.name}' mode='{mode}'")

        prompt = build_final_prompt(request, mode=mode)
        raw = await self._complete(prompt)
        answer = safety_filter(raw)
        if self.debug and answer != raw:
            print("[DEBUG][SERVICE] safety_filter replaced model reply")
        return answer

    async def generate_daily_tip(self, pet: PetProfile) -> str:
        if pet is None:
            raise ValueError("Missing pet profile")
        # Tips are returned as generated; they do not pass the safety filter.
        prompt = build_daily_tip_prompt(pet)
        return await self._complete(prompt)

    async def _complete(self, prompt: str) -> str:
        if self.debug:
            print("--- SENDING PROMPT TO MODEL ---")
            print(prompt)
            print("--- END PROMPT ---")
        text = await asyncio.to_thread(self.generator.complete, prompt)
        if self.debug:
            print(f"[DEBUG][SERVICE] response_source='{self.generator.source}'")
        return text


_default_service: PawPalChatService | None = None


def _service() -> PawPalChatService:
    global _default_service
    if _default_service is None:
        _default_service = PawPalChatService()
    return _default_service


async def generate_response(
    pet: PetProfile | None,
    history: Sequence[MedicalHistoryItem],
    memory: Sequence[ConversationMessage],
    user_message: str,
) -> str:
    request = PromptRequest(pet=pet, history=list(history), memory=list(memory), user_message=user_message)
    return await _service().generate_response(request)


async def generate_daily_tip(pet: PetProfile) -> str:
    return await _service().generate_daily_tip(pet)
