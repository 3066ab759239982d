import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pawpal.llm.classifier import detect_mode
from pawpal.llm.client import SimulatedTextGenerator
from pawpal.llm.composer import build_final_prompt
from pawpal.schemas import MedicalHistoryItem, PetProfile, PromptRequest
from pawpal.services.chat_service import PawPalChatService


async def main() -> None:
    request = PromptRequest(
        pet=PetProfile(
            name="Bella",
            species="Cat",
            breed="Siamese",
            age=3,
            weight=4.5,
            gender="Female",
            activity_level="High",
        ),
        history=[
            MedicalHistoryItem(date="2023-01-01", event="Vaccination", description="Vaccinations up to date"),
            MedicalHistoryItem(date="2023-02-01", event="Allergy", description="Allergic to tuna"),
        ],
        memory=[
            "User: She was scratching her ear yesterday.",
            "Bot: I suggested checking for mites.",
        ],
        user_message="She is bleeding from her paw!",
    )
    print(f"mode={detect_mode(request.user_message)}")
    print("--------------- GENERATED PROMPT START ---------------")
    print(build_final_prompt(request))
    print("--------------- GENERATED PROMPT END ---------------")

    service = PawPalChatService(generator=SimulatedTextGenerator())
    print(await service.generate_response(request))
    print("---")
    print(await service.generate_daily_tip(request.pet))


if __name__ == "__main__":
    asyncio.run(main())
