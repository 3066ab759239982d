from __future__ import annotations

import os
import random
from typing import Protocol
from urllib.parse import urlparse

from openai import OpenAI

from pawpal.config import settings
from pawpal.llm.prompts import MODE_INSTRUCTIONS


class GenerationError(RuntimeError):
    pass


class TextGenerator(Protocol):
    source: str

    def complete(self, prompt: str) -> str: ...


class OpenAITextGenerator:
    source = "openai"

    def __init__(self) -> None:
        if not settings.openai_api_key:
            raise GenerationError("OPENAI_API_KEY is not configured.")
        self.model = settings.openai_model
        self.max_tokens = settings.openai_max_tokens
        kwargs = {"api_key": settings.openai_api_key}
        if self._is_valid_http_url(settings.openai_base_url):
            kwargs["base_url"] = settings.openai_base_url
        else:
            # Let OpenAI SDK use its default URL when direct API is intended.
            os.environ.pop("OPENAI_BASE_URL", None)
        self.client = OpenAI(**kwargs)

    def complete(self, prompt: str) -> str:
        # The whole assembled prompt goes out as a single user message.
        response = self.client.chat.completions.create(
            model=self.model,
            max_completion_tokens=self.max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        text = (response.choices[0].message.content or "").strip()
        if not text:
            raise GenerationError("EmptyResponse: model returned no text.")
        return text

    @staticmethod
    def _is_valid_http_url(value: str) -> bool:
        if not value:
            return False
        parsed = urlparse(value)
        return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


class SimulatedTextGenerator:
    """Offline stand-in that answers with canned replies keyed on the prompt mode."""

    source = "simulation"

    DAILY_TIPS = (
        "Golden Retrievers love swimming, which is great low-impact exercise for their joints! 🏊‍♂️",
        "Remember to check Bruno's ears weekly, as floppy ears can trap moisture and cause infections. 👂",
        "A gentle daily brush will help keep Bruno's beautiful golden coat tangle-free and reduce shedding. 🖌️",
        "Since Bruno is 5, keeping him at a healthy weight is crucial for his long-term hip health. ⚖️",
    )

    EMERGENCY_REPLY = (
        "EMERGENCY RESPONSE SIMULATION:\n\n"
        "🚨 POSSIBLE REASONS\n"
        "This sounds serious. It could be severe trauma.\n\n"
        "🏠 WHAT YOU CAN DO AT HOME\n"
        "1. Keep the pet warm and still.\n"
        "2. Apply gentle pressure if bleeding.\n\n"
        "⚠️ WARNING SIGNS\n"
        "Unconsciousness, pale gums.\n\n"
        "🏥 WHEN TO SEE A VET\n"
        "IMMEDIATELY. Go to the nearest emergency clinic."
    )

    GENERAL_REPLY = (
        "PAWPAL RESPONSE SIMULATION:\n\n"
        "🟢 POSSIBLE REASONS\n"
        "It could be a minor sprain or just fatigue.\n\n"
        "🏠 WHAT YOU CAN DO AT HOME\n"
        "Rest and limit activity for 24 hours.\n\n"
        "⚠️ WARNING SIGNS\n"
        "If he stops eating or the limp gets worse.\n\n"
        "🏥 WHEN TO SEE A VET\n"
        "If it persists for more than 48 hours.\n\n"
        "💛 PREVENTION TIPS\n"
        "Avoid jumping from high places."
    )

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def complete(self, prompt: str) -> str:
        if "MODE: DAILY TIP GENERATOR" in prompt:
            return self.rng.choice(self.DAILY_TIPS)
        if MODE_INSTRUCTIONS["EMERGENCY"] in prompt:
            return self.EMERGENCY_REPLY
        return self.GENERAL_REPLY


def build_text_generator() -> TextGenerator:
    if settings.openai_api_key:
        return OpenAITextGenerator()
    return SimulatedTextGenerator()
