from pawpal.llm.context import (
    NO_MEDICAL_HISTORY,
    format_conversation_memory,
    format_conversation_turns,
    format_medical_history,
    format_pet_profile,
)
from pawpal.schemas import MedicalHistoryItem, PetProfile


def _bruno() -> PetProfile:
    return PetProfile(
        name="Bruno",
        species="Dog",
        breed="Golden Retriever",
        age="5",
        weight=32,
        gender="Male",
        activity_level="Moderate",
    )


def test_format_pet_profile_fields():
    block = format_pet_profile(_bruno())
    assert block.strip().splitlines() == [
        "PET PROFILE:",
        "Name: Bruno",
        "Species: Dog",
        "Breed: Golden Retriever",
        "Age: 5 years",
        "Weight: 32 kg",
        "Gender: Male",
        "Activity Level: Moderate",
    ]


def test_format_pet_profile_keeps_values_verbatim():
    pet = _bruno().model_copy(update={"weight": "32kg", "age": "5 years"})
    block = format_pet_profile(pet)
    assert "Weight: 32kg kg" in block
    assert "Age: 5 years years" in block


def test_format_medical_history_empty():
    assert format_medical_history([]).strip() == "MEDICAL HISTORY: No major past issues recorded."
    assert format_medical_history(None) == NO_MEDICAL_HISTORY


def test_format_medical_history_preserves_order_and_skips_empty_description():
    history = [
        MedicalHistoryItem(date="2023", event="Kennel Cough", description="Treated"),
        MedicalHistoryItem(date="2024-03-01", event="Dental cleaning"),
        MedicalHistoryItem(date="March", event="Allergy", description=None),
    ]
    lines = format_medical_history(history).strip().splitlines()
    assert lines == [
        "MEDICAL HISTORY:",
        "- 2023: Kennel Cough (Treated)",
        "- 2024-03-01: Dental cleaning",
        "- March: Allergy",
    ]


def test_format_conversation_memory():
    assert format_conversation_memory([]) == ""
    block = format_conversation_memory(["User: Hi", "Bot: Hello"])
    assert block.strip().splitlines() == ["RECENT CONVERSATION CONTEXT:", "- User: Hi", "- Bot: Hello"]


def test_format_conversation_turns():
    turns = [
        {"role": "user", "content": "She was scratching her ear."},
        {"role": "assistant", "content": "Check for mites."},
        {"role": "system", "content": "ignored"},
        {"role": "user", "content": "   "},
    ]
    assert format_conversation_turns(turns) == [
        "User: She was scratching her ear.",
        "Bot: Check for mites.",
    ]
    assert format_conversation_turns(None) == []
