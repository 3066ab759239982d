from __future__ import annotations

from pawpal.schemas import MedicalHistoryItem, PetProfile

DEFAULT_PET_ID = 1


def default_pet_profile() -> PetProfile:
    return PetProfile(
        id=DEFAULT_PET_ID,
        name="Bruno",
        species="Dog",
        breed="Golden Retriever",
        age=5,
        weight="32kg",
        gender="Male",
        activity_level="Moderate",
    )


def default_medical_history() -> list[MedicalHistoryItem]:
    return [MedicalHistoryItem(date="2023-01-10", event="Annual Checkup", description="All good!")]


class PetStore:
    """
    In-memory pet profiles and medical history keyed by pet id.

    Seeded with a single default pet so a chat turn always has someone to
    talk about.
    """

    def __init__(self) -> None:
        self._profiles: dict[int, PetProfile] = {}
        self._history: dict[int, list[MedicalHistoryItem]] = {}
        self.set_pet_profile(DEFAULT_PET_ID, default_pet_profile())
        self.set_medical_history(DEFAULT_PET_ID, default_medical_history())

    def get_pet_profile(self, pet_id: int = DEFAULT_PET_ID) -> PetProfile | None:
        return self._profiles.get(pet_id)

    def set_pet_profile(self, pet_id: int, profile: PetProfile) -> PetProfile:
        if profile.id != pet_id:
            profile = profile.model_copy(update={"id": pet_id})
        self._profiles[pet_id] = profile
        return profile

    def get_medical_history(self, pet_id: int = DEFAULT_PET_ID) -> list[MedicalHistoryItem]:
        return list(self._history.get(pet_id, []))

    def set_medical_history(self, pet_id: int, history: list[MedicalHistoryItem]) -> list[MedicalHistoryItem]:
        self._history[pet_id] = list(history)
        return self.get_medical_history(pet_id)

    def add_medical_record(self, pet_id: int, record: MedicalHistoryItem) -> list[MedicalHistoryItem]:
        self._history.setdefault(pet_id, []).append(record)
        return self.get_medical_history(pet_id)
