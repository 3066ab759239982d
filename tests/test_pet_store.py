from pawpal.schemas import MedicalHistoryItem
from pawpal.services.pet_store import DEFAULT_PET_ID, PetStore, default_pet_profile


def test_store_seeds_default_pet():
    store = PetStore()
    pet = store.get_pet_profile()
    assert pet.name == "Bruno"
    assert pet.id == DEFAULT_PET_ID
    assert [item.event for item in store.get_medical_history()] == ["Annual Checkup"]


def test_store_set_and_get_by_id():
    store = PetStore()
    luna = default_pet_profile().model_copy(update={"name": "Luna", "species": "Cat"})
    saved = store.set_pet_profile(2, luna)
    assert saved.id == 2
    assert store.get_pet_profile(2).name == "Luna"
    assert store.get_pet_profile(3) is None
    assert store.get_medical_history(2) == []


def test_add_medical_record_keeps_order_and_returns_copy():
    store = PetStore()
    record = MedicalHistoryItem(date="2024-05-02", event="Vaccination")
    history = store.add_medical_record(DEFAULT_PET_ID, record)
    assert [item.event for item in history] == ["Annual Checkup", "Vaccination"]
    history.clear()
    assert len(store.get_medical_history()) == 2
