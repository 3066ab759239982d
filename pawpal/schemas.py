from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


Mode = Literal["EMERGENCY", "DIET", "GROOMING", "BEHAVIOR", "HEALTH"]
MODES: tuple[Mode, ...] = ("EMERGENCY", "DIET", "GROOMING", "BEHAVIOR", "HEALTH")

# Messages arrive pre-formatted as "User: ..." or "Bot: ...".
ConversationMessage = str


class PetProfile(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[int] = None
    name: str
    species: str
    breed: str
    age: Union[int, float, str]
    weight: Union[int, float, str]
    gender: str
    activity_level: str = Field(alias="activityLevel")
    profile_photo: Optional[str] = Field(default=None, alias="profilePhoto")


class MedicalHistoryItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    event: str
    description: Optional[str] = ""


class PromptRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pet: Optional[PetProfile] = None
    history: list[MedicalHistoryItem] = Field(default_factory=list)
    memory: list[ConversationMessage] = Field(default_factory=list)
    user_message: str = Field(alias="userMessage")
