from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class GenerateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    trigger_word: str = Field(..., alias="triggerWord")
    provider: str


class ProviderAvailability(BaseModel):
    gemini: bool
    openai: bool


class HealthStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["OK"] = "OK"
    providers: ProviderAvailability
    default_provider: str = Field(..., alias="defaultProvider")


class ErrorResponse(BaseModel):
    error: str
