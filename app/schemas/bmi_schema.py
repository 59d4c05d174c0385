from typing import Any
from pydantic import BaseModel, ConfigDict, Field, model_validator

class BMIRequest(BaseModel):
    """Body of POST /bmi. Missing fields default to 0 and are rejected by the zero checks."""
    model_config = ConfigDict(strict=True, allow_inf_nan=False)

    weight: float = Field(0.0, description="Weight in kilograms")
    height: float = Field(0.0, description="Height in centimetres")

    @model_validator(mode="before")
    @classmethod
    def match_keys_ignoring_case(cls, data: Any) -> Any:
        # "Weight" or "HEIGHT" fill the field unless the exact key is also sent
        if not isinstance(data, dict):
            return data
        matched = {}
        for key, value in data.items():
            name = key.lower() if isinstance(key, str) else key
            if name in cls.model_fields and (key == name or name not in data):
                matched[name] = value
        return matched

class BMIResponse(BaseModel):
    BMI: float
    message: str

class ErrorResponse(BaseModel):
    error: str

class RateLimitResponse(BaseModel):
    message: str

class HealthResponse(BaseModel):
    status: str
    cache: str
    time: str
