from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, field_validator


class _ProviderModel(BaseModel):
    # The provider adds fields (callCount, copyright, ...) that are not used
    model_config = ConfigDict(extra="ignore")


class HeightResponse(_ProviderModel):
    dt: StrictInt
    height: StrictFloat


class ExtremeResponse(_ProviderModel):
    dt: StrictInt
    height: StrictFloat
    type: Literal["high", "low"]

    @field_validator("type", mode="before")
    @classmethod
    def _lowercase_type(cls, value):
        # Live responses use "High"/"Low"
        if isinstance(value, str):
            return value.lower()
        return value


class TidesResponse(_ProviderModel):
    status: StrictInt
    heights: list[HeightResponse]
    extremes: list[ExtremeResponse]


class TidesErrorResponse(_ProviderModel):
    status: int | None = None
    # Usually a message, but not guaranteed to be a string
    error: Any = None
