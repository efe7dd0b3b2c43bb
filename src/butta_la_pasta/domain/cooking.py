"""Models for inferred cooking times."""

from pydantic import BaseModel, ConfigDict, Field


class CookingTimes(BaseModel):
    """Structured cooking times returned by the inference service."""

    model_config = ConfigDict(strict=True, extra="ignore")

    cooking_time_minutes: int = Field(gt=0)
    al_dente_time_minutes: int | None = Field(default=None, gt=0)
