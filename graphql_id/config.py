import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    # How unsigned integers above 2**63 - 1 are narrowed by the text codec:
    # "wrap" keeps the two's-complement value, "error" rejects the input.
    unsigned_overflow: Literal["wrap", "error"] = Field(
        default_factory=lambda: os.getenv("GRAPHQL_ID_UNSIGNED_OVERFLOW", "wrap").strip().lower()
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
