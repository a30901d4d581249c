from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    max_stack_depth: int = Field(default=256, ge=0)
    max_column_width: int = Field(default=25, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="BTW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
    )
