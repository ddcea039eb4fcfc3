from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


class Settings(BaseModel):
    # App
    app_name: str = Field(
        default_factory=lambda: os.getenv("APP_NAME", "Lab Planner API")
    )
    debug: bool = Field(
        default_factory=lambda: os.getenv("DEBUG", "false").lower()
        in {"1", "true", "yes"}
    )

    # Flat JSON file storage
    data_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("DATA_DIR", "data")).expanduser()
    )

    @property
    def resolved_data_dir(self) -> Path:
        return self.data_dir.resolve()


def get_settings() -> Settings:
    # Keep a simple module-level singleton without extra deps
    # Evaluated only once per process
    global _SETTINGS_SINGLETON
    try:
        return _SETTINGS_SINGLETON
    except NameError:
        _SETTINGS_SINGLETON = Settings()  # type: ignore[reportPrivateUsage]
        return _SETTINGS_SINGLETON
