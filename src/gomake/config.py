from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GomakeSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GOMAKE_", extra="ignore")

    # Fallbacks for -L/--log-level and -W/--work-path when the flag is absent.
    log_level: str = Field(default="info")
    work_path: Path = Field(default=Path("."))

    # Command scripts live in <work_path>/<scripts_dir>/<command_prefix><name>[.<ext>]
    scripts_dir: str = Field(default="scripts")
    command_prefix: str = Field(default="command-")

    log_format: str = Field(default="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def get_settings() -> GomakeSettings:
    return GomakeSettings()
