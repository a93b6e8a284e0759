# src/temporary_folder/config.py
from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator          # Field stays in pydantic

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Configuration for the ``temporary-folder`` command line tool.

    Any field can be overridden via environment variables prefixed
    with  `TEMPORARY_FOLDER_`, e.g.

        export TEMPORARY_FOLDER_TEMP_ROOT=/scratch
        temporary-folder run -- make test

    See https://docs.pydantic.dev/latest/concepts/settings/ for details.
    """

    temp_root: Optional[Path] = Field(
        None,
        description="Directory new folders are created under (defaults to the platform temp dir).",
    )

    log_level: LogLevel = Field(
        "INFO",
        description="Logging level name passed to logging.basicConfig.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    # pydantic-v2
    model_config = {"env_prefix": "temporary_folder_"}
