# hydroconf/config/settings.py
"""
Settings that tell :class:`~hydroconf.hydro.Hydroconf` where to look.

* ``root_path`` overrides the base path (defaults to the running program)
* ``settings_file`` / ``secrets_file`` narrow the file names searched
* ``envvar_prefix`` opts in to an environment-variable layer
* Instances are frozen: build a new one instead of mutating
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hydroconf.config.defaults import (
    ENCODING,
    ENVVAR_SEPARATOR,
    SECRETS_FILE_NAMES,
    SETTINGS_FILE_NAMES,
)


class HydroSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # ---- location ------------------------------------------------------- #
    root_path: Optional[Path] = Field(
        default=None, description="Base path to search from; the running program when unset"
    )
    settings_file: Optional[str] = Field(
        default=None, description="Settings file name to look for instead of the defaults"
    )
    secrets_file: Optional[str] = Field(
        default=None, description="Secrets file name to look for instead of the defaults"
    )
    encoding: str = Field(default=ENCODING)
    # ---- environment layer ---------------------------------------------- #
    envvar_prefix: Optional[str] = Field(
        default=None, description="Merge <PREFIX>_* environment variables after the secrets file"
    )
    envvar_separator: str = Field(default=ENVVAR_SEPARATOR)
    dotenv_path: Optional[Path] = Field(
        default=None, description=".env file feeding the environment layer"
    )

    @field_validator("settings_file", "secrets_file")
    @classmethod
    def plain_file_name(cls, v: Optional[str]) -> Optional[str]:
        """File names are searched for in each directory, so they cannot be paths."""
        if v is not None and (not v or Path(v).name != v):
            raise ValueError(f"must be a bare file name, got {v!r}")
        return v

    @field_validator("envvar_prefix", "envvar_separator")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v:
            raise ValueError("must not be empty")
        return v

    # ---- derived -------------------------------------------------------- #
    def settings_candidates(self) -> Tuple[str, ...]:
        return (self.settings_file,) if self.settings_file else SETTINGS_FILE_NAMES

    def secrets_candidates(self) -> Tuple[str, ...]:
        return (self.secrets_file,) if self.secrets_file else SECRETS_FILE_NAMES
