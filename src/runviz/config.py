"""Configuration and environment handling for runviz."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

__all__ = [
    "NumericPolicy",
    "Settings",
    "get_preload_file",
    "get_settings",
    "is_dev_mode",
]

NumericPolicy = Literal["permissive", "strict"]


class Settings(BaseModel):
    """Runtime settings.

    Covers ingestion behavior (delimiter, numeric policy) and the resource
    limits enforced by the dashboard API.

    All settings can be customized via environment variables.
    """

    delimiter: str = Field(
        default=",",
        min_length=1,
        max_length=1,
        description="Field delimiter of uploaded tables",
    )

    numeric_policy: NumericPolicy = Field(
        default="permissive",
        description="How non-numeric step/value text is handled: NaN (permissive) or error (strict)",
    )

    max_upload_size: int = Field(
        default=64 * 1024 * 1024,  # 64MB
        description="Maximum upload size in bytes",
    )

    max_selection: int = Field(
        default=100,
        description="Maximum number of experiments in one selection",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables.

        Environment variables:
        - RUNVIZ_DELIMITER: Field delimiter (default: ",")
        - RUNVIZ_NUMERIC_POLICY: "permissive" or "strict" (default: permissive)
        - RUNVIZ_MAX_UPLOAD_SIZE: Maximum upload size in bytes (default: 64MB)
        - RUNVIZ_MAX_SELECTION: Maximum selected experiments (default: 100)

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        return cls(
            delimiter=os.environ.get("RUNVIZ_DELIMITER", cls.model_fields["delimiter"].default),
            numeric_policy=os.environ.get("RUNVIZ_NUMERIC_POLICY", cls.model_fields["numeric_policy"].default),
            max_upload_size=int(os.environ.get("RUNVIZ_MAX_UPLOAD_SIZE", cls.model_fields["max_upload_size"].default)),
            max_selection=int(os.environ.get("RUNVIZ_MAX_SELECTION", cls.model_fields["max_selection"].default)),
        )


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get runtime settings.

    Returns cached instance if already initialized.
    """
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_preload_file() -> Path | None:
    """Get the table to load when the dashboard starts.

    Returns:
        Path from RUNVIZ_PRELOAD_FILE if set, None otherwise.
    """
    preload = os.environ.get("RUNVIZ_PRELOAD_FILE")
    if not preload:
        return None
    return Path(preload).expanduser()


def is_dev_mode() -> bool:
    """Check if running in development mode.

    Returns:
        True if RUNVIZ_DEV_MODE is set to "1", False otherwise.
    """
    return os.environ.get("RUNVIZ_DEV_MODE") == "1"
