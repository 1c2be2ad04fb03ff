"""Settings shared by the adapters and the line mutation engine."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Line terminators a file may use
NEWLINES = ("\n", "\r\n", "\r")


class FilesSettings(BaseModel):
    """Tunable behaviour of scaffold-files.

    Attributes:
        newline: Terminator for readlines splitting and for lines added to
            files that don't have a terminator yet.
        indentation: Spaces added to the enclosing indentation when injecting
            lines inside a block or class.
        encoding: Text encoding used by the real filesystem adapter.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    newline: str = "\n"
    indentation: int = Field(default=2, ge=0)
    encoding: str = "utf-8"

    @field_validator("newline")
    @classmethod
    def _check_newline(cls, value: str) -> str:
        if value not in NEWLINES:
            raise ValueError(f"newline must be one of {NEWLINES!r}, got {value!r}")
        return value

    @classmethod
    def from_file(cls, path: Path) -> FilesSettings:
        """Load settings from a YAML or JSON file.

        Args:
            path: Path to the settings file.

        Returns:
            Parsed FilesSettings.

        Raises:
            FileNotFoundError: If file doesn't exist.
            ValueError: If the file isn't a valid settings mapping.
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid settings file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Invalid settings file {path}: expected a mapping")
        return cls.model_validate(data)
