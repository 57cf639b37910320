"""Top-level linkscheme configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field, field_validator

from .ExportConfig import ExportConfig
from .get_config_path import get_config_path
from .LogConfig import LogConfig
from .SchemeConfig import SchemeConfig


class LinkConfig(BaseModel):
    """Top-level configuration: the scheme table plus export and log settings."""

    model_config = ConfigDict(extra="forbid")

    schemes: dict[str, SchemeConfig]
    export: ExportConfig = Field(default_factory=ExportConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @field_validator("schemes")
    @classmethod
    def _check_tags(cls, value: dict[str, SchemeConfig]) -> dict[str, SchemeConfig]:
        for tag in value:
            if not tag:
                raise ValueError("scheme tag must not be empty")
            if ":" in tag:
                raise ValueError(f"scheme tag must not contain ':': {tag!r}")
        return value

    @computed_field
    def path(self) -> Path:
        """Path to config file."""
        return get_config_path()

    @classmethod
    def load(cls) -> "LinkConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            # Pydantic validates required fields and constructs nested models automatically
            return cls.model_validate(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "schemes": {tag: scheme.model_dump() for tag, scheme in self.schemes.items()},
            "export": self.export.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the configuration to its JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
