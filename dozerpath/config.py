"""Validated search and board-generation settings.

Settings live in a per-user configuration directory resolved through
``platformdirs.user_config_dir``.  A missing file simply yields the defaults;
nothing is written until :meth:`SearchSettings.save` is called.
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .hexpath import Layout

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def default_settings_path() -> Path:
    """Return the per-user path of ``search.json`` (the file may not exist)."""

    return Path(user_config_dir("dozerpath")) / "search.json"


class SearchSettings(BaseModel):
    """Tunables for a single destination search."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Safety valve for very large boards; None runs to frontier exhaustion.
    max_expansions: int | None = Field(default=None, ge=1)
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = str(value).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def load(cls, path: Path | str | None = None) -> SearchSettings:
        """Load settings from ``path`` (default: the per-user file).

        A missing file gives the defaults.  Malformed content raises
        ``pydantic.ValidationError`` so a broken config is never silently
        ignored.
        """

        target = Path(path) if path is not None else default_settings_path()
        if not target.exists():
            return cls()
        return cls.model_validate_json(target.read_text(encoding="utf-8"))

    def save(self, path: Path | str | None = None) -> Path:
        """Write the settings atomically and return the file written."""

        target = Path(path) if path is not None else default_settings_path()
        target.parent.mkdir(parents=True, exist_ok=True)
        temp_path = target.with_suffix(target.suffix + ".tmp")
        temp_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        temp_path.replace(target)
        return target


class BoardSettings(BaseModel):
    """Parameters for procedurally generated test and demo boards."""

    model_config = ConfigDict(extra="forbid")

    width: int = Field(default=16, ge=1)
    height: int = Field(default=16, ge=1)
    seed: int = Field(default=0, ge=0)
    layout: Layout = Field(default=Layout.EVEN_Q)
    level_frequency: float = Field(default=0.15, gt=0.0)
    max_level: int = Field(default=3, ge=0)
    max_terrain_cost: int = Field(default=2, ge=0)
    obstacle_density: float = Field(default=0.15, ge=0.0, le=1.0)
    impassable_density: float = Field(default=0.05, ge=0.0, le=1.0)
    min_leveling_cost: int = Field(default=2, ge=1)
    max_leveling_cost: int = Field(default=6, ge=1)

    @model_validator(mode="after")
    def _check_leveling_range(self) -> BoardSettings:
        if self.min_leveling_cost > self.max_leveling_cost:
            raise ValueError("min_leveling_cost cannot exceed max_leveling_cost")
        return self


__all__ = ["BoardSettings", "SearchSettings", "default_settings_path"]
