"""EDL generation settings."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator
from ruamel.yaml.error import YAMLError

from mediaedl.errors import ConfigError
from mediaedl.models.segment import EdlAction
from mediaedl.utils.io import read_yaml, write_yaml

DEFAULT_CONFIG_PATH = "mediaedl.yaml"

ACTION_FIELDS = (
    "unknown_edl_action",
    "intro_edl_action",
    "outro_edl_action",
    "recap_edl_action",
    "preview_edl_action",
    "commercial_edl_action",
)


def _default_parallelism() -> int:
    return os.cpu_count() or 1


class EdlConfig(BaseModel):
    """Per-type EDL actions plus batch settings.

    Immutable: a batch reads one snapshot for its whole run.
    """

    model_config = ConfigDict(frozen=True)

    unknown_edl_action: EdlAction = EdlAction.NONE
    intro_edl_action: EdlAction = EdlAction.NONE
    outro_edl_action: EdlAction = EdlAction.NONE
    recap_edl_action: EdlAction = EdlAction.NONE
    preview_edl_action: EdlAction = EdlAction.NONE
    commercial_edl_action: EdlAction = EdlAction.NONE
    overwrite_edl_files: bool = False
    max_parallelism: int = Field(default_factory=_default_parallelism, ge=1)

    @field_validator(*ACTION_FIELDS, mode="before")
    @classmethod
    def _parse_action(cls, value: object) -> EdlAction:
        return EdlAction.parse(value)

    @field_serializer(*ACTION_FIELDS)
    def _dump_action(self, value: EdlAction) -> str:
        return value.name.lower()


def load_config(path: Path | str) -> EdlConfig:
    """Load settings from a YAML file. A missing file yields the defaults."""
    path = Path(path)
    if not path.exists():
        return EdlConfig()
    try:
        return EdlConfig(**read_yaml(path))
    except (OSError, YAMLError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e


def save_config(path: Path | str, config: EdlConfig) -> None:
    """Write settings to a YAML file atomically."""
    write_yaml(path, config.model_dump(mode="json"))
