# src/annotated_csv/config.py

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

DEFAULT_SUPPORTED_VERSIONS = ("0.1.0",)


class ParserConfig(BaseModel):
    """Configuration for one annotated CSV parse.

    Immutable. Explicit. Passed into the parser; nothing is read from
    module-level state.
    """

    supported_versions: tuple[str, ...] = DEFAULT_SUPPORTED_VERSIONS
    delimiter: str = ","
    relax_column_count: bool = False
    allow_duplicate_fields: bool = False
    cell_annotation_marker: str = "#ANNOTATION:"
    debug: bool = False

    class Config:
        extra = "forbid"
        frozen = True

    @field_validator("supported_versions")
    @classmethod
    def _versions_not_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        versions = tuple(v.strip() for v in value)
        if not versions:
            raise ValueError("supported_versions must not be empty")
        return versions

    @field_validator("delimiter")
    @classmethod
    def _single_character_delimiter(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("delimiter must be a single character")
        return value

    @field_validator("cell_annotation_marker")
    @classmethod
    def _marker_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("cell_annotation_marker must not be blank")
        return value


def load_config(path: str | Path) -> ParserConfig:
    """Load a ParserConfig from a YAML file.

    An empty file yields the defaults. Unknown keys are rejected.
    """
    file_path = Path(path)
    logger.info("Loading parser config from %s", file_path)
    with open(file_path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file '{file_path}' must contain a mapping")
    config = ParserConfig(**data)
    logger.debug("Loaded parser config: %s", config)
    return config
