from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fileinject.models import InjectOptions


class InjectionConfig(BaseModel):
    """One injection: which targets receive which sources, and how."""

    targets: list[str] = Field(
        default_factory=list,
        description='Glob patterns (relative to the config file) of documents to inject into',
    )
    sources: list[str] = Field(
        default_factory=list,
        description='Glob patterns of files to inject; a leading "!" excludes matches',
    )
    options: dict[str, Any] = Field(
        default_factory=dict,
        description='Option overrides for this injection',
    )
    transform: str | None = Field(
        default=None,
        description='Jinja template rendering one line per source file',
    )

    @field_validator('targets', 'sources', mode='before')
    @classmethod
    def normalize_patterns(cls, value: Any) -> Any:
        """Accept a single pattern string in place of a list."""
        if isinstance(value, str):
            return [value]
        return value


class FileInjectConfigFile(BaseModel):
    """Configuration file for fileinject (raw YAML structure).

    For runtime use, convert this to FileInjectConfig using resolve_config().
    """

    options: dict[str, Any] = Field(
        default_factory=dict,
        description='Default options applied to every injection',
    )
    injections: list[InjectionConfig] = Field(
        default_factory=list,
        description='Injections to run, in order',
    )
    # Set when loading from disk; excluded from serialization.
    config_file: Path | None = Field(
        default=None,
        description='Path to the YAML configuration file (set by loader)',
        exclude=True,
    )


class ResolvedInjection(BaseModel):
    """An injection with validated options and expanded target paths."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    targets: list[Path]
    sources: list[str]
    options: InjectOptions


class FileInjectConfig(BaseModel):
    """Fully resolved configuration ready for runtime use."""

    base_dir: Path = Field(description='Directory globs and paths are relative to')
    injections: list[ResolvedInjection] = Field(default_factory=list)
    config_file: Path | None = Field(default=None, exclude=True)
