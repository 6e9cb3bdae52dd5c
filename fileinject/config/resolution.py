"""Resolve a raw configuration file into runtime objects."""

from pathlib import Path
from typing import Any

from hotlog import get_logger

from fileinject.config.models import (
    FileInjectConfig,
    FileInjectConfigFile,
    InjectionConfig,
    ResolvedInjection,
)
from fileinject.models import InjectOptions
from fileinject.transforms import TemplateTransform

logger = get_logger(__name__)


def expand_targets(patterns: list[str], base_dir: Path) -> list[Path]:
    """Expand target glob patterns, keeping pattern order and dropping duplicates."""
    targets: list[Path] = []
    for pattern in patterns:
        matches = sorted(p for p in base_dir.glob(pattern) if p.is_file())
        if not matches:
            logger.warning('no_targets_matched', pattern=pattern, base_dir=str(base_dir))
        targets.extend(p for p in matches if p not in targets)
    return targets


def resolve_options(defaults: dict[str, Any], injection: InjectionConfig) -> InjectOptions:
    """Merge default and per-injection options and validate the result."""
    data: dict[str, Any] = {**defaults, **injection.options}
    if injection.transform is not None:
        data['transform'] = TemplateTransform(injection.transform)
    return InjectOptions.model_validate(data)


def resolve_config(config_file: FileInjectConfigFile) -> FileInjectConfig:
    """Build the runtime configuration.

    Options are validated here so deprecated or mistyped options fail before
    any document is read.
    """
    base_dir = config_file.config_file.parent.resolve() if config_file.config_file else Path.cwd()
    injections = [
        ResolvedInjection(
            targets=expand_targets(injection.targets, base_dir),
            sources=injection.sources,
            options=resolve_options(config_file.options, injection),
        )
        for injection in config_file.injections
    ]
    return FileInjectConfig(
        base_dir=base_dir,
        injections=injections,
        config_file=config_file.config_file,
    )
