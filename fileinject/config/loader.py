from pathlib import Path

import yaml

from fileinject.config.models import FileInjectConfig, FileInjectConfigFile
from fileinject.config.resolution import resolve_config
from fileinject.config.validation import validate_config_file


def load_config_file(yaml_file: Path) -> FileInjectConfigFile:
    """Load and validate YAML configuration file without resolution.

    Args:
        yaml_file: Path to the YAML configuration file.

    Returns:
        A validated FileInjectConfigFile instance (not yet resolved).
    """
    with yaml_file.open(encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    config_file = FileInjectConfigFile.model_validate(data)
    config_file.config_file = yaml_file
    return config_file


def load_config(yaml_file: Path) -> FileInjectConfig:
    """Load and resolve a fileinject configuration from a YAML file.

    Args:
        yaml_file: Path to the YAML configuration file.

    Returns:
        A fully resolved FileInjectConfig instance ready for runtime use.
    """
    config_file = load_config_file(yaml_file)
    validate_config_file(config_file)
    return resolve_config(config_file)
