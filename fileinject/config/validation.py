"""Validation logic for configuration."""

from fileinject.config.models import FileInjectConfigFile
from fileinject.exceptions import ConfigValidationError


def validate_config_file(config: FileInjectConfigFile) -> None:
    """Validate the raw configuration file before resolution.

    Args:
        config: Raw configuration loaded from YAML

    Raises:
        ConfigValidationError: If the configuration structure is invalid
    """
    if not config.injections:
        msg = 'Configuration must specify at least one entry in "injections"'
        raise ConfigValidationError(msg)

    for index, injection in enumerate(config.injections):
        missing = [name for name in ('targets', 'sources') if not getattr(injection, name)]
        if missing:
            msg = f'injections[{index}] must specify {" and ".join(missing)}'
            raise ConfigValidationError(msg)
