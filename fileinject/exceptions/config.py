from fileinject.exceptions.core import FileInjectError


class ConfigError(FileInjectError):
    """Base class for configuration-related errors."""

    log_category = 'config_error'


class ConfigValidationError(ConfigError):
    """Configuration validation failed (structure, values, etc.)."""

    log_category = 'config_validation_failed'


class DeprecatedOptionError(ConfigError):
    """A removed or legacy option was supplied."""

    log_category = 'deprecated_option'


class InvalidOptionError(ConfigError):
    """An option has the wrong type (e.g. a non-callable transform)."""

    log_category = 'invalid_option'


class MissingSourcesError(ConfigError):
    """No source collection was given to the injector."""

    log_category = 'missing_sources'
