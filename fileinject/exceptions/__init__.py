from fileinject.exceptions.config import (
    ConfigError,
    ConfigValidationError,
    DeprecatedOptionError,
    InvalidOptionError,
    MissingSourcesError,
)
from fileinject.exceptions.core import FileInjectError, log_exception
from fileinject.exceptions.document import (
    DocumentContentError,
    DocumentError,
    RenderError,
    SourceCollectionError,
    StreamNotSupportedError,
)

__all__ = [
    'ConfigError',
    'ConfigValidationError',
    'DeprecatedOptionError',
    'DocumentContentError',
    'DocumentError',
    'FileInjectError',
    'InvalidOptionError',
    'MissingSourcesError',
    'RenderError',
    'SourceCollectionError',
    'StreamNotSupportedError',
    'log_exception',
]
