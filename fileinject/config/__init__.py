from .loader import load_config, load_config_file
from .models import (
    FileInjectConfig,
    FileInjectConfigFile,
    InjectionConfig,
    ResolvedInjection,
)

__all__ = [
    # Models
    'FileInjectConfig',
    'FileInjectConfigFile',
    'InjectionConfig',
    'ResolvedInjection',
    # Loader
    'load_config',
    'load_config_file',
]
