from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version('fileinject')
except PackageNotFoundError:  # pragma: no cover - only when running from a checkout
    __version__ = '0.0.0'
