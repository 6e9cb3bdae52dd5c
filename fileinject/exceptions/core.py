from structlog.types import FilteringBoundLogger


class FileInjectError(Exception):
    """Root of every error fileinject raises on purpose.

    Configuration errors (``ConfigError`` and its subclasses) stop a run
    before any document is read. Document errors (``DocumentError``, e.g.
    ``stream_not_supported`` or ``render_failed``) fail only the target
    being injected. ``log_category`` is the event name the error is logged
    under.
    """

    log_category: str = 'fileinject_error'

    @classmethod
    def get_log_category(cls) -> str:
        return cls.log_category


def log_exception(logger: FilteringBoundLogger, exc: Exception) -> None:
    """Log ``exc`` with its traceback under its event name.

    Errors from the hierarchy above use their ``log_category``; anything
    else is logged under its lower-cased class name, e.g. ``valueerror``.
    """
    category = exc.get_log_category() if isinstance(exc, FileInjectError) else exc.__class__.__name__.lower()
    logger.exception(category, error=str(exc))
