from fileinject.exceptions.core import FileInjectError


class DocumentError(FileInjectError):
    """Base class for errors raised while processing one target document."""

    log_category = 'document_error'


class StreamNotSupportedError(DocumentError):
    """The target document content is a stream instead of text or bytes."""

    log_category = 'stream_not_supported'


class DocumentContentError(DocumentError):
    """The target document has no content to inject into."""

    log_category = 'document_content_unavailable'


class SourceCollectionError(DocumentError):
    """Acquiring the source file collection failed."""

    log_category = 'source_collection_failed'


class RenderError(DocumentError):
    """The renderer raised while producing a line for a source file."""

    log_category = 'render_failed'
