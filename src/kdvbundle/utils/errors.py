"""Typed exceptions for document backends, record input and I/O formats."""


class CollaboratorError(RuntimeError):
    """Base class for failures raised by a document backend."""


class FontLoadError(CollaboratorError):
    """Raised when a font cannot be loaded or registered."""


class DocumentEncodingError(CollaboratorError):
    """Raised when a document cannot be serialized, loaded or merged."""


class RecordError(ValueError):
    """Raised when an application record cannot be parsed."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
