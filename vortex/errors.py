"""Exceptions raised by vortex."""


# Custom exceptions
class VortexException(Exception):
    """Base exception for vortex errors."""

    pass


class UnterminatedQuote(VortexException, ValueError):
    """Raised when a quote is opened but never closed."""

    def __init__(self, position: int, context: str):
        self.position = position
        self.context = context
        super().__init__(f"Unterminated quote at position {position}: {context}")


class EditorNotFound(VortexException):
    """Raised when no editor is configured or installed."""

    pass


class EditorFailed(VortexException):
    """Raised when the editor command is invalid or exits with an error."""

    pass


class TemplateReadError(VortexException):
    """Raised when a template file can't be read."""

    pass


class ConflictingTemplateSources(VortexException):
    """Raised when template filenames come from both arguments and stdin."""

    pass


class EnvironmentFileError(VortexException):
    """Raised when an environment file is missing or can't be loaded."""

    pass


class BodyTempfileError(VortexException):
    """Raised when the request body temp file can't be created or removed."""

    pass


class NoBackendAvailable(VortexException):
    """Raised when none of the supported backends is installed."""

    pass
