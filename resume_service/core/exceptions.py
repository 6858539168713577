"""Exceptions raised by the resume rendering pipeline and its collaborators."""


class ResumeRenderError(Exception):
    """Base class for failures that abort a single render call."""


class FontNotRegistered(ResumeRenderError):
    """A font id was used for measuring or drawing before it was registered."""

    def __init__(self, font_id: str):
        self.font_id = font_id
        super().__init__(f"Font '{font_id}' is not registered in this render context")


class FontResourceMissing(ResumeRenderError):
    """Neither the custom family nor the base family could be resolved."""


class DocumentEncodeError(ResumeRenderError):
    """The page stream could not be serialized into the output buffer."""


class ResumeMergeError(ValueError):
    """Tailored input could not be merged with the fixed resume data."""


class StorageError(RuntimeError):
    """Uploading the rendered PDF or signing its URL failed."""
