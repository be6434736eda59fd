"""Exceptions raised around the resume extraction engine.

The extractors themselves never raise; these cover the collaborators
(document decoding, persistence) and the orchestrator's wrapped failure.
"""


class ResumeChatError(Exception):
    """Base class for resume_chat errors."""


class DocumentExtractionError(ResumeChatError):
    """Raised when a document could not be decoded into plain text."""


class ResumeParseError(ResumeChatError):
    """Raised by the orchestrator when the upstream decoding step failed."""


class ResumeNotFoundError(ResumeChatError):
    """Raised when no persisted record exists for a file name."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Failed to retrieve resume data: no parsed resume for '{file_name}'")
