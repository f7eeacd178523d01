"""Exceptions raised by the job board pipeline."""
from __future__ import annotations

INVALID_UPLOAD_MESSAGE = "Invalid file used, please upload a valid JSON file"


class JobBoardError(Exception):
    """Base class for job board errors."""


class InvalidUploadError(JobBoardError):
    """The uploaded document is not a JSON array of job objects."""

    def __init__(self, message: str = INVALID_UPLOAD_MESSAGE) -> None:
        super().__init__(message)


class UploadInProgressError(JobBoardError):
    """A second upload arrived while the first one was still loading."""
