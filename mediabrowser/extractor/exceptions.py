"""
Extractor exceptions.

`ContentNotAvailableError` is the root of every failure that means "this media
cannot be played right now"; callers handle one exception type regardless of
whether parsing, storage or extraction failed.
"""

from typing import Optional


class ContentNotAvailableError(Exception):
    """Requested content cannot be provided."""


class ExtractionError(ContentNotAvailableError):
    """Error while extracting metadata from a streaming service."""

    def __init__(
        self,
        message: str,
        service_id: Optional[int] = None,
        url: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.service_id = service_id
        self.url = url
        self.original_error = original_error
