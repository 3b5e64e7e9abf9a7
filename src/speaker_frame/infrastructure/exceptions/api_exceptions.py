"""Exceptions related to the remote speaker directory.

This module provides custom exceptions for handling errors that occur
when talking to the speaker directory API.
"""

from typing import Any


class UpstreamError(Exception):
    """Base exception for all speaker directory errors."""

    pass


class UpstreamConnectionError(UpstreamError):
    """Exception raised when the speaker directory cannot be reached."""

    pass


class UpstreamResponseError(UpstreamError):
    """Exception raised when the directory returns an unsuccessful response."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload_status: Any = None,
    ) -> None:
        """Initialize UpstreamResponseError.

        Args:
            message: Error message
            status_code: HTTP status code of the response, if any
            payload_status: The ``status`` field of the JSON payload, if any
        """
        super().__init__(message)
        self.status_code = status_code
        self.payload_status = payload_status


class SpeakerNotFoundError(UpstreamResponseError):
    """Exception raised when a speaker is not found in the directory."""

    def __init__(self, message: str, speaker_id: str | None = None) -> None:
        """Initialize SpeakerNotFoundError.

        Args:
            message: Error message
            speaker_id: ID of the speaker that could not be found
        """
        super().__init__(message, status_code=404)
        self.speaker_id = speaker_id
