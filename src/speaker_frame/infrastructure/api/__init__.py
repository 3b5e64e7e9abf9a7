"""API client module for the speaker directory.

This package provides the base HTTP client and the speaker-specific client
used to list and fetch speakers.
"""

from speaker_frame.infrastructure.api.client import DirectoryClient
from speaker_frame.infrastructure.api.speaker_client import SpeakerDirectoryClient

__all__ = [
    "DirectoryClient",
    "SpeakerDirectoryClient",
]
