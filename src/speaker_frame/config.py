"""Configuration for the speaker suggestion frame.

A single ``FrameConfig`` object is constructed by the caller and handed to
the directory client, the state machine helpers and the frame service.
"""

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .infrastructure.storage.filesystem import FilesystemStorage

# Configure logger
logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND_IMAGE_URL = (
    "https://devcon.org/_next/image/"
    "?url=%2F_next%2Fstatic%2Fmedia%2Ffooter-bg.2061d385.png&w=3840&q=75"
)


@dataclass(frozen=True)
class FrameConfig:
    """Settings shared by every component of the frame.

    Attributes
    ----------
        api_base_url: Base URL of the speaker directory API
        page_size: Number of speakers loaded into a new session
        min_offset: Lower bound (inclusive) of the random listing offset
        max_offset: Upper bound (exclusive) of the random listing offset,
            roughly the size of the remote collection
        request_timeout: Timeout in seconds for each directory request
        agree_value: Button value counted as a suggestion
        unsure_value: Button value counted as an appearance only
        start_value: Button value of the welcome screen
        suggestions_key: Store key holding the free-text suggestion list
        title: Frame title shown by the transport
        background_image_url: Background image of every card
        suggestion_placeholder: Placeholder of the free-text input
    """

    api_base_url: str = "https://api.devcon.org"
    page_size: int = 10
    min_offset: int = 0
    max_offset: int = 1088
    request_timeout: int = 30
    agree_value: str = "agree"
    unsure_value: str = "unsure"
    start_value: str = "checkout"
    suggestions_key: str = "suggestions"
    title: str = "Devcon Speakers Suggestion"
    background_image_url: str = DEFAULT_BACKGROUND_IMAGE_URL
    suggestion_placeholder: str = "Suggest a speaker from Asia, especially SEA"

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if not 0 <= self.min_offset < self.max_offset:
            raise ValueError(
                "offset bounds must satisfy 0 <= min_offset < max_offset, "
                f"got {self.min_offset} and {self.max_offset}"
            )

    @property
    def vote_values(self) -> tuple[str, str]:
        """Button values that count as a vote on the displayed speaker."""
        return (self.agree_value, self.unsure_value)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FrameConfig":
        """Build a config from a mapping, ignoring unknown keys.

        Args:
            data: Mapping of field names to values

        Returns
        -------
            A validated FrameConfig
        """
        known = {field.name for field in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")
        return cls(**{key: value for key, value in data.items() if key in known})


def load_config(path: str | Path | None = None) -> FrameConfig:
    """Load a FrameConfig from a JSON file.

    Args:
        path: Path to a JSON object with FrameConfig fields. When omitted or
            missing on disk, the defaults are returned.

    Returns
    -------
        The loaded configuration

    Raises
    ------
        FileReadError: If the file exists but cannot be read or parsed
        ValueError: If the file does not hold a JSON object or a value is invalid
    """
    if path is None or not FilesystemStorage.file_exists(path):
        if path is not None:
            logger.info(f"Config file {path} not found, using defaults")
        return FrameConfig()

    data = FilesystemStorage.read_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}, got {type(data).__name__}")

    logger.debug(f"Loaded config from {path}")
    return FrameConfig.from_dict(data)
