"""Shared fixtures for the speaker frame tests."""

from unittest import mock

import pytest

from speaker_frame.config import FrameConfig
from speaker_frame.domain.models import SpeakerRecord, SpeakerSummary
from speaker_frame.infrastructure.api.speaker_client import SpeakerDirectoryClient


def make_record(speaker_id: str) -> SpeakerRecord:
    return SpeakerRecord(
        id=speaker_id,
        source_id=f"src-{speaker_id}",
        name=f"Speaker {speaker_id}",
        avatar_url=f"https://example.com/{speaker_id}.png",
        description=f"About {speaker_id}",
        twitter_handle=speaker_id if speaker_id.endswith(("0", "2", "4", "6", "8")) else None,
    )


@pytest.fixture
def page() -> list[SpeakerSummary]:
    """A page of ten speaker summaries."""
    return [SpeakerSummary(id=f"speaker-{i}") for i in range(10)]


@pytest.fixture
def directory(page: list[SpeakerSummary]) -> mock.MagicMock:
    """A directory client that serves ``page`` and synthetic records."""
    client = mock.MagicMock(spec=SpeakerDirectoryClient)
    client.fetch_random_page.return_value = page
    client.get_speaker_detail.side_effect = make_record
    return client


@pytest.fixture
def config() -> FrameConfig:
    return FrameConfig()
