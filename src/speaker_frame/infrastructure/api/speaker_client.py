"""Client for the speaker endpoints of the directory API.

This module lists pages of speakers and fetches single speaker records.
Every payload carries a ``status`` field that must equal the success
sentinel before its ``data`` is trusted.
"""

import logging
import random
from typing import Any

import requests

from ...config import FrameConfig
from ...domain.models import SpeakerRecord, SpeakerSummary
from ..exceptions.api_exceptions import (
    SpeakerNotFoundError,
    UpstreamError,
    UpstreamResponseError,
)
from .client import DirectoryClient

# Configure logger
logger = logging.getLogger(__name__)

SUCCESS_STATUS = "200"


class SpeakerDirectoryClient(DirectoryClient):
    """Client for retrieving speakers from the directory API."""

    def __init__(
        self,
        config: FrameConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the speaker client.

        Args:
            config: Frame configuration (base URL, timeout, page bounds)
            session: Optional requests session to use for API calls
        """
        self.config = config or FrameConfig()
        super().__init__(
            timeout=self.config.request_timeout,
            session=session,
            base_url=self.config.api_base_url,
        )

    def _get_data(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Fetch an endpoint and unwrap the ``data`` of a successful payload.

        Raises
        ------
            UpstreamError: If the request fails or the payload is not successful
        """
        try:
            payload = self.get(endpoint, params=params)
        except UpstreamError as e:
            logger.error(f"Request to {endpoint} failed: {e}")
            raise

        if not isinstance(payload, dict):
            logger.error(f"Unexpected payload from {endpoint}: {type(payload)}")
            raise UpstreamResponseError(
                f"Expected a JSON object, got {type(payload).__name__}"
            )

        status = payload.get("status")
        if str(status) != SUCCESS_STATUS:
            message = payload.get("message")
            logger.error(
                f"Directory returned status {status} for {endpoint}: {message}"
            )
            raise UpstreamResponseError(
                f"Response error: {message}", payload_status=status
            )

        return payload.get("data")

    def list_speakers(
        self, offset: int = 0, count: int | None = None
    ) -> list[SpeakerSummary]:
        """Get one page of speaker summaries.

        Args:
            offset: Index of the first speaker in the remote collection
            count: Page size, defaults to the configured page size

        Returns
        -------
            Speaker summaries in directory order

        Raises
        ------
            UpstreamError: If the request fails or the payload is malformed
        """
        count = self.config.page_size if count is None else count
        data = self._get_data("speakers", params={"from": offset, "size": count})

        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            logger.error("Speaker listing has no items")
            raise UpstreamResponseError("Expected data.items list in speaker listing")

        try:
            speakers = [SpeakerSummary.from_dict(item) for item in items]
        except (AttributeError, TypeError, ValueError) as e:
            logger.error(f"Malformed speaker listing item: {e}")
            raise UpstreamResponseError(f"Malformed speaker listing item: {e}") from e

        logger.info(f"Retrieved {len(speakers)} speakers from offset {offset}")
        return speakers

    def fetch_random_page(
        self, rng: random.Random | None = None
    ) -> list[SpeakerSummary]:
        """Get a page of speakers starting at a random offset.

        The offset is drawn from ``[min_offset, max_offset)`` of the config.
        """
        offset = (rng or random).randrange(
            self.config.min_offset, self.config.max_offset
        )
        return self.list_speakers(offset, self.config.page_size)

    def get_speaker_detail(self, speaker_id: str) -> SpeakerRecord:
        """Get the directory record of a single speaker.

        Args:
            speaker_id: Directory id of the speaker

        Returns
        -------
            The speaker record, without any score merged in

        Raises
        ------
            SpeakerNotFoundError: If the directory does not know the speaker
            UpstreamError: If the request fails or the payload is malformed
        """
        try:
            data = self._get_data(f"speakers/{speaker_id}")
        except UpstreamResponseError as e:
            if e.status_code != 404:
                raise
            raise SpeakerNotFoundError(
                f"Speaker {speaker_id} not found", speaker_id=speaker_id
            ) from e

        if not isinstance(data, dict):
            logger.error(f"Speaker {speaker_id} payload has no data")
            raise UpstreamResponseError(f"Expected speaker data for {speaker_id}")

        try:
            return SpeakerRecord.from_payload(data)
        except ValueError as e:
            logger.error(f"Malformed payload for speaker {speaker_id}: {e}")
            raise UpstreamResponseError(
                f"Malformed payload for speaker {speaker_id}: {e}"
            ) from e
