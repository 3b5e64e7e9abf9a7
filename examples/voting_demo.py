#!/usr/bin/env python3
"""Demonstrates a scripted viewer session against the live speaker directory.

This script plays the part of the frame transport: it carries the session
between round trips as JSON, always votes "agree" on even positions and
"unsure" otherwise, then submits one suggestion and prints the tallies.
"""

import json
import logging

from speaker_frame.config import FrameConfig
from speaker_frame.domain.models import Interaction, Session
from speaker_frame.infrastructure.api.speaker_client import SpeakerDirectoryClient
from speaker_frame.infrastructure.storage.kv_store import InMemoryKeyValueStore
from speaker_frame.infrastructure.storage.score_store import ScoreStore
from speaker_frame.services.frame_service import FrameRequest, FrameService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Walk one session from the welcome card to the suggestion box."""
    config = FrameConfig(page_size=5)
    scores = ScoreStore(InMemoryKeyValueStore(), config.suggestions_key)
    service = FrameService(config, SpeakerDirectoryClient(config), scores)

    view = service.render(FrameRequest(initial=True))
    logger.info(view.image.heading)
    payload = json.dumps(view.state.to_dict())

    value = config.start_value
    while True:
        state = Session.from_dict(json.loads(payload))
        view = service.render(FrameRequest(state=state, interaction=Interaction(value)))
        payload = json.dumps(view.state.to_dict())

        if view.speaker is None:
            break

        logger.info(f"Showing {view.speaker.name} ({view.speaker.id})")
        value = config.agree_value if view.state.current_index % 2 == 0 else config.unsure_value

    service.render(
        FrameRequest(
            state=Session.from_dict(json.loads(payload)),
            interaction=Interaction(input_text="Jane Doe"),
        )
    )

    for speaker in view.state.speakers:
        score = scores.get_score(speaker.id)
        logger.info(
            f"{speaker.id}: suggested {score.suggested_count} / appeared {score.appeared_count}"
        )
    logger.info(f"Suggestions: {scores.get_suggestions()}")


if __name__ == "__main__":
    main()
