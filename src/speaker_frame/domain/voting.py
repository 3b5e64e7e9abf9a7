"""Vote and suggestion aggregation.

Votes are attributed to the speaker just left, ``speakers[current_index - 1]``
of the advanced session. The read-modify-write on the score is not
idempotent: replaying an interaction counts it twice.
"""

import logging

from ..config import FrameConfig
from ..infrastructure.storage.score_store import ScoreStore
from .models import Score, Session, SessionPhase

# Configure logger
logger = logging.getLogger(__name__)


def apply_vote(
    session: Session,
    button_value: str | None,
    scores: ScoreStore,
    config: FrameConfig,
) -> Score | None:
    """Record a vote for the speaker shown before ``session.current_index``.

    Args:
        session: Session after the interaction has advanced it
        button_value: Button the viewer pressed
        scores: Store holding per-speaker scores
        config: Frame configuration, for the "agree" value

    Returns
    -------
        The persisted score, or None when there was nothing to vote on

    Raises
    ------
        StoreError: If the score cannot be read or written
    """
    if not button_value:
        return None
    if not 0 < session.current_index <= len(session.speakers):
        return None

    speaker = session.speakers[session.current_index - 1]
    agreed = button_value == config.agree_value

    score = scores.get_score(speaker.id).record(agreed)
    scores.save_score(speaker.id, score)

    logger.info(
        f"Recorded {'agree' if agreed else button_value!r} for speaker {speaker.id}: "
        f"{score.suggested_count}/{score.appeared_count}"
    )
    return score


def record_suggestion(
    session: Session, input_text: str | None, scores: ScoreStore
) -> bool:
    """Append a free-text suggestion once the session is exhausted.

    Args:
        session: Current session
        input_text: Text typed by the viewer, stored verbatim
        scores: Store holding the suggestion list

    Returns
    -------
        True if the suggestion was stored

    Raises
    ------
        StoreError: If the suggestion list cannot be read or written
    """
    if session.phase is not SessionPhase.EXHAUSTED:
        return False
    if not input_text or not input_text.strip():
        return False

    scores.append_suggestion(input_text)
    logger.info("Recorded speaker suggestion")
    return True
