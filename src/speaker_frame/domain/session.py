"""Session state machine for the speaker paging flow.

A viewer's session moves Uninitialized -> Paging -> Exhausted. The transport
decodes the prior session, calls ``derive_next_state`` exactly once per
interaction and encodes the result for the next round trip.
"""

import logging
from collections.abc import Callable, Sequence

from .models import Session, SessionPhase, SpeakerSummary
from .shuffle import shuffle

# Configure logger
logger = logging.getLogger(__name__)

PageFetcher = Callable[[], Sequence[SpeakerSummary]]
Shuffler = Callable[[Sequence[SpeakerSummary]], list[SpeakerSummary]]


def derive_next_state(
    prior: Session,
    fetch_page: PageFetcher,
    shuffler: Shuffler = shuffle,
) -> Session:
    """Advance a session by one interaction.

    Args:
        prior: Session decoded from the previous round trip
        fetch_page: Called once, only for an uninitialized session, to load
            the speaker page
        shuffler: Permutation applied to the freshly fetched page

    Returns
    -------
        The next session; ``prior`` is never modified

    Raises
    ------
        UpstreamError: Propagated from ``fetch_page``
    """
    phase = prior.phase

    if phase is SessionPhase.UNINITIALIZED:
        speakers = tuple(shuffler(fetch_page()))
        logger.debug(f"Loaded session with {len(speakers)} speakers")
        return Session(loaded=True, current_index=0, speakers=speakers)

    if phase is SessionPhase.PAGING:
        next_index = prior.current_index + 1
        logger.debug(f"Advancing session to {next_index}/{len(prior.speakers)}")
        return Session(
            loaded=True, current_index=next_index, speakers=prior.speakers
        )

    # Exhausted is terminal
    return prior
