"""Frame rendering service for the speaker suggestion flow.

This module ties the pieces of one interaction together: it advances the
viewer's session, records the vote or suggestion carried by the
interaction, composes the speaker on display with its stored score and
returns the structured view the transport turns into an image and buttons.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from ..config import FrameConfig
from ..domain.models import Interaction, Session, SessionPhase, SpeakerDetail
from ..domain.session import derive_next_state
from ..domain.voting import apply_vote, record_suggestion
from ..infrastructure.api.speaker_client import SpeakerDirectoryClient
from ..infrastructure.exceptions.api_exceptions import UpstreamError
from ..infrastructure.exceptions.storage_exceptions import StoreError
from ..infrastructure.storage.score_store import ScoreStore

# Configure logger
logger = logging.getLogger(__name__)


class ViewKind(Enum):
    """Which card the frame shows."""

    WELCOME = "welcome"
    SPEAKER = "speaker"
    THANKS = "thanks"


class ControlKind(Enum):
    """Interactive controls the transport can render."""

    BUTTON = "button"
    LINK = "link"
    TEXT_INPUT = "text_input"
    RESET = "reset"


@dataclass(frozen=True)
class Control:
    """A single interactive control below the frame image."""

    kind: ControlKind
    label: str
    value: str | None = None
    href: str | None = None


@dataclass(frozen=True)
class FrameImage:
    """Structured description of the frame image."""

    kind: ViewKind
    heading: str
    background_image_url: str
    avatar_url: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class FrameRequest:
    """Input of one render cycle, as decoded by the transport.

    Attributes
    ----------
        state: Session carried over from the previous round trip
        interaction: Button value and text the viewer submitted
        initial: True for the very first load, before any interaction
    """

    state: Session = field(default_factory=Session.initial)
    interaction: Interaction = field(default_factory=Interaction)
    initial: bool = False


@dataclass(frozen=True)
class FrameView:
    """Output of one render cycle."""

    image: FrameImage
    controls: tuple[Control, ...]
    state: Session
    speaker: SpeakerDetail | None = None


class FrameService:
    """Renders the speaker suggestion frame one interaction at a time."""

    WELCOME_HEADING = "Welcome to Devcon Speaker Suggestions"
    THANKS_HEADING = "Thanks for your valuable suggestions"

    def __init__(
        self,
        config: FrameConfig,
        directory: SpeakerDirectoryClient,
        scores: ScoreStore,
    ) -> None:
        """Initialize the frame service.

        Args:
            config: Frame configuration
            directory: Client for the remote speaker directory
            scores: Store for per-speaker scores and suggestions
        """
        self.config = config
        self.directory = directory
        self.scores = scores

    def render(self, request: FrameRequest) -> FrameView:
        """Run one interaction and build the resulting view.

        Args:
            request: Prior state and the viewer's interaction

        Returns
        -------
            The view to hand to the transport, including the new state

        Raises
        ------
            UpstreamError: If the speaker directory fails
            StoreError: If the score store fails
        """
        if request.initial:
            return self._welcome_view(request.state)

        try:
            return self._advance(request.state, request.interaction)
        except (UpstreamError, StoreError) as e:
            logger.error(f"Failed to render frame: {e}")
            raise

    def compose_detail(self, speaker_id: str) -> SpeakerDetail:
        """Merge a speaker's directory record with its stored score.

        Raises
        ------
            UpstreamError: If the directory record cannot be fetched
            StoreError: If the score cannot be read
        """
        record = self.directory.get_speaker_detail(speaker_id)
        score = self.scores.get_score(speaker_id)
        return SpeakerDetail.compose(record, score)

    def _advance(self, prior: Session, interaction: Interaction) -> FrameView:
        state = derive_next_state(prior, self.directory.fetch_random_page)

        voted = interaction.button_value in self.config.vote_values

        # Votes count only for a speaker that was on display
        if prior.phase is SessionPhase.PAGING and voted:
            apply_vote(state, interaction.button_value, self.scores, self.config)
        elif prior.phase is SessionPhase.EXHAUSTED and interaction.has_text:
            record_suggestion(state, interaction.input_text, self.scores)

        current = state.current_speaker
        if current is None:
            return self._thanks_view(state)

        speaker = self.compose_detail(current.id)
        return self._speaker_view(state, speaker)

    def _welcome_view(self, state: Session) -> FrameView:
        return FrameView(
            image=FrameImage(
                kind=ViewKind.WELCOME,
                heading=self.WELCOME_HEADING,
                background_image_url=self.config.background_image_url,
            ),
            controls=(
                Control(
                    ControlKind.BUTTON,
                    "Check out previous speakers",
                    value=self.config.start_value,
                ),
            ),
            state=state,
        )

    def _speaker_view(self, state: Session, speaker: SpeakerDetail) -> FrameView:
        controls = [
            Control(ControlKind.BUTTON, "Agree", value=self.config.agree_value),
            Control(ControlKind.BUTTON, "Unsure", value=self.config.unsure_value),
        ]
        if speaker.twitter_url is not None:
            controls.append(
                Control(ControlKind.LINK, "Twitter", href=speaker.twitter_url)
            )

        return FrameView(
            image=FrameImage(
                kind=ViewKind.SPEAKER,
                heading=speaker.name,
                background_image_url=self.config.background_image_url,
                avatar_url=speaker.avatar_url,
                description=speaker.description,
            ),
            controls=tuple(controls),
            state=state,
            speaker=speaker,
        )

    def _thanks_view(self, state: Session) -> FrameView:
        return FrameView(
            image=FrameImage(
                kind=ViewKind.THANKS,
                heading=self.THANKS_HEADING,
                background_image_url=self.config.background_image_url,
            ),
            controls=(
                Control(
                    ControlKind.TEXT_INPUT, self.config.suggestion_placeholder
                ),
                Control(ControlKind.RESET, "Submit"),
            ),
            state=state,
        )
