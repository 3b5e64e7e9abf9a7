"""Data models for the speaker suggestion frame.

This module contains the records exchanged between the directory client,
the session state machine, the score store and the frame service.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


def _required_text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"field {key!r} must be a non-empty string, got {value!r}")
    return value


def _optional_text(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) and value else None


def _count(data: dict[str, Any], key: str) -> int:
    value = data.get(key, 0)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class SpeakerSummary:
    """Lightweight listing entry for a speaker."""

    id: str
    twitter_handle: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "twitter": self.twitter_handle}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SpeakerSummary":
        return cls(
            id=_required_text(data, "id"),
            twitter_handle=_optional_text(data, "twitter"),
        )


@dataclass(frozen=True)
class SpeakerRecord:
    """Speaker detail as returned by the directory, before any score is merged."""

    id: str
    source_id: str
    name: str
    avatar_url: str
    description: str | None = None
    twitter_handle: str | None = None

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "SpeakerRecord":
        """Build a record from the directory's speaker payload.

        Raises
        ------
            ValueError: If a required field is missing, null or not a string
        """
        return cls(
            id=_required_text(data, "id"),
            source_id=_required_text(data, "sourceId"),
            name=_required_text(data, "name"),
            avatar_url=_required_text(data, "avatar"),
            description=_optional_text(data, "description"),
            twitter_handle=_optional_text(data, "twitter"),
        )


@dataclass(frozen=True)
class Score:
    """Per-speaker tally of appearances and "agree" votes.

    Every suggestion is also an appearance, so ``appeared_count`` can never
    be lower than ``suggested_count``.
    """

    suggested_count: int = 0
    appeared_count: int = 0

    def __post_init__(self) -> None:
        if self.suggested_count < 0 or self.appeared_count < 0:
            raise ValueError(
                f"Score counts must be non-negative, got {self.suggested_count}/"
                f"{self.appeared_count}"
            )
        if self.appeared_count < self.suggested_count:
            raise ValueError(
                f"appeared_count ({self.appeared_count}) is lower than "
                f"suggested_count ({self.suggested_count})"
            )

    @classmethod
    def empty(cls) -> "Score":
        return cls(0, 0)

    def record(self, agreed: bool) -> "Score":
        """Return the score after one more appearance.

        Args:
            agreed: Whether the viewer agreed the speaker should be suggested

        Returns
        -------
            A new Score; this one is left untouched
        """
        return Score(
            suggested_count=self.suggested_count + (1 if agreed else 0),
            appeared_count=self.appeared_count + 1,
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "suggestedCount": self.suggested_count,
            "appearedCount": self.appeared_count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Score":
        return cls(
            suggested_count=_count(data, "suggestedCount"),
            appeared_count=_count(data, "appearedCount"),
        )


@dataclass(frozen=True)
class SpeakerDetail:
    """Fully composed speaker: directory fields plus the stored score."""

    id: str
    source_id: str
    name: str
    avatar_url: str
    description: str | None = None
    twitter_handle: str | None = None
    suggested_count: int = 0
    appeared_count: int = 0

    @classmethod
    def compose(cls, record: SpeakerRecord, score: Score) -> "SpeakerDetail":
        return cls(
            id=record.id,
            source_id=record.source_id,
            name=record.name,
            avatar_url=record.avatar_url,
            description=record.description,
            twitter_handle=record.twitter_handle,
            suggested_count=score.suggested_count,
            appeared_count=score.appeared_count,
        )

    @property
    def twitter_url(self) -> str | None:
        if self.twitter_handle is None:
            return None
        return f"https://x.com/{self.twitter_handle}"


class SessionPhase(Enum):
    """Where a viewer's session stands in the paging flow."""

    UNINITIALIZED = "uninitialized"
    PAGING = "paging"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Session:
    """Per-viewer state threaded through successive frame interactions.

    Attributes
    ----------
        loaded: Whether the speaker page has been fetched
        current_index: Position of the speaker on display
        speakers: Shuffled page of speakers for this viewer
    """

    loaded: bool = False
    current_index: int = 0
    speakers: tuple[SpeakerSummary, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.current_index < 0:
            raise ValueError(f"current_index must be >= 0, got {self.current_index}")

    @classmethod
    def initial(cls) -> "Session":
        return cls()

    @property
    def phase(self) -> SessionPhase:
        if not self.loaded:
            return SessionPhase.UNINITIALIZED
        if self.current_index < len(self.speakers):
            return SessionPhase.PAGING
        return SessionPhase.EXHAUSTED

    @property
    def current_speaker(self) -> SpeakerSummary | None:
        if self.phase is not SessionPhase.PAGING:
            return None
        return self.speakers[self.current_index]

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the transport that carries state between round trips."""
        return {
            "loaded": self.loaded,
            "currentIdx": self.current_index,
            "speakers": [speaker.to_dict() for speaker in self.speakers],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Session":
        """Rebuild a session decoded by the transport.

        Args:
            data: Mapping produced by ``to_dict``; None means a fresh session

        Returns
        -------
            The decoded Session
        """
        if not data:
            return cls.initial()
        return cls(
            loaded=bool(data.get("loaded", False)),
            current_index=int(data.get("currentIdx", 0)),
            speakers=tuple(
                SpeakerSummary.from_dict(item) for item in data.get("speakers", [])
            ),
        )


@dataclass(frozen=True)
class Interaction:
    """What the viewer did on the previous render."""

    button_value: str | None = None
    input_text: str | None = None

    @property
    def has_text(self) -> bool:
        return bool(self.input_text and self.input_text.strip())
