"""Unit tests for the domain models."""

import pytest

from speaker_frame.domain.models import (
    Interaction,
    Score,
    Session,
    SessionPhase,
    SpeakerDetail,
    SpeakerRecord,
    SpeakerSummary,
)


def make_speakers(count: int) -> tuple[SpeakerSummary, ...]:
    return tuple(SpeakerSummary(id=f"speaker-{i}") for i in range(count))


class TestScore:
    """Tests for the Score record."""

    def test_empty_score(self) -> None:
        """Test the default score is zero."""
        assert Score.empty() == Score(0, 0)

    def test_record_agree(self) -> None:
        """Test that agreeing counts a suggestion and an appearance."""
        assert Score(1, 2).record(agreed=True) == Score(2, 3)

    def test_record_unsure(self) -> None:
        """Test that any other vote only counts an appearance."""
        assert Score(1, 2).record(agreed=False) == Score(1, 3)

    def test_record_does_not_modify_original(self) -> None:
        """Test that recording returns a new score."""
        score = Score(0, 0)
        score.record(agreed=True)

        assert score == Score(0, 0)

    def test_rejects_more_suggestions_than_appearances(self) -> None:
        """Test the appearances-at-least-suggestions invariant."""
        with pytest.raises(ValueError):
            Score(suggested_count=3, appeared_count=2)

    def test_rejects_negative_counts(self) -> None:
        """Test that negative counts are rejected."""
        with pytest.raises(ValueError):
            Score(suggested_count=-1, appeared_count=0)

    def test_dict_round_trip_uses_camel_case(self) -> None:
        """Test the stored representation of a score."""
        score = Score(2, 5)

        assert score.to_dict() == {"suggestedCount": 2, "appearedCount": 5}
        assert Score.from_dict(score.to_dict()) == score

    def test_from_partial_dict(self) -> None:
        """Test that missing counts default to zero."""
        assert Score.from_dict({"appearedCount": 4}) == Score(0, 4)

    @pytest.mark.parametrize(
        "data",
        [
            {"suggestedCount": 1, "appearedCount": 1.7},
            {"suggestedCount": True, "appearedCount": 1},
            {"suggestedCount": "1", "appearedCount": 1},
            {"suggestedCount": 0, "appearedCount": None},
        ],
    )
    def test_from_dict_rejects_non_integer_counts(self, data: dict) -> None:
        """Test that stored counts must be plain integers."""
        with pytest.raises(ValueError):
            Score.from_dict(data)


class TestSpeakerSummary:
    """Tests for the SpeakerSummary record."""

    @pytest.mark.parametrize("data", [{}, {"id": None}, {"id": 5}, {"id": ""}])
    def test_from_dict_requires_string_id(self, data: dict) -> None:
        """Test that a missing, null or non-string id is rejected."""
        with pytest.raises(ValueError):
            SpeakerSummary.from_dict(data)

    def test_from_dict_ignores_non_string_twitter(self) -> None:
        """Test that a twitter value of the wrong type is treated as absent."""
        summary = SpeakerSummary.from_dict({"id": "a", "twitter": 42})

        assert summary == SpeakerSummary("a", None)


class TestSpeakerRecord:
    """Tests for the SpeakerRecord record."""

    PAYLOAD = {
        "id": "alice",
        "sourceId": "SRC1",
        "name": "Alice",
        "avatar": "https://example.com/alice.png",
    }

    def test_from_payload_optional_fields_default_to_none(self) -> None:
        """Test that description and twitter may be absent."""
        record = SpeakerRecord.from_payload(self.PAYLOAD)

        assert record.description is None
        assert record.twitter_handle is None

    @pytest.mark.parametrize("key", ["id", "sourceId", "name", "avatar"])
    @pytest.mark.parametrize("value", [None, 3, ""])
    def test_from_payload_rejects_bad_required_field(self, key: str, value) -> None:
        """Test that required fields must be non-empty strings."""
        with pytest.raises(ValueError):
            SpeakerRecord.from_payload({**self.PAYLOAD, key: value})


class TestSession:
    """Tests for the Session record and its phases."""

    def test_initial_session_is_uninitialized(self) -> None:
        """Test the state of a fresh session."""
        session = Session.initial()

        assert session.phase is SessionPhase.UNINITIALIZED
        assert session.current_speaker is None

    def test_paging_phase(self) -> None:
        """Test that a loaded session with speakers left is paging."""
        speakers = make_speakers(3)
        session = Session(loaded=True, current_index=1, speakers=speakers)

        assert session.phase is SessionPhase.PAGING
        assert session.current_speaker == speakers[1]

    def test_exhausted_phase(self) -> None:
        """Test that a session past its last speaker is exhausted."""
        session = Session(loaded=True, current_index=3, speakers=make_speakers(3))

        assert session.phase is SessionPhase.EXHAUSTED
        assert session.current_speaker is None

    def test_loaded_empty_session_is_exhausted(self) -> None:
        """Test that an empty page leaves nothing to page through."""
        assert Session(loaded=True).phase is SessionPhase.EXHAUSTED

    def test_rejects_negative_index(self) -> None:
        """Test that the index cannot be negative."""
        with pytest.raises(ValueError):
            Session(current_index=-1)

    def test_transport_round_trip(self) -> None:
        """Test serialization used between round trips."""
        session = Session(
            loaded=True,
            current_index=1,
            speakers=(SpeakerSummary("a", "alice"), SpeakerSummary("b")),
        )

        data = session.to_dict()

        assert data == {
            "loaded": True,
            "currentIdx": 1,
            "speakers": [{"id": "a", "twitter": "alice"}, {"id": "b", "twitter": None}],
        }
        assert Session.from_dict(data) == session

    def test_from_empty_dict_is_initial(self) -> None:
        """Test that missing transport state decodes to a fresh session."""
        assert Session.from_dict(None) == Session.initial()
        assert Session.from_dict({}) == Session.initial()


class TestSpeakerDetail:
    """Tests for composing speaker details."""

    def test_compose_merges_record_and_score(self) -> None:
        """Test that composition copies every field."""
        record = SpeakerRecord(
            id="s1",
            source_id="src-1",
            name="Ada",
            avatar_url="https://example.com/ada.png",
            description="Cryptographer",
            twitter_handle="ada",
        )

        detail = SpeakerDetail.compose(record, Score(1, 4))

        assert detail.name == "Ada"
        assert detail.source_id == "src-1"
        assert detail.description == "Cryptographer"
        assert detail.suggested_count == 1
        assert detail.appeared_count == 4
        assert detail.twitter_url == "https://x.com/ada"

    def test_twitter_url_absent_without_handle(self) -> None:
        """Test that no link is built without a handle."""
        record = SpeakerRecord("s1", "src-1", "Ada", "https://example.com/ada.png")

        assert SpeakerDetail.compose(record, Score.empty()).twitter_url is None


class TestInteraction:
    """Tests for the Interaction record."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [(None, False), ("", False), ("   ", False), ("Jane Doe", True)],
    )
    def test_has_text(self, text: str | None, expected: bool) -> None:
        """Test detection of non-empty free text."""
        assert Interaction(input_text=text).has_text is expected
