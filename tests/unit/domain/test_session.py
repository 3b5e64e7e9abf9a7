"""Unit tests for the session state machine."""

from unittest import mock

import pytest

from speaker_frame.domain.models import Session, SessionPhase, SpeakerSummary
from speaker_frame.domain.session import derive_next_state
from speaker_frame.infrastructure.exceptions.api_exceptions import UpstreamError


def make_speakers(count: int) -> tuple[SpeakerSummary, ...]:
    return tuple(SpeakerSummary(id=f"speaker-{i}") for i in range(count))


def identity(speakers):
    return list(speakers)


class TestDeriveNextState:
    """Tests for derive_next_state."""

    def test_first_interaction_loads_page(self) -> None:
        """Test Uninitialized -> Paging on the first interaction."""
        page = list(make_speakers(10))
        fetch = mock.Mock(return_value=page)

        state = derive_next_state(Session.initial(), fetch)

        fetch.assert_called_once_with()
        assert state.phase is SessionPhase.PAGING
        assert state.loaded is True
        assert state.current_index == 0
        assert len(state.speakers) == 10
        assert sorted(s.id for s in state.speakers) == sorted(s.id for s in page)

    def test_first_interaction_shuffles_page(self) -> None:
        """Test that the fetched page goes through the shuffler."""
        page = list(make_speakers(3))
        shuffler = mock.Mock(return_value=list(reversed(page)))

        state = derive_next_state(Session.initial(), lambda: page, shuffler=shuffler)

        shuffler.assert_called_once_with(page)
        assert state.speakers == tuple(reversed(page))

    def test_empty_page_goes_straight_to_exhausted(self) -> None:
        """Test loading an empty page."""
        state = derive_next_state(Session.initial(), lambda: [])

        assert state.loaded is True
        assert state.phase is SessionPhase.EXHAUSTED

    def test_paging_increments_index(self) -> None:
        """Test a subsequent interaction advances the pointer."""
        prior = Session(loaded=True, current_index=3, speakers=make_speakers(10))
        fetch = mock.Mock()

        state = derive_next_state(prior, fetch)

        fetch.assert_not_called()
        assert state.current_index == 4
        assert state.speakers == prior.speakers
        assert state.phase is SessionPhase.PAGING

    def test_last_speaker_moves_to_exhausted(self) -> None:
        """Test that leaving the last speaker exhausts the session."""
        prior = Session(loaded=True, current_index=9, speakers=make_speakers(10))

        state = derive_next_state(prior, mock.Mock())

        assert state.current_index == 10
        assert state.phase is SessionPhase.EXHAUSTED

    def test_exhausted_is_terminal(self) -> None:
        """Test that an exhausted session does not change."""
        prior = Session(loaded=True, current_index=10, speakers=make_speakers(10))
        fetch = mock.Mock()

        state = derive_next_state(prior, fetch)

        fetch.assert_not_called()
        assert state == prior

    def test_prior_state_is_not_modified(self) -> None:
        """Test that derivation returns a new session."""
        prior = Session(loaded=True, current_index=0, speakers=make_speakers(2))
        snapshot = Session.from_dict(prior.to_dict())

        derive_next_state(prior, mock.Mock())

        assert prior == snapshot

    def test_index_never_decreases(self) -> None:
        """Test index monotonicity over a whole session."""
        state = Session.initial()
        indices = []

        for _ in range(15):
            state = derive_next_state(state, lambda: list(make_speakers(5)), identity)
            indices.append(state.current_index)

        assert indices == sorted(indices)
        assert indices[0] == 0
        assert indices[-1] == 5

    def test_fetch_failure_propagates(self) -> None:
        """Test that an upstream failure aborts the derivation."""
        fetch = mock.Mock(side_effect=UpstreamError("directory down"))

        with pytest.raises(UpstreamError):
            derive_next_state(Session.initial(), fetch)
