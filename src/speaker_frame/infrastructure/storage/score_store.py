"""Score and suggestion persistence on top of a key-value store."""

import logging

from ...domain.models import Score
from ..exceptions.storage_exceptions import StoreReadError, StoreWriteError
from .kv_store import KeyValueStore

# Configure logger
logger = logging.getLogger(__name__)


class ScoreStore:
    """Reads and writes per-speaker scores and the suggestion list.

    Scores live under the speaker id; suggestions are a list under a
    single well-known key.
    """

    def __init__(
        self, store: KeyValueStore, suggestions_key: str = "suggestions"
    ) -> None:
        """Initialize the score store.

        Args:
            store: Backend to persist into
            suggestions_key: Key holding the free-text suggestion list
        """
        self.store = store
        self.suggestions_key = suggestions_key

    def get_score(self, speaker_id: str) -> Score:
        """Load a speaker's score, defaulting to zero when absent.

        Raises
        ------
            StoreReadError: If the stored value is not a valid score
        """
        value = self.store.get(speaker_id)
        if value is None:
            return Score.empty()

        try:
            return Score.from_dict(value)
        except (AttributeError, TypeError, ValueError) as e:
            raise StoreReadError(f"Invalid score record: {e}", key=speaker_id) from e

    def save_score(self, speaker_id: str, score: Score) -> None:
        if speaker_id == self.suggestions_key:
            raise StoreWriteError(
                "Speaker id collides with the suggestions key", key=speaker_id
            )
        self.store.set(speaker_id, score.to_dict())

    def get_suggestions(self) -> list[str]:
        """Return the stored suggestions, oldest first.

        Raises
        ------
            StoreReadError: If the stored value is not a list
        """
        value = self.store.get(self.suggestions_key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise StoreReadError(
                f"Expected a list of suggestions, got {type(value).__name__}",
                key=self.suggestions_key,
            )
        return [str(item) for item in value]

    def append_suggestion(self, text: str) -> None:
        """Append ``text`` verbatim to the suggestion list."""
        suggestions = self.get_suggestions()
        suggestions.append(text)
        self.store.set(self.suggestions_key, suggestions)
        logger.debug(f"Suggestion list now holds {len(suggestions)} entries")
