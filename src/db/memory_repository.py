"""Implementation of (Session)Repository using a dictionary"""

from uuid import UUID, uuid4

from src.session.hand_and_brain import HandAndBrainSession


class InMemorySessionRepository:
    """Sessions live as long as the process does."""

    def __init__(self) -> None:
        self._sessions: dict[UUID, HandAndBrainSession] = {}

    def get_session(self, game_id: UUID) -> HandAndBrainSession | None:
        """Get session by ID, if it exists."""
        return self._sessions.get(game_id)

    def add_session(self, session: HandAndBrainSession) -> UUID:
        """Store a new session and return its newly created game ID."""
        game_id = uuid4()
        self._sessions[game_id] = session
        return game_id

    def delete_session(self, game_id: UUID) -> HandAndBrainSession | None:
        """Remove a session."""
        return self._sessions.pop(game_id, None)

    def __len__(self) -> int:
        return len(self._sessions)
