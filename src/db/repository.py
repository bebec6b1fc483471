"""Protocol repository (sessions are kept in memory, but the service only relies on this contract)."""

from typing import Protocol
from uuid import UUID

from src.session.hand_and_brain import HandAndBrainSession


class SessionRepository(Protocol):
    """Keeps track of running games"""

    def get_session(self, game_id: UUID) -> HandAndBrainSession | None:
        """Get session by ID, if it exists."""
        ...

    def add_session(self, session: HandAndBrainSession) -> UUID:
        """Store a new session and return its newly created game ID."""
        ...

    def delete_session(self, game_id: UUID) -> HandAndBrainSession | None:
        """Remove a session."""
        ...
