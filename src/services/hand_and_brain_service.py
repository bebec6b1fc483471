"""Orchestration of communication from API router to the game sessions (and the reverse direction)."""

import logging
import threading
from collections.abc import Callable
from typing import Optional
from uuid import UUID

from src.api.models import (
    ActionResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GameCreatedResponse,
    JoinGameRequest,
    MovePieceRequest,
    PickPieceRequest,
    PlayerStateRequest,
    PlayerStateResponse,
    StartGameRequest,
)
from src.core.config import SETTINGS
from src.core.exceptions import HandAndBrainError, RepositoryError
from src.db.repository import SessionRepository
from src.engine.move_engine import MoveEngine
from src.engine.python_chess_engine import PythonChessEngine
from src.session.hand_and_brain import HandAndBrainSession

logger = logging.getLogger(__name__)

EngineFactory = Callable[[Optional[str]], MoveEngine]


class HandAndBrainService:
    """Orchestration of layers for Hand and Brain games."""

    def __init__(
        self,
        repository: SessionRepository,
        engine_factory: EngineFactory = PythonChessEngine,
    ) -> None:
        self.repo = repository
        self.engine_factory = engine_factory
        # One lock per game: operations on the same session never interleave, different games run independently
        self._locks: dict[UUID, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    # -- API routes logic ---
    def create_game(self, request: CreateGameRequest) -> GameCreatedResponse:
        """Set up an empty table. Players join afterwards."""
        engine = self.engine_factory(request.starting_fen or SETTINGS.starting_fen)
        game_id = self.repo.add_session(HandAndBrainSession(engine=engine))
        logger.info("Created game %s", game_id)
        return GameCreatedResponse(game_id=game_id)

    def join_game(self, request: JoinGameRequest) -> ActionResponse:
        return self._run(
            request.game_id,
            lambda session: session.join(request.player_name),
        )

    def start_game(self, request: StartGameRequest) -> ActionResponse:
        return self._run(
            request.game_id,
            lambda session: session.start(request.player_name),
        )

    def pick_piece(self, request: PickPieceRequest) -> ActionResponse:
        return self._run(
            request.game_id,
            lambda session: session.pick_piece_type(
                request.player_name, request.piece
            ),
        )

    def move_piece(self, request: MovePieceRequest) -> ActionResponse:
        return self._run(
            request.game_id,
            lambda session: session.move_piece(
                request.player_name,
                request.from_square,
                request.to_square,
                request.promote_to,
            ),
        )

    def get_player_state(self, request: PlayerStateRequest) -> PlayerStateResponse:
        """
        Retrieve the game as seen by one player.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        session = self._fetch_session(request.game_id)
        with self._lock_for(request.game_id):
            view = session.player_view(request.player_name)
            turn_count = session.turn_count
        return PlayerStateResponse.from_view(request.game_id, view, turn_count)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a game."""
        self.repo.delete_session(request.game_id)
        with self._locks_guard:
            self._locks.pop(request.game_id, None)

    # -- Internal helpers --
    def _run(
        self, game_id: UUID, operation: Callable[[HandAndBrainSession], object]
    ) -> ActionResponse:
        """Apply an operation to a session and turn a rule violation into a rejected response."""
        session = self._fetch_session(game_id)
        with self._lock_for(game_id):
            try:
                operation(session)
            except HandAndBrainError as exc:
                logger.debug("Game %s rejected request: %s (%s)", game_id, exc.code, exc)
                return ActionResponse.rejected(exc)
        return ActionResponse.ok()

    def _lock_for(self, game_id: UUID) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(game_id, threading.Lock())

    def _fetch_session(self, game_id: UUID) -> HandAndBrainSession:
        """Attempt to find the game in the repository and raise error if it fails."""
        session = self.repo.get_session(game_id)
        if session is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return session
