"""Requests and Response models"""

from typing import Optional, Self
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import HandAndBrainError, InvalidRequestError
from src.core.models import PlayerView
from src.core.shared_types import Color, GameStatus, PieceType, Role

PlayerName = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_fen: Optional[str] = None

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        parts = value.strip().split(" ")
        if len(parts) != 6:
            raise InvalidRequestError(
                "FEN string must contain 6 space-separated parts."
            )
        return value.strip()


class JoinGameRequest(BaseModel):
    game_id: UUID
    player_name: PlayerName


class StartGameRequest(BaseModel):
    game_id: UUID
    player_name: PlayerName


# NOTE piece and squares are kept as raw strings: the session decides (in order of its checks) whether they are valid
class PickPieceRequest(BaseModel):
    game_id: UUID
    player_name: PlayerName
    piece: Optional[str] = None


class MovePieceRequest(BaseModel):
    game_id: UUID
    player_name: PlayerName
    from_square: str
    to_square: str
    promote_to: Optional[str] = None


class PlayerStateRequest(BaseModel):
    game_id: UUID
    player_name: PlayerName


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameCreatedResponse(BaseModel):
    game_id: UUID


class ActionResponse(BaseModel):
    """Uniform outcome of join / start / pick / move: success, or the reason it was rejected."""

    success: bool
    reason: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> Self:
        return cls(success=True)

    @classmethod
    def rejected(cls, exc: HandAndBrainError) -> Self:
        return cls(success=False, reason=str(exc), error=exc.code)


class PieceResponse(BaseModel):
    square: str
    color: Color
    type: PieceType


class PlayerStateResponse(BaseModel):
    game_id: UUID
    board: list[PieceResponse]
    status: GameStatus
    color: Optional[Color] = None
    role: Optional[Role] = None
    opponents: list[PlayerName] = []
    pending_piece_type: Optional[PieceType] = None
    turn_count: int = 0

    @classmethod
    def from_view(cls, game_id: UUID, view: PlayerView, turn_count: int) -> Self:
        return cls(
            game_id=game_id,
            board=[
                PieceResponse(square=piece.square, color=piece.color, type=piece.type)
                for piece in view.board
            ],
            status=view.status,
            color=view.color,
            role=view.role,
            opponents=view.opponents,
            pending_piece_type=view.pending_piece_type,
            turn_count=turn_count,
        )
