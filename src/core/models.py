"""
Boundary layer data model(s).

These objects are exchanged between the Move Engine, the session and the Service.
(Decouples the data model of the chess library from the information the session and the API layer need)
"""

from dataclasses import dataclass, field
from typing import Optional

from src.core.shared_types import Color, GameStatus, PieceType, Role

# Type aliases to make the models easier to read
PlayerName = str
SquareName = str


@dataclass(frozen=True)
class Seat:
    """A player's place at the table. Created when joining, never changed afterwards."""

    player: PlayerName
    color: Color
    role: Role


@dataclass(frozen=True)
class BoardPiece:
    """One occupied square of the board."""

    square: SquareName
    color: Color
    type: PieceType


@dataclass(frozen=True)
class LegalMove:
    """Verbose description of a move the side to move can currently play."""

    color: Color
    piece_type: PieceType
    from_square: SquareName
    to_square: SquareName
    promotion: Optional[PieceType] = None

    def to_uci(self) -> str:
        promotion = PROMOTION_TO_UCI[self.promotion] if self.promotion else ""
        return f"{self.from_square}{self.to_square}{promotion}"


PROMOTION_TO_UCI: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass
class PlayerView:
    """Projection of a session as seen by a single player."""

    board: list[BoardPiece]
    status: GameStatus
    color: Optional[Color] = None
    role: Optional[Role] = None
    opponents: list[PlayerName] = field(default_factory=list)
    pending_piece_type: Optional[PieceType] = None
