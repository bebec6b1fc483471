"""Protocol Move Engine (any chess rules implementation can be plugged into a session, as long as it provides these capabilities)."""

from typing import Optional, Protocol

from src.core.models import BoardPiece, LegalMove
from src.core.shared_types import Color, PieceType


class MoveEngine(Protocol):
    """Owner of the board position and of standard chess legality."""

    def current_turn_color(self) -> Color:
        """Color of the side to move."""
        ...

    def piece_at(self, square: str) -> Optional[BoardPiece]:
        """Piece on the square (in algebraic notation), None if the square is empty."""
        ...

    def legal_moves(self, piece_type: Optional[PieceType] = None) -> list[LegalMove]:
        """Legal moves of the side to move, optionally only those of one piece type."""
        ...

    def apply_move(
        self,
        from_square: str,
        to_square: str,
        promotion: Optional[PieceType] = None,
    ) -> bool:
        """Play the move if it is legal. Returns False (and leaves the board untouched) otherwise."""
        ...

    def board_snapshot(self) -> list[BoardPiece]:
        """All occupied squares."""
        ...
