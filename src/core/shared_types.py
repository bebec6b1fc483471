"""
Type definitions used across layers
"""

from enum import StrEnum
from typing import Self


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class Role(StrEnum):
    HAND = "hand"
    BRAIN = "brain"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


# --- Status is derived by the session (never stored): WAITING until 4 players are seated, then <COLOR>_<ROLE>_TURN
class GameStatus(StrEnum):
    WAITING = "WAITING"
    WHITE_BRAIN_TURN = "WHITE_BRAIN_TURN"
    WHITE_HAND_TURN = "WHITE_HAND_TURN"
    BLACK_BRAIN_TURN = "BLACK_BRAIN_TURN"
    BLACK_HAND_TURN = "BLACK_HAND_TURN"

    @classmethod
    def for_turn(cls, color: Color, role: Role) -> Self:
        return cls[f"{color.name}_{role.name}_TURN"]
