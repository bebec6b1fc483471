"""
Move Engine backed by python-chess.

Translates between the library's integer squares / piece types and the names used by the session.
"""

import logging
from typing import Optional

import chess

from src.core.config import STANDARD_STARTING_FEN
from src.core.exceptions import InvalidFENError, InvalidSquareError
from src.core.models import BoardPiece, LegalMove
from src.core.shared_types import Color, PieceType

logger = logging.getLogger(__name__)

CHESS_TO_PIECE: dict[chess.PieceType, PieceType] = {
    chess.PAWN: PieceType.PAWN,
    chess.KNIGHT: PieceType.KNIGHT,
    chess.BISHOP: PieceType.BISHOP,
    chess.ROOK: PieceType.ROOK,
    chess.QUEEN: PieceType.QUEEN,
    chess.KING: PieceType.KING,
}

PIECE_TO_CHESS: dict[PieceType, chess.PieceType] = {
    value: key for key, value in CHESS_TO_PIECE.items()
}


def to_color(color: chess.Color) -> Color:
    return Color.WHITE if color == chess.WHITE else Color.BLACK


def parse_square(square: str) -> chess.Square:
    """Algebraic notation 'a1' - 'h8' to the library's square index."""
    try:
        return chess.parse_square(square)
    except (ValueError, TypeError) as exc:
        raise InvalidSquareError(
            f"Cannot interpret {square!r} as a square on the board."
        ) from exc


class PythonChessEngine:
    """Standard chess rules, as implemented by chess.Board"""

    def __init__(self, starting_fen: Optional[str] = None) -> None:
        fen = starting_fen or STANDARD_STARTING_FEN
        try:
            self.board = chess.Board(fen)
        except ValueError as exc:
            raise InvalidFENError(f"Invalid starting position: {fen!r}") from exc

    def fen(self) -> str:
        return self.board.fen()

    def current_turn_color(self) -> Color:
        return to_color(self.board.turn)

    def piece_at(self, square: str) -> Optional[BoardPiece]:
        chess_square = parse_square(square)
        piece = self.board.piece_at(chess_square)
        if piece is None:
            return None
        return self._to_board_piece(chess_square, piece)

    def legal_moves(self, piece_type: Optional[PieceType] = None) -> list[LegalMove]:
        color = self.current_turn_color()
        moves: list[LegalMove] = []
        for move in self.board.legal_moves:
            moved_type = CHESS_TO_PIECE[self.board.piece_type_at(move.from_square)]
            if piece_type is not None and moved_type != piece_type:
                continue
            moves.append(
                LegalMove(
                    color=color,
                    piece_type=moved_type,
                    from_square=chess.square_name(move.from_square),
                    to_square=chess.square_name(move.to_square),
                    promotion=CHESS_TO_PIECE[move.promotion] if move.promotion else None,
                )
            )
        return moves

    def apply_move(
        self,
        from_square: str,
        to_square: str,
        promotion: Optional[PieceType] = None,
    ) -> bool:
        try:
            move = chess.Move(
                parse_square(from_square),
                parse_square(to_square),
                promotion=PIECE_TO_CHESS[promotion] if promotion else None,
            )
        except InvalidSquareError:
            logger.debug("Rejected move with unknown square: %s-%s", from_square, to_square)
            return False

        # NOTE compare against the listed moves: a pawn push to the last rank needs a promotion choice,
        # and king-takes-own-rook (the library's castling encoding) must not be accepted as castling
        if not any(legal == move for legal in self.board.legal_moves):
            return False
        self.board.push(move)
        return True

    def board_snapshot(self) -> list[BoardPiece]:
        """Occupied squares, listed from rank 8 down to rank 1, each rank from file a to h."""
        snapshot: list[BoardPiece] = []
        for rank in reversed(range(8)):
            for file in range(8):
                square = chess.square(file, rank)
                piece = self.board.piece_at(square)
                if piece is not None:
                    snapshot.append(self._to_board_piece(square, piece))
        return snapshot

    def _to_board_piece(self, square: chess.Square, piece: chess.Piece) -> BoardPiece:
        return BoardPiece(
            square=chess.square_name(square),
            color=to_color(piece.color),
            type=CHESS_TO_PIECE[piece.piece_type],
        )
