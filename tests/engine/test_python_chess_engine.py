"""Unit tests for src/engine/python_chess_engine.py"""

import pytest

from src.core.exceptions import InvalidFENError, InvalidSquareError
from src.core.models import BoardPiece, LegalMove
from src.core.shared_types import Color, PieceType
from src.engine.python_chess_engine import PythonChessEngine, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
PROMOTION_FEN = "7k/P7/8/8/8/8/8/K7 w - - 0 1"
# Both white rooks and the king on their starting squares, castling rights on both sides
CASTLING_FEN = "4k3/8/8/8/8/8/8/R3K2R w KQ - 0 1"


def test_default_starting_position(engine: PythonChessEngine) -> None:
    assert engine.fen() == STARTING_FEN
    assert engine.current_turn_color() == Color.WHITE


def test_custom_starting_position() -> None:
    engine = PythonChessEngine(PROMOTION_FEN)
    assert engine.fen() == PROMOTION_FEN
    assert len(engine.board_snapshot()) == 3


@pytest.mark.parametrize(
    "fen",
    [
        "nonsense",
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w KQkq - 0 1",  # only 7 ranks
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1",  # no such color to move
    ],
)
def test_invalid_starting_position(fen: str) -> None:
    with pytest.raises(InvalidFENError):
        _ = PythonChessEngine(fen)


# -- Squares and pieces --
def test_piece_at(engine: PythonChessEngine) -> None:
    assert engine.piece_at("e1") == BoardPiece("e1", Color.WHITE, PieceType.KING)
    assert engine.piece_at("d8") == BoardPiece("d8", Color.BLACK, PieceType.QUEEN)
    assert engine.piece_at("g7") == BoardPiece("g7", Color.BLACK, PieceType.PAWN)
    assert engine.piece_at("e4") is None


@pytest.mark.parametrize("square", ["i1", "a9", "a0", "e", "nonsense", ""])
def test_piece_at_unknown_square(engine: PythonChessEngine, square: str) -> None:
    with pytest.raises(InvalidSquareError):
        _ = engine.piece_at(square)


def test_parse_square() -> None:
    assert parse_square("a1") == 0
    assert parse_square("h8") == 63
    with pytest.raises(InvalidSquareError):
        _ = parse_square("h9")


# -- Legal moves --
def test_legal_moves_starting_position(engine: PythonChessEngine) -> None:
    moves = engine.legal_moves()
    assert len(moves) == 20
    assert all(move.color == Color.WHITE for move in moves)
    assert {move.piece_type for move in moves} == {PieceType.PAWN, PieceType.KNIGHT}


@pytest.mark.parametrize(
    "piece_type, expected_count",
    [
        (PieceType.PAWN, 16),
        (PieceType.KNIGHT, 4),
        (PieceType.BISHOP, 0),
        (PieceType.KING, 0),
    ],
)
def test_legal_moves_by_piece_type(
    engine: PythonChessEngine, piece_type: PieceType, expected_count: int
) -> None:
    moves = engine.legal_moves(piece_type)
    assert len(moves) == expected_count
    assert all(move.piece_type == piece_type for move in moves)


def test_promotion_moves_are_listed_per_choice() -> None:
    engine = PythonChessEngine(PROMOTION_FEN)
    promotions = {
        move.promotion for move in engine.legal_moves(PieceType.PAWN)
    }
    assert promotions == {
        PieceType.QUEEN,
        PieceType.ROOK,
        PieceType.BISHOP,
        PieceType.KNIGHT,
    }
    assert LegalMove(
        Color.WHITE, PieceType.PAWN, "a7", "a8", PieceType.QUEEN
    ).to_uci() == "a7a8q"


# -- Applying moves --
def test_apply_legal_move(engine: PythonChessEngine) -> None:
    assert engine.apply_move("e2", "e4") is True
    assert engine.current_turn_color() == Color.BLACK
    assert engine.piece_at("e4") == BoardPiece("e4", Color.WHITE, PieceType.PAWN)


@pytest.mark.parametrize(
    "from_square, to_square",
    [
        ("e2", "e5"),  # pawn cannot move three squares
        ("e7", "e5"),  # not black's turn
        ("e1", "e2"),  # own piece on target square
        ("e4", "e5"),  # empty square
        ("e2", "nonsense"),
        ("z2", "e4"),
    ],
)
def test_reject_illegal_move(
    engine: PythonChessEngine, from_square: str, to_square: str
) -> None:
    assert engine.apply_move(from_square, to_square) is False
    assert engine.fen() == STARTING_FEN


def test_promotion_requires_choice() -> None:
    engine = PythonChessEngine(PROMOTION_FEN)
    assert engine.apply_move("a7", "a8") is False
    assert engine.apply_move("a7", "a8", PieceType.KNIGHT) is True
    assert engine.piece_at("a8") == BoardPiece("a8", Color.WHITE, PieceType.KNIGHT)


def test_board_snapshot_order(engine: PythonChessEngine) -> None:
    """From black's back rank to white's back rank, a-file to h-file."""
    snapshot = engine.board_snapshot()
    assert len(snapshot) == 32
    assert [piece.square for piece in snapshot[:8]] == [
        "a8", "b8", "c8", "d8", "e8", "f8", "g8", "h8"
    ]
    assert snapshot[4] == BoardPiece("e8", Color.BLACK, PieceType.KING)
    assert snapshot[-4] == BoardPiece("e1", Color.WHITE, PieceType.KING)


@pytest.mark.parametrize("to_square", ["h1", "a1"])
def test_king_cannot_take_own_rook(to_square: str) -> None:
    """Castling is the king moving two squares, the king never lands on its own rook's square."""
    engine = PythonChessEngine(CASTLING_FEN)
    assert engine.apply_move("e1", to_square) is False
    assert engine.fen() == CASTLING_FEN


@pytest.mark.parametrize(
    "to_square, rook_square",
    [
        ("g1", "f1"),  # king side
        ("c1", "d1"),  # queen side
    ],
)
def test_castling(to_square: str, rook_square: str) -> None:
    engine = PythonChessEngine(CASTLING_FEN)
    assert engine.apply_move("e1", to_square) is True
    assert engine.piece_at(to_square) == BoardPiece(to_square, Color.WHITE, PieceType.KING)
    assert engine.piece_at(rook_square) == BoardPiece(
        rook_square, Color.WHITE, PieceType.ROOK
    )
    assert engine.piece_at("e1") is None
