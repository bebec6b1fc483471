"""
The HandAndBrainSession is the entrypoint into the domain layer for the service layer.

It owns the seating and the turn/role state of one game of Hand and Brain:
- the Brain of the side to move picks a piece type,
- the Hand of the side to move then moves a piece of exactly that type.

Whose turn it is always comes from the Move Engine. The only state the session adds on top is
the pending pick. Every operation validates completely before mutating anything, so a rejected
request leaves the session unchanged.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from src.core.config import MAX_PLAYERS
from src.core.exceptions import (
    AlreadyJoinedError,
    AlreadyPickedError,
    GameFullError,
    GameNotStartedError,
    IllegalMoveError,
    InvalidPieceTypeError,
    InvalidSquareError,
    NoLegalMoveError,
    NoPendingPickError,
    NotBrainError,
    NotEnoughPlayersError,
    NotHandError,
    NotYourTurnError,
    PlayerNotInGameError,
    WrongPieceTypeError,
)
from src.core.models import PlayerView, Seat
from src.core.shared_types import Color, GameStatus, PieceType, Role
from src.engine.move_engine import MoveEngine

logger = logging.getLogger(__name__)

# Join order decides the seat: both Hands first, then both Brains
SEATING_ORDER: tuple[tuple[Color, Role], ...] = (
    (Color.WHITE, Role.HAND),
    (Color.BLACK, Role.HAND),
    (Color.WHITE, Role.BRAIN),
    (Color.BLACK, Role.BRAIN),
)


def seat_assignment(seat_count: int) -> tuple[Color, Role]:
    """Color and role of the next player to join, given how many seats are taken already."""
    if not 0 <= seat_count < MAX_PLAYERS:
        raise GameFullError()
    return SEATING_ORDER[seat_count]


def parse_piece_type(value: Optional[PieceType | str]) -> PieceType:
    """Accepts a PieceType or its name (case-insensitive): 'PAWN', 'pawn', ..."""
    if isinstance(value, PieceType):
        return value
    if not isinstance(value, str) or value.strip().upper() not in PieceType.__members__:
        raise InvalidPieceTypeError()
    return PieceType[value.strip().upper()]


@dataclass
class HandAndBrainSession:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    engine: MoveEngine
    seats: list[Seat] = field(default_factory=list)
    turn_count: int = 0
    pending_piece_type: Optional[PieceType] = None

    @property
    def is_full(self) -> bool:
        return len(self.seats) == MAX_PLAYERS

    @property
    def turn_color(self) -> Color:
        return self.engine.current_turn_color()

    @property
    def status(self) -> GameStatus:
        if not self.is_full:
            return GameStatus.WAITING
        role = Role.BRAIN if self.pending_piece_type is None else Role.HAND
        return GameStatus.for_turn(self.turn_color, role)

    def seat_of(self, player: str) -> Optional[Seat]:
        return next((seat for seat in self.seats if seat.player == player), None)

    def join(self, player: str) -> Seat:
        """Take the next free seat."""
        if self.seat_of(player) is not None:
            raise AlreadyJoinedError()
        if self.is_full:
            raise GameFullError()

        color, role = seat_assignment(len(self.seats))
        seat = Seat(player=player, color=color, role=role)
        self.seats.append(seat)
        logger.info("%s joined as %s %s", player, color.name, role.name)
        return seat

    def start(self, player: str) -> None:
        """
        Readiness check only.
        ---
        Play starts by itself once 4 players are seated, this just tells the caller whether that is the case.
        """
        if not self.is_full:
            raise NotEnoughPlayersError()

    def pick_piece_type(
        self, player: str, piece_type: Optional[PieceType | str]
    ) -> PieceType:
        """
        The Brain of the side to move chooses which type of piece its Hand has to move.
        -----

        1. seated, game full, your color's turn, you are the Brain
        2. no piece type picked yet this turn
        3. the piece type exists, and has at least one legal move
        """
        seat = self._assert_your_turn(player)
        if seat.role != Role.BRAIN:
            raise NotBrainError()
        if self.pending_piece_type is not None:
            raise AlreadyPickedError()

        picked = parse_piece_type(piece_type)
        if not self._is_piece_type_moveable(picked):
            raise NoLegalMoveError()

        self.pending_piece_type = picked
        logger.info("%s (%s brain) picked %s", player, seat.color.name, picked.name)
        return picked

    def move_piece(
        self,
        player: str,
        from_square: str,
        to_square: str,
        promotion: Optional[PieceType | str] = None,
    ) -> None:
        """
        The Hand of the side to move plays a move with a piece of the picked type.
        -----

        1. seated, game full, your color's turn, you are the Hand
        2. your Brain has picked a piece type
        3. the from square holds a piece of that type
        4. the Move Engine accepts the move (all chess legality lives there)
        5. update turn count and clear the pick
        """
        seat = self._assert_your_turn(player)
        if seat.role != Role.HAND:
            raise NotHandError()
        if self.pending_piece_type is None:
            raise NoPendingPickError()

        try:
            piece = self.engine.piece_at(from_square)
        except Exception as exc:
            raise InvalidSquareError(
                f"From square not found: {from_square!r}"
            ) from exc

        if piece is None or piece.type != self.pending_piece_type:
            raise WrongPieceTypeError()

        promote_to = self._parse_promotion(promotion)
        try:
            accepted = self.engine.apply_move(from_square, to_square, promote_to)
        except Exception as exc:
            raise IllegalMoveError(
                f"Invalid move: {from_square}-{to_square}"
            ) from exc
        if not accepted:
            raise IllegalMoveError()

        self.turn_count += 1
        self.pending_piece_type = None
        logger.info(
            "%s (%s hand) moved %s-%s, turn %d",
            player,
            seat.color.name,
            from_square,
            to_square,
            self.turn_count,
        )

    def legal_moves(self, player: str) -> list[str]:
        """
        Moves (in UCI notation) the player could submit right now.
        ---
        Only the Hand of the side to move, after its Brain picked, has any. Everybody else gets an empty list.
        """
        seat = self.seat_of(player)
        if (
            seat is None
            or self.status != GameStatus.for_turn(seat.color, Role.HAND)
            or seat.role != Role.HAND
        ):
            return []
        return [
            move.to_uci()
            for move in self.engine.legal_moves(self.pending_piece_type)
            if move.color == seat.color
        ]

    def player_view(self, player: str) -> PlayerView:
        """What a single player gets to see. Never fails: unseated players get no color, role or opponents."""
        seat = self.seat_of(player)
        opponents = (
            [other.player for other in self.seats if other.color != seat.color]
            if seat is not None
            else []
        )
        return PlayerView(
            board=self.engine.board_snapshot(),
            status=self.status,
            color=seat.color if seat else None,
            role=seat.role if seat else None,
            opponents=opponents,
            pending_piece_type=self.pending_piece_type,
        )

    # -- PRIVATE HELPERS ---
    def _assert_your_turn(self, player: str) -> Seat:
        """Checks shared by picking and moving: you must be seated, the game must be full, and your color must be to move."""
        seat = self.seat_of(player)
        if seat is None:
            raise PlayerNotInGameError()
        if not self.is_full:
            raise GameNotStartedError()
        if seat.color != self.turn_color:
            raise NotYourTurnError()
        return seat

    def _is_piece_type_moveable(self, piece_type: PieceType) -> bool:
        color = self.turn_color
        return any(
            move.color == color and move.piece_type == piece_type
            for move in self.engine.legal_moves(piece_type)
        )

    def _parse_promotion(
        self, promotion: Optional[PieceType | str]
    ) -> Optional[PieceType]:
        if promotion is None:
            return None
        try:
            return parse_piece_type(promotion)
        except InvalidPieceTypeError as exc:
            raise IllegalMoveError(
                f"Cannot promote to {promotion!r}."
            ) from exc
