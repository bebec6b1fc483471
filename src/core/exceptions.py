"""
Custom exceptions.

All rule violations of a Hand and Brain game derive from HandAndBrainError.
They are expected outcomes of a player's request (not faults): the message is meant to be shown to the player,
and the `code` is a stable identifier that clients can switch on.
"""


class GameError(Exception):
    """Top-level exception for anything going wrong while handling a game."""


class InvalidRequestError(GameError):
    """Request could not be parsed into something the service understands."""


class InvalidFENError(GameError):
    """Starting position for the Move Engine is not a valid FEN string."""


class RepositoryError(GameError):
    """Game could not be found / stored."""


class HandAndBrainError(GameError):
    """A request was rejected by the rules of the session. State is left unchanged."""

    code: str = "HandAndBrainError"
    default_message: str = "Request rejected."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


# --- Seating ---
class AlreadyJoinedError(HandAndBrainError):
    code = "AlreadyJoined"
    default_message = "You have already joined the game!"


class GameFullError(HandAndBrainError):
    code = "GameFull"
    default_message = "There are already 4 players in this game!"


class NotEnoughPlayersError(HandAndBrainError):
    code = "NotEnoughPlayers"
    default_message = "4 players are needed to start the game, game will automatically start once 4 have joined!"


# --- Turn / role gating ---
class PlayerNotInGameError(HandAndBrainError):
    code = "PlayerNotInGame"
    default_message = "You are not in this game, join the game to enter."


class GameNotStartedError(HandAndBrainError):
    code = "GameNotStarted"
    default_message = "Game not started, wait till 4 people have joined."


class NotYourTurnError(HandAndBrainError):
    code = "NotYourTurn"
    default_message = "Not your turn!"


class NotBrainError(HandAndBrainError):
    code = "NotBrain"
    default_message = "You are not the brain, you cannot pick a piece!"


class NotHandError(HandAndBrainError):
    code = "NotHand"
    default_message = "Only the hand can move a piece!"


class AlreadyPickedError(HandAndBrainError):
    code = "AlreadyPicked"
    default_message = "You already picked a piece, you cannot change it!"


class NoPendingPickError(HandAndBrainError):
    code = "NoPendingPick"
    default_message = "Brain has not picked a moveable piece yet!"


# --- Piece / move validation ---
class InvalidPieceTypeError(HandAndBrainError):
    code = "InvalidPieceType"
    default_message = "You did not pick a valid piece, pick one of PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING"


class NoLegalMoveError(HandAndBrainError):
    code = "NoLegalMove"
    default_message = "This piece does not have a legal move, pick another one!"


class InvalidSquareError(HandAndBrainError):
    code = "InvalidSquare"
    default_message = "From square not found!"


class WrongPieceTypeError(HandAndBrainError):
    code = "WrongPieceType"
    default_message = "You cannot move this piece!"


class IllegalMoveError(HandAndBrainError):
    code = "IllegalMove"
    default_message = "Invalid move"
