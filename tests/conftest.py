"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

import pytest

from src.engine.python_chess_engine import PythonChessEngine
from src.session.hand_and_brain import HandAndBrainSession

# Join order decides the seats: WHITE/HAND, BLACK/HAND, WHITE/BRAIN, BLACK/BRAIN
PLAYERS = ["Alice", "Bob", "Carol", "Dave"]


@pytest.fixture
def engine() -> PythonChessEngine:
    return PythonChessEngine()


@pytest.fixture
def empty_session(engine: PythonChessEngine) -> HandAndBrainSession:
    return HandAndBrainSession(engine=engine)


@pytest.fixture
def full_session(engine: PythonChessEngine) -> HandAndBrainSession:
    """All 4 players seated (Alice, Bob, Carol, Dave in that order), standard starting position, white to move."""
    session = HandAndBrainSession(engine=engine)
    for player in PLAYERS:
        session.join(player)
    return session
