"""Shared test fixtures for the Dice Chess engine tests."""

import pytest

from dicechess.game.board import Board
from dicechess.game.dice import SequenceDice
from dicechess.game.engine import TurnEngine
from dicechess.game.state import Color

# Kings tucked into the right-hand corners, out of the way of most test pieces
KINGS = {(7, 7): ("K", Color.WHITE), (7, 0): ("K", Color.BLACK)}


def _board_with(layout: dict, kings: bool = True) -> Board:
    full = dict(KINGS) if kings else {}
    full.update(layout)
    return Board.from_layout(full)


@pytest.fixture
def make_board():
    """Factory: board holding ``layout`` plus (by default) one king per side."""
    return _board_with


@pytest.fixture
def rolled_engine():
    """Factory: engine that has already rolled and is waiting for a move."""
    def _make(board: Board = None, rolls=(6,), **kwargs) -> TurnEngine:
        engine = TurnEngine(board=board, dice=SequenceDice(rolls), **kwargs)
        engine.request_roll()
        engine.notify_roll_animation_complete()
        return engine
    return _make


@pytest.fixture
def standard_engine():
    """Standard starting position, dice fixed to 6."""
    return TurnEngine(dice=SequenceDice([6]))
