"""Dice Chess game engine: board, move rules, dice, turn state machine."""

from dicechess.game.state import Color, PieceType, Phase, Piece, MoveCandidate
from dicechess.game.board import BOARD_SIZE, Board, render_board, square_to_notation, notation_to_square
from dicechess.game.rules import legal_moves, cost_of
from dicechess.game.dice import DiceSource, RandomDice, SequenceDice
from dicechess.game.engine import TurnEngine, CommandResult, Outcome, SetupError

__all__ = [
    "Color", "PieceType", "Phase", "Piece", "MoveCandidate",
    "BOARD_SIZE", "Board", "render_board", "square_to_notation", "notation_to_square",
    "legal_moves", "cost_of",
    "DiceSource", "RandomDice", "SequenceDice",
    "TurnEngine", "CommandResult", "Outcome", "SetupError",
]
