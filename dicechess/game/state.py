"""Piece, color and phase definitions for Dice Chess."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

Square = tuple[int, int]  # (file, rank), (0, 0) is the top-left corner (a8)


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> Color:
        return Color(1 - self)

    @property
    def label(self) -> str:
        return self.name.capitalize()


class PieceType(IntEnum):
    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5


class Phase(str, Enum):
    """Turn state machine phases."""
    AWAITING_ROLL = "awaiting_roll"
    ROLL_ANIMATING = "roll_animating"
    AWAITING_MOVE = "awaiting_move"
    GAME_OVER = "game_over"


# Map character codes to PieceType
PIECE_CHARS = {
    "P": PieceType.PAWN,
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}
PIECE_NAMES = {v: k for k, v in PIECE_CHARS.items()}

# Starting layout: dict mapping (file, rank) -> (piece_type_char, color)
# Black on ranks 0-1 (top), White on ranks 6-7 (bottom)
BACK_ROW = "RNBQKBNR"
STARTING_POSITIONS: dict[Square, tuple[str, Color]] = {}
for _file, _char in enumerate(BACK_ROW):
    STARTING_POSITIONS[(_file, 0)] = (_char, Color.BLACK)
    STARTING_POSITIONS[(_file, 1)] = ("P", Color.BLACK)
    STARTING_POSITIONS[(_file, 6)] = ("P", Color.WHITE)
    STARTING_POSITIONS[(_file, 7)] = (_char, Color.WHITE)

# Rank each color's pawns start on
PAWN_START_RANK = {Color.WHITE: 6, Color.BLACK: 1}


@dataclass(eq=False)
class Piece:
    """A piece on the board.

    Pieces compare by identity: two white pawns are different pieces.
    ``piece_id`` is assigned by the board when the piece is placed.
    """
    kind: PieceType
    color: Color
    position: Square = (0, 0)
    has_moved: bool = False
    moved_this_turn: bool = False
    piece_id: int = -1

    @property
    def char(self) -> str:
        return PIECE_NAMES[self.kind]

    def __repr__(self) -> str:
        return (f"Piece({self.color.label} {self.kind.name.capitalize()} "
                f"#{self.piece_id} at {self.position})")


@dataclass(frozen=True)
class MoveCandidate:
    """A reachable destination and what it costs from the budget."""
    destination: Square
    cost: int
    is_capture: bool = field(default=False, compare=False)
