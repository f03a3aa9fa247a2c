"""Board model, coordinate notation, and text-based rendering."""

from __future__ import annotations

from typing import Iterator, Optional

from dicechess.game.state import (
    PIECE_CHARS, STARTING_POSITIONS, Color, Piece, PieceType, Square,
)

BOARD_SIZE = 8

# Column labels for notation
FILE_LABELS = "abcdefgh"
# Rank labels, indexed by rank (rank 0 is the top row = "8")
RANK_LABELS = "87654321"


def square_to_notation(square: Square) -> str:
    """Convert (file, rank) to algebraic notation like 'e2'."""
    f, r = square
    return FILE_LABELS[f] + RANK_LABELS[r]


def notation_to_square(sq: str) -> Square:
    """Convert algebraic notation like 'e2' to (file, rank)."""
    sq = sq.strip().lower()
    if len(sq) != 2 or sq[0] not in FILE_LABELS or sq[1] not in RANK_LABELS:
        raise ValueError(f"Invalid square: {sq!r}")
    return (FILE_LABELS.index(sq[0]), RANK_LABELS.index(sq[1]))


class Board:
    """8x8 grid of piece handles backed by an arena of live pieces.

    Cells hold ``piece_id`` values; ``_pieces`` owns the Piece objects.
    Every occupied cell's piece has ``position`` equal to that cell.
    """

    def __init__(self):
        self._cells: list[list[Optional[int]]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._pieces: dict[int, Piece] = {}
        self._next_id = 0

    @classmethod
    def standard(cls) -> Board:
        """Board with the standard chess starting position."""
        return cls.from_layout(STARTING_POSITIONS)

    @classmethod
    def from_layout(cls, layout: dict[Square, tuple[str, Color]]) -> Board:
        """Build a board from ``{(file, rank): (piece_char, color)}``."""
        board = cls()
        for square, (char, color) in layout.items():
            if char not in PIECE_CHARS:
                raise ValueError(f"Unknown piece letter: {char!r}")
            if not board.in_bounds(square):
                raise ValueError(f"Square out of range: {square}")
            board.place(square, Piece(PIECE_CHARS[char], Color(color)))
        return board

    @staticmethod
    def in_bounds(square: Square) -> bool:
        f, r = square
        return 0 <= f < BOARD_SIZE and 0 <= r < BOARD_SIZE

    def get(self, square: Square) -> Optional[Piece]:
        """Get piece at square, or None (also for off-board squares)."""
        if not self.in_bounds(square):
            return None
        f, r = square
        pid = self._cells[r][f]
        return None if pid is None else self._pieces[pid]

    def piece(self, piece_id: int) -> Optional[Piece]:
        """Resolve a handle to a live piece."""
        return self._pieces.get(piece_id)

    def place(self, square: Square, piece: Piece):
        """Put a piece on a square during setup, replacing any occupant."""
        self._detach(square)
        piece.piece_id = self._next_id
        self._next_id += 1
        self._pieces[piece.piece_id] = piece
        f, r = square
        self._cells[r][f] = piece.piece_id
        piece.position = square

    def move(self, src: Square, dst: Square) -> Optional[Piece]:
        """Move the occupant of ``src`` to ``dst``.

        Returns the piece previously on ``dst`` (now detached), if any.
        Whether that counts as a capture is up to the caller.
        """
        sf, sr = src
        pid = self._cells[sr][sf]
        if pid is None:
            return None
        captured = self._detach(dst)
        self._cells[sr][sf] = None
        df, dr = dst
        self._cells[dr][df] = pid
        self._pieces[pid].position = dst
        return captured

    def _detach(self, square: Square) -> Optional[Piece]:
        f, r = square
        pid = self._cells[r][f]
        if pid is None:
            return None
        self._cells[r][f] = None
        return self._pieces.pop(pid)

    def pieces(self, color: Optional[Color] = None) -> Iterator[Piece]:
        """Iterate live pieces, optionally only one color."""
        for piece in list(self._pieces.values()):
            if color is None or piece.color == color:
                yield piece

    def find(self, kind: PieceType, color: Color) -> list[Piece]:
        return [p for p in self._pieces.values()
                if p.kind == kind and p.color == color]

    def __len__(self) -> int:
        return len(self._pieces)


def render_board(board: Board, highlights: Optional[set[Square]] = None,
                 selected: Optional[Square] = None) -> str:
    """Render the board as a text string.

    White pieces are uppercase, black lowercase. Empty squares in
    ``highlights`` show '*', occupied ones are wrapped in 'x', and the
    selected square is bracketed.
    """
    highlights = highlights or set()
    lines = []

    lines.append("    a   b   c   d   e   f   g   h")
    lines.append("  +---+---+---+---+---+---+---+---+")

    for rank in range(BOARD_SIZE):
        label = RANK_LABELS[rank]
        row_str = f"{label} |"
        for f in range(BOARD_SIZE):
            square = (f, rank)
            piece = board.get(square)
            if piece is not None:
                display = piece.char if piece.color == Color.WHITE else piece.char.lower()
            else:
                display = " "
            if square == selected:
                row_str += f"[{display}]|"
            elif square in highlights:
                # Capture targets keep their letter
                row_str += f"x{display}x|" if piece is not None else " * |"
            else:
                row_str += f" {display} |"
        row_str += f" {label}"
        lines.append(row_str)
        lines.append("  +---+---+---+---+---+---+---+---+")

    lines.append("    a   b   c   d   e   f   g   h")

    return "\n".join(lines)
