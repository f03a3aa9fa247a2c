"""Move notation for logs and the text client.

Formats:
  Pe2-e4     Pawn from e2 to e4
  Nb1xc3     Capture: Knight at b1 takes the piece on c3
"""

from __future__ import annotations

import re

from dicechess.game.board import notation_to_square, square_to_notation
from dicechess.game.state import PIECE_CHARS, PIECE_NAMES, MoveCandidate, PieceType, Square


def move_to_notation(kind: PieceType, origin: Square, move: MoveCandidate) -> str:
    """Convert a candidate to notation.

    Args:
        kind: Type of the moving piece.
        origin: Square the piece moves from.
        move: The candidate being played.
    """
    sep = "x" if move.is_capture else "-"
    return f"{PIECE_NAMES[kind]}{square_to_notation(origin)}{sep}{square_to_notation(move.destination)}"


_MOVE_RE = re.compile(r"^([PNBRQK])([a-h][1-8])([-x])([a-h][1-8])$")


def parse_move(text: str) -> tuple[PieceType, Square, Square]:
    """Parse notation into (kind, origin, destination).

    Raises:
        ValueError: If the notation is invalid.
    """
    m = _MOVE_RE.match(text.strip())
    if not m:
        raise ValueError(f"Invalid move notation: {text!r}")
    return (PIECE_CHARS[m.group(1)], notation_to_square(m.group(2)),
            notation_to_square(m.group(4)))
