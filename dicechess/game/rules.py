"""Legal move generation with movement costs.

Every candidate carries the number of budget points it consumes:
  Pawn     1 per step (2 for the opening double step), diagonal capture 1
  Knight   3, regardless of what it jumps over
  Sliders  distance travelled (Rook, Bishop, Queen)
  King     1

Candidates costing more than the remaining budget are never emitted.
"""

from __future__ import annotations

from typing import Callable

from dicechess.game.board import Board
from dicechess.game.state import (
    PAWN_START_RANK, Color, MoveCandidate, Piece, PieceType,
)

# Directions are (dfile, drank)
ORTHOGONAL = [(0, 1), (0, -1), (1, 0), (-1, 0)]
DIAGONAL_DIRS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
# All 8 directions
ALL_DIRS = ORTHOGONAL + DIAGONAL_DIRS
KNIGHT_OFFSETS = [(1, 2), (1, -2), (-1, 2), (-1, -2),
                  (2, 1), (2, -1), (-2, 1), (-2, -1)]

KNIGHT_COST = 3
KING_COST = 1
PAWN_STEP_COST = 1
PAWN_DOUBLE_STEP_COST = 2

SLIDER_DIRS = {
    PieceType.ROOK: ORTHOGONAL,
    PieceType.BISHOP: DIAGONAL_DIRS,
    PieceType.QUEEN: ALL_DIRS,
}


def pawn_forward(color: Color) -> int:
    """Rank delta of a forward pawn step. White moves up the board (-1)."""
    return -1 if color == Color.WHITE else 1


def cost_of(kind: PieceType, distance: int = 1) -> int:
    """Budget cost of moving a piece of ``kind`` over ``distance`` squares."""
    if kind == PieceType.KNIGHT:
        return KNIGHT_COST
    if kind == PieceType.KING:
        return KING_COST
    # Pawns and sliders pay per square
    return distance


def _gen_pawn_moves(piece: Piece, board: Board, budget: int,
                    moves: list[MoveCandidate]):
    """Pawn: forward steps never capture, diagonal-forward steps only capture."""
    f, r = piece.position
    forward = pawn_forward(piece.color)

    one = (f, r + forward)
    if board.in_bounds(one) and board.get(one) is None:
        if PAWN_STEP_COST <= budget:
            moves.append(MoveCandidate(one, PAWN_STEP_COST))
        two = (f, r + 2 * forward)
        if r == PAWN_START_RANK[piece.color] and board.get(two) is None:
            if PAWN_DOUBLE_STEP_COST <= budget:
                moves.append(MoveCandidate(two, PAWN_DOUBLE_STEP_COST))

    for df in (1, -1):
        target_sq = (f + df, r + forward)
        if not board.in_bounds(target_sq):
            continue
        target = board.get(target_sq)
        if target is not None and target.color != piece.color:
            if PAWN_STEP_COST <= budget:
                moves.append(MoveCandidate(target_sq, PAWN_STEP_COST, is_capture=True))


def _gen_knight_moves(piece: Piece, board: Board, budget: int,
                      moves: list[MoveCandidate]):
    """Knight: fixed L offsets, jumps over everything, flat cost."""
    if KNIGHT_COST > budget:
        return
    f, r = piece.position
    for df, dr in KNIGHT_OFFSETS:
        target_sq = (f + df, r + dr)
        if not board.in_bounds(target_sq):
            continue
        target = board.get(target_sq)
        if target is None:
            moves.append(MoveCandidate(target_sq, KNIGHT_COST))
        elif target.color != piece.color:
            moves.append(MoveCandidate(target_sq, KNIGHT_COST, is_capture=True))


def _gen_king_moves(piece: Piece, board: Board, budget: int,
                    moves: list[MoveCandidate]):
    """King: one square in any direction."""
    if KING_COST > budget:
        return
    f, r = piece.position
    for df, dr in ALL_DIRS:
        target_sq = (f + df, r + dr)
        if not board.in_bounds(target_sq):
            continue
        target = board.get(target_sq)
        if target is None:
            moves.append(MoveCandidate(target_sq, KING_COST))
        elif target.color != piece.color:
            moves.append(MoveCandidate(target_sq, KING_COST, is_capture=True))


def _gen_slider_moves(piece: Piece, board: Board, budget: int,
                      moves: list[MoveCandidate]):
    """Rook/Bishop/Queen: slide along rays, paying one point per square."""
    f, r = piece.position
    for df, dr in SLIDER_DIRS[piece.kind]:
        dist = 1
        while True:
            target_sq = (f + df * dist, r + dr * dist)
            if not board.in_bounds(target_sq):
                break
            if dist > budget:
                break
            target = board.get(target_sq)
            if target is None:
                moves.append(MoveCandidate(target_sq, dist))
            else:
                if target.color != piece.color:
                    moves.append(MoveCandidate(target_sq, dist, is_capture=True))
                break  # Ray stops at the first occupied square
            dist += 1


_GENERATORS: dict[PieceType, Callable[[Piece, Board, int, list[MoveCandidate]], None]] = {
    PieceType.PAWN: _gen_pawn_moves,
    PieceType.KNIGHT: _gen_knight_moves,
    PieceType.BISHOP: _gen_slider_moves,
    PieceType.ROOK: _gen_slider_moves,
    PieceType.QUEEN: _gen_slider_moves,
    PieceType.KING: _gen_king_moves,
}
assert set(_GENERATORS) == set(PieceType)


def legal_moves(piece: Piece, board: Board, budget: int) -> list[MoveCandidate]:
    """Enumerate the squares ``piece`` can reach for at most ``budget`` points.

    Order is stable: direction-table order, then increasing distance.
    Each candidate is checked against the budget on its own; nothing is
    accumulated across moves.
    """
    moves: list[MoveCandidate] = []
    if budget <= 0:
        return moves
    _GENERATORS[piece.kind](piece, board, budget, moves)
    return moves


def find_move(moves: list[MoveCandidate], destination) -> MoveCandidate | None:
    """Return the candidate landing on ``destination``, if any."""
    for move in moves:
        if move.destination == destination:
            return move
    return None
