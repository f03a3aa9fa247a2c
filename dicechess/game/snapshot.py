"""Pydantic models describing engine state for a presentation layer."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class PieceView(BaseModel):
    """One live piece."""
    id: int
    kind: str
    color: str
    square: str = Field(..., description="Square in algebraic notation, e.g. 'e2'")
    has_moved: bool = False
    moved_this_turn: bool = False


class MoveView(BaseModel):
    """A legal destination for the selected piece."""
    square: str
    cost: int = Field(..., ge=1)
    capture: bool = False


class GameSnapshot(BaseModel):
    """Everything a renderer needs to draw the current position."""
    turn: str
    phase: str
    turn_number: int = Field(..., ge=1)
    dice_value: Optional[int] = Field(None, ge=1, le=6)
    moves_left: int = Field(0, ge=0)
    winner: Optional[str] = None
    info_text: str = ""
    turn_should_end: bool = False
    pieces: list[PieceView] = Field(default_factory=list)
    selected_piece_id: Optional[int] = None
    legal_moves: list[MoveView] = Field(default_factory=list)
