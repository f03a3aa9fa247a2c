"""Turn state machine: dice roll, budgeted moves, turn handover, win detection.

TurnEngine is the pure-Python core with no rendering dependency. It moves
through AWAITING_ROLL -> ROLL_ANIMATING -> AWAITING_MOVE -> AWAITING_ROLL
until a king is captured, which ends the game (GAME_OVER).

Commands never raise during play. A command issued in the wrong phase, or
a move to a square that is not a legal destination, comes back as a
CommandResult with an IGNORED or ILLEGAL_MOVE outcome and changes nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from dicechess.game.board import Board, square_to_notation
from dicechess.game.dice import DiceSource, RandomDice
from dicechess.game.notation import move_to_notation
from dicechess.game.rules import find_move, legal_moves
from dicechess.game.snapshot import GameSnapshot, MoveView, PieceView
from dicechess.game.state import Color, MoveCandidate, Phase, Piece, PieceType, Square

if TYPE_CHECKING:
    from dicechess.config import EngineConfig

logger = logging.getLogger("dicechess.engine")


class SetupError(ValueError):
    """Raised when a game is started from an invalid position."""


class Outcome(str, Enum):
    """How the engine handled a command."""
    OK = "ok"
    IGNORED = "ignored"  # Wrong phase, or no piece selected
    ILLEGAL_MOVE = "illegal_move"


# ---------------------------------------------------------------------------
# Events returned to the caller
# ---------------------------------------------------------------------------

@dataclass
class DiceRolled:
    value: int


@dataclass
class BudgetGranted:
    moves_left: int


@dataclass
class SelectionChanged:
    piece: Optional[Piece]
    moves: list[MoveCandidate] = field(default_factory=list)


@dataclass
class MoveExecuted:
    piece: Piece
    origin: Square
    destination: Square
    cost: int
    captured: Optional[Piece] = None
    moves_left: int = 0


@dataclass
class TurnExhausted:
    """The budget hit zero; the host should call end_turn()."""
    color: Color


@dataclass
class TurnEnded:
    previous: Color
    next: Color
    forfeited: int = 0  # Budget left unspent


@dataclass
class GameOver:
    winner: Color


Event = Union[DiceRolled, BudgetGranted, SelectionChanged, MoveExecuted,
              TurnExhausted, TurnEnded, GameOver]


@dataclass
class CommandResult:
    status: Outcome
    events: list[Event] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == Outcome.OK

    def first(self, event_type: type) -> Optional[Event]:
        """First event of the given type, or None."""
        for event in self.events:
            if isinstance(event, event_type):
                return event
        return None


def validate_kings(board: Board):
    """Require exactly one king per color."""
    for color in Color:
        count = len(board.find(PieceType.KING, color))
        if count != 1:
            raise SetupError(
                f"{color.label} must have exactly one king, found {count}"
            )


class TurnEngine:
    """Game and turn state for one Dice Chess game."""

    def __init__(self, board: Optional[Board] = None,
                 dice: Optional[DiceSource] = None,
                 auto_end_turn: bool = False,
                 skip_roll_animation: bool = False,
                 first_turn: Color = Color.WHITE):
        self.board: Board = board if board is not None else Board.standard()
        validate_kings(self.board)
        self.dice: DiceSource = dice if dice is not None else RandomDice()
        self.auto_end_turn = auto_end_turn
        self.skip_roll_animation = skip_roll_animation

        self.turn: Color = first_turn
        self.phase: Phase = Phase.AWAITING_ROLL
        self.dice_value: Optional[int] = None
        self.moves_left: int = 0
        self.selected_piece: Optional[Piece] = None
        self.legal_moves: list[MoveCandidate] = []
        self.winner: Optional[Color] = None
        self.turn_should_end: bool = False
        self.turn_number: int = 1
        self.info_text: str = "Roll the dice to start!"

    @classmethod
    def from_config(cls, config: EngineConfig, board: Optional[Board] = None,
                    dice: Optional[DiceSource] = None) -> TurnEngine:
        """Build an engine from loaded configuration."""
        if dice is None:
            dice = RandomDice(seed=config.seed)
        return cls(board=board, dice=dice,
                   auto_end_turn=config.auto_end_turn,
                   skip_roll_animation=config.skip_roll_animation)

    @property
    def is_over(self) -> bool:
        return self.phase == Phase.GAME_OVER

    def _ignored(self, command: str) -> CommandResult:
        logger.debug(f"Ignored {command} in {self.phase.value} phase")
        return CommandResult(Outcome.IGNORED)

    # ------------------------------------------------------------------
    # Dice
    # ------------------------------------------------------------------

    def request_roll(self) -> CommandResult:
        """Roll the die. The budget is granted once the animation completes."""
        if self.phase != Phase.AWAITING_ROLL:
            return self._ignored("roll")

        self.dice_value = self.dice.roll()
        self.phase = Phase.ROLL_ANIMATING
        self.info_text = "Rolling..."
        logger.info(f"{self.turn.label} rolled {self.dice_value}")
        result = CommandResult(Outcome.OK, [DiceRolled(self.dice_value)])

        if self.skip_roll_animation:
            result.events.extend(self.notify_roll_animation_complete().events)
        return result

    def notify_roll_animation_complete(self) -> CommandResult:
        if self.phase != Phase.ROLL_ANIMATING:
            return self._ignored("roll animation complete")

        self.moves_left = self.dice_value
        self.phase = Phase.AWAITING_MOVE
        self.info_text = f"Rolled a {self.dice_value}! Select pieces to move."
        return CommandResult(Outcome.OK, [BudgetGranted(self.moves_left)])

    # ------------------------------------------------------------------
    # Selection and moves
    # ------------------------------------------------------------------

    def _is_selectable(self, piece: Optional[Piece]) -> bool:
        return (piece is not None and piece.color == self.turn
                and not piece.moved_this_turn)

    def _clear_selection(self) -> CommandResult:
        if self.selected_piece is None:
            return CommandResult(Outcome.OK)
        self.selected_piece = None
        self.legal_moves = []
        return CommandResult(Outcome.OK, [SelectionChanged(None)])

    def select_square(self, square: Square) -> CommandResult:
        """Handle a click on ``square``.

        Selects an own unmoved piece, otherwise tries to move the current
        selection there. Clicking off the board or on an unusable square
        with nothing selected clears the selection.
        """
        if self.phase != Phase.AWAITING_MOVE:
            return self._ignored("select")
        if not self.board.in_bounds(square):
            return self._clear_selection()

        piece = self.board.get(square)
        if self._is_selectable(piece):
            self.selected_piece = piece
            # Always recompute: the budget shrinks after every move
            self.legal_moves = legal_moves(piece, self.board, self.moves_left)
            return CommandResult(Outcome.OK,
                                 [SelectionChanged(piece, list(self.legal_moves))])
        if self.selected_piece is not None:
            return self.attempt_move(square)
        return self._clear_selection()

    def attempt_move(self, square: Square) -> CommandResult:
        """Move the selected piece to ``square`` if it is a legal destination."""
        if self.phase != Phase.AWAITING_MOVE or self.selected_piece is None:
            return self._ignored("move")

        move = find_move(self.legal_moves, square)
        if move is None:
            logger.debug(f"Illegal destination {square} for {self.selected_piece}")
            return CommandResult(Outcome.ILLEGAL_MOVE)

        piece = self.selected_piece
        origin = piece.position
        notation = move_to_notation(piece.kind, origin, move)
        captured = self.board.move(origin, move.destination)

        if captured is not None and captured.kind == PieceType.KING:
            executed = MoveExecuted(piece, origin, move.destination, move.cost, captured)
            self._game_over(piece.color)
            logger.info(f"{piece.color.label} plays {notation} and captures the king")
            return CommandResult(Outcome.OK, [executed, GameOver(piece.color)])

        piece.has_moved = True
        piece.moved_this_turn = True
        self.moves_left -= move.cost
        self.selected_piece = None
        self.legal_moves = []
        logger.info(f"{piece.color.label} plays {notation} "
                    f"(cost {move.cost}, {self.moves_left} left)")

        result = CommandResult(Outcome.OK, [
            MoveExecuted(piece, origin, move.destination, move.cost,
                         captured, self.moves_left),
        ])
        if self.moves_left == 0:
            self.turn_should_end = True
            self.info_text = "No moves left. Ending turn..."
            result.events.append(TurnExhausted(self.turn))
            if self.auto_end_turn:
                result.events.extend(self.end_turn().events)
        return result

    def available_moves(self) -> dict[Piece, list[MoveCandidate]]:
        """Candidates for every piece the current player may still move."""
        if self.phase != Phase.AWAITING_MOVE:
            return {}
        return {
            piece: legal_moves(piece, self.board, self.moves_left)
            for piece in self.board.pieces(self.turn)
            if not piece.moved_this_turn
        }

    # ------------------------------------------------------------------
    # Turn handover and game end
    # ------------------------------------------------------------------

    def end_turn(self) -> CommandResult:
        """Pass to the other player, forfeiting any unspent budget."""
        if self.phase != Phase.AWAITING_MOVE:
            return self._ignored("end turn")

        for piece in self.board.pieces():
            piece.moved_this_turn = False

        previous = self.turn
        forfeited = self.moves_left
        self.turn = previous.opponent
        self.phase = Phase.AWAITING_ROLL
        self.dice_value = None
        self.moves_left = 0
        self.selected_piece = None
        self.legal_moves = []
        self.turn_should_end = False
        self.turn_number += 1
        self.info_text = f"{self.turn.label}'s turn. Roll the dice!"
        logger.info(f"{previous.label} ends turn {self.turn_number - 1}"
                    + (f", forfeiting {forfeited}" if forfeited else ""))
        return CommandResult(Outcome.OK, [TurnEnded(previous, self.turn, forfeited)])

    def _game_over(self, winner: Color):
        self.phase = Phase.GAME_OVER
        self.winner = winner
        self.moves_left = 0
        self.selected_piece = None
        self.legal_moves = []
        self.turn_should_end = False
        self.info_text = f"GAME OVER! {winner.name} WINS!"

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        """Serializable view of the whole game."""
        pieces = sorted(self.board.pieces(), key=lambda p: p.piece_id)
        return GameSnapshot(
            turn=self.turn.name.lower(),
            phase=self.phase.value,
            turn_number=self.turn_number,
            dice_value=self.dice_value,
            moves_left=self.moves_left,
            winner=self.winner.name.lower() if self.winner is not None else None,
            info_text=self.info_text,
            turn_should_end=self.turn_should_end,
            pieces=[
                PieceView(
                    id=p.piece_id,
                    kind=p.kind.name.lower(),
                    color=p.color.name.lower(),
                    square=square_to_notation(p.position),
                    has_moved=p.has_moved,
                    moved_this_turn=p.moved_this_turn,
                )
                for p in pieces
            ],
            selected_piece_id=(self.selected_piece.piece_id
                               if self.selected_piece is not None else None),
            legal_moves=[
                MoveView(square=square_to_notation(m.destination),
                         cost=m.cost, capture=m.is_capture)
                for m in self.legal_moves
            ],
        )
