#!/usr/bin/env python3
"""Interactive CLI for playing Dice Chess (two humans, one terminal).

Usage:
    python scripts/play.py                       # Random dice
    python scripts/play.py --seed 42             # Reproducible dice
    python scripts/play.py --config my.yaml      # Settings from YAML

Commands at the prompt:
    roll        Roll the die for this turn
    e2          Select the piece on e2, or move the selected piece to e2
    moves       List every move still affordable this turn
    end         End the turn, forfeiting any remaining budget
    q           Quit
"""

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dicechess.config import load_config
from dicechess.game.board import notation_to_square, render_board, square_to_notation
from dicechess.game.engine import (
    MoveExecuted, Outcome, SelectionChanged, TurnEngine,
)
from dicechess.game.notation import move_to_notation
from dicechess.game.state import Phase


def display_state(engine: TurnEngine):
    """Print the board, highlighting the selection and its destinations."""
    selected = engine.selected_piece.position if engine.selected_piece else None
    highlights = {m.destination for m in engine.legal_moves}
    print(render_board(engine.board, highlights=highlights, selected=selected))
    dice = engine.dice_value if engine.dice_value is not None else "-"
    print(f"Turn {engine.turn_number}: {engine.turn.label}   "
          f"Dice: {dice}   Moves left: {engine.moves_left}")
    print(engine.info_text)
    print()


def list_moves(engine: TurnEngine):
    """Print every affordable move for the player to move."""
    available = engine.available_moves()
    count = 0
    for piece, moves in available.items():
        for move in moves:
            count += 1
            print(f"  {move_to_notation(piece.kind, piece.position, move)} (cost {move.cost})")
    if count == 0:
        print("  No affordable moves. Type 'end' to pass.")


def handle_square(engine: TurnEngine, text: str):
    try:
        square = notation_to_square(text)
    except ValueError:
        print("Invalid input. Enter a square like e2, or 'roll', 'moves', 'end', 'q'.")
        return

    result = engine.select_square(square)
    if result.status == Outcome.IGNORED:
        print("Roll the dice first.")
    elif result.status == Outcome.ILLEGAL_MOVE:
        print(f"{square_to_notation(square)} is not reachable with the remaining budget.")

    selection = result.first(SelectionChanged)
    if selection is not None and selection.piece is not None and not selection.moves:
        print("That piece has no affordable moves.")

    executed = result.first(MoveExecuted)
    if executed is not None and executed.captured is not None:
        print(f"Captured {executed.captured.kind.name.capitalize()} "
              f"on {square_to_notation(executed.destination)}.")


def play_game(engine: TurnEngine):
    """Play a full game."""
    print("=" * 60)
    print("  Dice Chess")
    print("=" * 60)

    while not engine.is_over:
        display_state(engine)
        inp = input("> ").strip().lower()

        if inp == "q":
            print("Game aborted.")
            return
        elif inp == "roll":
            if engine.request_roll().ok:
                # No animation in the terminal
                engine.notify_roll_animation_complete()
            else:
                print("You already rolled this turn.")
        elif inp == "end":
            if not engine.end_turn().ok:
                print("Roll the dice before ending the turn.")
        elif inp == "moves":
            if engine.phase != Phase.AWAITING_MOVE:
                print("Roll the dice first.")
            else:
                list_moves(engine)
        elif inp:
            handle_square(engine, inp)

        if engine.turn_should_end:
            engine.end_turn()

    # Game over
    display_state(engine)
    print(f"{engine.winner.label} wins on turn {engine.turn_number}!")


def main():
    parser = argparse.ArgumentParser(description="Play Dice Chess")
    parser.add_argument("--config", default=None,
                        help="Path to config YAML (default: configs/default.yaml)")
    parser.add_argument("--seed", type=int, default=None, help="Override dice seed")
    args = parser.parse_args()

    config = load_config(args.config)
    if args.seed is not None:
        config.seed = args.seed

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    engine = TurnEngine.from_config(config)
    try:
        play_game(engine)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")


if __name__ == "__main__":
    main()
