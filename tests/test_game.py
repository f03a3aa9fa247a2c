"""Unit tests for the board model, notation and rendering."""

import pytest

from dicechess.game.board import (
    BOARD_SIZE, Board, notation_to_square, render_board, square_to_notation,
)
from dicechess.game.notation import move_to_notation, parse_move
from dicechess.game.state import (
    PIECE_CHARS, STARTING_POSITIONS, Color, MoveCandidate, Piece, PieceType,
)


class TestBoard:
    def test_board_size(self):
        assert BOARD_SIZE == 8

    def test_starting_positions(self):
        white = [sq for sq, (_, c) in STARTING_POSITIONS.items() if c == Color.WHITE]
        black = [sq for sq, (_, c) in STARTING_POSITIONS.items() if c == Color.BLACK]
        assert len(white) == 16
        assert len(black) == 16
        # Black at the top, White at the bottom
        assert {r for _, r in black} == {0, 1}
        assert {r for _, r in white} == {6, 7}

    def test_standard_board(self):
        board = Board.standard()
        assert len(board) == 32
        king = board.get((4, 7))
        assert king.kind == PieceType.KING
        assert king.color == Color.WHITE
        queen = board.get((3, 0))
        assert queen.kind == PieceType.QUEEN
        assert queen.color == Color.BLACK
        assert board.get((4, 4)) is None

    def test_positions_match_cells(self):
        board = Board.standard()
        for piece in board.pieces():
            assert board.get(piece.position) is piece

    def test_piece_ids_unique(self):
        board = Board.standard()
        ids = [p.piece_id for p in board.pieces()]
        assert len(set(ids)) == 32
        for pid in ids:
            assert board.piece(pid).piece_id == pid

    def test_in_bounds(self):
        assert Board.in_bounds((0, 0))
        assert Board.in_bounds((7, 7))
        assert not Board.in_bounds((-1, 0))
        assert not Board.in_bounds((0, 8))
        assert not Board.in_bounds((8, 3))

    def test_get_out_of_range_is_empty(self):
        board = Board.standard()
        assert board.get((-1, 0)) is None
        assert board.get((8, 8)) is None

    def test_place_sets_position(self):
        board = Board()
        rook = Piece(PieceType.ROOK, Color.WHITE)
        board.place((2, 5), rook)
        assert rook.position == (2, 5)
        assert board.get((2, 5)) is rook

    def test_place_replaces_occupant(self):
        board = Board()
        first = Piece(PieceType.PAWN, Color.WHITE)
        second = Piece(PieceType.KNIGHT, Color.BLACK)
        board.place((3, 3), first)
        board.place((3, 3), second)
        assert board.get((3, 3)) is second
        assert len(board) == 1

    def test_move_updates_cells_and_position(self):
        board = Board()
        rook = Piece(PieceType.ROOK, Color.WHITE)
        board.place((0, 0), rook)
        captured = board.move((0, 0), (0, 5))
        assert captured is None
        assert board.get((0, 0)) is None
        assert board.get((0, 5)) is rook
        assert rook.position == (0, 5)

    def test_move_detaches_occupant(self):
        board = Board()
        rook = Piece(PieceType.ROOK, Color.WHITE)
        pawn = Piece(PieceType.PAWN, Color.BLACK)
        board.place((0, 0), rook)
        board.place((0, 3), pawn)
        captured = board.move((0, 0), (0, 3))
        assert captured is pawn
        assert board.piece(pawn.piece_id) is None
        assert pawn not in list(board.pieces())
        assert len(board) == 1

    def test_move_from_empty_square(self):
        board = Board()
        assert board.move((4, 4), (4, 5)) is None
        assert board.get((4, 5)) is None

    def test_pieces_by_color(self):
        board = Board.standard()
        white = list(board.pieces(Color.WHITE))
        assert len(white) == 16
        assert all(p.color == Color.WHITE for p in white)

    def test_find(self):
        board = Board.standard()
        knights = board.find(PieceType.KNIGHT, Color.BLACK)
        assert {p.position for p in knights} == {(1, 0), (6, 0)}

    def test_from_layout_rejects_bad_letter(self):
        with pytest.raises(ValueError):
            Board.from_layout({(0, 0): ("X", Color.WHITE)})

    def test_from_layout_rejects_bad_square(self):
        with pytest.raises(ValueError):
            Board.from_layout({(9, 0): ("K", Color.WHITE)})

    def test_pieces_compare_by_identity(self):
        a = Piece(PieceType.PAWN, Color.WHITE)
        b = Piece(PieceType.PAWN, Color.WHITE)
        assert a != b
        assert a == a


class TestNotation:
    def test_square_to_notation(self):
        assert square_to_notation((0, 0)) == "a8"
        assert square_to_notation((7, 7)) == "h1"
        assert square_to_notation((4, 6)) == "e2"

    def test_notation_to_square(self):
        assert notation_to_square("e2") == (4, 6)
        assert notation_to_square(" A8 ") == (0, 0)

    def test_notation_roundtrip(self):
        for f in range(8):
            for r in range(8):
                assert notation_to_square(square_to_notation((f, r))) == (f, r)

    @pytest.mark.parametrize("text", ["", "e", "e9", "i2", "e22", "22"])
    def test_invalid_square(self, text):
        with pytest.raises(ValueError):
            notation_to_square(text)

    def test_move_to_notation(self):
        move = MoveCandidate((4, 4), 2)
        assert move_to_notation(PieceType.PAWN, (4, 6), move) == "Pe2-e4"
        capture = MoveCandidate((2, 5), 3, is_capture=True)
        assert move_to_notation(PieceType.KNIGHT, (1, 7), capture) == "Nb1xc3"

    def test_parse_move(self):
        assert parse_move("Pe2-e4") == (PieceType.PAWN, (4, 6), (4, 4))
        assert parse_move("Nb1xc3") == (PieceType.KNIGHT, (1, 7), (2, 5))

    def test_parse_invalid_move(self):
        with pytest.raises(ValueError):
            parse_move("Xe2-e4")

    def test_all_piece_letters(self):
        assert set(PIECE_CHARS) == {"P", "N", "B", "R", "Q", "K"}


class TestRenderBoard:
    def test_render_standard(self):
        text = render_board(Board.standard())
        lines = text.splitlines()
        assert lines[0].strip().startswith("a")
        # Black back rank on top, lowercase
        assert "r | n | b | q | k | b | n | r" in lines[2]
        # White back rank at the bottom, uppercase
        assert "R | N | B | Q | K | B | N | R" in lines[-3]

    def test_render_highlights(self):
        board = Board()
        board.place((0, 0), Piece(PieceType.ROOK, Color.WHITE))
        board.place((0, 2), Piece(PieceType.PAWN, Color.BLACK))
        text = render_board(board, highlights={(0, 1), (0, 2)}, selected=(0, 0))
        assert "[R]" in text
        assert " * " in text
        assert "xpx" in text
