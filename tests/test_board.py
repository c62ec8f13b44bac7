"""Tests du plateau: disposition fixe, géométrie et contrat d'accès."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from congklak.engine.board import Board, Pit
from congklak.engine.player import Player
from congklak.engine.rules import TOTAL_PITS, TOTAL_SEEDS


class TestStandardLayout:
    """Disposition initiale: 0/7x7/7x7/0."""

    def test_sixteen_pits(self):
        board = Board.standard()
        assert len(board) == TOTAL_PITS == 16

    def test_stores_are_empty_and_owned(self):
        board = Board.standard()
        assert board[0].is_store and board[0].owner is Player.FIRST
        assert board[15].is_store and board[15].owner is Player.SECOND
        assert board[0].seed_count == 0
        assert board[15].seed_count == 0

    def test_small_pits_start_with_seven_seeds(self):
        board = Board.standard()
        for index in range(1, 8):
            assert board[index].owner is Player.FIRST
            assert not board[index].is_store
            assert board[index].seed_count == 7
        for index in range(8, 15):
            assert board[index].owner is Player.SECOND
            assert not board[index].is_store
            assert board[index].seed_count == 7

    def test_total_seeds(self):
        assert Board.standard().total_seeds() == TOTAL_SEEDS == 98


class TestGeometry:
    def test_store_index(self):
        board = Board.standard()
        assert board.store_index(Player.FIRST) == 0
        assert board.store_index(Player.SECOND) == 15

    def test_owned_range_excludes_store(self):
        board = Board.standard()
        assert list(board.owned_range(Player.FIRST)) == [1, 2, 3, 4, 5, 6, 7]
        assert list(board.owned_range(Player.SECOND)) == [8, 9, 10, 11, 12, 13, 14]

    def test_opposite_index(self):
        board = Board.standard()
        assert board.opposite_index(1) == 14
        assert board.opposite_index(2) == 13
        assert board.opposite_index(7) == 8
        assert board.opposite_index(14) == 1

    @pytest.mark.parametrize("index", [0, 15, -1, 16, 100])
    def test_opposite_index_absent_outside_small_pits(self, index):
        assert Board.standard().opposite_index(index) is None

    @given(st.integers(min_value=1, max_value=14))
    def test_opposite_index_is_involutive(self, index):
        board = Board.standard()
        opposite = board.opposite_index(index)
        assert opposite is not None
        assert 1 <= opposite <= 14
        assert board[opposite].owner is not board[index].owner
        assert board.opposite_index(opposite) == index

    def test_is_side_empty(self):
        counts = [0] * 16
        counts[9] = 3
        board = Board.from_counts(counts)
        assert board.is_side_empty(Player.FIRST)
        assert not board.is_side_empty(Player.SECOND)

    def test_is_side_empty_ignores_store(self):
        counts = [40] + [0] * 7 + [7] * 7 + [9]
        board = Board.from_counts(counts)
        assert board.is_side_empty(Player.FIRST)

    def test_store_count(self):
        counts = [5] + [7] * 14 + [9]
        board = Board.from_counts(counts)
        assert board.store_count(Player.FIRST) == 5
        assert board.store_count(Player.SECOND) == 9


class TestContract:
    """Les violations de contrat échouent bruyamment."""

    @pytest.mark.parametrize("index", [-1, 16, 42])
    def test_out_of_range_access_raises(self, index):
        board = Board.standard()
        with pytest.raises(IndexError):
            board[index]
        with pytest.raises(IndexError):
            board[index] = Pit(Player.FIRST, False, 1)

    def test_wrong_pit_count_rejected(self):
        pits = list(Board.standard())[:15]
        with pytest.raises(ValueError):
            Board(pits)
        with pytest.raises(ValueError):
            Board.from_counts([7] * 17)

    def test_layout_mismatch_rejected(self):
        pits = list(Board.standard())
        pits[0], pits[15] = pits[15], pits[0]
        with pytest.raises(ValueError):
            Board(pits)

    def test_setitem_cannot_change_ownership(self):
        board = Board.standard()
        with pytest.raises(ValueError):
            board[3] = Pit(Player.SECOND, False, 7)
        with pytest.raises(ValueError):
            board[3] = Pit(Player.FIRST, True, 7)
        board[3] = Pit(Player.FIRST, False, 2)
        assert board[3].seed_count == 2

    def test_negative_seed_count_rejected(self):
        board = Board.standard()
        with pytest.raises(ValueError):
            board[1].seed_count = -1
        with pytest.raises(ValueError):
            Pit(Player.FIRST, False, -3)

    def test_owner_and_kind_are_read_only(self):
        pit = Board.standard()[1]
        with pytest.raises(AttributeError):
            pit.owner = Player.SECOND
        with pytest.raises(AttributeError):
            pit.is_store = True


class TestPit:
    def test_selectable_only_by_owner_when_not_empty(self):
        pit = Pit(Player.FIRST, False, 3)
        assert pit.can_be_selected_by(Player.FIRST)
        assert not pit.can_be_selected_by(Player.SECOND)

    def test_empty_pit_not_selectable(self):
        pit = Pit(Player.FIRST, False, 0)
        assert pit.is_empty
        assert not pit.can_be_selected_by(Player.FIRST)

    def test_store_never_selectable(self):
        store = Pit(Player.FIRST, True, 10)
        assert not store.can_be_selected_by(Player.FIRST)


def test_copy_is_independent():
    board = Board.standard()
    clone = board.copy()
    clone[1].seed_count = 0
    assert board[1].seed_count == 7
    assert clone != board
    assert board.copy() == board


def test_describe():
    assert Board.standard().describe() == (
        "Player 2: [7] [7] [7] [7] [7] [7] [7] Store: [0]\n"
        "Player 1: Store: [0] [7] [7] [7] [7] [7] [7] [7]"
    )
