"""Propriétés vérifiées sur des suites aléatoires de coups légaux."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from congklak.engine.board import Board
from congklak.engine.player import Player
from congklak.engine.rules import TOTAL_PITS, TOTAL_SEEDS
from congklak.engine.state import GameEngine
from congklak.sim.runner import legal_moves


def _check_selectability(engine: GameEngine) -> None:
    board = engine.board
    for index in range(TOTAL_PITS):
        pit = board[index]
        expected = (
            pit.owner is engine.current_player
            and not pit.is_store
            and pit.seed_count >= 1
        )
        assert engine.can_select(index) is expected


@settings(max_examples=60, deadline=None)
@given(st.data())
def test_seeds_conserved_and_selectability_holds(data):
    engine = GameEngine()
    engine.start_new_game()

    for _ in range(200):
        assert engine.board.total_seeds() == TOTAL_SEEDS
        _check_selectability(engine)
        if engine.is_game_over():
            break
        index = data.draw(st.sampled_from(legal_moves(engine)))
        mover = engine.current_player
        opponent_store = engine.store_count(mover.opponent)
        outcome = engine.perform_move(index)

        assert outcome is not None
        assert outcome.touched_indices[0] == index
        assert outcome.board.total_seeds() == TOTAL_SEEDS
        # Le grenier adverse ne reçoit jamais de graine pendant le semis.
        assert engine.store_count(mover.opponent) == opponent_store
        if outcome.extra_turn:
            assert engine.current_player is mover
        else:
            assert engine.current_player is mover.opponent

    if engine.is_game_over():
        engine.determine_winner()
        assert engine.board.total_seeds() == TOTAL_SEEDS
        assert all(engine.board.is_side_empty(player) for player in Player)


@settings(max_examples=30, deadline=None)
@given(st.lists(st.integers(min_value=-3, max_value=20), max_size=30))
def test_reset_restores_initial_layout_after_any_requests(requests):
    engine = GameEngine()
    engine.start_new_game()
    for index in requests:
        engine.perform_move(index)

    engine.start_new_game()

    assert engine.board == Board.standard()
    assert engine.current_player is Player.FIRST
