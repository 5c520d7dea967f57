"""Tests for lerndeutsch.core.memory – pair matching board."""

from __future__ import annotations

from collections import Counter

import pytest

from lerndeutsch.core.config import MEMORY_MISMATCH_DELAY_MS, MEMORY_VICTORY_DELAY_MS
from lerndeutsch.core.memory import CardState, MemorySession

from conftest import make_words


def _pair_indices(board):
    pairs = {}
    for i, card in enumerate(board.cards):
        pairs.setdefault(card.pair_key, []).append(i)
    return list(pairs.values())


def _mismatch(board):
    pairs = _pair_indices(board)
    return pairs[0][0], pairs[1][0]


def _solve(board):
    for a, b in _pair_indices(board):
        board.reveal(a)
        board.reveal(b)


@pytest.fixture()
def board(scheduler, cycling_rng):
    return MemorySession(make_words(10), scheduler, cycling_rng)


# ---------------------------------------------------------------------------
# Board construction
# ---------------------------------------------------------------------------

class TestBoard:
    def test_sixteen_cards_for_large_pool(self, board):
        assert len(board.cards) == 16
        assert board.pair_count == 8

    def test_each_pair_has_german_and_czech(self, board):
        by_key = {}
        for card in board.cards:
            by_key.setdefault(card.pair_key, set()).add(card.language)
        assert len(by_key) == 8
        assert all(langs == {"de", "cz"} for langs in by_key.values())

    def test_pair_keys_appear_twice(self, board):
        assert set(Counter(c.pair_key for c in board.cards).values()) == {2}

    def test_eight_words_give_sixteen_cards(self, scheduler, cycling_rng):
        b = MemorySession(make_words(8), scheduler, cycling_rng)
        assert len(b.cards) == 16
        assert {c.pair_key for c in b.cards} == set(range(8))

    def test_small_pool_shrinks_board(self, scheduler, cycling_rng):
        b = MemorySession(make_words(5), scheduler, cycling_rng)
        assert len(b.cards) == 10

    def test_all_hidden_at_start(self, board):
        assert all(c.state is CardState.HIDDEN for c in board.cards)
        assert board.moves == 0
        assert not board.locked


# ---------------------------------------------------------------------------
# Revealing
# ---------------------------------------------------------------------------

class TestReveal:
    def test_single_reveal(self, board):
        assert board.reveal(0)
        assert board.cards[0].state is CardState.REVEALED
        assert board.selection == [0]

    @pytest.mark.parametrize("index", [-1, -16, 16])
    def test_out_of_range_index(self, board, index):
        with pytest.raises(IndexError):
            board.reveal(index)
        assert board.selection == []

    def test_last_card_then_negative_index(self, board):
        board.reveal(15)
        with pytest.raises(IndexError):
            board.reveal(-1)
        assert board.selection == [15]
        assert board.cards[15].state is CardState.REVEALED
        assert board.pairs_found == 0

    def test_same_card_twice_ignored(self, board):
        board.reveal(0)
        assert not board.reveal(0)
        assert board.selection == [0]

    def test_match(self, board):
        a, b = _pair_indices(board)[0]
        board.reveal(a)
        board.reveal(b)
        assert board.cards[a].matched and board.cards[b].matched
        assert not board.locked
        assert board.selection == []
        assert board.pairs_found == 1
        assert board.moves == 1

    def test_matched_card_ignored(self, board):
        a, b = _pair_indices(board)[0]
        board.reveal(a)
        board.reveal(b)
        assert not board.reveal(a)

    def test_mismatch_locks_then_hides(self, board, scheduler):
        a, b = _mismatch(board)
        board.reveal(a)
        board.reveal(b)
        assert board.locked
        assert board.cards[a].state is CardState.WRONG
        assert board.cards[b].state is CardState.WRONG
        scheduler.advance(MEMORY_MISMATCH_DELAY_MS)
        assert not board.locked
        assert board.cards[a].state is CardState.HIDDEN
        assert board.cards[b].state is CardState.HIDDEN
        assert board.selection == []

    def test_third_card_ignored_while_locked(self, board):
        a, b = _mismatch(board)
        board.reveal(a)
        board.reveal(b)
        third = next(i for i in range(len(board.cards)) if i not in (a, b))
        assert not board.reveal(third)
        assert board.cards[third].state is CardState.HIDDEN

    def test_at_most_two_unmatched_face_up(self, board, scheduler):
        a, b = _mismatch(board)
        for i in (a, b, 5, 6, 7):
            board.reveal(i)
        face_up = [c for c in board.cards if c.face_up and not c.matched]
        assert len(face_up) <= 2

    def test_mismatch_after_close_stays(self, board, scheduler):
        a, b = _mismatch(board)
        board.reveal(a)
        board.reveal(b)
        board.close()
        scheduler.advance(MEMORY_MISMATCH_DELAY_MS)
        assert board.cards[a].state is CardState.WRONG


# ---------------------------------------------------------------------------
# Victory
# ---------------------------------------------------------------------------

class TestVictory:
    def test_victory_fires_once_after_delay(self, board, scheduler):
        wins = []
        board.add_victory_listener(lambda: wins.append(1))
        _solve(board)
        assert board.is_won
        assert wins == []
        scheduler.advance(MEMORY_VICTORY_DELAY_MS)
        assert wins == [1]
        scheduler.advance(10_000)
        assert wins == [1]

    def test_no_victory_after_close(self, board, scheduler):
        wins = []
        board.add_victory_listener(lambda: wins.append(1))
        _solve(board)
        board.close()
        scheduler.advance(MEMORY_VICTORY_DELAY_MS)
        assert wins == []

    def test_moves_count_pairs_tried(self, board):
        _solve(board)
        assert board.moves == 8
        assert board.pairs_found == 8
