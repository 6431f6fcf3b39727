"""Tests for the easy, medium and hard move selectors."""

import random
from math import inf

import pytest

from conftest import ExplodingRng, ScriptedRng
from connect4cli.ai.base import NoLegalMoves
from connect4cli.ai.easy_agent import EasyAgent, select_easy_move
from connect4cli.ai.hard_agent import HardAgent, SearchCounters, minimax, select_hard_move
from connect4cli.ai.medium_agent import (
    count_threats,
    find_best_strategic_move,
    select_medium_move,
    shuffled_center_preference,
)
from connect4cli.ai.pick import agent_for
from connect4cli.ai.tactics import find_winning_move
from connect4cli.core.board import Board
from connect4cli.core.rules import is_game_over
from connect4cli.core.scoring import evaluate
from connect4cli.game.state import GameState
from connect4cli.types import Move, other

# Yellow (computer) can win at (5,3); red also threatens column 6.
BOTH_THREATEN = [
    ".......",
    ".......",
    ".......",
    "......R",
    "......R",
    "YYY...R",
]

# Only red threatens: yellow must block column 6.
RED_THREATENS = [
    ".......",
    ".......",
    ".......",
    "......R",
    "......R",
    "Y.Y...R",
]

MIDGAME = [
    ".......",
    ".......",
    ".......",
    "...Y...",
    "..RR...",
    ".YRYR..",
]


def _plain_minimax(board, depth, maximizing, root):
    """Reference search without pruning."""
    if depth == 0 or is_game_over(board):
        return evaluate(board, root)
    moves = board.valid_moves()
    if not moves:
        return 0
    piece = root if maximizing else other(root)
    scores = []
    for c in moves:
        with board.simulate(c, piece):
            scores.append(_plain_minimax(board, depth - 1, not maximizing, root))
    return max(scores) if maximizing else min(scores)


# ---- tactics ----

def test_find_winning_move_and_restore():
    """The finder reports the landing cell and leaves the board intact."""
    board = Board.from_rows(BOTH_THREATEN)
    before = board.snapshot()
    assert find_winning_move(board, "Y") == Move(5, 3)
    assert find_winning_move(board, "R") == Move(2, 6)
    assert board.snapshot() == before


def test_find_winning_move_none_on_empty(board):
    assert find_winning_move(board, "R") is None


# ---- easy ----

def test_easy_retries_full_columns():
    """A full column is redrawn until an open one comes up."""
    board = Board()
    for i in range(6):
        board.drop(0, "R" if i % 2 else "Y")
    rng = ScriptedRng(ranges=[0, 0, 4])
    assert select_easy_move(board, rng) == Move(5, 4)


def test_easy_on_full_board_raises(drawn_board):
    with pytest.raises(NoLegalMoves):
        select_easy_move(drawn_board, random.Random(0))


def test_easy_agent_is_reproducible_with_seed():
    """Same seed, same sequence of columns."""
    state = GameState(board=Board(), current="Y")
    a = EasyAgent(rng=random.Random(42))
    b = EasyAgent(rng=random.Random(42))
    assert [a.choose_move(state) for _ in range(5)] == [b.choose_move(state) for _ in range(5)]


# ---- medium ----

def test_medium_takes_immediate_win_without_randomness():
    """Winning beats blocking, and no random draw happens."""
    board = Board.from_rows(BOTH_THREATEN)
    assert select_medium_move(board, "Y", ExplodingRng()) == Move(5, 3)


def test_medium_blocks_immediate_loss():
    board = Board.from_rows(RED_THREATENS)
    assert select_medium_move(board, "Y", ExplodingRng()) == Move(2, 6)


def test_medium_strategic_move_prefers_center_on_empty_board(board):
    """With no connections available, the center bonus decides."""
    assert select_medium_move(board, "Y", ScriptedRng(randoms=[0.1])) == Move(5, 3)


def test_count_threats_and_strategic_choice():
    """Connections plus center bonus choose column 2 here."""
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "YY.....",
    ])
    before = board.snapshot()
    assert count_threats(board, 2, "Y") == 3
    assert count_threats(board, 0, "Y") == 2
    assert count_threats(board, 3, "Y") == 0
    assert find_best_strategic_move(board, "Y") == Move(5, 2)
    assert board.snapshot() == before


def test_medium_falls_back_to_shuffled_center_order(board):
    """Above the strategic threshold the shuffled preference list is used."""
    rng = ScriptedRng(randoms=[0.9], ranges=[6, 1, 2, 3, 4, 5, 6])
    assert select_medium_move(board, "Y", rng) == Move(5, 6)


def test_medium_fallback_skips_full_columns():
    board = Board()
    for i in range(6):
        board.drop(6, "R" if i % 2 else "Y")
    rng = ScriptedRng(randoms=[0.9], ranges=[6, 1, 2, 3, 4, 5, 6])
    # shuffled order is [6, 2, 4, 1, 5, 0, 3]; column 6 is full
    assert select_medium_move(board, "R", rng) == Move(5, 2)


def test_shuffle_keeps_every_column():
    order = shuffled_center_preference(random.Random(3))
    assert sorted(order) == list(range(7))


# ---- hard ----

def test_hard_takes_immediate_win():
    """The search is skipped entirely when a win is on the board."""
    board = Board.from_rows(BOTH_THREATEN)
    counters = SearchCounters()
    assert select_hard_move(board, "Y", counters=counters) == Move(5, 3)
    assert counters.nodes == 0


def test_hard_blocks_immediate_loss():
    board = Board.from_rows(RED_THREATENS)
    counters = SearchCounters()
    assert select_hard_move(board, "Y", counters=counters) == Move(2, 6)
    assert counters.nodes == 0


def test_hard_is_deterministic_and_restores_board():
    """Repeated searches on the same board agree and leave it untouched."""
    board = Board.from_rows(MIDGAME)
    before = board.snapshot()
    first = select_hard_move(board, "Y")
    assert board.snapshot() == before
    second = select_hard_move(board, "Y")
    assert first == second
    assert first.column in board.valid_moves()
    assert first.row == board.landing_row(first.column)


def test_alpha_beta_matches_plain_minimax():
    """Pruning never changes the value of a node."""
    board = Board.from_rows(MIDGAME)
    for col in board.valid_moves():
        with board.simulate(col, "Y"):
            counters = SearchCounters()
            pruned = minimax(board, 3, -inf, inf, False, "Y", counters)
            plain = _plain_minimax(board, 3, False, "Y")
            assert pruned == plain


def test_minimax_prunes_something():
    board = Board.from_rows(MIDGAME)
    counters = SearchCounters()
    minimax(board, 4, -inf, inf, True, "Y", counters)
    assert counters.cutoffs > 0
    assert counters.nodes < 7 ** 4


def test_minimax_leaf_is_root_perspective():
    """Depth 0 returns the static score for the root player on either ply."""
    board = Board.from_rows(MIDGAME)
    assert minimax(board, 0, -inf, inf, True, "Y") == evaluate(board, "Y")
    assert minimax(board, 0, -inf, inf, False, "Y") == evaluate(board, "Y")


def test_minimax_terminal_full_board(drawn_board):
    assert minimax(drawn_board, 4, -inf, inf, True, "R") == evaluate(drawn_board, "R")


def test_hard_agent_depth_is_capped():
    with pytest.raises(ValueError):
        HardAgent(depth=6)


def test_hard_agent_reports_search_info():
    board = Board.from_rows(MIDGAME)
    agent = HardAgent(depth=3)
    move = agent.choose_move(GameState(board=board, current="Y"))
    assert agent.last_info["move_col"] == move.column + 1
    assert agent.last_info["nodes"] > 0


def test_selectors_refuse_full_board(drawn_board):
    with pytest.raises(NoLegalMoves):
        select_medium_move(drawn_board, "Y", random.Random(0))
    with pytest.raises(NoLegalMoves):
        select_hard_move(drawn_board, "Y")


@pytest.mark.parametrize("difficulty", ["easy", "medium", "hard"])
def test_agent_for_builds_each_difficulty(difficulty):
    agent = agent_for(difficulty, seed=1)
    assert difficulty.capitalize() in agent.name


def test_agent_for_rejects_unknown():
    with pytest.raises(ValueError):
        agent_for("impossible")


# Column 3 full and everything else empty: the position is mirror-symmetric.
CENTER_FILLED = [
    "...Y...",
    "...R...",
    "...Y...",
    "...R...",
    "...Y...",
    "...R...",
]


def test_hard_breaks_ties_toward_the_left():
    """Mirror columns score the same; the leftmost of the best pair is played."""
    board = Board.from_rows(CENTER_FILLED)
    scores = {}
    for col in board.valid_moves():
        with board.simulate(col, "Y"):
            scores[col] = evaluate(board, "Y")
    best = max(scores.values())
    tied = sorted(c for c, s in scores.items() if s == best)
    assert len(tied) >= 2
    assert scores[tied[0]] == scores[6 - tied[0]]

    move = select_hard_move(board, "Y", depth=1)
    assert move == Move(5, tied[0])


def test_strategic_move_breaks_ties_toward_the_left():
    """Columns 2 and 4 both score the near-center bonus; column 2 wins."""
    board = Board.from_rows(CENTER_FILLED)
    assert count_threats(board, 2, "Y") == count_threats(board, 4, "Y") == 0
    assert find_best_strategic_move(board, "Y") == Move(5, 2)


def test_minimax_stops_at_a_finished_game():
    """A position that already holds four in a row is scored without searching."""
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "RRR....",
        "YYYY...",
    ])
    before = board.snapshot()
    for root in ("Y", "R"):
        for maximizing in (True, False):
            counters = SearchCounters()
            assert minimax(board, 3, -inf, inf, maximizing, root, counters) == evaluate(board, root)
            assert counters.nodes == 1
    assert board.snapshot() == before
