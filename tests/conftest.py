"""Shared fixtures and helpers for the test suite."""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from connect4cli.core.board import Board


class ScriptedRng:
    """Stand-in for random.Random that replays fixed values."""

    def __init__(self, randoms=(), ranges=()):
        self._randoms = list(randoms)
        self._ranges = list(ranges)

    def random(self):
        return self._randoms.pop(0)

    def randrange(self, n):
        v = self._ranges.pop(0)
        assert 0 <= v < n
        return v


class ExplodingRng:
    """Fails the test if any randomness is consumed."""

    def random(self):
        raise AssertionError("random() should not be called")

    def randrange(self, n):
        raise AssertionError("randrange() should not be called")


# Full board, alternating two-row bands; contains no four in a row.
DRAWN_ROWS = [
    "RYRYRYR",
    "RYRYRYR",
    "YRYRYRY",
    "YRYRYRY",
    "RYRYRYR",
    "RYRYRYR",
]


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def drawn_board():
    return Board.from_rows(DRAWN_ROWS)
