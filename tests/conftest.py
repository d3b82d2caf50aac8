import itertools

import pytest

from tetris_game import Game
from tetris_highscore import MemoryHighScoreStore
from tetris_rng import PieceRandom


class ScriptedRandom(PieceRandom):
    """Deals the given kinds in a loop."""
    def __init__(self, *kinds):
        super().__init__(seed=0)
        self._kinds = itertools.cycle(kinds)

    def next_kind(self):
        return next(self._kinds)


class Recorder:
    def __init__(self):
        self.events = []

    def __call__(self, name, payload):
        self.events.append((name, payload))

    @property
    def names(self):
        return [n for n, _ in self.events]


def fill_rows(board, rows, skip_cols=(), color="#808080"):
    for y in rows:
        for x in range(board.cols):
            if x not in skip_cols:
                board.grid[y][x] = color


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_game(store, recorder):
    def make(*kinds, difficulty="normal"):
        game = Game(store=store, rng=ScriptedRandom(*(kinds or ("O",))), difficulty=difficulty)
        game.events.subscribe(recorder)
        return game
    return make
