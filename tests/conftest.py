import random

import pytest

from reversi_lite.engine.board import Board


# White holds two corners, each flanked by a lone Black disc. Black can never
# capture a corner, so Black has no move while White has (0,2) and (7,2).
CORNER_TRAP = """
WB......
........
........
........
........
........
........
WB......
"""


@pytest.fixture
def start_board():
    return Board.initial()


@pytest.fixture
def corner_trap():
    return Board.from_string(CORNER_TRAP)


@pytest.fixture
def full_board():
    return Board.from_string("B" * 40 + "W" * 24)


@pytest.fixture
def rng():
    return random.Random(1234)