import os

# board window tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


# canonical 5x5, 3 player game: every move valid, the last one
# completes the anti-diagonal for player 3
REFERENCE_MOVES = [
    (1, 1, 0), (2, 3, 3), (3, 1, 3), (1, 0, 2), (2, 0, 0), (3, 2, 2),
    (1, 4, 1), (2, 4, 2), (3, 3, 1), (1, 1, 2), (2, 4, 3), (3, 2, 1),
    (1, 4, 4), (2, 1, 1), (3, 0, 4), (1, 0, 1), (2, 2, 3), (3, 4, 0),
]

REFERENCE_BOARD = (
    "2 1 1 0 3\n"
    "1 2 1 3 0\n"
    "0 3 3 2 0\n"
    "0 3 0 2 0\n"
    "3 1 2 2 1"
)


@pytest.fixture
def reference_moves():
    return list(REFERENCE_MOVES)


@pytest.fixture
def reference_board():
    return REFERENCE_BOARD
