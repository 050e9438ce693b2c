"""Pytest configuration for tests."""

import copy

import pytest

from sudoku_profiles.helpers.database_helpers import USER_ACTIVE_GAMES, MongoGateway
from sudoku_profiles.services.profile_service import ProfileQueryService
from tests.mocks.async_mongo import AsyncDatabase

ACTIVE_GAMES = [
    {
        "userID": "user-1",
        "puzzle": "310084002200150006570003010423708095760030000009562030050006070007000900000001500",
        "currentTime": 120,
        "moves": [
            {"puzzleCurrentState": "S0", "puzzleCurrentNotesState": "N0"},
            {"puzzleCurrentState": "S1", "puzzleCurrentNotesState": "N1"},
        ],
        "numHintsUsed": 1,
        "numWrongCellsPlayedPerStrategy": {"NAKED_SINGLE": 2, "HIDDEN_SINGLE": 0},
    },
    {
        "userID": "user-2",
        "puzzle": "003020600900305001001806400008102900700000008006708200002609500800203009005010300",
        "currentTime": 45,
        "moves": [
            {"puzzleCurrentState": "S1", "puzzleCurrentNotesState": "N9"},
        ],
        "numHintsUsed": 0,
        "numWrongCellsPlayedPerStrategy": {"NAKED_SINGLE": 0, "HIDDEN_SINGLE": 3},
    },
]


# Real boards: all-digit strings, 81 cells (notes: 9 candidates per cell).
BOARD = ACTIVE_GAMES[0]["puzzle"]
BOARD_AFTER_MOVE = BOARD[:2] + "9" + BOARD[3:]
NOTES = "1" + "0" * 728


@pytest.fixture(scope="session")
def anyio_backend():
    """Configure anyio to use only asyncio backend."""
    return "asyncio"


@pytest.fixture
def active_games():
    """Fresh copies of the sample active games."""
    return copy.deepcopy(ACTIVE_GAMES)


@pytest.fixture
def db():
    """Empty in-memory database."""
    return AsyncDatabase()


@pytest.fixture
def collection(db):
    """Synchronous handle on the active games collection, for assertions."""
    return db.sync[USER_ACTIVE_GAMES.collection]


@pytest.fixture
def gateway(db):
    return MongoGateway(db)


@pytest.fixture
def service(gateway):
    return ProfileQueryService(gateway)


@pytest.fixture
def seeded(collection, active_games):
    """Database holding the sample active games."""
    collection.insert_many(copy.deepcopy(active_games))
    return collection


@pytest.fixture
def board_game(collection):
    """One stored game whose states are real all-digit Sudoku boards."""
    doc = {
        "userID": "user-board",
        "puzzle": BOARD,
        "currentTime": 10,
        "moves": [
            {"puzzleCurrentState": BOARD, "puzzleCurrentNotesState": NOTES},
            {"puzzleCurrentState": BOARD_AFTER_MOVE, "puzzleCurrentNotesState": NOTES},
        ],
    }
    collection.insert_one(copy.deepcopy(doc))
    return doc
