"""Shared league fixtures."""

from __future__ import annotations

import pytest

from pennant.league import LeagueSnapshot, TeamRecord


@pytest.fixture
def teams4() -> LeagueSnapshot:
    # Atlanta leads with 83. Montreal cannot get there at all. Philadelphia tops
    # out at 83, which needs Atlanta to lose all six games against New_York and
    # takes New_York to 84.
    return LeagueSnapshot.from_records(
        [
            TeamRecord("Atlanta", 83, 71, 8),
            TeamRecord("Philadelphia", 80, 79, 3),
            TeamRecord("New_York", 78, 78, 6),
            TeamRecord("Montreal", 77, 82, 3),
        ],
        [
            [0, 1, 6, 1],
            [1, 0, 0, 2],
            [6, 0, 0, 0],
            [1, 2, 0, 0],
        ],
    )


@pytest.fixture
def round_robin4() -> LeagueSnapshot:
    # Three teams on 10 wins with 9 games left among them: someone reaches 13,
    # while Detroit can get at most 12. No pair of them proves it on its own.
    return LeagueSnapshot.from_records(
        [
            TeamRecord("Akron", 10, 5, 7),
            TeamRecord("Boise", 10, 5, 7),
            TeamRecord("Camden", 10, 6, 6),
            TeamRecord("Detroit", 10, 6, 2),
        ],
        [
            [0, 3, 3, 1],
            [3, 0, 3, 1],
            [3, 3, 0, 0],
            [1, 1, 0, 0],
        ],
    )


@pytest.fixture
def solo() -> LeagueSnapshot:
    return LeagueSnapshot.from_records([TeamRecord("Lonely", 3, 4, 0)], [[0]])
