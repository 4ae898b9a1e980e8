import itertools
import random

import pytest

from pennant.config import EliminationConfig
from pennant.elimination import (
    Certificate,
    EliminationEngine,
    network_elimination,
    trivial_elimination,
)
from pennant.errors import ResourceLimitError
from pennant.league import LeagueSnapshot, TeamRecord


def _random_league(rng: random.Random) -> LeagueSnapshot:
    n = rng.randint(2, 5)
    against = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            against[i][j] = against[j][i] = rng.randint(0, 2)
    records = [
        TeamRecord(f"T{i}", rng.randint(0, 8), rng.randint(0, 8), sum(against[i]))
        for i in range(n)
    ]
    return LeagueSnapshot.from_records(records, against).validate()


def _brute_force_eliminated(snapshot: LeagueSnapshot, team: int) -> bool:
    """Try every split of every game left among the other teams."""
    n = len(snapshot)
    ceiling = snapshot.wins[team] + snapshot.remaining[team]
    pairs = [
        (i, j)
        for i in range(n)
        for j in range(i + 1, n)
        if team not in (i, j) and snapshot.against[i][j] > 0
    ]
    choices = [range(snapshot.against[i][j] + 1) for i, j in pairs]
    for split in itertools.product(*choices):
        totals = list(snapshot.wins)
        for (i, j), wins_i in zip(pairs, split):
            totals[i] += wins_i
            totals[j] += snapshot.against[i][j] - wins_i
        if all(totals[k] <= ceiling for k in range(n) if k != team):
            return False
    return True


def _proves_elimination(snapshot: LeagueSnapshot, team: int, certificate: Certificate) -> bool:
    members = [snapshot.index_of(name) for name in certificate.teams]
    ceiling = snapshot.wins[team] + snapshot.remaining[team]
    games = sum(
        snapshot.against[i][j] for i, j in itertools.combinations(members, 2)
    )
    return sum(snapshot.wins[i] for i in members) + games > ceiling * len(members)


class TestTrivialElimination:
    def test_leader_out_of_reach(self, teams4):
        certificate = trivial_elimination(teams4, 3)
        assert certificate == Certificate("Montreal", ("Atlanta",), trivial=True)

    def test_tie_with_leader_is_not_trivial(self, teams4):
        # Philadelphia can reach exactly 83
        assert trivial_elimination(teams4, 1) is None

    def test_leader_itself(self, teams4):
        assert trivial_elimination(teams4, 0) is None

    def test_no_games_left(self):
        snapshot = LeagueSnapshot.from_records(
            [TeamRecord("A", 4, 0, 0), TeamRecord("B", 3, 1, 0)], [[0, 0], [0, 0]]
        )
        assert trivial_elimination(snapshot, 1).teams == ("A",)
        assert trivial_elimination(snapshot, 0) is None


class TestNetworkElimination:
    def test_two_team_certificate(self, teams4):
        certificate = network_elimination(teams4, 1)
        assert certificate == Certificate("Philadelphia", ("Atlanta", "New_York"))
        assert _proves_elimination(teams4, 1, certificate)

    def test_three_team_certificate(self, round_robin4):
        certificate = network_elimination(round_robin4, 3)
        assert certificate.teams == ("Akron", "Boise", "Camden")
        assert not certificate.trivial
        assert _proves_elimination(round_robin4, 3, certificate)

    @pytest.mark.parametrize("team", [0, 2])
    def test_not_eliminated(self, teams4, team):
        assert network_elimination(teams4, team) is None

    def test_single_team_league(self, solo):
        assert network_elimination(solo, 0) is None

    def test_trivial_case_is_also_caught_by_network(self, teams4):
        certificate = network_elimination(teams4, 3)
        assert "Atlanta" in certificate
        assert _proves_elimination(teams4, 3, certificate)

    def test_augmentation_limit(self, round_robin4):
        with pytest.raises(ResourceLimitError):
            network_elimination(round_robin4, 3, EliminationConfig(max_augmentations=1))


class TestEliminationEngine:
    def test_decide(self, teams4):
        engine = EliminationEngine(teams4)
        assert engine.decide(0) is None
        assert engine.decide(1).teams == ("Atlanta", "New_York")
        assert engine.decide(2) is None
        assert engine.decide(3).teams == ("Atlanta",)
        assert engine.decide(3).trivial

    def test_decide_is_cached(self, teams4, monkeypatch):
        engine = EliminationEngine(teams4)
        first = engine.decide(1)

        def _fail(*args, **kwargs):
            raise AssertionError("recomputed a cached team")

        monkeypatch.setattr("pennant.elimination.network_elimination", _fail)
        assert engine.decide(1) is first
        assert "Philadelphia" in engine.cache

    def test_resolve_all_in_load_order(self, teams4):
        results = EliminationEngine(teams4).resolve_all()
        assert list(results) == ["Atlanta", "Philadelphia", "New_York", "Montreal"]
        assert results["Atlanta"] is None
        assert results["Montreal"].teams == ("Atlanta",)

    def test_reset(self, teams4):
        engine = EliminationEngine(teams4)
        engine.decide(1)
        engine.reset()
        assert len(engine.cache) == 0

    def test_leader_playing_every_remaining_game(self):
        # Every game left involves the leader, so nobody else can gain a win.
        snapshot = LeagueSnapshot.from_records(
            [
                TeamRecord("A", 9, 1, 1),
                TeamRecord("B", 12, 0, 4),
                TeamRecord("C", 11, 2, 3),
            ],
            [[0, 1, 0], [1, 0, 3], [0, 3, 0]],
        ).validate()
        engine = EliminationEngine(snapshot)
        assert engine.decide(1) is None


@pytest.mark.parametrize("seed", range(40))
def test_random_leagues_against_brute_force(seed):
    snapshot = _random_league(random.Random(seed))
    engine = EliminationEngine(snapshot)
    leader_wins = max(snapshot.wins)
    for team in range(len(snapshot)):
        certificate = engine.decide(team)
        assert (certificate is not None) == _brute_force_eliminated(snapshot, team)
        if certificate is None:
            continue
        assert len(certificate) > 0
        assert snapshot.name_of(team) not in certificate
        if snapshot.wins[team] + snapshot.remaining[team] < leader_wins:
            assert certificate.teams == (snapshot.name_of(snapshot.leader()),)
            assert certificate.trivial
        else:
            assert _proves_elimination(snapshot, team, certificate)
        assert engine.decide(team) is certificate
