"""Query interface over a league snapshot.

Example:
    >>> from pennant import Division, TeamRecord
    >>> division = Division.from_records(
    ...     [
    ...         TeamRecord("Atlanta", 83, 71, 8),
    ...         TeamRecord("Philadelphia", 80, 79, 3),
    ...         TeamRecord("New_York", 78, 78, 6),
    ...         TeamRecord("Montreal", 77, 82, 3),
    ...     ],
    ...     [[0, 1, 6, 1], [1, 0, 0, 2], [6, 0, 0, 0], [1, 2, 0, 0]],
    ... )
    >>> division.is_eliminated("Philadelphia")
    True
    >>> division.certificate_of("Philadelphia")
    ('Atlanta', 'New_York')
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from pennant.config import EliminationConfig
from pennant.elimination import EliminationEngine
from pennant.league import LeagueSnapshot, TeamRecord


class Division:
    """Standings lookups and elimination queries by team name.

    Every method taking a team name raises ``UnknownTeamError`` (a KeyError)
    for a name that is not in the league, including None.
    """

    def __init__(
        self,
        snapshot: LeagueSnapshot,
        config: Optional[EliminationConfig] = None,
    ) -> None:
        self._snapshot = snapshot
        self._engine = EliminationEngine(snapshot, config)

    @classmethod
    def from_records(
        cls,
        records: Iterable[TeamRecord],
        against: Sequence[Sequence[int]],
        config: Optional[EliminationConfig] = None,
    ) -> Division:
        return cls(LeagueSnapshot.from_records(records, against), config)

    @property
    def snapshot(self) -> LeagueSnapshot:
        return self._snapshot

    def team_count(self) -> int:
        return len(self._snapshot)

    def teams(self) -> List[str]:
        """Team names in load order."""
        return list(self._snapshot.names)

    def wins(self, team: str) -> int:
        return self._snapshot.wins[self._snapshot.index_of(team)]

    def losses(self, team: str) -> int:
        return self._snapshot.losses[self._snapshot.index_of(team)]

    def remaining(self, team: str) -> int:
        return self._snapshot.remaining[self._snapshot.index_of(team)]

    def against(self, team1: str, team2: str) -> int:
        i = self._snapshot.index_of(team1)
        j = self._snapshot.index_of(team2)
        return self._snapshot.against[i][j]

    def is_eliminated(self, team: str) -> bool:
        return self._engine.decide(self._snapshot.index_of(team)) is not None

    def certificate_of(self, team: str) -> Optional[Tuple[str, ...]]:
        """Names of the teams that eliminate ``team``, or None if it is still alive."""
        certificate = self._engine.decide(self._snapshot.index_of(team))
        return None if certificate is None else certificate.teams

    def eliminations(self) -> Dict[str, Optional[Tuple[str, ...]]]:
        """Certificate (or None) of every team, in load order."""
        return {
            name: None if certificate is None else certificate.teams
            for name, certificate in self._engine.resolve_all().items()
        }

    def clear_cache(self) -> None:
        self._engine.reset()
