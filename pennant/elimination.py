"""Elimination decisions and certificates.

A team is eliminated when it cannot finish with at least as many wins as every
other team, whatever the outcome of the remaining games. The proof of
elimination is a set of teams R whose wins plus the games left among them
exceed what the query team can reach, on average over R::

    (sum(wins[R]) + games_among(R)) / |R| > wins[t] + remaining[t]

Two checks decide it:

* ``trivial_elimination``: some team already has more wins than the query team
  can reach. The certificate is that single team.
* ``EliminationEngine``: otherwise, a max flow on the network from
  ``pennant.network``. If it does not saturate the source edges, the other
  teams on the source side of the minimum cut form the certificate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from pennant.cache import CertificateCache
from pennant.config import ELIMINATION_CONFIG, EliminationConfig
from pennant.league import LeagueSnapshot
from pennant.lib.algorithms.max_flow import calc_max_flow
from pennant.logging import get_logger
from pennant.network import build_elimination_network

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class Certificate:
    """Proof that ``team`` is eliminated.

    Attributes:
        team: Name of the eliminated team.
        teams: Names of the witness teams, in load order. Never empty.
        trivial: True if a single team already has more wins than ``team``
            can reach, so no flow computation was needed.
    """

    team: str
    teams: Tuple[str, ...]
    trivial: bool = False

    def __len__(self) -> int:
        return len(self.teams)

    def __iter__(self):
        return iter(self.teams)

    def __contains__(self, name: object) -> bool:
        return name in self.teams


def trivial_elimination(snapshot: LeagueSnapshot, team: int) -> Optional[Certificate]:
    """Return a singleton certificate if the league leader is out of reach.

    The leader is the first team in load order with the most wins.
    """
    leader = snapshot.leader()
    if snapshot.wins[team] + snapshot.remaining[team] < snapshot.wins[leader]:
        return Certificate(
            team=snapshot.name_of(team),
            teams=(snapshot.name_of(leader),),
            trivial=True,
        )
    return None


def network_elimination(
    snapshot: LeagueSnapshot,
    team: int,
    config: Optional[EliminationConfig] = None,
) -> Optional[Certificate]:
    """Decide elimination of ``team`` with a max flow; None if not eliminated."""
    config = config or ELIMINATION_CONFIG
    network = build_elimination_network(snapshot, team, config)
    flow, summary = calc_max_flow(
        network.graph,
        network.source,
        network.sink,
        return_summary=True,
        copy_graph=False,
        max_augmentations=config.max_augmentations,
    )

    if flow == network.total_source_capacity:
        return None

    witnesses = tuple(
        snapshot.name_of(i)
        for i, vertex in sorted(network.team_vertices.items())
        if vertex in summary.reachable
    )
    # an unsaturated source edge puts at least one team vertex behind the cut
    assert witnesses, "flow below source capacity but empty cut"
    return Certificate(team=snapshot.name_of(team), teams=witnesses)


class EliminationEngine:
    """Answers elimination queries for one league snapshot.

    Results are cached per team for the lifetime of the engine; each team goes
    from unresolved to resolved exactly once, even under concurrent queries.
    """

    def __init__(
        self,
        snapshot: LeagueSnapshot,
        config: Optional[EliminationConfig] = None,
    ) -> None:
        self.snapshot = snapshot
        self.config = config or ELIMINATION_CONFIG
        self.cache: CertificateCache[Certificate] = CertificateCache()

    def decide(self, team: int) -> Optional[Certificate]:
        """Return the certificate of the team at index ``team``, or None."""
        name = self.snapshot.name_of(team)
        return self.cache.get_or_compute(name, lambda: self._compute(team))

    def _compute(self, team: int) -> Optional[Certificate]:
        certificate = trivial_elimination(self.snapshot, team)
        if certificate is not None:
            LOGGER.debug(
                "'%s' trivially eliminated by '%s'",
                certificate.team,
                certificate.teams[0],
            )
            return certificate

        certificate = network_elimination(self.snapshot, team, self.config)
        if certificate is None:
            LOGGER.debug("'%s' is not eliminated", self.snapshot.name_of(team))
        else:
            LOGGER.debug(
                "'%s' eliminated by %s", certificate.team, ", ".join(certificate.teams)
            )
        return certificate

    def resolve_all(self) -> Dict[str, Optional[Certificate]]:
        """Decide every team; the result is ordered by load order."""
        return {
            self.snapshot.name_of(i): self.decide(i) for i in range(len(self.snapshot))
        }

    def reset(self) -> None:
        self.cache.clear()
