"""pennant: mathematical elimination in league standings.

pennant decides whether a team can still finish first (possibly tied) given the
current standings and the games left, and produces a certificate of
elimination when it cannot. The decision is reduced to a max-flow/min-cut
problem solved by the bundled Edmonds-Karp implementation.

Primary API:
    Division - Standings lookups and elimination queries by team name
    LeagueSnapshot, TeamRecord - Immutable league standings
    EliminationEngine, Certificate - Per-team decisions with caching
    calc_max_flow - Generic max flow with min-cut summary

Example:
    from pennant import Division, TeamRecord

    division = Division.from_records(
        [TeamRecord("A", 10, 2, 2), TeamRecord("B", 5, 7, 2)],
        [[0, 2], [2, 0]],
    )
    division.certificate_of("B")  # ('A',)
"""

from __future__ import annotations

from pennant import logging
from pennant.cache import CertificateCache
from pennant.config import ELIMINATION_CONFIG, EliminationConfig
from pennant.division import Division
from pennant.elimination import Certificate, EliminationEngine, trivial_elimination
from pennant.errors import ResourceLimitError, UnknownTeamError
from pennant.league import LeagueSnapshot, TeamRecord
from pennant.lib.algorithms.max_flow import calc_max_flow
from pennant.lib.algorithms.types import FlowSummary
from pennant.lib.graph import FlowNetwork
from pennant.network import EliminationNetwork, build_elimination_network

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "LeagueSnapshot",
    "TeamRecord",
    # Queries (primary API)
    "Division",
    "EliminationEngine",
    "Certificate",
    "CertificateCache",
    "trivial_elimination",
    "EliminationNetwork",
    "build_elimination_network",
    # Flow
    "FlowNetwork",
    "FlowSummary",
    "calc_max_flow",
    # Configuration and errors
    "EliminationConfig",
    "ELIMINATION_CONFIG",
    "ResourceLimitError",
    "UnknownTeamError",
    # Utilities
    "logging",
]
