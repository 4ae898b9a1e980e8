"""Flow network construction for elimination queries.

For a query team ``t`` and the other teams of the league the network is::

    source -> game(i, j)      capacity: games left between i and j
    game(i, j) -> team(i)     capacity: unbounded
    game(i, j) -> team(j)     capacity: unbounded
    team(i) -> sink           capacity: max(0, wins[t] + remaining[t] - wins[i])

Every remaining game among the other teams can be played without anyone
passing ``t``'s best possible total exactly when the max flow saturates all
source edges.

Vertex layout: 0 is the source, then one game vertex per unordered pair of
other teams (pairs with no games left included), then one vertex per other
team in load order, and the sink last.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from pennant.config import ELIMINATION_CONFIG, EliminationConfig
from pennant.league import LeagueSnapshot
from pennant.lib.graph import FlowNetwork
from pennant.logging import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class EliminationNetwork:
    """Flow network for one query team plus the bookkeeping to read its cut.

    Attributes:
        graph: The flow network.
        source: Source vertex id.
        sink: Sink vertex id.
        team: Index of the query team.
        team_vertices: Team index -> team vertex id, for every other team.
        game_vertices: Unordered team index pair (i < j) -> game vertex id.
        total_source_capacity: Games left among the other teams.
        unbounded_capacity: Capacity used for game -> team edges.
    """

    graph: FlowNetwork
    source: int
    sink: int
    team: int
    team_vertices: Dict[int, int]
    game_vertices: Dict[Tuple[int, int], int]
    total_source_capacity: int
    unbounded_capacity: int


def elimination_vertex_count(team_count: int) -> int:
    """Vertices in the network of a league with ``team_count`` teams."""
    others = max(team_count - 1, 0)
    return 2 + others * (others - 1) // 2 + others


def build_elimination_network(
    snapshot: LeagueSnapshot,
    team: int,
    config: Optional[EliminationConfig] = None,
) -> EliminationNetwork:
    """Build the elimination flow network for the team at index ``team``.

    Game -> team edges should never limit the flow. They get the sum of all
    other capacities in the network plus one, which is larger than any cut
    that avoids them, so a minimum cut never contains one.

    Args:
        snapshot: League standings.
        team: Index of the query team.
        config: Resource caps; defaults to ``ELIMINATION_CONFIG``.

    Returns:
        EliminationNetwork for the query.

    Raises:
        IndexError: If ``team`` is not a valid team index.
        ResourceLimitError: If the network would exceed ``config.max_vertices``.
    """
    config = config or ELIMINATION_CONFIG
    n = len(snapshot)
    if not 0 <= team < n:
        raise IndexError(f"Team index {team} out of range for {n} teams.")

    vertex_count = elimination_vertex_count(n)
    config.check_vertex_budget(vertex_count)

    others: List[int] = [i for i in range(n) if i != team]
    pairs = [
        (others[a], others[b])
        for a in range(len(others))
        for b in range(a + 1, len(others))
    ]
    ceiling = snapshot.wins[team] + snapshot.remaining[team]

    source = 0
    sink = vertex_count - 1
    game_vertices = {pair: 1 + k for k, pair in enumerate(pairs)}
    team_vertices = {i: 1 + len(pairs) + k for k, i in enumerate(others)}

    game_caps = {pair: snapshot.against[pair[0]][pair[1]] for pair in pairs}
    headroom = {i: max(0, ceiling - snapshot.wins[i]) for i in others}
    total_source_capacity = sum(game_caps.values())
    unbounded = total_source_capacity + sum(headroom.values()) + 1

    graph = FlowNetwork(vertex_count)
    for pair, game_vertex in game_vertices.items():
        i, j = pair
        graph.add_flow_edge(source, game_vertex, game_caps[pair])
        graph.add_flow_edge(game_vertex, team_vertices[i], unbounded)
        graph.add_flow_edge(game_vertex, team_vertices[j], unbounded)
    for i, team_vertex in team_vertices.items():
        graph.add_flow_edge(team_vertex, sink, headroom[i])

    LOGGER.debug(
        "Elimination network for '%s': %d vertices, %d edges, %d games to place",
        snapshot.name_of(team),
        vertex_count,
        graph.number_of_edges(),
        total_source_capacity,
    )
    return EliminationNetwork(
        graph=graph,
        source=source,
        sink=sink,
        team=team,
        team_vertices=team_vertices,
        game_vertices=game_vertices,
        total_source_capacity=total_source_capacity,
        unbounded_capacity=unbounded,
    )
