import pytest

from pennant.config import EliminationConfig
from pennant.errors import ResourceLimitError
from pennant.network import build_elimination_network, elimination_vertex_count


@pytest.mark.parametrize(
    "teams,expected", [(1, 2), (2, 3), (3, 5), (4, 8), (5, 12), (30, 437)]
)
def test_vertex_count(teams, expected):
    assert elimination_vertex_count(teams) == expected


class TestBuildEliminationNetwork:
    def test_layout(self, teams4):
        network = build_elimination_network(teams4, 1)
        graph = network.graph
        assert network.source == 0
        assert network.sink == graph.vertex_count - 1 == 7
        assert network.team == 1
        assert network.game_vertices == {(0, 2): 1, (0, 3): 2, (2, 3): 3}
        assert network.team_vertices == {0: 4, 2: 5, 3: 6}
        assert graph.number_of_edges() == 3 * 3 + 3

    def test_capacities(self, teams4):
        network = build_elimination_network(teams4, 1)
        graph = network.graph

        def capacity(u, v):
            (key,) = graph.edges_between(u, v)
            return graph.get_edge_attr(key)["capacity"]

        # games left among Atlanta, New_York, Montreal
        assert capacity(0, 1) == 6
        assert capacity(0, 2) == 1
        assert capacity(0, 3) == 0
        assert network.total_source_capacity == 7
        assert graph.source_capacity(network.source) == 7

        # Philadelphia can reach 83 wins
        assert capacity(4, 7) == 0
        assert capacity(5, 7) == 5
        assert capacity(6, 7) == 6

        assert network.unbounded_capacity == 7 + 11 + 1
        for game in (1, 2, 3):
            for _, team_vertex, attr in graph.out_edges(game, data=True):
                assert attr["capacity"] == network.unbounded_capacity

    def test_headroom_clamped_at_zero(self, teams4):
        # Montreal tops out at 80, below Atlanta's 83
        network = build_elimination_network(teams4, 3)
        (key,) = network.graph.edges_between(network.team_vertices[0], network.sink)
        assert network.graph.get_edge_attr(key)["capacity"] == 0

    def test_game_edges_point_to_both_teams(self, round_robin4):
        network = build_elimination_network(round_robin4, 3)
        graph = network.graph
        game = network.game_vertices[(0, 2)]
        targets = sorted(v for _, v in graph.out_edges(game))
        assert targets == [network.team_vertices[0], network.team_vertices[2]]

    def test_single_team(self, solo):
        network = build_elimination_network(solo, 0)
        assert network.graph.vertex_count == 2
        assert network.graph.number_of_edges() == 0
        assert network.total_source_capacity == 0

    def test_bad_team_index(self, teams4):
        with pytest.raises(IndexError):
            build_elimination_network(teams4, 4)

    def test_vertex_limit(self, teams4):
        with pytest.raises(ResourceLimitError) as exc_info:
            build_elimination_network(teams4, 0, EliminationConfig(max_vertices=7))
        assert exc_info.value.actual == 8

    def test_vertex_limit_exact(self, teams4):
        network = build_elimination_network(teams4, 0, EliminationConfig(max_vertices=8))
        assert network.graph.vertex_count == 8
