import pytest

from pennant.lib.graph import FlowNetwork, StrictMultiDiGraph


@pytest.fixture
def line1():
    # Capacity:
    #     [5]      [1,3,7]
    #  A◄───────►B◄───────►C
    #
    g = StrictMultiDiGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_node("C")

    g.add_edge("A", "B", key=0, capacity=5)
    g.add_edge("B", "A", key=1, capacity=5)
    g.add_edge("B", "C", key=2, capacity=1)
    g.add_edge("C", "B", key=3, capacity=1)
    g.add_edge("B", "C", key=4, capacity=3)
    g.add_edge("C", "B", key=5, capacity=3)
    g.add_edge("B", "C", key=6, capacity=7)
    g.add_edge("C", "B", key=7, capacity=7)
    return g


@pytest.fixture
def clrs6():
    # Textbook network (vertex 0 is the source, 5 the sink). Max flow is 23 and
    # the minimum cut separates {0, 1, 2, 4}: edges 1->3, 4->3 and 4->5.
    g = FlowNetwork(6)
    g.add_flow_edge(0, 1, 16)
    g.add_flow_edge(0, 2, 13)
    g.add_flow_edge(1, 3, 12)
    g.add_flow_edge(2, 1, 4)
    g.add_flow_edge(2, 4, 14)
    g.add_flow_edge(3, 2, 9)
    g.add_flow_edge(3, 5, 20)
    g.add_flow_edge(4, 3, 7)
    g.add_flow_edge(4, 5, 4)
    return g


@pytest.fixture
def detour8():
    # The first shortest path s-a-b-t blocks s-c-b; the second augmentation has
    # to send flow back over a->b and around through d and e.
    #
    #   s ──► a ──► b ──► t
    #   │     │     ▲     ▲
    #   ▼     ▼     │     │
    #   c ────┼─────┘     │
    #         d ──► e ────┘
    #
    g = StrictMultiDiGraph()
    for node in ("s", "a", "b", "c", "d", "e", "t"):
        g.add_node(node)
    g.add_edge("s", "a", capacity=1)
    g.add_edge("a", "b", capacity=1)
    g.add_edge("b", "t", capacity=1)
    g.add_edge("s", "c", capacity=1)
    g.add_edge("c", "b", capacity=1)
    g.add_edge("a", "d", capacity=1)
    g.add_edge("d", "e", capacity=1)
    g.add_edge("e", "t", capacity=1)
    return g


@pytest.fixture
def parallel_float():
    # Two parallel edges with fractional capacities, then a wide link.
    g = FlowNetwork(3)
    g.add_flow_edge(0, 1, 0.5)
    g.add_flow_edge(0, 1, 0.25)
    g.add_flow_edge(1, 2, 10.0)
    return g
