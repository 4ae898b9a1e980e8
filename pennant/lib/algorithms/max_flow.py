from typing import List, Literal, Optional, Set, Tuple, Union, overload

from pennant.config import ELIMINATION_CONFIG
from pennant.errors import ResourceLimitError
from pennant.lib.algorithms.base import Capacity, ResidualPred, ResidualStep
from pennant.lib.algorithms.bfs import residual_bfs
from pennant.lib.algorithms.flow_init import init_flow_graph
from pennant.lib.algorithms.types import Edge, FlowSummary
from pennant.lib.graph import NodeID, StrictMultiDiGraph
from pennant.logging import get_logger

LOGGER = get_logger(__name__)


@overload
def calc_max_flow(
    graph: StrictMultiDiGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[False] = False,
    return_graph: Literal[False] = False,
    reset_flow_graph: bool = False,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
    copy_graph: bool = True,
    max_augmentations: Optional[int] = None,
) -> Capacity: ...


@overload
def calc_max_flow(
    graph: StrictMultiDiGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[True],
    return_graph: Literal[False] = False,
    reset_flow_graph: bool = False,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
    copy_graph: bool = True,
    max_augmentations: Optional[int] = None,
) -> Tuple[Capacity, FlowSummary]: ...


@overload
def calc_max_flow(
    graph: StrictMultiDiGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[False] = False,
    return_graph: Literal[True],
    reset_flow_graph: bool = False,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
    copy_graph: bool = True,
    max_augmentations: Optional[int] = None,
) -> Tuple[Capacity, StrictMultiDiGraph]: ...


@overload
def calc_max_flow(
    graph: StrictMultiDiGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[True],
    return_graph: Literal[True],
    reset_flow_graph: bool = False,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
    copy_graph: bool = True,
    max_augmentations: Optional[int] = None,
) -> Tuple[Capacity, FlowSummary, StrictMultiDiGraph]: ...


def calc_max_flow(
    graph: StrictMultiDiGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: bool = False,
    return_graph: bool = False,
    reset_flow_graph: bool = False,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
    copy_graph: bool = True,
    max_augmentations: Optional[int] = None,
) -> Union[Capacity, tuple]:
    """Compute the maximum flow between two nodes of a directed multi-graph
    with the Edmonds-Karp method.

    The function:
      1. Creates or re-initializes a flow-aware copy of the graph (via ``init_flow_graph``).
      2. Runs a breadth-first search over the residual graph (``residual_bfs``),
         which includes backward steps over edges that already carry flow.
      3. Pushes the path bottleneck along the shortest augmenting path found and
         repeats until the destination is no longer reachable.

    The visited set of that last, failed search is the source side of a minimum
    cut and is reported as ``FlowSummary.reachable``.

    Capacities must be finite. An "unbounded" edge is expressed with a large
    finite capacity (anything above the total of all other capacities works).

    Args:
        graph (StrictMultiDiGraph):
            The graph with a capacity attribute on each edge.
        src_node (NodeID):
            The source node for flow.
        dst_node (NodeID):
            The destination node for flow.
        return_summary (bool):
            If True, also return a FlowSummary with flows and the min cut.
        return_graph (bool):
            If True, also return the flow-annotated graph.
        reset_flow_graph (bool):
            If True, reset any existing flow on the edges before starting.
            Defaults to False, which continues from the flow already present.
        capacity_attr (str):
            The name of the capacity attribute on edges. Defaults to "capacity".
        flow_attr (str):
            The name of the flow attribute on edges. Defaults to "flow".
        copy_graph (bool):
            If True, work on a copy of the original graph so it remains unmodified.
            Defaults to True.
        max_augmentations (Optional[int]):
            Upper bound on augmenting paths; falls back to
            ``ELIMINATION_CONFIG.max_augmentations`` when None.

    Returns:
        Union[Capacity, tuple]:
            - If neither return_summary nor return_graph: the flow value
            - If return_summary only: tuple[flow, FlowSummary]
            - If return_graph only: tuple[flow, StrictMultiDiGraph]
            - If both flags: tuple[flow, FlowSummary, StrictMultiDiGraph]

    Raises:
        KeyError: If ``src_node`` is not in the graph.
        ValueError: If ``dst_node`` is not in the graph.
        ResourceLimitError: If more than ``max_augmentations`` paths are needed.

    Examples:
        >>> g = StrictMultiDiGraph()
        >>> for n in "ABC":
        ...     g.add_node(n)
        >>> g.add_edge("A", "B", capacity=10)
        0
        >>> g.add_edge("B", "C", capacity=5)
        1
        >>> calc_max_flow(g, "A", "C")
        5
        >>> flow, summary = calc_max_flow(g, "A", "C", return_summary=True)
        >>> summary.min_cut
        [('B', 'C', 1)]
    """
    if src_node not in graph:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")
    if dst_node not in graph:
        raise ValueError(f"Destination node '{dst_node}' is not in the graph.")
    if max_augmentations is None:
        max_augmentations = ELIMINATION_CONFIG.max_augmentations

    flow_graph = init_flow_graph(
        graph.copy() if copy_graph else graph, flow_attr, reset_flow_graph
    )

    # Degenerate case (s == t): conservation forces the net surplus at the
    # vertex to zero, and no edge set separates a node from itself.
    if src_node == dst_node:
        return _build_return_value(
            0,
            flow_graph,
            set(flow_graph.nodes),
            0,
            return_summary,
            return_graph,
            capacity_attr,
            flow_attr,
        )

    edges = flow_graph.get_edges()
    max_flow: Capacity = 0
    augmentations = 0
    while True:
        pred, visited = residual_bfs(
            flow_graph, src_node, dst_node, capacity_attr, flow_attr
        )
        if dst_node not in visited:
            break

        if max_augmentations is not None and augmentations >= max_augmentations:
            raise ResourceLimitError(
                "augmentation", max_augmentations, augmentations + 1
            )

        path = _trace_path(pred, src_node, dst_node)
        bottleneck = min(
            _residual(edges[key][3], forward, capacity_attr, flow_attr)
            for _, key, forward in path
        )
        for _, key, forward in path:
            edges[key][3][flow_attr] += bottleneck if forward else -bottleneck

        max_flow += bottleneck
        augmentations += 1

    LOGGER.debug(
        "Max flow %s -> %s: value=%s after %d augmentations (%d nodes, %d edges)",
        src_node,
        dst_node,
        max_flow,
        augmentations,
        flow_graph.number_of_nodes(),
        len(edges),
    )
    return _build_return_value(
        max_flow,
        flow_graph,
        visited,
        augmentations,
        return_summary,
        return_graph,
        capacity_attr,
        flow_attr,
    )


def _residual(attr: dict, forward: bool, capacity_attr: str, flow_attr: str) -> Capacity:
    if forward:
        return attr[capacity_attr] - attr[flow_attr]
    return attr[flow_attr]


def _trace_path(
    pred: ResidualPred, src_node: NodeID, dst_node: NodeID
) -> List[ResidualStep]:
    """Walk the BFS tree back from ``dst_node`` to ``src_node``."""
    path: List[ResidualStep] = []
    node = dst_node
    while node != src_node:
        step = pred[node]
        path.append(step)
        node = step[0]
    path.reverse()
    return path


def _build_return_value(
    max_flow: Capacity,
    flow_graph: StrictMultiDiGraph,
    reachable: Set[NodeID],
    augmentations: int,
    return_summary: bool,
    return_graph: bool,
    capacity_attr: str,
    flow_attr: str,
) -> Union[Capacity, tuple]:
    """Build the appropriate return value based on the requested flags."""
    if not (return_summary or return_graph):
        return max_flow

    ret: list = [max_flow]
    if return_summary:
        ret.append(
            _build_flow_summary(
                max_flow,
                flow_graph,
                reachable,
                augmentations,
                capacity_attr,
                flow_attr,
            )
        )
    if return_graph:
        ret.append(flow_graph)
    return tuple(ret)


def _build_flow_summary(
    total_flow: Capacity,
    flow_graph: StrictMultiDiGraph,
    reachable: Set[NodeID],
    augmentations: int,
    capacity_attr: str,
    flow_attr: str,
) -> FlowSummary:
    """Build a FlowSummary from the flow graph state and the final BFS."""
    edge_flow = {}
    residual_cap = {}
    min_cut: List[Edge] = []

    for u, v, k, d in flow_graph.edges(data=True, keys=True):
        edge = (u, v, k)
        f = d[flow_attr]
        edge_flow[edge] = f
        residual_cap[edge] = d[capacity_attr] - f
        if u in reachable and v not in reachable:
            min_cut.append(edge)

    return FlowSummary(
        total_flow=total_flow,
        edge_flow=edge_flow,
        residual_cap=residual_cap,
        reachable=reachable,
        min_cut=min_cut,
        augmentations=augmentations,
    )


def saturated_edges(
    graph: StrictMultiDiGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
    tolerance: float = 1e-10,
    **kwargs,
) -> List[Edge]:
    """Identify saturated (bottleneck) edges in a max flow solution.

    Args:
        graph: The graph to analyze
        src_node: Source node
        dst_node: Destination node
        capacity_attr: Name of capacity attribute
        flow_attr: Name of flow attribute
        tolerance: Tolerance for considering an edge saturated
        **kwargs: Additional arguments passed to calc_max_flow

    Returns:
        List of saturated edge tuples (u, v, k) where residual capacity <= tolerance
    """
    _, summary = calc_max_flow(
        graph,
        src_node,
        dst_node,
        return_summary=True,
        capacity_attr=capacity_attr,
        flow_attr=flow_attr,
        **kwargs,
    )
    return [
        edge for edge, residual in summary.residual_cap.items() if residual <= tolerance
    ]
