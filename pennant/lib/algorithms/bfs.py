from __future__ import annotations

from collections import deque
from typing import Deque, Optional, Set, Tuple

from pennant.lib.algorithms.base import ResidualPred
from pennant.lib.graph import NodeID, StrictMultiDiGraph


def residual_bfs(
    flow_graph: StrictMultiDiGraph,
    src_node: NodeID,
    dst_node: Optional[NodeID] = None,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> Tuple[ResidualPred, Set[NodeID]]:
    """
    Breadth-first search over the residual graph of ``flow_graph``.

    A node ``v`` is a residual neighbor of ``u`` if either
      - some edge ``u -> v`` has ``capacity - flow > 0`` (forward step), or
      - some edge ``v -> u`` has ``flow > 0`` (backward step, undoing flow).

    The search stops as soon as ``dst_node`` is reached. When ``dst_node`` is
    not reachable the search exhausts, and the returned visited set is the
    source side of a minimum cut.

    Args:
        flow_graph: Graph with capacity and flow attributes on every edge.
        src_node: Node to start from.
        dst_node: Optional node at which to stop.
        capacity_attr: Name of the capacity attribute.
        flow_attr: Name of the flow attribute.

    Returns:
        A tuple ``(pred, visited)``; ``pred`` maps every visited node except the
        source to the residual step (previous node, edge key, forward flag)
        through which it was first reached. BFS order makes the recorded path to
        any node a shortest one in hops.
    """
    out_adj = flow_graph._adj
    in_adj = flow_graph._pred
    if src_node not in out_adj:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")

    pred: ResidualPred = {}
    visited: Set[NodeID] = {src_node}
    queue: Deque[NodeID] = deque([src_node])

    while queue:
        node = queue.popleft()
        if node == dst_node:
            break

        for neighbor, edges_map in out_adj[node].items():
            if neighbor in visited:
                continue
            for key, attr in edges_map.items():
                if attr[capacity_attr] - attr[flow_attr] > 0:
                    visited.add(neighbor)
                    pred[neighbor] = (node, key, True)
                    queue.append(neighbor)
                    break

        for neighbor, edges_map in in_adj[node].items():
            if neighbor in visited:
                continue
            for key, attr in edges_map.items():
                if attr[flow_attr] > 0:
                    visited.add(neighbor)
                    pred[neighbor] = (node, key, False)
                    queue.append(neighbor)
                    break

    return pred, visited
