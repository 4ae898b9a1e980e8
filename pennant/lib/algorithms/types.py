"""Types and data structures for max-flow results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, List, Set, Tuple

from pennant.lib.algorithms.base import Capacity

# Edge identifier tuple: (source_node, destination_node, edge_key)
Edge = Tuple[Hashable, Hashable, Hashable]


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation, including the minimum cut.

    Attributes:
        total_flow: The maximum flow value achieved.
        edge_flow: Flow amount on each edge, indexed by (src, dst, key).
        residual_cap: Remaining capacity on each edge after flow placement.
        reachable: Nodes reachable from the source in the final residual graph.
            This is the source side of a minimum cut.
        min_cut: Saturated edges leaving ``reachable``.
        augmentations: Number of augmenting paths that carried flow.
    """

    total_flow: Capacity
    edge_flow: Dict[Edge, Capacity]
    residual_cap: Dict[Edge, Capacity]
    reachable: Set[Hashable]
    min_cut: List[Edge]
    augmentations: int = 0

    def cut_capacity(self) -> Capacity:
        """Sum of the capacities of the edges in ``min_cut``."""
        return sum(
            self.edge_flow[edge] + self.residual_cap[edge] for edge in self.min_cut
        )
