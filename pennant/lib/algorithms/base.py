from __future__ import annotations

from typing import Dict, Tuple, Union

from pennant.lib.graph import EdgeID, NodeID

#: Numeric edge capacity. League data is integral, so flows stay integral too.
Capacity = Union[int, float]

#: One residual step into a node: (previous node, edge key, forward?).
#: ``forward`` is False when the step undoes flow on the edge ``node -> previous``.
ResidualStep = Tuple[NodeID, EdgeID, bool]

#: BFS tree over the residual graph: node -> the step that first reached it.
ResidualPred = Dict[NodeID, ResidualStep]
