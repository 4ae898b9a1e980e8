from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, Hashable, List, Optional, Tuple

import networkx as nx

NodeID = Hashable
EdgeID = Hashable
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]


class StrictMultiDiGraph(nx.MultiDiGraph):
    """
    A multi-directed graph with strict rules and unique edge keys.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raising ValueError on duplicates).
      - No duplicate edges by key (raising ValueError on duplicates).
      - Each edge key is unique across the whole graph; by default keys are
        consecutive integers in insertion order.

    Inherits from:
        networkx.MultiDiGraph
    """

    def __init__(self, *args, **kwargs) -> None:
        """
        Initialize a StrictMultiDiGraph.

        Attributes:
            _edges (Dict[EdgeID, EdgeTuple]): Maps an edge key to a tuple
                (source_node, target_node, edge_key, attribute_dict).
        """
        super().__init__(*args, **kwargs)
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        self._next_edge_key = 0

    def new_edge_key(self, src_node: NodeID, dst_node: NodeID) -> EdgeID:
        """
        Generate a unique edge key.

        Returns the next free integer. Subclasses may override this to provide
        an alternative scheme.

        Args:
            src_node (NodeID): The source node of the new edge.
            dst_node (NodeID): The target node of the new edge.

        Returns:
            EdgeID: The newly generated edge key.
        """
        while self._next_edge_key in self._edges:
            self._next_edge_key += 1
        key = self._next_edge_key
        self._next_edge_key += 1
        return key

    def copy(self, as_view: bool = False, pickle: bool = True) -> StrictMultiDiGraph:
        """
        Create a copy of this graph.

        By default, uses pickle-based deep copying, which keeps the edge key
        index consistent with the copied attribute dicts. If pickle=False,
        this method calls the parent class's copy, which supports views.

        Args:
            as_view (bool): If True, returns a view instead of a full copy;
                only used if pickle=False. Defaults to False.
            pickle (bool): If True, perform a pickle-based deep copy.
                Defaults to True.

        Returns:
            StrictMultiDiGraph: A new instance (or view) of the graph.
        """
        if not pickle:
            return super().copy(as_view=as_view)
        return loads(dumps(self))

    #
    # Node management
    #
    def add_node(self, n: NodeID, **attr: Any) -> None:
        """
        Add a single node, disallowing duplicates.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if n in self:
            raise ValueError(f"Node '{n}' already exists in this graph.")
        super().add_node(n, **attr)

    #
    # Edge management
    #
    def add_edge(
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """
        Add a directed edge from u_for_edge to v_for_edge.

        Both endpoints must already exist in the graph.

        Args:
            u_for_edge (NodeID): The source node.
            v_for_edge (NodeID): The target node.
            key (Optional[EdgeID]): The unique edge key. If None, a new key
                is generated. Must not already be in use if provided.
            **attr: Arbitrary edge attributes.

        Returns:
            EdgeID: The key associated with this new edge.

        Raises:
            ValueError: If either node does not exist, or if the key is already in use.
        """
        if u_for_edge not in self:
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        elif key in self._edges:
            raise ValueError(f"Edge with id '{key}' already exists.")

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self[u_for_edge][v_for_edge][key],
        )
        return key

    def remove_edge_by_id(self, key: EdgeID) -> None:
        """
        Remove a directed edge by its unique key.

        Raises:
            ValueError: If no edge with this key exists in the graph.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        src_node, dst_node, _, _ = self._edges.pop(key)
        super().remove_edge(src_node, dst_node, key=key)

    #
    # Convenience methods
    #
    def get_nodes(self) -> Dict[NodeID, AttrDict]:
        """Retrieve all nodes and their attributes as a dictionary."""
        return dict(self.nodes(data=True))

    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """
        Retrieve a dictionary of all edges by their keys.

        Returns:
            Dict[EdgeID, EdgeTuple]: A mapping of edge key to a tuple
                (source_node, target_node, edge_key, edge_attributes).
        """
        return self._edges

    def get_edge_attr(self, key: EdgeID) -> AttrDict:
        """
        Retrieve the attribute dictionary of a specific edge.

        Raises:
            ValueError: If no edge with this key is found.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        return self._edges[key][3]

    def edges_between(self, u: NodeID, v: NodeID) -> List[EdgeID]:
        """List all edge keys from node u to node v (empty if there are none)."""
        if u not in self.succ or v not in self.succ[u]:
            return []
        return list(self.succ[u][v].keys())


class FlowNetwork(StrictMultiDiGraph):
    """
    A capacitated flow network over the vertices ``0..V-1``.

    Edges carry a ``capacity`` attribute; any other attribute (for instance a
    cost) is accepted but ignored by the max-flow routines.
    """

    def __init__(self, vertex_count: int = 0) -> None:
        if vertex_count < 0:
            raise ValueError(f"Vertex count must be non-negative, got {vertex_count}.")
        super().__init__()
        for vertex in range(vertex_count):
            self.add_node(vertex)

    @property
    def vertex_count(self) -> int:
        return self.number_of_nodes()

    def add_vertex(self) -> int:
        """Append a vertex and return its id."""
        vertex = self.number_of_nodes()
        self.add_node(vertex)
        return vertex

    def add_flow_edge(self, u: int, v: int, capacity: float) -> EdgeID:
        """
        Add an edge ``u -> v`` with the given non-negative capacity.

        Raises:
            ValueError: If the capacity is negative or an endpoint is unknown.
        """
        if capacity < 0:
            raise ValueError(f"Capacity of edge {u}->{v} must be non-negative.")
        return self.add_edge(u, v, capacity=capacity)

    def source_capacity(self, source: int) -> float:
        """Sum of capacities on the edges leaving ``source``."""
        return sum(
            attr["capacity"] for _, _, attr in self.out_edges(source, data=True)
        )
