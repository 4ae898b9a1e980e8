from __future__ import annotations

from pennant.lib.graph import StrictMultiDiGraph


def init_flow_graph(
    flow_graph: StrictMultiDiGraph,
    flow_attr: str = "flow",
    reset_flow_graph: bool = True,
) -> StrictMultiDiGraph:
    """
    Ensure that every edge in ``flow_graph`` carries a numeric flow attribute.

    If ``reset_flow_graph`` is True, any existing flow values are overwritten
    with 0; otherwise the attribute is only created where it is missing, so a
    previous run can be continued.

    Args:
        flow_graph: The graph whose edges should be prepared for flow assignment.
        flow_attr: The attribute name holding the flow on each edge.
        reset_flow_graph: If True, reset existing flows to 0.

    Returns:
        The same ``flow_graph`` object.
    """
    for edge_data in flow_graph.get_edges().values():
        attr_dict = edge_data[3]
        if reset_flow_graph:
            attr_dict[flow_attr] = 0
        else:
            attr_dict.setdefault(flow_attr, 0)
    return flow_graph
