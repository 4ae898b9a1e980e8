from pennant.lib.algorithms.max_flow import calc_max_flow, saturated_edges
from pennant.lib.algorithms.types import FlowSummary

__all__ = [
    "calc_max_flow",
    "saturated_edges",
    "FlowSummary",
]
