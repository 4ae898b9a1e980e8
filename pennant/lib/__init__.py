"""Graph primitives and flow algorithms used by the elimination engine."""

from pennant.lib.graph import FlowNetwork, StrictMultiDiGraph

__all__ = [
    "FlowNetwork",
    "StrictMultiDiGraph",
]
