"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import NodeStatus, EdgeStatus, GraphFormatError
"""

from graph.node  import Node,  NodeStatus
from graph.edge  import Edge,  EdgeStatus, is_valid_weight
from graph.graph import Graph, GraphFormatError

__all__ = [
    "Node",      "NodeStatus",
    "Edge",      "EdgeStatus",
    "Graph",     "GraphFormatError",
    "is_valid_weight",
]
