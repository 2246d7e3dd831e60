"""Graph-related utilities for representing the delivery network.

This subpackage builds the in-memory adjacency list and runs the
traversal, shortest-path and spanning-tree algorithms on top of it.
"""

from .dijkstra import shortest_paths
from .mst import minimum_spanning_forest
from .network import (
    FACILITY_NAMES,
    NODE_COUNT,
    REFERENCE_EDGES,
    Graph,
    build_graph,
    facility_directory,
    reference_graph,
)
from .traversal import breadth_first, depth_first

__all__ = [
    "Graph",
    "NODE_COUNT",
    "FACILITY_NAMES",
    "REFERENCE_EDGES",
    "build_graph",
    "reference_graph",
    "facility_directory",
    "depth_first",
    "breadth_first",
    "shortest_paths",
    "minimum_spanning_forest",
]
