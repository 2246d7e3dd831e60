"""Top-level package for the package delivery network.

The network is a small fixed set of facilities joined by undirected
routes weighted by travel time. The package builds it once and offers
traversal, shortest-path and spanning-tree reports over it, either
through an interactive menu or a linear demo.
"""
