"""
Strategies Package - Concrete search strategy implementations.

Import this module to register all built-in strategies.
"""

from .bfs import BFSStrategy
from .bidirectional import BidirectionalStrategy
from .astar import AStarStrategy

__all__ = [
    "BFSStrategy",
    "BidirectionalStrategy",
    "AStarStrategy",
]
