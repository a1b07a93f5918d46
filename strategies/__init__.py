"""Package exposing search strategy implementations."""

# Expose names for convenience (optional)
from .dijkstra import run_dijkstra
from .bfs import run_bfs
from .dfs import run_dfs
from .bellman import run_bellman

__all__ = ["run_dijkstra", "run_bfs", "run_dfs", "run_bellman"]
