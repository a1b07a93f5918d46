from collections import deque
from strategies.common import reconstruct_path
from util import SearchResult

def run_bfs(grid):
    """Breadth-First Search over the grid, stopping once the end cell is dequeued."""
    q = deque([grid.start])
    came_from = {}
    discovered = {grid.start}
    visited = []

    while q:
        cell = q.popleft()
        visited.append(cell)

        if cell == grid.end:
            break

        # predecessor is fixed at enqueue time, first discoverer wins
        for neighbor in grid.neighbors(cell):
            if neighbor not in discovered:
                discovered.add(neighbor)
                came_from[neighbor] = cell
                q.append(neighbor)

    path = reconstruct_path(came_from, grid.start, grid.end)
    return SearchResult(visited=tuple(visited), path=path)
