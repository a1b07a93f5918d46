from strategies.common import reconstruct_path
from util import SearchResult

def run_dijkstra(grid):
    """
    Dijkstra's algorithm - uninformed shortest path search on a unit-cost grid.

    The next cell is chosen by scanning the unvisited set for the smallest
    tentative distance. The unvisited set keeps row-major insertion order and
    only a strictly smaller distance replaces the current best, so ties go to
    the cell that comes first in row-major order.
    Args:
        grid: GridConfig snapshot to search
    Returns:
        SearchResult with cells in the order they were finalised
    """
    inf = float('inf')
    distances = {}
    unvisited = {}  # dict used as an ordered set
    for cell in grid.open_cells():
        distances[cell] = inf
        unvisited[cell] = None
    distances[grid.start] = 0

    came_from = {}
    visited = []
    while unvisited:
        current = None
        min_distance = inf
        for cell in unvisited:
            if distances[cell] < min_distance:
                min_distance = distances[cell]
                current = cell

        # everything left is unreachable
        if current is None:
            break

        del unvisited[current]
        visited.append(current)
        if current == grid.end:
            break

        for neighbor in grid.neighbors(current):
            if neighbor in unvisited:
                alt = distances[current] + 1
                if alt < distances[neighbor]:
                    distances[neighbor] = alt
                    came_from[neighbor] = current

    path = reconstruct_path(came_from, grid.start, grid.end)
    return SearchResult(visited=tuple(visited), path=path)
