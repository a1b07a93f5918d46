from strategies.common import reconstruct_path
from util import SearchResult

def build_edges(grid):
    """Directed unit-weight edges, one per (open cell, neighbour) pair in row-major order."""
    edges = []
    for cell in grid.open_cells():
        for neighbor in grid.neighbors(cell):
            edges.append((cell, neighbor))
    return edges

def run_bellman(grid):
    """Bellman-Ford edge relaxation over the grid.

    Relaxation has no real visit order, so `visited` is synthesised: every
    reachable cell sorted by its final distance, ties kept in row-major order.
    Its length is the size of the reachable region and is not comparable
    step-for-step with the traversal algorithms.
    """
    inf = float('inf')
    distances = {cell: inf for cell in grid.open_cells()}
    distances[grid.start] = 0
    came_from = {}
    edges = build_edges(grid)

    # at most V-1 passes, stop as soon as a pass changes nothing
    for _ in range(len(distances) - 1):
        updated = False
        for frm, to in edges:
            dist_from = distances[frm]
            if dist_from != inf and dist_from + 1 < distances[to]:
                distances[to] = dist_from + 1
                came_from[to] = frm
                updated = True
        if not updated:
            break

    reached = [(cell, dist) for cell, dist in distances.items() if dist != inf]
    reached.sort(key=lambda x: x[1])  # stable, keeps row-major order within a distance
    visited = tuple(cell for cell, _ in reached)

    path = reconstruct_path(came_from, grid.start, grid.end)
    return SearchResult(visited=visited, path=path)
