from strategies.common import reconstruct_path
from util import SearchResult

def run_dfs(grid):
    """Depth-First Search over the grid: returns a SearchResult.

    The path is whatever branch reached the end first, so it is not
    necessarily the shortest one.
    """
    stack = [grid.start]
    came_from = {}
    seen = set()
    visited = []

    while stack:
        cell = stack.pop()
        # the same cell may be pushed several times before it is expanded
        if cell in seen:
            continue
        seen.add(cell)
        visited.append(cell)

        if cell == grid.end:
            break

        # push neighbours in reverse order so they are expanded up, down, left, right
        for neighbor in reversed(grid.neighbors(cell)):
            if neighbor not in seen:
                if neighbor not in came_from:
                    came_from[neighbor] = cell
                stack.append(neighbor)

    path = reconstruct_path(came_from, grid.start, grid.end)
    return SearchResult(visited=tuple(visited), path=path)
