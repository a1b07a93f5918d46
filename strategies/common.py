from util import Cell


def reconstruct_path(came_from, start, end):
    """Reconstructs the start->end path (tuple of cells) from a came_from map.

    Cells with no predecessor are simply absent from `came_from`. If the walk
    back from `end` does not finish on `start` the end was never reached and an
    empty path is returned.
    """
    current = Cell(*end)
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    if path[0] == start:
        return tuple(path)
    return ()
