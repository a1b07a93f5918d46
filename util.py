from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, NamedTuple, Tuple

import constants


class InvalidConfig(ValueError):
    """Raised when a grid configuration breaks one of its invariants."""


class Cell(NamedTuple):
    """A (row, col) coordinate on the grid."""
    row: int
    col: int

    def __str__(self):
        return f"({self.row}, {self.col})"


# up, down, left, right
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class GridConfig:
    """Snapshot of the search space: dimensions, walls, start and end.

    A GridConfig never changes once built. Editing helpers below return a new
    snapshot instead, so a run always sees one consistent board.
    """
    rows: int
    cols: int
    start: Cell
    end: Cell
    walls: FrozenSet[Cell] = field(default_factory=frozenset)

    def __post_init__(self):
        # Normalise plain tuples into Cells so callers can pass (r, c)
        object.__setattr__(self, "start", Cell(*self.start))
        object.__setattr__(self, "end", Cell(*self.end))
        object.__setattr__(self, "walls", frozenset(Cell(*w) for w in self.walls))

        if self.rows <= 0 or self.cols <= 0:
            raise InvalidConfig(f"Grid dimensions must be positive, got {self.rows}x{self.cols}")
        for name, cell in (("start", self.start), ("end", self.end)):
            if not self.in_bounds(cell):
                raise InvalidConfig(f"{name} {cell} is outside the {self.rows}x{self.cols} grid")
            if cell in self.walls:
                raise InvalidConfig(f"{name} {cell} is a wall")

    def in_bounds(self, cell) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_wall(self, cell) -> bool:
        return cell in self.walls

    def neighbors(self, cell) -> List[Cell]:
        """Open neighbours of `cell` in up, down, left, right order."""
        row, col = cell
        out = []
        for dr, dc in DIRECTIONS:
            candidate = Cell(row + dr, col + dc)
            if self.in_bounds(candidate) and candidate not in self.walls:
                out.append(candidate)
        return out

    def cells(self) -> Iterator[Cell]:
        """All cells in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Cell(row, col)

    def open_cells(self) -> Iterator[Cell]:
        """Non-wall cells in row-major order."""
        return (c for c in self.cells() if c not in self.walls)


@dataclass(frozen=True)
class SearchResult:
    """Cells in the order an algorithm finalised them, plus the start->end path."""
    visited: Tuple[Cell, ...] = ()
    path: Tuple[Cell, ...] = ()


def default_config() -> GridConfig:
    """The board shown when nothing else is loaded."""
    return GridConfig(
        rows=constants.DEFAULT_ROWS,
        cols=constants.DEFAULT_COLS,
        start=Cell(*constants.DEFAULT_START),
        end=Cell(*constants.DEFAULT_END),
    )


# --- Editing helpers: each returns a new snapshot ---

def with_start(config: GridConfig, cell) -> GridConfig:
    """Move the start marker, clearing any wall on the target cell."""
    cell = Cell(*cell)
    return GridConfig(config.rows, config.cols, cell, config.end, config.walls - {cell})


def with_end(config: GridConfig, cell) -> GridConfig:
    """Move the end marker, clearing any wall on the target cell."""
    cell = Cell(*cell)
    return GridConfig(config.rows, config.cols, config.start, cell, config.walls - {cell})


def toggle_wall(config: GridConfig, cell) -> GridConfig:
    """Add or remove a wall. Start and end cells are left alone."""
    cell = Cell(*cell)
    if cell in (config.start, config.end):
        return config
    if not config.in_bounds(cell):
        raise InvalidConfig(f"wall {cell} is outside the {config.rows}x{config.cols} grid")
    if cell in config.walls:
        walls = config.walls - {cell}
    else:
        walls = config.walls | {cell}
    return GridConfig(config.rows, config.cols, config.start, config.end, walls)


def clear_walls(config: GridConfig) -> GridConfig:
    return GridConfig(config.rows, config.cols, config.start, config.end)


def FormatBytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"
