import re

from util import Cell, GridConfig, InvalidConfig

MAP_WALL = '#'
MAP_START = 'S'
MAP_END = 'E'
MAP_OPEN = '.'


class ConfigFileError(InvalidConfig):
    """A grid file could not be read or contains a malformed line."""
    def __init__(self, message, line_no=None):
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


def parse_cell(text):
    """Parse "r,c" or "(r, c)" into a Cell."""
    nums = re.findall(r"-?\d+", str(text))
    if len(nums) != 2:
        raise InvalidConfig(f"Expected a cell as 'row,col', got '{text}'")
    return Cell(int(nums[0]), int(nums[1]))


def parse_walls(text):
    """Parse a list of cells separated by ';' or newlines, e.g. "1,1; 1,2"."""
    walls = set()
    for chunk in re.split(r"[;\n]", text or ""):
        if chunk.strip():
            walls.add(parse_cell(chunk))
    return walls


def _parse_map(lines):
    """Read ASCII map rows into (rows, cols, start, end, walls)."""
    start = end = None
    walls = set()
    width = len(lines[0][1])
    for r, (line_no, row) in enumerate(lines):
        if len(row) != width:
            raise ConfigFileError(f"map row has {len(row)} cells, expected {width}", line_no)
        for c, ch in enumerate(row):
            if ch == MAP_WALL:
                walls.add(Cell(r, c))
            elif ch == MAP_START:
                start = Cell(r, c)
            elif ch == MAP_END:
                end = Cell(r, c)
            elif ch != MAP_OPEN:
                raise ConfigFileError(f"unknown map character '{ch}'", line_no)
    return len(lines), width, start, end, walls


def parse_config_file(path):
    """Parses a grid file into a grid snapshot

    Args:
        path (string): Filepath to the grid txt file

    Returns:
        config: GridConfig built from the [GRID], [META], [WALLS] and [MAP] sections
        algorithm: name given by ALGORITHM in [META], or None
    """
    section = None
    rows = cols = None
    start = end = None
    algorithm = None
    walls = set()
    map_lines = []

    def is_header(line):
        return line.startswith("[") and line.endswith("]")

    def ignore(line):
        return (not line.strip()) or line.strip().startswith("#")

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw_lines = f.readlines()
    except OSError as e:
        raise ConfigFileError(f"cannot read grid file '{path}': {e}") from e

    for line_no, raw in enumerate(raw_lines, start=1):
        line = raw.strip()
        # '#' is a wall inside [MAP], so comments are only skipped elsewhere
        if section == "[MAP]" and line and not is_header(line):
            map_lines.append((line_no, line))
            continue
        if ignore(line):
            continue
        if is_header(line):
            section = line.upper()
            continue

        p = [x.strip() for x in line.split(",")]
        try:
            if section == "[GRID]":
                key = p[0].upper()
                if key == "ROWS":
                    rows = int(p[1])
                elif key == "COLS":
                    cols = int(p[1])
                else:
                    raise ConfigFileError(f"unknown GRID key '{p[0]}'", line_no)

            elif section == "[META]":
                key = p[0].upper()
                if key == "START":
                    start = parse_cell(",".join(p[1:]))
                elif key == "END":
                    end = parse_cell(",".join(p[1:]))
                elif key == "ALGORITHM":
                    algorithm = p[1].lower()
                else:
                    raise ConfigFileError(f"unknown META key '{p[0]}'", line_no)

            elif section == "[WALLS]":
                walls.add(parse_cell(line))

            else:
                raise ConfigFileError(f"line outside a known section: '{line}'", line_no)
        except ConfigFileError:
            raise
        except (IndexError, ValueError) as e:
            raise ConfigFileError(f"cannot parse '{line}' in {section}: {e}", line_no) from e

    if map_lines:
        map_rows, map_cols, map_start, map_end, map_walls = _parse_map(map_lines)
        if (rows is not None and rows != map_rows) or (cols is not None and cols != map_cols):
            raise ConfigFileError(f"[MAP] is {map_rows}x{map_cols} but [GRID] says {rows}x{cols}")
        rows, cols = map_rows, map_cols
        start = start or map_start
        end = end or map_end
        walls |= map_walls

    if rows is None or cols is None:
        raise ConfigFileError(f"'{path}' does not define ROWS and COLS")
    if start is None or end is None:
        raise ConfigFileError(f"'{path}' does not define both START and END")

    return GridConfig(rows=rows, cols=cols, start=start, end=end, walls=frozenset(walls)), algorithm
