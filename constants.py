"""Project wide constants and defaults."""

# Default board
DEFAULT_ROWS = 20
DEFAULT_COLS = 25
DEFAULT_START = (2, 2)
DEFAULT_END = (17, 22)

# Selector name -> display label, in dropdown order
ALGORITHMS = {
    "dijkstra": "Dijkstra's Algorithm",
    "bfs": "Breadth-First Search",
    "dfs": "Depth-First Search",
    "bellman": "Bellman-Ford",
}

# Animation pacing (milliseconds)
VISITED_STEP_MS = 20
PATH_STEP_MS = 80
PATH_PAUSE_MS = 500

TEST_CASE_FOLDER = "test_cases"

# Cell state codes used when rendering the board
STATE_EMPTY = 0
STATE_WALL = 1
STATE_VISITED = 2
STATE_PATH = 3
STATE_START = 4
STATE_END = 5

STATE_COLORS = {
    STATE_EMPTY: "#ffffff",
    STATE_WALL: "#34495e",
    STATE_VISITED: "#74b9ff",
    STATE_PATH: "#fdcb6e",
    STATE_START: "#00b894",
    STATE_END: "#d63031",
}
