import argparse
import logging
import sys
import time
import tracemalloc
from dataclasses import dataclass
from typing import Tuple

import pandas as pd
import psutil

import constants
import file_reader
from util import Cell, FormatBytes, GridConfig, InvalidConfig, SearchResult

# Import search strategies implemented in the `strategies` package
from strategies.dijkstra import run_dijkstra
from strategies.bfs import run_bfs
from strategies.dfs import run_dfs
from strategies.bellman import run_bellman

logger = logging.getLogger(__name__)

STRATEGIES = {
    "dijkstra": run_dijkstra,
    "bfs": run_bfs,
    "dfs": run_dfs,
    "bellman": run_bellman,
}


@dataclass(frozen=True)
class RunResult:
    """Outcome of one run: visited order, path and wall-clock duration in seconds."""
    algorithm: str
    visited: Tuple[Cell, ...] = ()
    path: Tuple[Cell, ...] = ()
    elapsed: float = 0.0

    @property
    def steps(self) -> int:
        return len(self.visited)

    @property
    def path_length(self) -> int:
        return len(self.path)

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000

    @property
    def found(self) -> bool:
        return bool(self.path)

    def as_search_result(self) -> SearchResult:
        return SearchResult(visited=self.visited, path=self.path)


def resolve_strategy(name):
    """Look up a strategy by selector name (case-insensitive). Returns None if unknown."""
    if name is None:
        return None
    return STRATEGIES.get(str(name).strip().lower())


def run(config: GridConfig, algorithm: str) -> RunResult:
    """Run the named algorithm on a grid snapshot and time it.

    An unrecognised name gives an empty result rather than an error. Only the
    search itself is timed.
    """
    run_fn = resolve_strategy(algorithm)
    if run_fn is None:
        logger.warning("Unknown algorithm %r, returning an empty result", algorithm)
        return RunResult(algorithm=str(algorithm))

    name = str(algorithm).strip().lower()
    logger.debug("Running %s on %dx%d grid from %s to %s (%d walls)",
                 name, config.rows, config.cols, config.start, config.end, len(config.walls))
    t0 = time.perf_counter()
    result = run_fn(config)
    dt = time.perf_counter() - t0
    logger.debug("%s finished: %d visited, path length %d, %.3f ms",
                 name, len(result.visited), len(result.path), dt * 1000)
    return RunResult(algorithm=name, visited=result.visited, path=result.path, elapsed=dt)


def format_path(path):
    if not path:
        return "No path found"
    return " -> ".join(str(c) for c in path)


def compare_algorithms(config: GridConfig, algorithms=None) -> pd.DataFrame:
    """Run every algorithm on the same snapshot and tabulate the results.

    Rows are sorted by path length; algorithms that found no path go last.
    """
    if algorithms is None:
        algorithms = list(constants.ALGORITHMS)

    rows = []
    for name in algorithms:
        res = run(config, name)
        rows.append({
            'Algorithm': constants.ALGORITHMS.get(res.algorithm, res.algorithm),
            'Steps': res.steps,
            'Path Length': res.path_length if res.found else float('inf'),
            'Time (ms)': round(res.elapsed_ms, 3),
            'Path': " -> ".join(str(c) for c in res.path),
        })

    df = pd.DataFrame(rows, columns=['Algorithm', 'Steps', 'Path Length', 'Time (ms)', 'Path'])
    df = df.sort_values(by='Path Length', kind='stable').reset_index(drop=True)
    df['Path Length'] = df['Path Length'].apply(lambda n: 'No Path Found' if n == float('inf') else int(n))
    return df


def _execute_with_metrics(config, method):
    """Run a search and collect runtime and memory metrics.

    Returns: (result, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage)
    """
    tracemalloc.start()
    proc = psutil.Process()
    result = run(config, method)
    _cur, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    rss_after = proc.memory_info().rss
    return result, peak, rss_after


def main(filename, method=None, metrics_mode="none"):
    """Load a grid file, run one algorithm and print the result.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line in addition to the normal output
    Returns the process exit status.
    """
    config, file_method = file_reader.parse_config_file(filename)
    method = method or file_method
    if resolve_strategy(method) is None:
        print(f"Unknown method: {method}")
        print(f"Methods: {', '.join(constants.ALGORITHMS)}")
        return 1
    method = method.strip().lower()

    print(f"Grid File: {filename}, Method: {method}")
    print(f"Grid: {config.rows}x{config.cols}, Walls: {len(config.walls)}")
    print(f"Start: {config.start} End: {config.end}")

    result, peak_bytes, rss_after = _execute_with_metrics(config, method)

    # Expected output:
    # <filename> <method>
    # <steps> <path length> <path>
    print(f"{filename} {method}")
    print(f"Number of cells visited:{result.steps}")
    print(f"Path length:{result.path_length}")
    print(format_path(result.path))

    if metrics_mode in ("stderr", "stdout"):
        metrics_line = (
            f"Metrics: method={method} cells_visited={result.steps} "
            f"path_length={result.path_length} "
            f"runtime_ms={result.elapsed_ms:.3f} peak_py_mem={FormatBytes(peak_bytes)} "
            f"rss_now={FormatBytes(rss_after)}"
        )
        if metrics_mode == "stdout":
            print(metrics_line)
        else:
            print(metrics_line, file=sys.stderr)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Run a grid pathfinding algorithm on a grid file")
    parser.add_argument('filename', help='Grid file to load')
    parser.add_argument('method', nargs='?', default=None,
                        help=f"One of: {', '.join(constants.ALGORITHMS)} (defaults to the file's ALGORITHM)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--metrics', '-m', dest='metrics_mode', action='store_const', const='stderr',
                       default='none', help='Print a metrics line to stderr')
    group.add_argument('--metrics-stdout', dest='metrics_mode', action='store_const', const='stdout',
                       help='Print a metrics line to stdout')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser


if __name__ == "__main__":
    # e.g., python search.py test_cases/default.txt bfs --metrics
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        status = main(args.filename, args.method, args.metrics_mode)
    except InvalidConfig as e:
        print(f"Error: {e}", file=sys.stderr)
        status = 1
    sys.exit(status)
