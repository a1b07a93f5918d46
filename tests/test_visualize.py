"""
Unit tests for board rendering.
"""

import plotly.graph_objects as go

import constants
import search
import visualize
from util import Cell, GridConfig, SearchResult


class TestGridStates:
    """Test the state-code board."""

    def test_empty_board(self, open_grid):
        z = visualize.grid_states(open_grid)
        assert len(z) == 5 and all(len(row) == 5 for row in z)
        assert z[0][0] == constants.STATE_START
        assert z[4][4] == constants.STATE_END
        assert z[2][2] == constants.STATE_EMPTY

    def test_walls_visited_and_path(self, detour_grid):
        result = search.run(detour_grid, "bfs")
        z = visualize.grid_states(detour_grid, result.visited, result.path)
        assert z[1][1] == constants.STATE_WALL
        for r, c in result.path[1:-1]:
            assert z[r][c] == constants.STATE_PATH
        # markers win over visited/path colouring
        assert z[2][0] == constants.STATE_START
        assert z[2][4] == constants.STATE_END

    def test_visited_not_on_path(self):
        config = GridConfig(rows=1, cols=3, start=(0, 1), end=(0, 2))
        z = visualize.grid_states(config, visited=[Cell(0, 1), Cell(0, 0)], path=[Cell(0, 1), Cell(0, 2)])
        assert z[0] == [constants.STATE_VISITED, constants.STATE_START, constants.STATE_END]


class TestFigures:
    """Test plotly figure construction."""

    def test_build_figure(self, open_grid):
        fig = visualize.build_figure(open_grid, title="Board")
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        assert isinstance(fig.data[0], go.Heatmap)
        assert fig.layout.title.text == "Board"

    def test_build_figure_with_result(self, open_grid):
        result = search.run(open_grid, "dijkstra")
        fig = visualize.build_figure(open_grid, result)
        z = [list(row) for row in fig.data[0].z]
        assert z == visualize.grid_states(open_grid, result.visited, result.path)

    def test_build_animation_frames_follow_schedule(self, detour_grid):
        result = search.run(detour_grid, "bfs")
        fig = visualize.build_animation(detour_grid, result, stride=3)
        assert len(fig.frames) == len(visualize.frame_schedule(result, stride=3))
        assert fig.layout.updatemenus[0].buttons[0].label == "Play"

    def test_last_frame_shows_full_result(self, detour_grid):
        result = search.run(detour_grid, "bfs")
        fig = visualize.build_animation(detour_grid, result)
        last = [list(row) for row in fig.frames[-1].data[0].z]
        assert last == visualize.grid_states(detour_grid, result.visited, result.path)


class TestFrameSchedule:
    """Test animation pacing."""

    def test_visited_then_pause_then_path(self):
        result = SearchResult(
            visited=(Cell(0, 0), Cell(0, 1), Cell(0, 2)),
            path=(Cell(0, 0), Cell(0, 1)),
        )
        schedule = visualize.frame_schedule(result)
        pause = constants.PATH_PAUSE_MS // constants.VISITED_STEP_MS
        step = constants.PATH_STEP_MS // constants.VISITED_STEP_MS
        assert schedule[:4] == [(0, 0), (1, 0), (2, 0), (3, 0)]
        assert schedule[4:4 + pause] == [(3, 0)] * pause
        assert schedule[4 + pause:] == [(3, 1)] * step + [(3, 2)] * step

    def test_stride(self):
        result = SearchResult(visited=tuple(Cell(0, c) for c in range(10)))
        assert visualize.frame_schedule(result, stride=4) == [(0, 0), (4, 0), (8, 0), (10, 0)]

    def test_no_path_has_no_path_frames(self):
        result = SearchResult(visited=(Cell(0, 0),))
        assert visualize.frame_schedule(result) == [(0, 0), (1, 0)]

    def test_empty_result(self):
        assert visualize.frame_schedule(SearchResult()) == [(0, 0)]
