import plotly.graph_objects as go

import constants


def grid_states(config, visited=(), path=()):
    """Board as a [row][col] list of state codes.

    Start and end keep their own colour even when visited or on the path.
    """
    z = [[constants.STATE_EMPTY] * config.cols for _ in range(config.rows)]
    for r, c in config.walls:
        if config.in_bounds((r, c)):
            z[r][c] = constants.STATE_WALL
    for r, c in visited:
        z[r][c] = constants.STATE_VISITED
    for r, c in path:
        z[r][c] = constants.STATE_PATH
    z[config.start.row][config.start.col] = constants.STATE_START
    z[config.end.row][config.end.col] = constants.STATE_END
    return z


def _colorscale():
    """Stepped colorscale so each integer state maps to exactly one colour."""
    states = sorted(constants.STATE_COLORS)
    n = len(states)
    scale = []
    for i, state in enumerate(states):
        color = constants.STATE_COLORS[state]
        scale.append([i / n, color])
        scale.append([(i + 1) / n, color])
    return scale


def _heatmap(z):
    return go.Heatmap(
        z=z,
        zmin=min(constants.STATE_COLORS) - 0.5,
        zmax=max(constants.STATE_COLORS) + 0.5,
        colorscale=_colorscale(),
        showscale=False,
        xgap=1,
        ygap=1,
        hovertemplate="row %{y}, col %{x}<extra></extra>",
    )


def _layout(fig, config, title=None):
    fig.update_layout(
        title=title,
        height=max(300, 28 * config.rows),
        margin={"r": 10, "t": 40 if title else 10, "l": 10, "b": 10},
        plot_bgcolor="#dfe6e9",
    )
    fig.update_xaxes(showgrid=False, zeroline=False, showticklabels=False)
    fig.update_yaxes(showgrid=False, zeroline=False, showticklabels=False,
                     autorange="reversed", scaleanchor="x")


def build_figure(config, result=None, title=None):
    """Static heatmap of the board, with the visited cells and path of `result` if given."""
    visited = result.visited if result is not None else ()
    path = result.path if result is not None else ()
    fig = go.Figure(data=[_heatmap(grid_states(config, visited, path))])
    _layout(fig, config, title)
    return fig


def frame_schedule(result, stride=1):
    """(visited_count, path_count) for each animation frame.

    Frames play at VISITED_STEP_MS. Visited cells appear `stride` at a time,
    then the board holds for PATH_PAUSE_MS, then path cells appear one at a
    time, each held for PATH_STEP_MS.
    """
    stride = max(1, int(stride))
    n_visited = len(result.visited)
    schedule = [(i, 0) for i in range(0, n_visited, stride)]
    schedule.append((n_visited, 0))

    if result.path:
        hold = max(1, round(constants.PATH_PAUSE_MS / constants.VISITED_STEP_MS))
        schedule.extend([(n_visited, 0)] * hold)
        step_hold = max(1, round(constants.PATH_STEP_MS / constants.VISITED_STEP_MS))
        for j in range(1, len(result.path) + 1):
            schedule.extend([(n_visited, j)] * step_hold)
    return schedule


def build_animation(config, result, stride=1, title=None):
    """Heatmap with one frame per step of the visited order, then the path."""
    schedule = frame_schedule(result, stride)
    frames = []
    for i, (nv, np_) in enumerate(schedule):
        z = grid_states(config, result.visited[:nv], result.path[:np_])
        frames.append(go.Frame(data=[_heatmap(z)], name=str(i)))

    fig = go.Figure(data=[_heatmap(grid_states(config))], frames=frames)
    _layout(fig, config, title)
    fig.update_layout(
        updatemenus=[dict(
            type="buttons",
            showactive=False,
            x=0.0, y=-0.02, xanchor="left", yanchor="top",
            buttons=[
                dict(label="Play", method="animate",
                     args=[None, {"frame": {"duration": constants.VISITED_STEP_MS, "redraw": True},
                                  "fromcurrent": True, "transition": {"duration": 0}}]),
                dict(label="Pause", method="animate",
                     args=[[None], {"frame": {"duration": 0, "redraw": False},
                                    "mode": "immediate", "transition": {"duration": 0}}]),
            ],
        )]
    )
    return fig
