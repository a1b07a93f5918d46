import argparse
import os

import gradio as gr
import pandas as pd

import constants
import file_reader
import search
import util
import visualize
from util import GridConfig, InvalidConfig, default_config

# ============================
# Initialization stuff
# ============================
STATS_COLUMNS = ['Algorithm', 'Steps', 'Path Length', 'Time (ms)']


def available_files(folder=constants.TEST_CASE_FOLDER):
    """Grid files offered in the dropdown."""
    if not os.path.isdir(folder):
        return []
    return sorted(f for f in os.listdir(folder) if f.endswith('.txt'))


def config_to_inputs(config, algorithm=None):
    """Split a GridConfig into the values shown in the input widgets."""
    walls = "; ".join(f"{r},{c}" for r, c in sorted(config.walls))
    return (config.rows, config.cols,
            f"{config.start.row},{config.start.col}",
            f"{config.end.row},{config.end.col}",
            walls,
            algorithm or next(iter(constants.ALGORITHMS)))


def inputs_to_config(rows, cols, start, end, walls):
    """Build a GridConfig from widget values. Raises InvalidConfig on bad input."""
    start_cell = file_reader.parse_cell(start)
    end_cell = file_reader.parse_cell(end)
    # start and end always win over a wall typed on the same cell
    wall_cells = file_reader.parse_walls(walls) - {start_cell, end_cell}
    return GridConfig(rows=int(rows), cols=int(cols), start=start_cell, end=end_cell,
                      walls=frozenset(wall_cells))


def run_visualization(rows, cols, start, end, walls, algorithm, stride=1):
    """Run one algorithm and return (animated figure, stats dataframe)."""
    try:
        config = inputs_to_config(rows, cols, start, end, walls)
    except InvalidConfig as e:
        raise gr.Error(str(e))

    result = search.run(config, algorithm)
    label = constants.ALGORITHMS.get(result.algorithm, result.algorithm)
    fig = visualize.build_animation(config, result, stride=stride, title=label)
    stats_df = pd.DataFrame([{
        'Algorithm': label,
        'Steps': result.steps,
        'Path Length': result.path_length,
        'Time (ms)': f"{result.elapsed_ms:.2f}",
    }], columns=STATS_COLUMNS)
    return fig, stats_df


def run_comparison(rows, cols, start, end, walls):
    try:
        config = inputs_to_config(rows, cols, start, end, walls)
    except InvalidConfig as e:
        raise gr.Error(str(e))
    return search.compare_algorithms(config)


def load_grid_file(filename):
    """Load a grid file from the test case folder into the input widgets"""
    filepath = os.path.join(constants.TEST_CASE_FOLDER, filename)
    try:
        config, algorithm = file_reader.parse_config_file(filepath)
    except InvalidConfig as e:
        raise gr.Error(str(e))
    return config_to_inputs(config, algorithm)


EDIT_MODES = {
    "Start": util.with_start,
    "End": util.with_end,
    "Wall": util.toggle_wall,
}


def apply_edit(mode, cell, rows, cols, start, end, walls):
    """Apply one edit (move start, move end or toggle a wall) and redraw the board."""
    try:
        config = inputs_to_config(rows, cols, start, end, walls)
        config = EDIT_MODES[mode](config, file_reader.parse_cell(cell))
    except InvalidConfig as e:
        raise gr.Error(str(e))
    _rows, _cols, start, end, walls, _algorithm = config_to_inputs(config)
    return start, end, walls, visualize.build_figure(config)


def clear_board(rows, cols, start, end, walls):
    """Remove every wall and redraw the empty board."""
    try:
        config = util.clear_walls(inputs_to_config(rows, cols, start, end, walls))
    except InvalidConfig as e:
        raise gr.Error(str(e))
    return "", visualize.build_figure(config)


#================================================
#   GRADIO INTERFACE
#================================================
def build_demo(initial_config=None, initial_algorithm=None, initial_file=None):
    if initial_config is None:
        initial_config = default_config()
    rows, cols, start, end, walls, algorithm = config_to_inputs(initial_config, initial_algorithm)
    files = available_files()

    with gr.Blocks(title="Grid Pathfinding") as demo:
        with gr.Column():
            with gr.Row():
                board = gr.Plot(value=visualize.build_figure(initial_config))
            with gr.Row():
                stats_out = gr.DataFrame(headers=STATS_COLUMNS, interactive=False, label="Statistics")
            with gr.Row():
                visualize_btn = gr.Button(value="Visualize", variant="primary")
                compare_btn = gr.Button(value="Compare all")
                clear_btn = gr.Button(value="Clear walls", variant="stop")
            with gr.Row():
                file_dropdown = gr.Dropdown(choices=files, value=initial_file if initial_file in files else None,
                                            label="Load Grid File", interactive=True)
                inp_algorithm = gr.Dropdown(choices=[(label, name) for name, label in constants.ALGORITHMS.items()],
                                            value=algorithm, label="Algorithm", interactive=True)
                inp_stride = gr.Slider(minimum=1, maximum=20, step=1, value=1, label="Cells per frame")
            with gr.Row():
                inp_rows = gr.Number(value=rows, label="Rows", precision=0, interactive=True)
                inp_cols = gr.Number(value=cols, label="Columns", precision=0, interactive=True)
                inp_start = gr.Textbox(value=start, label="Start (row,col)", interactive=True)
                inp_end = gr.Textbox(value=end, label="End (row,col)", interactive=True)
            with gr.Row():
                inp_walls = gr.Textbox(value=walls, lines=3, label="Walls (row,col separated by ';')", interactive=True)
            with gr.Row():
                inp_mode = gr.Radio(choices=list(EDIT_MODES), value="Wall", label="Edit mode", interactive=True)
                inp_cell = gr.Textbox(value="", label="Cell (row,col)", interactive=True)
                edit_btn = gr.Button(value="Apply edit")
        with gr.Tab("Comparison"):
            compare_out = gr.DataFrame(interactive=False, label="All algorithms")

        grid_inputs = [inp_rows, inp_cols, inp_start, inp_end, inp_walls]

        # Event listeners
        file_dropdown.change(
            load_grid_file,
            inputs=[file_dropdown],
            outputs=grid_inputs + [inp_algorithm]
        )
        visualize_btn.click(
            run_visualization,
            inputs=grid_inputs + [inp_algorithm, inp_stride],
            outputs=[board, stats_out]
        )
        compare_btn.click(run_comparison, inputs=grid_inputs, outputs=[compare_out])
        clear_btn.click(clear_board, inputs=grid_inputs, outputs=[inp_walls, board])
        edit_btn.click(
            apply_edit,
            inputs=[inp_mode, inp_cell] + grid_inputs,
            outputs=[inp_start, inp_end, inp_walls, board]
        )
    return demo


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Launch gradio grid pathfinding application")
    parser.add_argument('--config', help='Initial grid file', default=None)
    args = parser.parse_args()

    init_config, init_algorithm, init_file = None, None, None
    if args.config:
        init_config, init_algorithm = file_reader.parse_config_file(args.config)
        # Update default file to display the currently loaded file
        init_file = os.path.basename(args.config)
    build_demo(init_config, init_algorithm, init_file).launch()
