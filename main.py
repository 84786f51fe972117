import argparse
import sys

from models.direction import Direction
from models.line import DiagonalMapping, Line, LineStyle, VertexStyle
from shapes.boxes import draw_box, draw_shaded_rectangle, hide_box
from shapes.circles import draw_circle
from shapes.lines import draw_line, horizontal_line, vertical_line
from terminal.ansi import Attribute, Color
from terminal.screen_buffer import ScreenBuffer
from terminal.session import Terminal
from utils.errors import CollectingErrorHandler
from utils.glyphs import (
    BoxStyle,
    HorizontalLineStyle,
    ShadeStyle,
    StarSymbol,
    VerticalLineStyle,
)
from utils.snapshot_io import ensure_output_dir, save_snapshot, snapshot_name

from config import (
    OUTPUT_FOLDER,
    TAG_OK,
    TAG_WARN,
    get_active_params,
)


def pause(terminal: Terminal, params):
    """Waits between scenes: Enter in interactive mode, a frame delay otherwise."""
    if params["PROMPT_BETWEEN_SCENES"]:
        terminal.move_cursor_to(1, terminal.viewport.height)
        terminal.print("Press Enter to continue...")
        terminal.read_line()
    elif params["FRAME_DELAY_SECONDS"]:
        terminal.wait_for_seconds(params["FRAME_DELAY_SECONDS"])


def scene_title(terminal: Terminal, title: str):
    terminal.clear_screen()
    terminal.set_foreground_color(Color.GREEN)
    terminal.set_attribute(Attribute.BRIGHT)
    terminal.print(title)
    terminal.reset_attributes()


def run_demo(terminal: Terminal, params=None):
    """
    Runs every demonstration scene in order:
      1. Boxes in each style
      2. Shaded rectangles + erase
      3. Straight lines
      4. Direction-based Lines (all 8 directions, both diagonal mappings)
      5. Bresenham segment and circle outline
    """
    if params is None:
        params = get_active_params()

    # ------------------------------
    # SCENE 1: BOXES
    # ------------------------------
    scene_title(terminal, "Box styles")
    for i, style in enumerate(BoxStyle):
        x = 2 + (i % 3) * 26
        y = 3 + (i // 3) * 9
        draw_box(terminal, x, y, 24, 7, style)
        terminal.place(x + 2, y + 3, style.name.replace("_", " ").title())
    pause(terminal, params)

    # ------------------------------
    # SCENE 2: SHADES
    # ------------------------------
    scene_title(terminal, "Shaded rectangles")
    for i, shade in enumerate(ShadeStyle):
        draw_shaded_rectangle(terminal, 3 + i * 19, 4, 16, 6, shade)
    hide_box(terminal, 7, 6, 8, 2)
    pause(terminal, params)

    # ------------------------------
    # SCENE 3: STRAIGHT LINES
    # ------------------------------
    scene_title(terminal, "Straight lines")
    for i, style in enumerate(list(HorizontalLineStyle)[:6]):
        horizontal_line(terminal, 3, 3 + i * 2, 30, style)
    for i, style in enumerate(list(VerticalLineStyle)[:6]):
        vertical_line(terminal, 40 + i * 4, 3, 12, style)
    pause(terminal, params)

    # ------------------------------
    # SCENE 4: DIRECTIONAL LINES
    # ------------------------------
    scene_title(terminal, "Directional lines")
    centre_x, centre_y = 20, 12
    star_ends = LineStyle(end_vertex=VertexStyle.star(StarSymbol.BLACK_STAR))
    for direction in Direction:
        line = Line(terminal, centre_x, centre_y, 8, star_ends, direction)
        line.show()

    geometric = LineStyle(
        start_vertex_enabled=False,
        diagonal_glyphs=DiagonalMapping.GEOMETRIC,
    )
    for direction in Direction:
        line = Line(terminal, centre_x + 36, centre_y, 8, geometric, direction)
        line.show()

    # a moving line: show, wait, erase, move
    runner = Line(terminal, 3, 22, 12)
    for _ in range(4):
        runner.show(params["LINE_SHOW_SECONDS"])
        runner.move_to(runner.x + 15, runner.y)
    pause(terminal, params)

    # ------------------------------
    # SCENE 5: SEGMENTS & CIRCLES
    # ------------------------------
    scene_title(terminal, "Bresenham segment and circle")
    draw_line(terminal, "*", 5, 4, 40, 18)
    draw_circle(terminal, "o", 58, 12, 8)
    pause(terminal, params)


def main(argv=None):
    """
    Main entry point:
      - Builds a terminal session (real stdout, or a ScreenBuffer with --headless)
      - Runs the demonstration scenes
      - Saves a text snapshot when headless
    """
    parser = argparse.ArgumentParser(description="Terminal drawing demonstration")
    parser.add_argument("--headless", action="store_true",
                        help="render into an in-memory screen and save a snapshot")
    parser.add_argument("--name", default="demo", help="snapshot file name")
    args = parser.parse_args(argv)

    params = get_active_params()

    if args.headless:
        params = dict(params, PROMPT_BETWEEN_SCENES=False, FRAME_DELAY_SECONDS=0,
                      LINE_SHOW_SECONDS=None)
        screen = ScreenBuffer(params["VIEWPORT_WIDTH"], params["VIEWPORT_HEIGHT"])
        handler = CollectingErrorHandler()
        terminal = Terminal(stream=screen, error_handler=handler)

        run_demo(terminal, params)

        ensure_output_dir(OUTPUT_FOLDER)
        path = save_snapshot(f"{OUTPUT_FOLDER}/{snapshot_name(args.name)}", screen)
        for error in handler.errors:
            print(f"{TAG_WARN} {error}")
        print(f"{TAG_OK} Snapshot written to {path}")
        return 0

    terminal = Terminal()
    terminal.hide_cursor()
    try:
        run_demo(terminal, params)
    finally:
        terminal.reset_color()
        terminal.clear_screen()
        terminal.show_cursor()
    print(f"{TAG_OK} Demonstration finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
