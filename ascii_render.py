"""
ASCII rendering for walkgrid structures.

Draws a grid as a boxed character map with ANSI colors, optionally marking an
origin cell, its neighbors and a path. Useful when eyeballing what
get_neighbors() returns under a given rule set.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_parser import BORDER_CHARS
from grid_types import Side
from node import Node
from pathgrid import Grid

logger = logging.getLogger(__name__)

__all__ = ["render", "render_plain"]


def _cell_char(node: Node) -> tuple[str, Callable[[str], str]]:
    match node.walkable:
        case Side() as side:
            return BORDER_CHARS[side], chalk.yellow
        case True:
            return ".", chalk.white
        case _:
            return "#", chalk.red


def render(
    grid: Grid,
    origin: Node | None = None,
    neighbors: Iterable[Node] = (),
    path: Iterable[Node] = (),
    cell_width: int = 1,
    color: bool = True,
) -> str:
    """
    Render a grid to a boxed ASCII string.

    Args:
        grid: The grid to render
        origin: Optional cell to highlight with a white background
        neighbors: Cells to mark with a green '*'
        path: Cells to mark with a cyan 'o'
        cell_width: Characters per cell (default 1)
        color: Apply ANSI colors (default True)

    Returns:
        Rendered string, one line per grid row plus the box
    """
    neighbor_positions = {(n.x, n.y) for n in neighbors}
    path_positions = {(n.x, n.y) for n in path}

    title = f" {grid.width}x{grid.height} "
    inner_width = grid.width * cell_width
    if len(title) <= inner_width:
        left = (inner_width - len(title)) // 2
        top = "┌" + "─" * left + title + "─" * (inner_width - left - len(title)) + "┐"
    else:
        top = "┌" + "─" * inner_width + "┐"

    lines = [top]
    for row in grid.nodes:
        line_parts = ["│"]
        for node in row:
            pos = (node.x, node.y)
            char, colorize = _cell_char(node)
            if pos in neighbor_positions:
                char, colorize = "*", chalk.green
            elif pos in path_positions:
                char, colorize = "o", chalk.cyan

            content = char if cell_width == 1 else char.center(cell_width)

            if not color:
                line_parts.append(content)
            elif origin is not None and pos == (origin.x, origin.y):
                line_parts.append(chalk.bgWhite.black(content))
            else:
                line_parts.append(colorize(content))
        line_parts.append("│")
        lines.append("".join(line_parts))
    lines.append("└" + "─" * inner_width + "┘")

    logger.info(
        "render: %dx%d cells, %d neighbors, %d path cells",
        grid.width,
        grid.height,
        len(neighbor_positions),
        len(path_positions),
    )
    return "\n".join(lines)


def render_plain(grid: Grid, origin: Node | None = None, neighbors: Iterable[Node] = ()) -> str:
    """Render without ANSI codes. The origin is drawn as '@'."""
    text = render(grid, neighbors=neighbors, color=False)
    if origin is None:
        return text
    lines = text.split("\n")
    # +1 for the top border line and the left border char
    row = list(lines[origin.y + 1])
    row[origin.x + 1] = "@"
    lines[origin.y + 1] = "".join(row)
    return "\n".join(lines)
