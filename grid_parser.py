"""
Text map parsing for walkgrid.

Concise format, one character per cell:
- Rows separated by | or newlines (blank lines and indentation are ignored)
- '.' or '_': Open cell
- '#': Blocked cell
- '^', '>', 'v', '<': Border on the top, right, bottom, left side
"""

from __future__ import annotations

from grid_types import MovementRules, ShapeMismatch, Side, Walkable
from pathgrid import Grid

__all__ = ["parse_grid", "format_grid"]


CELL_CHARS: dict[str, Walkable] = {
    ".": True,
    "_": True,
    "#": False,
    "^": Side.TOP,
    ">": Side.RIGHT,
    "v": Side.BOTTOM,
    "<": Side.LEFT,
}

BORDER_CHARS = {Side.TOP: "^", Side.RIGHT: ">", Side.BOTTOM: "v", Side.LEFT: "<"}


def parse_grid(definition: str, rules: MovementRules = MovementRules()) -> Grid:
    """
    Parse a grid from the concise text format.

    Example:
        "..#|.^.|..." creates a 3x3 grid with (2, 0) blocked and a top border
        on (1, 1), so (1, 1) cannot be entered from (1, 0).

    Args:
        definition: Rows of cell characters
        rules: Movement rules for the resulting grid

    Returns:
        The parsed Grid

    Raises:
        ValueError: If the definition is empty or contains an invalid character
        ShapeMismatch: If rows have different lengths
    """
    row_strings = [
        row.strip()
        for line in definition.strip().split("\n")
        for row in line.split("|")
        if row.strip()
    ]
    if not row_strings:
        raise ValueError("Empty grid definition")

    rows: list[list[Walkable]] = []
    for row_idx, row_str in enumerate(row_strings):
        cells: list[Walkable] = []
        for col_idx, char in enumerate(row_str):
            if char not in CELL_CHARS:
                raise ValueError(
                    f"Invalid character '{char}'\n"
                    f"  Row {row_idx}: \"{row_str}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid characters: {' '.join(CELL_CHARS)}"
                )
            cells.append(CELL_CHARS[char])
        rows.append(cells)

    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise ShapeMismatch(error_msg)

    matrix = [[cell is False for cell in row] for row in rows]
    grid = Grid(cols, len(rows), matrix, rules=rules)

    # Border tags are not expressible in the obstacle matrix
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if isinstance(cell, Side):
                grid.set_walkable_at(x, y, cell)

    return grid


def format_grid(grid: Grid) -> str:
    """Render a grid back to the concise format, one row per line."""
    lines = []
    for row in grid.nodes:
        chars = []
        for node in row:
            if isinstance(node.walkable, Side):
                chars.append(BORDER_CHARS[node.walkable])
            else:
                chars.append("." if node.walkable else "#")
        lines.append("".join(chars))
    return "\n".join(lines)
