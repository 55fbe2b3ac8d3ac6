"""Colored terminal table of a board's grid."""

import re
from typing import Dict

from ..generation.models import BoardButton, BoardDocument

RESET = "\x1b[0m"
CELL_WIDTH = 12


def rgb_to_ansi(rgb_color: str) -> str:
    """Convert 'rgb(r, g, b)' to an ANSI background code with readable text color."""
    match = re.match(r'rgb\((\d+),\s*(\d+),\s*(\d+)\)', rgb_color)
    if not match:
        return RESET

    r, g, b = (int(v) for v in match.groups())
    brightness = (r + g + b) / 3
    text_color = "\x1b[97m" if brightness < 128 else "\x1b[30m"

    return f"\x1b[48;2;{r};{g};{b}m{text_color}"


def render_board(board: BoardDocument, color: bool = True) -> str:
    """Render the board grid as a text table."""
    buttons: Dict[str, BoardButton] = {b.id: b for b in board.buttons}
    grid = board.grid

    lines = ["Board Layout:", "=" * (grid.columns * 15)]
    for row in grid.order:
        cells = []
        for button_id in row:
            if not button_id:
                cells.append("---empty---".ljust(CELL_WIDTH))
                continue
            button = buttons.get(button_id)
            if button is None:
                cells.append("---error---".ljust(CELL_WIDTH))
                continue
            label = button.label.ljust(CELL_WIDTH)
            cells.append(f"{rgb_to_ansi(button.background_color)}{label}{RESET}" if color else label)
        lines.append("|".join(cells))
        lines.append("-" * (grid.columns * 15))

    return "\n".join(lines)


def visualize_board(board: BoardDocument) -> None:
    """Print the colored board table to the terminal."""
    print()
    print(render_board(board))
    print(RESET)
