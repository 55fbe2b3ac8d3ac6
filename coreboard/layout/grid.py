"""
Grid layout engine for core vocabulary boards.

Partitions a rows x columns grid into horizontal bands and fills each
category's words column by column inside its band:

    rows [0, pronouns_end_row)                 Pronouns
    rows [0, middle_section)                   Actions, Adjectives/Adverbs
    rows [middle_section, pronouns_end_row)    Determiners, Prepositions
    rows [pronouns_end_row, rows)              Questions, Negation, Interjections

Categories sharing a band continue from the previous category's end cursor.
Words that do not fit are dropped with a warning; placement never raises
for geometric reasons.
"""

import logging
import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .models import Band, CoreWord, Cursor, GridLayout, LayoutResult, RegionPlacement
from .allocation import validate_total_buttons
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)


PRONOUNS_ROW_FRACTION = 0.8
MIDDLE_SECTION_FRACTION = 0.8
SMALL_GRID_THRESHOLD = 60

# (small grid fraction, large grid fraction)
ACTIONS_BALANCE = (0.5, 0.5)
DETERMINERS_BALANCE = (0.5, 0.5)
QUESTIONS_BALANCE = (0.3, 0.4)
NEGATION_BALANCE = (0.3, 0.3)

Cells = Mapping[Tuple[int, int], str]


def grid_dimensions(total_buttons: int) -> Tuple[int, int]:
    """Return (rows, columns) with columns = ceil(sqrt(n)) and rows = ceil(n / columns)."""
    total_buttons = validate_total_buttons(total_buttons)
    columns = math.isqrt(total_buttons)
    if columns * columns < total_buttons:
        columns += 1
    rows = -(-total_buttons // columns)
    return rows, columns


def calculate_balance_number(
    grid_size: int,
    available_slots: int,
    small_grid_fraction: float,
    large_grid_fraction: float
) -> int:
    """
    Cap on how many words of a category are placed in its leftover space.

    Args:
        grid_size: Total number of cells in the grid
        available_slots: Cells geometrically left for the region
        small_grid_fraction: Fraction used when grid_size < 60
        large_grid_fraction: Fraction used otherwise

    Returns:
        floor(available_slots * fraction), bumped up to the next even number
    """
    fraction = small_grid_fraction if grid_size < SMALL_GRID_THRESHOLD else large_grid_fraction
    balance_number = math.floor(max(available_slots, 0) * fraction)
    if balance_number % 2 != 0:
        balance_number += 1
    return balance_number


def _wrap(cursor: Cursor, band: Band) -> Cursor:
    """Move a cursor that ran off the bottom of its band to the top of the next column."""
    row = max(cursor.row, band.first_row)
    if row >= band.end_row:
        return Cursor(band.first_row, cursor.col + 1)
    return Cursor(row, cursor.col)


def _next_free(cursor: Cursor, band: Band, end_col: int, *taken: Cells) -> Cursor:
    """First cell at or after `cursor` that lies inside the band and is not taken."""
    cursor = _wrap(cursor, band)
    while cursor.col < end_col and (
        cursor.row >= band.end_row or any(cursor in cells for cells in taken)
    ):
        cursor = _wrap(Cursor(cursor.row + 1, cursor.col), band)
    return cursor


def place_words(
    category: str,
    words: Sequence[CoreWord],
    start: Cursor,
    band: Band,
    end_col: int,
    occupied: Cells,
    rows: int,
    columns: int,
    balance_number: Optional[int] = None,
) -> RegionPlacement:
    """
    Place a category's words down the columns of a band.

    Starts at `start`, moves down the current column until the band's end
    row, then continues at the band's first row of the next column. Cells
    already in `occupied` are skipped, never overwritten. Once the column
    reaches `end_col` the remaining words are dropped.

    Args:
        category: Category being placed
        words: The category's words in placement order
        start: Cursor to start from
        band: Rows this region may use
        end_col: Column bound (exclusive)
        occupied: Cells filled by earlier regions (not modified)
        rows: Grid row count
        columns: Grid column count
        balance_number: Maximum number of words to place (None for no cap)

    Returns:
        RegionPlacement holding the new cells and the end cursor
    """
    start = Cursor(*start)
    candidates = list(words) if balance_number is None else list(words[:balance_number])
    dropped = [w.id for w in words[len(candidates):]]
    if dropped:
        logger.debug(f"{category}: balance number {balance_number} holds back {len(dropped)} words")

    cells: Dict[Tuple[int, int], str] = {}
    cursor = start

    for index, word in enumerate(candidates):
        cursor = _next_free(cursor, band, end_col, occupied, cells)

        if cursor.col >= end_col:
            overflow = candidates[index:]
            dropped.extend(w.id for w in overflow)
            logger.warning(f"{category}: region full, dropped {len(overflow)} words")
            break

        if not (0 <= cursor.row < rows and 0 <= cursor.col < columns):
            logger.warning(
                f"Attempted to place word outside grid bounds: "
                f"word={word.label}, row={cursor.row}, col={cursor.col}"
            )
            dropped.append(word.id)
            cursor = Cursor(cursor.row + 1, cursor.col)
            continue

        cells[cursor] = word.id
        cursor = Cursor(cursor.row + 1, cursor.col)

    # An empty region has zero width: the next category starts where this one did
    end = _wrap(cursor, band) if cells else start

    return RegionPlacement(
        category=category,
        band=band,
        start=start,
        end=end,
        balance_number=balance_number,
        cells=cells,
        dropped=dropped,
    )


def _group_by_category(words: Sequence[CoreWord]) -> Dict[str, List[CoreWord]]:
    grouped: Dict[str, List[CoreWord]] = {}
    for word in words:
        grouped.setdefault(word.category, []).append(word)
    return grouped


def _validate_words(words: object) -> List[CoreWord]:
    if not isinstance(words, (list, tuple)):
        raise InvalidInputError(f"words must be a list, got {type(words).__name__}")

    seen = set()
    for word in words:
        if not isinstance(word, CoreWord):
            raise InvalidInputError(f"Expected CoreWord, got {type(word).__name__}")
        if word.id in seen:
            raise InvalidInputError(f"Duplicate word id '{word.id}'")
        seen.add(word.id)
    return list(words)


def create_grid_order(rows: int, columns: int, cells: Cells) -> List[List[Optional[str]]]:
    """Row-major matrix of word ids, None for empty cells."""
    return [[cells.get((row, col)) for col in range(columns)] for row in range(rows)]


def plan_layout(words: Sequence[CoreWord], total_buttons: int) -> LayoutResult:
    """
    Compute the grid placement for a board.

    Args:
        words: Core words in placement order (see combine_words)
        total_buttons: Requested number of buttons

    Returns:
        LayoutResult with the grid and one RegionPlacement per category,
        in placement order
    """
    words = _validate_words(words)
    rows, columns = grid_dimensions(total_buttons)
    grid_size = rows * columns
    by_category = _group_by_category(words)

    pronouns_end_row = math.floor(rows * PRONOUNS_ROW_FRACTION)
    middle_section = math.floor(pronouns_end_row * MIDDLE_SECTION_FRACTION)

    upper = Band(0, pronouns_end_row)
    middle = Band(0, middle_section)
    lower = Band(middle_section, pronouns_end_row)
    bottom = Band(pronouns_end_row, rows)

    cells: Dict[Tuple[int, int], str] = {}
    regions: List[RegionPlacement] = []

    def place(category: str, start: Cursor, band: Band,
              balance_number: Optional[int] = None) -> RegionPlacement:
        nonlocal cells
        placement = place_words(
            category, by_category.get(category, []), start, band,
            columns, cells, rows, columns, balance_number,
        )
        cells = {**cells, **placement.cells}
        regions.append(placement)
        return placement

    def balance(available_slots: int, fractions: Tuple[float, float]) -> int:
        return calculate_balance_number(grid_size, available_slots, *fractions)

    pronouns = place("Pronouns", Cursor(0, 0), upper)

    available = (
        max(middle_section - pronouns.end.row, 0)
        + (columns - (pronouns.end.col + 1)) * middle_section
    )
    actions = place("Actions", pronouns.end, middle, balance(available, ACTIONS_BALANCE))
    place("Adjectives/Adverbs", actions.end, middle)

    available = (pronouns_end_row - middle_section) * (columns - pronouns.end.col)
    determiners = place(
        "Determiners", Cursor(middle_section, pronouns.end.col), lower,
        balance(available, DETERMINERS_BALANCE),
    )
    place("Prepositions", determiners.end, lower)

    available = (rows - pronouns_end_row) * columns
    questions = place(
        "Questions", Cursor(pronouns_end_row, 0), bottom,
        balance(available, QUESTIONS_BALANCE),
    )
    negation = place("Negation", questions.end, bottom, balance(available, NEGATION_BALANCE))
    place("Interjections", negation.end, bottom)

    return LayoutResult(
        grid=GridLayout(rows=rows, columns=columns, order=create_grid_order(rows, columns, cells)),
        pronouns_end_row=pronouns_end_row,
        middle_section=middle_section,
        regions=regions,
    )

