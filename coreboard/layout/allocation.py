"""Per-category slot allocation."""

import math
from typing import List, Sequence

from .models import Category, CategorySlotAllocation
from .categories import CORE_CATEGORIES
from ..errors import InvalidInputError


def validate_total_buttons(total_buttons: object) -> int:
    """Reject anything that is not a positive integer (bools included)."""
    if isinstance(total_buttons, bool) or not isinstance(total_buttons, int):
        raise InvalidInputError(
            f"total_buttons must be a positive integer, got {total_buttons!r}"
        )
    if total_buttons <= 0:
        raise InvalidInputError(
            f"total_buttons must be a positive integer, got {total_buttons}"
        )
    return total_buttons


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def allocate_slots(
    total_buttons: int,
    categories: Sequence[Category] = CORE_CATEGORIES
) -> List[CategorySlotAllocation]:
    """
    Split a button count across categories by their target percentage.

    Each category gets round(total_buttons * percentage) slots, bumped up by
    one when odd so every count is even. The sum is not guaranteed to equal
    total_buttons.

    Args:
        total_buttons: Requested number of buttons on the board
        categories: Categories in board order

    Returns:
        One allocation per category, in the same order
    """
    total_buttons = validate_total_buttons(total_buttons)

    allocations: List[CategorySlotAllocation] = []
    for category in categories:
        slots = round_half_up(total_buttons * category.target_percentage)
        if slots % 2 != 0:
            slots += 1
        allocations.append(CategorySlotAllocation(
            name=category.name,
            slots=slots,
            required=category.required
        ))

    return allocations
