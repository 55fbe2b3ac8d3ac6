"""Core vocabulary board layout."""

from .models import (
    CategoryName,
    Category,
    FixedWords,
    DynamicWords,
    CategorySlotAllocation,
    CoreWord,
    Cursor,
    Band,
    RegionPlacement,
    GridLayout,
    LayoutResult,
)
from .categories import (
    CORE_CATEGORIES,
    FIXED_WORDS_ORDER,
    CATEGORY_COLORS,
    BORDER_COLOR,
    get_category,
    get_category_color,
    fixed_words_by_category,
    dynamic_categories,
)
from .allocation import allocate_slots, validate_total_buttons
from .combine import combine_words, DedupPolicy
from .grid import (
    grid_dimensions,
    calculate_balance_number,
    place_words,
    plan_layout,
    create_grid_order,
)

__all__ = [
    # Models
    "CategoryName",
    "Category",
    "FixedWords",
    "DynamicWords",
    "CategorySlotAllocation",
    "CoreWord",
    "Cursor",
    "Band",
    "RegionPlacement",
    "GridLayout",
    "LayoutResult",
    # Category data
    "CORE_CATEGORIES",
    "FIXED_WORDS_ORDER",
    "CATEGORY_COLORS",
    "BORDER_COLOR",
    "get_category",
    "get_category_color",
    "fixed_words_by_category",
    "dynamic_categories",
    # Allocation and combination
    "allocate_slots",
    "validate_total_buttons",
    "combine_words",
    "DedupPolicy",
    # Grid layout
    "grid_dimensions",
    "calculate_balance_number",
    "place_words",
    "plan_layout",
    "create_grid_order",
]
