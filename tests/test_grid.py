"""
Test suite for the grid layout engine.

Covers grid dimensioning, balance numbers, single-region placement and the
full eight-region plan.
"""

import math

import pytest

from coreboard.errors import InvalidInputError
from coreboard.layout import (
    Band,
    CoreWord,
    Cursor,
    allocate_slots,
    calculate_balance_number,
    combine_words,
    create_grid_order,
    fixed_words_by_category,
    grid_dimensions,
    place_words,
    plan_layout,
)


def make_words(category: str, count: int, start_id: int = 1):
    return [
        CoreWord(
            id=str(start_id + i),
            label=f"{category.lower()}{i}",
            background_color="rgb(255, 255, 255)",
            border_color="rgb(0, 0, 0)",
            category=category,
        )
        for i in range(count)
    ]


def board_words(total_buttons: int, dynamic_sizes=None):
    """Core words for a board with mocked dynamic responses."""
    allocations = allocate_slots(total_buttons)
    sizes = {a.name: a.slots for a in allocations}
    sizes.update(dynamic_sizes or {})
    dynamic = {
        name: [f"{name.lower()}-{i}" for i in range(sizes[name])]
        for name in ["Actions", "Adjectives/Adverbs", "Determiners", "Prepositions"]
    }
    return combine_words(fixed_words_by_category(), dynamic, allocations)


class TestGridDimensions:
    """Test rows and columns."""

    @pytest.mark.parametrize("total,expected", [
        (20, (4, 5)),
        (42, (6, 7)),
        (49, (7, 7)),
        (50, (7, 8)),
        (1, (1, 1)),
        (2, (1, 2)),
    ])
    def test_known_sizes(self, total, expected):
        assert grid_dimensions(total) == expected

    def test_dimension_invariant(self):
        """columns = ceil(sqrt(n)), rows = ceil(n / columns), and the grid fits n."""
        for total in range(1, 500):
            rows, columns = grid_dimensions(total)
            assert columns == math.ceil(math.sqrt(total))
            assert rows == math.ceil(total / columns)
            assert rows * columns >= total

    @pytest.mark.parametrize("total", [0, -1])
    def test_non_positive_total(self, total):
        with pytest.raises(InvalidInputError):
            grid_dimensions(total)


class TestBalanceNumber:
    """Test the rebalancing cap."""

    def test_small_grid_fraction(self):
        """Grids under 60 cells use the small fraction."""
        assert calculate_balance_number(42, 14, 0.3, 0.4) == 4

    def test_large_grid_fraction(self):
        """Grids of 60 cells or more use the large fraction."""
        assert calculate_balance_number(60, 14, 0.3, 0.4) == 6

    def test_forced_even(self):
        """Odd results are bumped to the next even number."""
        assert calculate_balance_number(42, 10, 0.5, 0.5) == 6

    def test_rounds_down_first(self):
        assert calculate_balance_number(42, 16, 0.5, 0.5) == 8

    def test_negative_space(self):
        """No space left means nothing is placed."""
        assert calculate_balance_number(42, -3, 0.5, 0.5) == 0


class TestPlaceWords:
    """Test placement inside a single region."""

    def test_column_major_fill(self):
        """Words go down a column, then continue at the band top of the next."""
        words = make_words("Questions", 3)
        placement = place_words("Questions", words, Cursor(3, 0), Band(2, 4), 4, {}, 4, 4)
        assert placement.cells == {(3, 0): "1", (2, 1): "2", (3, 1): "3"}
        assert placement.end == Cursor(2, 2)

    def test_top_band_resets_to_row_zero(self):
        """A band starting at row 0 restarts every column at the top."""
        words = make_words("Actions", 3)
        placement = place_words("Actions", words, Cursor(1, 0), Band(0, 2), 3, {}, 3, 3)
        assert placement.cells == {(1, 0): "1", (0, 1): "2", (1, 1): "3"}

    def test_truncation_at_capacity(self):
        """Excess words are dropped; exactly the region capacity is placed."""
        words = make_words("Pronouns", 10)
        placement = place_words("Pronouns", words, Cursor(0, 0), Band(0, 2), 2, {}, 2, 2)
        assert placement.placed_count == 4
        assert placement.dropped == ["5", "6", "7", "8", "9", "10"]

    def test_balance_number_caps_words(self):
        words = make_words("Negation", 5)
        placement = place_words("Negation", words, Cursor(0, 0), Band(0, 4), 4, {}, 4, 4, balance_number=2)
        assert placement.placed_count == 2
        assert placement.dropped == ["3", "4", "5"]

    def test_occupied_cells_skipped(self):
        """Cells filled by earlier regions are never overwritten."""
        words = make_words("Determiners", 2)
        occupied = {(0, 0): "x"}
        placement = place_words("Determiners", words, Cursor(0, 0), Band(0, 2), 2, occupied, 2, 2)
        assert placement.cells == {(1, 0): "1", (0, 1): "2"}
        assert occupied == {(0, 0): "x"}

    def test_no_words_keeps_cursor(self):
        """An empty region has zero width."""
        placement = place_words("Actions", [], Cursor(2, 3), Band(0, 3), 5, {}, 5, 5)
        assert placement.cells == {}
        assert placement.end == Cursor(2, 3)

    def test_start_below_band_wraps(self):
        """A start cursor past the band's end moves to the next column."""
        words = make_words("Actions", 1)
        placement = place_words("Actions", words, Cursor(3, 0), Band(0, 2), 3, {}, 4, 3)
        assert placement.cells == {(0, 1): "1"}

    def test_empty_band_drops_everything(self):
        """A band with no rows places nothing and never raises."""
        words = make_words("Pronouns", 2)
        placement = place_words("Pronouns", words, Cursor(0, 0), Band(0, 0), 3, {}, 1, 3)
        assert placement.placed_count == 0
        assert placement.dropped == ["1", "2"]


class TestCreateGridOrder:

    def test_row_major_with_empty_cells(self):
        order = create_grid_order(2, 3, {(0, 0): "1", (1, 2): "2"})
        assert order == [["1", None, None], [None, None, "2"]]


class TestPlanLayout42:
    """Full plan for 42 buttons: a 6x7 grid."""

    @pytest.fixture
    def layout(self):
        return plan_layout(board_words(42), 42)

    def test_dimensions(self, layout):
        assert layout.grid.rows == 6
        assert layout.grid.columns == 7
        assert layout.pronouns_end_row == 4
        assert layout.middle_section == 3

    def test_region_order(self, layout):
        assert [r.category for r in layout.regions] == [
            "Pronouns", "Actions", "Adjectives/Adverbs", "Determiners",
            "Prepositions", "Questions", "Negation", "Interjections",
        ]

    def test_cursor_chaining(self, layout):
        """Each continuing region starts exactly at the previous end cursor."""
        pronouns = layout.region("Pronouns")
        actions = layout.region("Actions")
        adjectives = layout.region("Adjectives/Adverbs")
        determiners = layout.region("Determiners")
        prepositions = layout.region("Prepositions")
        questions = layout.region("Questions")
        negation = layout.region("Negation")
        interjections = layout.region("Interjections")

        assert pronouns.start == Cursor(0, 0)
        assert actions.start == pronouns.end
        assert adjectives.start == actions.end
        assert determiners.start == Cursor(layout.middle_section, pronouns.end.col)
        assert prepositions.start == determiners.end
        assert questions.start == Cursor(layout.pronouns_end_row, 0)
        assert negation.start == questions.end
        assert interjections.start == negation.end

    def test_end_cursors(self, layout):
        ends = {r.category: tuple(r.end) for r in layout.regions}
        assert ends == {
            "Pronouns": (2, 1),
            "Actions": (1, 4),
            "Adjectives/Adverbs": (0, 7),
            "Determiners": (3, 5),
            "Prepositions": (3, 7),
            "Questions": (4, 2),
            "Negation": (4, 4),
            "Interjections": (4, 7),
        }

    def test_balance_numbers(self, layout):
        balance = {r.category: r.balance_number for r in layout.regions}
        assert balance["Actions"] == 8
        assert balance["Determiners"] == 4
        assert balance["Questions"] == 4
        assert balance["Negation"] == 4
        assert balance["Pronouns"] is None

    def test_placed_counts(self, layout):
        placed = {r.category: r.placed_count for r in layout.regions}
        assert placed == {
            "Pronouns": 6,
            "Actions": 8,
            "Adjectives/Adverbs": 8,
            "Determiners": 4,
            "Prepositions": 2,
            "Questions": 4,
            "Negation": 4,
            "Interjections": 6,
        }

    def test_grid_fully_filled(self, layout):
        cells = [cell for row in layout.grid.order for cell in row]
        assert None not in cells
        assert len(set(cells)) == 42

    def test_known_cells(self, layout):
        """Pronouns in the top-left, interjections in the bottom-right."""
        order = layout.grid.order
        assert order[0][0] == "1"   # "I"
        assert order[3][0] == "4"   # "we"
        assert order[0][1] == "5"   # "they"
        assert order[5][6] == "16"  # last interjection


class TestPlanLayoutInvariants:
    """Properties that hold for every board size."""

    def test_bounds_and_uniqueness(self):
        for total in range(1, 121):
            words = board_words(total)
            layout = plan_layout(words, total)
            grid = layout.grid
            assert len(grid.order) == grid.rows
            assert all(len(row) == grid.columns for row in grid.order)

            ids = [cell for row in grid.order for cell in row if cell is not None]
            assert len(ids) == len(set(ids))
            assert set(ids) <= {w.id for w in words}

    def test_every_word_placed_or_dropped(self):
        """Per region, placed + dropped equals the category's word count."""
        words = board_words(64)
        layout = plan_layout(words, 64)
        for region in layout.regions:
            count = sum(1 for w in words if w.category == region.category)
            assert region.placed_count + len(region.dropped) == count

    def test_cells_within_grid(self):
        for total in [3, 7, 16, 30, 81, 100]:
            layout = plan_layout(board_words(total), total)
            for region in layout.regions:
                for row, col in region.cells:
                    assert 0 <= row < layout.grid.rows
                    assert 0 <= col < layout.grid.columns

    def test_deterministic(self):
        """Same words and size give the same grid."""
        first = plan_layout(board_words(42), 42)
        second = plan_layout(board_words(42), 42)
        assert first.model_dump() == second.model_dump()

    def test_missing_category_has_zero_width(self):
        """With no Actions, Adjectives start where Pronouns ended."""
        words = board_words(42, {"Actions": 0})
        layout = plan_layout(words, 42)
        actions = layout.region("Actions")
        assert actions.placed_count == 0
        assert actions.end == actions.start
        assert layout.region("Adjectives/Adverbs").start == layout.region("Pronouns").end

    def test_tiny_boards(self):
        """Very small boards never raise."""
        for total in [1, 2, 3]:
            layout = plan_layout(board_words(total), total)
            assert layout.grid.rows * layout.grid.columns >= total


class TestPlanLayoutInvalidInput:
    """Test rejection of malformed inputs."""

    def test_words_not_a_list(self):
        with pytest.raises(InvalidInputError):
            plan_layout("I, you", 10)

    def test_words_not_core_words(self):
        with pytest.raises(InvalidInputError):
            plan_layout([{"id": "1", "label": "I"}], 10)

    def test_duplicate_ids(self):
        words = make_words("Pronouns", 2) + make_words("Actions", 1)
        with pytest.raises(InvalidInputError):
            plan_layout(words, 10)

    def test_non_positive_total(self):
        with pytest.raises(InvalidInputError):
            plan_layout(make_words("Pronouns", 2), 0)
