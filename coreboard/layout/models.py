"""Data models for the core vocabulary layout."""

from typing import Annotated, Dict, List, Literal, NamedTuple, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field


CategoryName = Literal[
    "Pronouns",
    "Actions",
    "Adjectives/Adverbs",
    "Determiners",
    "Prepositions",
    "Questions",
    "Negation",
    "Interjections",
]


class FixedWords(BaseModel):
    """Words come from a static, hand-curated lexicon."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    words: Tuple[str, ...] = ()


class DynamicWords(BaseModel):
    """Words are requested from the word generator per board."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["dynamic"] = "dynamic"


WordSource = Annotated[Union[FixedWords, DynamicWords], Field(discriminator="kind")]


class Category(BaseModel):
    """A linguistic category and its share of the board."""
    model_config = ConfigDict(frozen=True)

    name: CategoryName
    target_percentage: float = Field(..., ge=0)
    required: bool = False  # informational only
    grid_percentage: Optional[float] = None  # unused by the current layout
    color: str
    source: WordSource = DynamicWords()

    @property
    def is_fixed(self) -> bool:
        return isinstance(self.source, FixedWords)


class CategorySlotAllocation(BaseModel):
    """Number of grid slots a category receives for one board."""
    name: CategoryName
    slots: int = Field(..., ge=0)
    required: bool = False


class CoreWord(BaseModel):
    """A single vocabulary item ready to be placed on the grid."""
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    background_color: str
    border_color: str
    category: CategoryName


class Cursor(NamedTuple):
    """A (row, col) position in the grid."""
    row: int
    col: int


class Band(NamedTuple):
    """Rows [first_row, end_row) a region may use. New columns restart at first_row."""
    first_row: int
    end_row: int


class RegionPlacement(BaseModel):
    """Outcome of placing one category's words."""
    category: CategoryName
    band: Band
    start: Cursor
    end: Cursor
    balance_number: Optional[int] = None
    cells: Dict[Tuple[int, int], str] = Field(default_factory=dict)
    dropped: List[str] = Field(default_factory=list)  # ids that did not fit

    @property
    def placed_count(self) -> int:
        return len(self.cells)


class GridLayout(BaseModel):
    """The OBF grid: rows x columns of button ids (or None)."""
    rows: int
    columns: int
    order: List[List[Optional[str]]]


class LayoutResult(BaseModel):
    """A grid plus the per-region trace that produced it."""
    grid: GridLayout
    pronouns_end_row: int
    middle_section: int
    regions: List[RegionPlacement] = Field(default_factory=list)

    def region(self, category: str) -> RegionPlacement:
        for placement in self.regions:
            if placement.category == category:
                return placement
        raise KeyError(category)
