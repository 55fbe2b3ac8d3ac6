"""Merge fixed and generated words into the ordered core word list."""

from enum import Enum
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

from .models import CategorySlotAllocation, CoreWord
from .categories import BORDER_COLOR, get_category_color
from ..errors import InvalidInputError


class DedupPolicy(str, Enum):
    """Which repeated labels are removed before ids are assigned."""
    NONE = "none"
    WITHIN_CATEGORY = "within_category"
    ACROSS_CATEGORIES = "across_categories"


def _validated_words(category: str, words: object) -> List[str]:
    if not isinstance(words, (list, tuple)):
        raise InvalidInputError(
            f"Words for '{category}' must be a list, got {type(words).__name__}"
        )
    cleaned = []
    for word in words:
        if not isinstance(word, str):
            raise InvalidInputError(f"Word {word!r} in '{category}' is not a string")
        word = word.strip()
        if word:
            cleaned.append(word)
    return cleaned


def _fixed_entries(
    fixed_words: Mapping[str, Sequence[str]],
    slots: Mapping[str, int]
) -> Iterator[Tuple[str, str]]:
    # Truncate to the allocation, never pad
    for category, words in fixed_words.items():
        limit = slots.get(category, 0)
        for word in _validated_words(category, words)[:limit]:
            yield category, word


def _dynamic_entries(
    dynamic_words: Mapping[str, Sequence[str]],
    slots: Mapping[str, int]
) -> Iterator[Tuple[str, str]]:
    for category, words in dynamic_words.items():
        words = _validated_words(category, words)
        if slots.get(category, 0) == 0:
            continue
        for word in words:
            yield category, word


def _deduplicate(
    entries: List[Tuple[str, str]],
    policy: DedupPolicy
) -> List[Tuple[str, str]]:
    if policy == DedupPolicy.NONE:
        return entries

    seen = set()
    result = []
    for category, label in entries:
        key = label.casefold()
        if policy == DedupPolicy.WITHIN_CATEGORY:
            key = (category, key)
        if key in seen:
            continue
        seen.add(key)
        result.append((category, label))
    return result


def combine_words(
    fixed_words: Mapping[str, Sequence[str]],
    dynamic_words: Mapping[str, Sequence[str]],
    allocations: Sequence[CategorySlotAllocation],
    dedup: DedupPolicy = DedupPolicy.WITHIN_CATEGORY,
) -> List[CoreWord]:
    """
    Build the ordered list of core words for one board.

    Fixed categories come first in their declared order, each truncated to
    its slot count. Dynamic categories follow in the order their responses
    were received, contributing every returned word. Categories with zero
    slots contribute nothing. Ids are assigned sequentially from "1" after
    deduplication, so the result is a pure function of the inputs.

    Args:
        fixed_words: Static lexicon per fixed category
        dynamic_words: Generated words per dynamic category
        allocations: Slot allocation per category
        dedup: Which repeated labels to drop

    Returns:
        List of CoreWord in placement order
    """
    slots: Dict[str, int] = {a.name: a.slots for a in allocations}

    entries = list(_fixed_entries(fixed_words, slots))
    entries.extend(_dynamic_entries(dynamic_words, slots))
    entries = _deduplicate(entries, DedupPolicy(dedup))

    return [
        CoreWord(
            id=str(index),
            label=label,
            background_color=get_category_color(category),
            border_color=BORDER_COLOR,
            category=category,
        )
        for index, (category, label) in enumerate(entries, start=1)
    ]
