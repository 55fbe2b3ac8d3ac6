# Core vocabulary categories, their board shares and the fixed lexicons.
# Percentages are heuristics and intentionally do not sum to 1.0.

from typing import Dict, List, Sequence

from .models import Category, CategoryName, FixedWords
from ..errors import InvalidInputError


BORDER_COLOR = "rgb(0, 0, 0)"

CATEGORY_COLORS: Dict[str, str] = {
    "Actions": "rgb(200, 255, 200)",
    "Adjectives/Adverbs": "rgb(135, 206, 250)",
    "Pronouns": "rgb(255, 255, 200)",
    "Interjections": "rgb(255, 192, 203)",
    "Questions": "rgb(255, 200, 255)",
    "Determiners": "rgb(180, 180, 180)",
    "Prepositions": "rgb(255, 255, 255)",
    "Negation": "rgb(255, 140, 140)",
}

PRONOUNS = (
    # Personal
    "I", "you", "it", "we", "they", "he", "she",
    # Possessive
    "my", "your", "their", "his", "her", "our", "its",
    # Demonstrative
    "this", "that", "these", "those",
    # Reflexive
    "myself", "yourself", "themselves",
)

QUESTIONS = (
    "what", "where", "when", "who", "why", "how",
    "which", "whose", "can", "will", "did",
    "how long", "how often", "how many",
    # Clarification
    "really", "right", "okay",
)

NEGATION = (
    "not", "don't",
    "no", "never", "none",
    "can't", "won't", "didn't",
    "nothing", "nowhere", "nobody",
)

INTERJECTIONS = (
    # Responses
    "yes", "no", "please", "thank you",
    # Greetings
    "hello", "hi", "bye", "goodbye",
    # Emotions
    "wow", "oh", "ah", "ouch",
    # Social
    "sorry", "excuse me", "okay", "well",
    # Attention-getters
    "hey", "look", "listen", "wait",
)


# Lexicon order of the fixed categories; fixes their ids ahead of generated words
FIXED_WORDS_ORDER = ("Pronouns", "Questions", "Interjections", "Negation")

CORE_CATEGORIES: List[Category] = [
    Category(name="Pronouns", target_percentage=0.15, required=True, grid_percentage=0.9,
             color=CATEGORY_COLORS["Pronouns"], source=FixedWords(words=PRONOUNS)),
    Category(name="Actions", target_percentage=0.3, grid_percentage=0.8,
             color=CATEGORY_COLORS["Actions"]),
    Category(name="Adjectives/Adverbs", target_percentage=0.3, grid_percentage=0.8,
             color=CATEGORY_COLORS["Adjectives/Adverbs"]),
    Category(name="Determiners", target_percentage=0.15, grid_percentage=0.5,
             color=CATEGORY_COLORS["Determiners"]),
    Category(name="Prepositions", target_percentage=0.15,
             color=CATEGORY_COLORS["Prepositions"]),
    Category(name="Questions", target_percentage=0.1, required=True, grid_percentage=0.4,
             color=CATEGORY_COLORS["Questions"], source=FixedWords(words=QUESTIONS)),
    Category(name="Negation", target_percentage=0.1, required=True,
             color=CATEGORY_COLORS["Negation"], source=FixedWords(words=NEGATION)),
    Category(name="Interjections", target_percentage=0.15, required=True,
             color=CATEGORY_COLORS["Interjections"], source=FixedWords(words=INTERJECTIONS)),
]


def get_category(name: str, categories: Sequence[Category] = CORE_CATEGORIES) -> Category:
    """Look up a category by name."""
    for category in categories:
        if category.name == name:
            return category
    raise InvalidInputError(f"Unknown category: '{name}'")


def get_category_color(name: str) -> str:
    """Background color for a category's buttons."""
    try:
        return CATEGORY_COLORS[name]
    except KeyError:
        raise InvalidInputError(f"Unknown category: '{name}'") from None


def fixed_words_by_category(
    categories: Sequence[Category] = CORE_CATEGORIES
) -> Dict[CategoryName, List[str]]:
    """Static lexicons of the fixed categories, in FIXED_WORDS_ORDER."""
    fixed = [category for category in categories if category.is_fixed]
    unlisted = len(FIXED_WORDS_ORDER)
    fixed.sort(key=lambda c: FIXED_WORDS_ORDER.index(c.name) if c.name in FIXED_WORDS_ORDER else unlisted)
    return {category.name: list(category.source.words) for category in fixed}


def dynamic_categories(categories: Sequence[Category] = CORE_CATEGORIES) -> List[Category]:
    """Categories whose words must be requested from the word generator."""
    return [category for category in categories if not category.is_fixed]
