"""
Word generation backed by an LLM.

LLMWordGenerator asks the model for core words of one category, or for a
free-form list of pictogram-friendly words about a topic. Failures and
empty answers raise UpstreamGenerationError so that the caller can abort
the board.
"""

import asyncio
import logging
import re
from typing import Dict, List, Optional, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, ConfigDict

from .llm_client import LLMClient
from .language import get_language_name
from .prompts import build_category_messages, build_suggestion_messages
from ..errors import UpstreamGenerationError
from ..layout.categories import CORE_CATEGORIES
from ..layout.models import Category, CategorySlotAllocation

logger = logging.getLogger(__name__)


# Room for roughly 50 words plus list punctuation
CATEGORY_MAX_TOKENS = round(4.5 * 50 + 200)


@runtime_checkable
class WordGenerator(Protocol):
    """Supplies words for a dynamic category. Must return at most `count` words."""

    async def generate(self, topic: str, category: str, count: int) -> List[str]:
        ...


def parse_word_list(content: str, limit: Optional[int] = None) -> List[str]:
    """Split a comma-separated answer into clean words."""
    words = []
    for raw in content.split(","):
        word = raw.strip().strip('{}"\'.').strip()
        if word:
            words.append(word)
    return words[:limit] if limit is not None else words


def parse_braced_list(content: str, limit: Optional[int] = None) -> List[str]:
    """Parse the `{word1, word2, ...}` template used by suggestion prompts."""
    match = re.search(r'\{(.*?)\}', content.replace("\n\n", ""), re.DOTALL)
    if not match:
        return []
    return parse_word_list(match.group(1), limit)


class LLMWordGenerator(BaseModel):
    """
    Generates vocabulary through an LLMClient.

    Attributes:
        llm_client: Client used for every request
        language: Default language for free-form suggestions
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    llm_client: LLMClient
    language: str = "en"

    async def _complete(self, messages: List[Dict[str, str]], max_tokens: int,
                        category: Optional[str] = None) -> str:
        try:
            response = await self.llm_client.completion(messages, max_tokens=max_tokens)
        except Exception as e:
            logger.error(f"Word generation failed for {category or 'suggestions'}: {e}")
            raise UpstreamGenerationError(
                f"Word generation request failed: {e}", category=category
            ) from e

        content = LLMClient.extract_content(response)
        if not content:
            logger.error(f"Empty response from LLM for {category or 'suggestions'}")
            raise UpstreamGenerationError(
                "Failed to get valid response from LLM", category=category
            )
        return content

    async def generate(self, topic: str, category: str, count: int) -> List[str]:
        """
        Generate up to `count` core words of a category for a topic.

        Args:
            topic: Board topic
            category: Category name (e.g. "Actions")
            count: Number of words requested

        Returns:
            At most `count` words; possibly fewer
        """
        messages = build_category_messages(topic, category, count)
        content = await self._complete(messages, CATEGORY_MAX_TOKENS, category)

        words = parse_word_list(content, count)
        if not words:
            raise UpstreamGenerationError(
                f"Could not parse any {category} from the LLM response", category=category
            )
        return words

    async def suggest(self, topic: str, max_words: int, language: Optional[str] = None) -> List[str]:
        """
        Free-form word suggestions about a topic.

        Args:
            topic: What the board is about
            max_words: Maximum number of words to return
            language: Language code (defaults to the generator's language)

        Returns:
            Up to `max_words` words
        """
        language_name = get_language_name(language or self.language)
        messages = build_suggestion_messages(topic, max_words, language_name)
        content = await self._complete(messages, round(4.5 * max_words + 200))

        words = parse_braced_list(content, max_words)
        if not words:
            raise UpstreamGenerationError("Suggestion list is empty or max tokens reached")
        return words


async def _request_category(
    generator: WordGenerator,
    topic: str,
    category: str,
    count: int
) -> List[str]:
    try:
        words = await generator.generate(topic, category, count)
    except UpstreamGenerationError:
        raise
    except Exception as e:
        logger.error(f"Error generating dynamic words for {category}: {e}")
        raise UpstreamGenerationError(str(e), category=category) from e

    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        raise UpstreamGenerationError(
            f"Word generator returned a malformed list for {category}", category=category
        )
    if not words:
        raise UpstreamGenerationError(f"Word generator returned no words for {category}", category=category)
    if len(words) > count:
        logger.warning(f"{category}: generator returned {len(words)} words for {count} slots")
        words = words[:count]
    return words


async def generate_dynamic_words(
    generator: WordGenerator,
    topic: str,
    allocations: Sequence[CategorySlotAllocation],
    categories: Sequence[Category] = CORE_CATEGORIES
) -> Dict[str, List[str]]:
    """
    Request words for every dynamic category with slots, concurrently.

    Categories with zero slots are not requested. A failure in any request
    aborts the whole batch.

    Returns:
        Mapping of category name to words, in request order
    """
    dynamic_names = {c.name for c in categories if not c.is_fixed}
    requests = [a for a in allocations if a.name in dynamic_names and a.slots > 0]

    tasks = [
        asyncio.ensure_future(_request_category(generator, topic, allocation.name, allocation.slots))
        for allocation in requests
    ]
    try:
        results = await asyncio.gather(*tasks)
    except BaseException:
        # One failure fails the board; stop the requests still in flight
        for task in tasks:
            task.cancel()
        raise

    return {allocation.name: words for allocation, words in zip(requests, results)}
