import logging
import uuid
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .board import assemble_board, image_for
from .language import get_two_letter_code
from .llm_client import LLMClient
from .models import BoardDocument, EngineConfig, PictogramSuggestion
from .symbols import NO_IMAGE_ERROR, NOT_FOUND, PictogramResolver, make_resolver, resolve_all
from .word_generator import LLMWordGenerator, WordGenerator, generate_dynamic_words
from ..errors import InvalidInputError
from ..layout.allocation import allocate_slots
from ..layout.categories import CORE_CATEGORIES, fixed_words_by_category
from ..layout.combine import combine_words
from ..layout.models import Category

logger = logging.getLogger(__name__)


class CoreBoardService(BaseModel):
    """
    Entry point for generating core vocabulary boards.

    Coordinates slot allocation, word generation, word combination, grid
    layout and pictogram lookup. All collaborators are injected; nothing is
    read from module-level state.

    Attributes:
        config: Engine configuration
        word_generator: Supplies words for dynamic categories
        resolver: Pictogram resolver (built from config when None)
        categories: Category definitions in board order
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: EngineConfig = Field(default_factory=EngineConfig)
    word_generator: WordGenerator
    resolver: Optional[PictogramResolver] = None
    categories: List[Category] = Field(default_factory=lambda: list(CORE_CATEGORIES))

    @classmethod
    def create(
        cls,
        config: Optional[EngineConfig] = None,
        **config_kwargs: Any
    ) -> "CoreBoardService":
        """
        Factory method wiring an LLM-backed generator from the configuration.

        Args:
            config: Optional EngineConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            Configured CoreBoardService instance
        """
        if config is None:
            config = EngineConfig(**config_kwargs)

        llm_client = LLMClient(
            model=config.model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            **config.llm_params
        )
        word_generator = LLMWordGenerator(llm_client=llm_client, language=config.language)

        return cls(config=config, word_generator=word_generator)

    def _get_resolver(self, symbol_set: Optional[str], global_symbols_symbol_set: Optional[str]):
        if self.resolver is not None and symbol_set is None:
            return self.resolver
        return make_resolver(self.config, symbol_set, global_symbols_symbol_set)

    async def generate_core_board(
        self,
        topic: str,
        total_buttons: int,
        symbol_set: Optional[str] = None,
        global_symbols_symbol_set: Optional[str] = None,
        resolve_images: Optional[bool] = None,
    ) -> BoardDocument:
        """
        Generate a core vocabulary board for a topic.

        Either returns a complete board or raises; no partial board is
        produced when word generation fails.

        Args:
            topic: What the board is about
            total_buttons: Requested number of buttons
            symbol_set: "arasaac" or "global-symbols" (defaults to config)
            global_symbols_symbol_set: Global Symbols symbol set slug
            resolve_images: Look up pictograms (defaults to config)

        Returns:
            The assembled BoardDocument

        Raises:
            InvalidInputError: Bad topic or button count
            UpstreamGenerationError: Any dynamic-category request failed
        """
        if not isinstance(topic, str) or not topic.strip():
            raise InvalidInputError("topic must be a non-empty string")
        topic = topic.strip()

        allocations = allocate_slots(total_buttons, self.categories)
        logger.info(
            "Category slots: " + ", ".join(f"{a.name}={a.slots}" for a in allocations)
        )

        dynamic_words = await generate_dynamic_words(
            self.word_generator, topic, allocations, self.categories
        )
        words = combine_words(
            fixed_words_by_category(self.categories),
            dynamic_words,
            allocations,
            self.config.dedup,
        )

        if resolve_images is None:
            resolve_images = self.config.resolve_images

        images: list = []
        if resolve_images and words:
            resolver = self._get_resolver(symbol_set, global_symbols_symbol_set)
            images = await resolve_all(resolver, [w.label for w in words], self.config.language)

        board = assemble_board(
            words,
            topic,
            images,
            total_buttons,
            locale=get_two_letter_code(self.config.language),
        )
        logger.info(
            f"Generated board '{board.name}': {len(board.buttons)} buttons, "
            f"{board.grid.rows}x{board.grid.columns} grid, {len(board.images)} images"
        )
        return board

    async def get_suggestions(
        self,
        topic: str,
        max_suggestions: Optional[int] = None,
        symbol_set: Optional[str] = None,
        language: Optional[str] = None,
        global_symbols_symbol_set: Optional[str] = None,
    ) -> List[PictogramSuggestion]:
        """
        Suggest words about a topic together with their pictograms.

        Args:
            topic: What the suggestions are about
            max_suggestions: Maximum number of words (defaults to config)
            symbol_set: Symbol set to search (defaults to config)
            language: Language code (defaults to config)
            global_symbols_symbol_set: Global Symbols symbol set slug

        Returns:
            One suggestion per word; words without a pictogram carry an error
        """
        if not isinstance(topic, str) or not topic.strip():
            raise InvalidInputError("topic must be a non-empty string")

        max_suggestions = max_suggestions or self.config.max_suggestions
        language = language or self.config.language

        if not hasattr(self.word_generator, "suggest"):
            raise InvalidInputError("The configured word generator does not support suggestions")

        words = await self.word_generator.suggest(topic.strip(), max_suggestions, language)
        resolver = self._get_resolver(symbol_set, global_symbols_symbol_set)
        lookups = await resolve_all(resolver, words, language)

        suggestions = []
        for word, lookup in zip(words, lookups):
            if lookup == NOT_FOUND or image_for(lookup) is None:
                suggestions.append(PictogramSuggestion(
                    id=uuid.uuid4().hex[:8],
                    label=word,
                    locale=language,
                    error=NO_IMAGE_ERROR,
                ))
            else:
                suggestions.append(PictogramSuggestion(
                    id=uuid.uuid4().hex[:8],
                    label=word,
                    locale=language,
                    images=lookup,
                ))
        return suggestions
