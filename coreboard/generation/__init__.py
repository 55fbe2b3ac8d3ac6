"""Board generation: LLM words, pictograms and OBF assembly."""

from .models import (
    Message,
    Role,
    SymbolSet,
    EngineConfig,
    PictogramImage,
    PictogramSuggestion,
    BoardButton,
    BoardImage,
    BoardLicense,
    BoardDocument,
)
from .llm_client import LLMClient
from .word_generator import WordGenerator, LLMWordGenerator, generate_dynamic_words
from .symbols import (
    PictogramResolver,
    ArasaacResolver,
    GlobalSymbolsResolver,
    NOT_FOUND,
    make_resolver,
    resolve_all,
)
from .board import assemble_board
from .core_board import CoreBoardService

__all__ = [
    "Message",
    "Role",
    "SymbolSet",
    "EngineConfig",
    "PictogramImage",
    "PictogramSuggestion",
    "BoardButton",
    "BoardImage",
    "BoardLicense",
    "BoardDocument",
    "LLMClient",
    "WordGenerator",
    "LLMWordGenerator",
    "generate_dynamic_words",
    "PictogramResolver",
    "ArasaacResolver",
    "GlobalSymbolsResolver",
    "NOT_FOUND",
    "make_resolver",
    "resolve_all",
    "assemble_board",
    "CoreBoardService",
]
