"""
Pydantic models for the generation layer.

Holds the engine configuration, chat messages, pictogram lookups and the
Open Board Format document. The logic classes (LLMClient, LLMWordGenerator,
resolvers, CoreBoardService) live in their own modules.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..layout.combine import DedupPolicy
from ..layout.models import GridLayout


# Type aliases
Role = Literal["system", "user", "assistant"]
SymbolSet = Literal["arasaac", "global-symbols"]

DEFAULT_ARASAAC_URL = "https://api.arasaac.org/api/pictograms"
DEFAULT_GLOBAL_SYMBOLS_URL = "https://globalsymbols.com/api/v1/labels/search/"
DEFAULT_LANGUAGE = "en"
DEFAULT_MAX_SUGGESTIONS = 10
OBF_FORMAT = "open-board-0.1"


class Message(BaseModel):
    """Represents a single chat message."""
    role: Role
    content: str


class EngineConfig(BaseModel):
    """
    Configuration passed explicitly to CoreBoardService.

    Extra keys are allowed and forwarded to LiteLLM (e.g. api_base, api_key).
    """
    model_config = ConfigDict(extra='allow')

    model: str = "gpt-4o-mini"
    temperature: float = 0.0
    max_tokens: Optional[int] = None
    language: str = DEFAULT_LANGUAGE
    symbol_set: SymbolSet = "arasaac"
    global_symbols_symbol_set: Optional[str] = None
    arasaac_url: str = DEFAULT_ARASAAC_URL
    global_symbols_url: str = DEFAULT_GLOBAL_SYMBOLS_URL
    request_timeout: float = Field(default=30.0, gt=0)
    dedup: DedupPolicy = DedupPolicy.WITHIN_CATEGORY
    max_suggestions: int = Field(default=DEFAULT_MAX_SUGGESTIONS, ge=1)
    resolve_images: bool = True

    @property
    def llm_params(self) -> dict:
        """Extra LiteLLM parameters given in the config."""
        return dict(self.__pydantic_extra__) if self.__pydantic_extra__ else {}


class PictogramImage(BaseModel):
    """One candidate image returned by a symbol set."""
    id: str
    symbol_set: str
    url: str


class PictogramSuggestion(BaseModel):
    """A suggested word together with its pictogram candidates."""
    id: str
    label: str
    locale: str
    images: List[PictogramImage] = Field(default_factory=list)
    error: Optional[str] = None


class BoardButton(BaseModel):
    id: str
    label: str
    background_color: str
    border_color: str
    image_id: Optional[str] = None


class BoardImage(BaseModel):
    id: str
    url: str
    content_type: str = "image/png"
    symbol_set: Optional[str] = None


class BoardLicense(BaseModel):
    type: str = "CC By"
    copyright_notice_url: str = "https://creativecommons.org/licenses/by/4.0/"
    author_name: str = "OpenAAC"
    author_url: str = "https://www.openaac.org"


class BoardDocument(BaseModel):
    """An Open Board Format board."""
    format: str = OBF_FORMAT
    id: str = "1"
    locale: str = DEFAULT_LANGUAGE
    name: str
    description_html: str = ""
    license: BoardLicense = Field(default_factory=BoardLicense)
    buttons: List[BoardButton] = Field(default_factory=list)
    grid: GridLayout
    images: List[BoardImage] = Field(default_factory=list)

    def to_obf(self) -> dict:
        """Serializable OBF dict; buttons without an image carry no image_id."""
        return self.model_dump(exclude_none=True)
