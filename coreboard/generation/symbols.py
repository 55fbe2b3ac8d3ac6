"""
Pictogram lookup against the ARASAAC and Global Symbols APIs.

A lookup that fails for any reason (HTTP error, bad payload, no match)
yields NOT_FOUND so that board generation can carry on without an image.
"""

import asyncio
import logging
import re
import unicodedata
from typing import Any, List, Optional, Protocol, Sequence, Union, runtime_checkable
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict

from .language import THREE_LETTER_CODES
from .models import (
    DEFAULT_ARASAAC_URL,
    DEFAULT_GLOBAL_SYMBOLS_URL,
    EngineConfig,
    PictogramImage,
)
from ..errors import InvalidInputError

logger = logging.getLogger(__name__)


ARASAAC = "arasaac"
GLOBAL_SYMBOLS = "global-symbols"
ARASAAC_IMAGE_URL = "https://static.arasaac.org/pictograms/{id}/{id}_500.png"

NOT_FOUND = "not found"
NO_IMAGE_ERROR = "ERROR: No image in the Symbol Set"

PictogramLookup = Union[List[PictogramImage], str]


@runtime_checkable
class PictogramResolver(Protocol):
    """Resolves a word to its pictogram candidates, best first, or NOT_FOUND."""

    async def resolve(self, word: str, language: str) -> PictogramLookup:
        ...


def remove_diacritics(text: str) -> str:
    return re.sub(r"[\u0300-\u036f]", "", unicodedata.normalize("NFD", text))


def convert_language_to_locale(language: str) -> str:
    return THREE_LETTER_CODES.get(language, language)


class _HTTPResolver(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    base_url: str
    timeout: float = 30.0
    client: Optional[httpx.AsyncClient] = None

    async def _get_json(self, url: str, params: Optional[dict] = None) -> Any:
        if self.client is not None:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
            return response.json()

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(url, params=params)
            response.raise_for_status()
            return response.json()

    async def _lookup(self, word: str, url: str, params: Optional[dict] = None) -> Any:
        try:
            return await self._get_json(url, params)
        except httpx.HTTPError as e:
            logger.warning(f"Pictogram lookup failed for '{word}': {e}")
        except ValueError as e:
            logger.warning(f"Invalid pictogram payload for '{word}': {e}")
        return None


class ArasaacResolver(_HTTPResolver):
    """Looks words up with the ARASAAC bestsearch endpoint."""

    base_url: str = DEFAULT_ARASAAC_URL

    async def resolve(self, word: str, language: str) -> PictogramLookup:
        locale = convert_language_to_locale(language)
        term = quote(remove_diacritics(word), safe="")
        data = await self._lookup(word, f"{self.base_url.rstrip('/')}/{locale}/bestsearch/{term}")

        if not isinstance(data, list) or not data:
            return NOT_FOUND

        try:
            return [
                PictogramImage(
                    id=str(pictogram["_id"]),
                    symbol_set=ARASAAC,
                    url=ARASAAC_IMAGE_URL.format(id=pictogram["_id"]),
                )
                for pictogram in data
            ]
        except (KeyError, TypeError) as e:
            logger.warning(f"Unexpected ARASAAC entry for '{word}': {e}")
            return NOT_FOUND


class GlobalSymbolsResolver(_HTTPResolver):
    """Looks words up with the Global Symbols label search."""

    base_url: str = DEFAULT_GLOBAL_SYMBOLS_URL
    symbol_set: Optional[str] = None

    async def resolve(self, word: str, language: str) -> PictogramLookup:
        params = {"query": remove_diacritics(word), "language": language}
        if self.symbol_set:
            params["symbolset"] = self.symbol_set
        data = await self._lookup(word, self.base_url, params)

        if not isinstance(data, list) or not data:
            return NOT_FOUND

        try:
            return [
                PictogramImage(
                    id=str(label["id"]),
                    symbol_set=str(label["picto"]["symbolset_id"]),
                    url=label["picto"]["image_url"],
                )
                for label in data
            ]
        except (KeyError, TypeError) as e:
            logger.warning(f"Unexpected Global Symbols entry for '{word}': {e}")
            return NOT_FOUND


def make_resolver(
    config: EngineConfig,
    symbol_set: Optional[str] = None,
    global_symbols_symbol_set: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> PictogramResolver:
    """Build the resolver for a symbol set (defaults to the configured one)."""
    symbol_set = symbol_set or config.symbol_set

    if symbol_set == ARASAAC:
        return ArasaacResolver(base_url=config.arasaac_url, timeout=config.request_timeout, client=client)
    if symbol_set == GLOBAL_SYMBOLS:
        return GlobalSymbolsResolver(
            base_url=config.global_symbols_url,
            timeout=config.request_timeout,
            client=client,
            symbol_set=global_symbols_symbol_set or config.global_symbols_symbol_set,
        )
    raise InvalidInputError(f"Unknown symbol set: '{symbol_set}'")


async def resolve_all(
    resolver: PictogramResolver,
    words: Sequence[str],
    language: str
) -> List[PictogramLookup]:
    """Resolve every word concurrently. Results are in input order."""
    results = await asyncio.gather(*[resolver.resolve(word, language) for word in words])

    missing = [word for word, result in zip(words, results) if result == NOT_FOUND]
    if missing:
        logger.info(f"No pictogram found for {len(missing)} words: {', '.join(missing)}")
    return list(results)
