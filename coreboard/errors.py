"""Exception taxonomy for core board generation."""

from typing import Optional


class CoreBoardError(Exception):
    """Base class for all board generation failures."""


class InvalidInputError(CoreBoardError, ValueError):
    """Malformed button counts, word lists or categories. Never retried."""


class UpstreamGenerationError(CoreBoardError):
    """The word generator failed or returned nothing usable."""

    def __init__(self, message: str, category: Optional[str] = None):
        super().__init__(message)
        self.category = category
