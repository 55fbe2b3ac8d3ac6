"""Assemble placed words and pictograms into an Open Board Format document."""

from typing import Dict, List, Optional, Sequence

from .models import BoardButton, BoardDocument, BoardImage, PictogramImage
from ..layout.grid import plan_layout
from ..layout.models import CoreWord


def image_for(lookup: object) -> Optional[PictogramImage]:
    """Best image of a resolver result, or None when the word was not found."""
    if isinstance(lookup, PictogramImage):
        return lookup
    if isinstance(lookup, list) and lookup and isinstance(lookup[0], PictogramImage):
        return lookup[0]
    return None


def assemble_board(
    words: Sequence[CoreWord],
    topic: str,
    images: Sequence[object],
    total_buttons: int,
    locale: str = "en",
) -> BoardDocument:
    """
    Build the board document.

    Images are matched to words by position. A word whose image is missing
    (shorter list, None, or NOT_FOUND) gets a button without image_id.

    Args:
        words: Core words in placement order
        topic: Board topic, used for name and description
        images: Resolver results aligned with `words`
        total_buttons: Requested number of buttons
        locale: Board locale

    Returns:
        BoardDocument ready to be serialized
    """
    layout = plan_layout(words, total_buttons)

    buttons: List[BoardButton] = []
    board_images: Dict[str, BoardImage] = {}

    for index, word in enumerate(words):
        image = image_for(images[index]) if index < len(images) else None
        if image is not None and image.id not in board_images:
            board_images[image.id] = BoardImage(id=image.id, url=image.url, symbol_set=image.symbol_set)

        buttons.append(BoardButton(
            id=word.id,
            label=word.label,
            background_color=word.background_color,
            border_color=word.border_color,
            image_id=image.id if image is not None else None,
        ))

    return BoardDocument(
        locale=locale,
        name=f"Core Board - {topic}",
        description_html=f"Core vocabulary board generated for the topic: {topic}",
        buttons=buttons,
        grid=layout.grid,
        images=list(board_images.values()),
    )
