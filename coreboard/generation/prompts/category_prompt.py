from typing import Dict, List

from ..models import Message


def build_category_messages(topic: str, category: str, count: int) -> List[Dict[str, str]]:
    """Messages asking for `count` core words of one category for a topic."""
    category_name = category.lower()
    system = (
        f'You are a speech language pathologist selecting core vocabulary {category_name} '
        f'related to "{topic}". Provide exactly {count} common, versatile words that could '
        f'be used across multiple contexts.'
    )
    user = (
        f'Generate {count} core {category_name} for the topic "{topic}". '
        f'Return only the words in a comma-separated list.'
    )
    return [
        Message(role="system", content=system).model_dump(),
        Message(role="user", content=user).model_dump(),
    ]
