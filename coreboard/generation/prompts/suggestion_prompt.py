from typing import Dict, List

from ..models import Message


SUGGESTION_PROMPT = """act as a speech pathologist selecting pictograms in language {language_name}
for a non verbal person about what the user asks you to.
Here are mandatory instructions for the list:
 -Ensure that the list contains precisely {max_words} words; it must not be shorter or longer.
 -The words should be related to the topic.
 -When using verbs, you must use the infinitive form. Do not use gerunds, conjugated forms, or any other variations of the verb.
 -Do not repeat any words.
 -Do not include any additional text, symbols, or characters beyond the words requested.
 -The list should follow this exact format: {{word1, word2, word3,..., wordN}}."""


def build_suggestion_messages(topic: str, max_words: int, language_name: str) -> List[Dict[str, str]]:
    """Messages asking for a braced list of pictogram-friendly words about a topic."""
    return [
        Message(role="system", content=SUGGESTION_PROMPT.format(
            language_name=language_name,
            max_words=max_words,
        )).model_dump(),
        Message(role="user", content=f"Create a board about {topic}").model_dump(),
    ]
