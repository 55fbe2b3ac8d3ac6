from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict
import litellm


class LLMClient(BaseModel):
    """
    Stateless async client for LLM calls via LiteLLM.

    Every call carries its own messages, so one client can serve several
    concurrent requests.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 0.0
    max_tokens: Optional[int] = None

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Get additional parameters passed during initialization."""
        return self.__pydantic_extra__ if hasattr(self, '__pydantic_extra__') and self.__pydantic_extra__ else {}

    async def completion(self, messages: List[Dict[str, str]], **kwargs: Any) -> Any:
        """
        Generate a completion for the given messages.

        Args:
            messages: Conversation in OpenAI chat format
            **kwargs: Additional arguments to pass to litellm.acompletion()

        Returns:
            The completion response from LiteLLM
        """
        params = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            **self.additional_params,
            **kwargs
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        # If reasoning_effort is specified (OpenAI compatibility), allow it through
        if "reasoning_effort" in params:
            params.setdefault("allowed_openai_params", [])
            if "reasoning_effort" not in params["allowed_openai_params"]:
                params["allowed_openai_params"].append("reasoning_effort")

        return await litellm.acompletion(**params)

    @staticmethod
    def extract_content(response: Any) -> Optional[str]:
        """Text of the first choice, or None when the response has none."""
        try:
            return response.choices[0].message.content
        except (AttributeError, IndexError, TypeError):
            return None
