"""Generation-service collaborator: the only code that talks to an LLM."""

import logging
from typing import Any, Dict, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel

from ..exceptions import GenerationServiceError

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)


class GenerationService(Protocol):
    """Anything that can turn a prompt into an instance of a response schema.

    Implementations may fail for any reason (quota, malformed input, service
    fault); callers let those errors propagate.
    """

    async def generate(self, schema: Type[T], prompt: str) -> T:
        ...


class LangChainGenerationService:
    """GenerationService backed by a LangChain chat model's structured output."""

    SYSTEM_PROMPT = (
        "You are a brand naming strategist. Answer only with data matching the "
        "requested structure."
    )

    def __init__(self, llm):
        self.llm = llm

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> 'LangChainGenerationService':
        """Build a Gemini-backed service from the ``ai`` config section."""
        from langchain_google_genai import ChatGoogleGenerativeAI

        ai_config = (config or {}).get('ai', {})
        llm = ChatGoogleGenerativeAI(
            model=ai_config.get('model', 'gemini-1.5-pro'),
            temperature=ai_config.get('temperature', 0.9),
            google_api_key=ai_config.get('api_key'),
        )
        return cls(llm)

    async def generate(self, schema: Type[T], prompt: str) -> T:
        from langchain_core.messages import HumanMessage, SystemMessage

        logger.debug("Requesting %s", schema.__name__)
        structured = self.llm.with_structured_output(schema)
        result = await structured.ainvoke([
            SystemMessage(content=self.SYSTEM_PROMPT),
            HumanMessage(content=prompt),
        ])

        if result is None:
            raise GenerationServiceError(f"Model returned no {schema.__name__}")
        if isinstance(result, dict):
            result = schema.model_validate(result)
        return result
