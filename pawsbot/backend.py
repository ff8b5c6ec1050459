"""Generation backend: the text-completion service the topic handlers ask for prose."""
import asyncio
import time
from typing import Protocol

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from pawsbot.config import get_api_key, get_max_output_tokens, get_model_name, get_temperature, has_api_key
from pawsbot.errors import GenerationError
from pawsbot.log_config import log_generation
from pawsbot.utils import extract_message_text


class GenerationBackend(Protocol):
    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Return generated text or raise."""
        ...


def _get_llm() -> ChatGoogleGenerativeAI:
    return ChatGoogleGenerativeAI(
        model=get_model_name(),
        temperature=get_temperature(),
        max_output_tokens=get_max_output_tokens(),
        google_api_key=get_api_key(),
    )


class GeminiBackend:
    """Gemini via LangChain. One retry after a short pause, then GenerationError."""

    def __init__(self, llm: ChatGoogleGenerativeAI | None = None, retry_delay_s: float = 1.0):
        self._llm = llm
        self.retry_delay_s = retry_delay_s

    @property
    def llm(self) -> ChatGoogleGenerativeAI:
        if self._llm is None:
            self._llm = _get_llm()
        return self._llm

    async def _invoke(self, system_prompt: str, user_prompt: str) -> str:
        t0 = time.perf_counter()
        response = await self.llm.ainvoke([SystemMessage(content=system_prompt), HumanMessage(content=user_prompt)])
        log_generation(self.llm.model, time.perf_counter() - t0)
        return extract_message_text(response.content)

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        try:
            text = await self._invoke(system_prompt, user_prompt)
        except Exception as e1:
            await asyncio.sleep(self.retry_delay_s)
            try:
                text = await self._invoke(system_prompt, user_prompt)
            except Exception as e2:
                raise GenerationError(f"LLM failed (retry failed): {e1!r}; {e2!r}") from e2
        if not text:
            raise GenerationError("LLM returned empty content")
        return text


def build_backend() -> GeminiBackend | None:
    """Gemini backend when an API key is configured, else None (handlers then use fallbacks)."""
    if not has_api_key():
        return None
    return GeminiBackend()
