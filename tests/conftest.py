import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pytest

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pawsbot.graph import PawsBot
from pawsbot.store import ConversationStore


@dataclass
class GenerateCall:
    system_prompt: str
    user_prompt: str


class FakeBackend:
    """
    Deterministic stand-in for the Gemini backend.

    - Records every call so tests can assert what the handlers sent.
    - `fail = True` makes every call raise, like a quota or network error.
    - `reply` is returned verbatim otherwise.
    """
    def __init__(self, reply: str = "GENERATED_ADVICE") -> None:
        self.calls: List[GenerateCall] = []
        self.reply = reply
        self.fail = False
        self.error: Optional[Exception] = None

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append(GenerateCall(system_prompt=system_prompt, user_prompt=user_prompt))
        if self.fail:
            raise self.error or RuntimeError("429 RESOURCE_EXHAUSTED")
        return self.reply


@pytest.fixture()
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def store() -> ConversationStore:
    return ConversationStore(history_limit=10)


@pytest.fixture()
def bot(fake_backend, store) -> PawsBot:
    return PawsBot(fake_backend, store, context_turns=2)
