"""Topic handler nodes. Each returns run-state updates including `next_node`."""
from dataclasses import dataclass

from pawsbot.backend import GenerationBackend
from pawsbot.classifier import Category
from pawsbot.errors import GenerationError
from pawsbot.fallback import fallback
from pawsbot.log_config import log_node_step, log_reply
from pawsbot.prompts import (
    BEHAVIOR_FOOTER,
    BEHAVIOR_HEADER,
    BEHAVIOR_INSTRUCTIONS,
    BEHAVIOR_SYSTEM,
    EMERGENCY_RESPONSE,
    GENERAL_FOOTER,
    GENERAL_HEADER,
    GENERAL_INSTRUCTIONS,
    GENERAL_SYSTEM,
    HEALTH_FOOTER,
    HEALTH_HEADER,
    HEALTH_INSTRUCTIONS,
    HEALTH_SYSTEM,
    NUTRITION_FOOTER,
    NUTRITION_HEADER,
    NUTRITION_INSTRUCTIONS,
    NUTRITION_SYSTEM,
    build_user_prompt,
    wrap_response,
)
from pawsbot.state import Node, RunState


@dataclass(frozen=True)
class Topic:
    category: Category
    label: str
    system_prompt: str
    instructions: str
    header: str
    footer: str
    uses_history: bool = False
    inline_header: bool = False


HEALTH = Topic(Category.HEALTH, "Pet health question", HEALTH_SYSTEM, HEALTH_INSTRUCTIONS, HEALTH_HEADER, HEALTH_FOOTER)
BEHAVIOR = Topic(Category.BEHAVIOR, "Pet behavior question", BEHAVIOR_SYSTEM, BEHAVIOR_INSTRUCTIONS, BEHAVIOR_HEADER, BEHAVIOR_FOOTER)
NUTRITION = Topic(Category.NUTRITION, "Pet nutrition question", NUTRITION_SYSTEM, NUTRITION_INSTRUCTIONS, NUTRITION_HEADER, NUTRITION_FOOTER)
GENERAL = Topic(
    Category.GENERAL, "Pet care question", GENERAL_SYSTEM, GENERAL_INSTRUCTIONS, GENERAL_HEADER, GENERAL_FOOTER,
    uses_history=True, inline_header=True,
)


def emergency_node(state: RunState) -> RunState:
    """Fixed safety script. No backend call on this path, ever."""
    log_node_step(Node.EMERGENCY.value, "static safety script")
    log_reply("emergency", EMERGENCY_RESPONSE)
    return {
        "next_node": Node.END.value,
        "response": EMERGENCY_RESPONSE,
        "needs_followup": False,
    }


def _fallback_updates(topic: Topic, error) -> RunState:
    return {
        "next_node": Node.END.value,
        "response": fallback(topic.category.value, str(error)),
        "needs_followup": False,
    }


async def run_topic_handler(
    state: RunState,
    backend: GenerationBackend | None,
    topic: Topic,
    context_turns: int = 2,
) -> RunState:
    """Ask the backend for prose on this topic and wrap it; fall back to static text on any failure."""
    log_node_step(topic.category.value, f"backend={'yes' if backend else 'NO'}")
    if backend is None:
        return _fallback_updates(topic, "generation backend not configured")

    user_prompt = build_user_prompt(
        topic.label,
        state.get("message", ""),
        topic.instructions,
        context=state.get("context"),
        history=state.get("history") if topic.uses_history else None,
        history_turns=context_turns if topic.uses_history else 0,
    )
    try:
        text = await backend.generate(topic.system_prompt, user_prompt)
        if not text or not text.strip():
            raise GenerationError("empty generation")
    except Exception as e:
        return _fallback_updates(topic, e)

    response = wrap_response(topic.header, text.strip(), topic.footer, topic.inline_header)
    log_reply(topic.category.value, response)
    return {
        "next_node": Node.FOLLOWUP.value,
        "response": response,
        "needs_followup": True,
    }


def followup_node(state: RunState) -> RunState:
    """Pass-through: the response set by the topic handler is kept as-is."""
    log_node_step(Node.FOLLOWUP.value)
    return {"next_node": Node.END.value}
