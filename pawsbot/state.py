"""Graph run state: the per-message accumulator threaded through the nodes."""
from enum import Enum
from typing import Annotated, Any, TypedDict


class Node(str, Enum):
    """Closed set of node ids. END is LangGraph's terminal, not a registered node."""
    START = "start"
    CLASSIFY = "classify"
    EMERGENCY = "emergency"
    HEALTH = "health"
    BEHAVIOR = "behavior"
    NUTRITION = "nutrition"
    GENERAL = "general"
    FOLLOWUP = "followup"
    END = "end"


TOPIC_NODES = (Node.EMERGENCY, Node.HEALTH, Node.BEHAVIOR, Node.NUTRITION, Node.GENERAL)


def merge_context(left: dict[str, Any] | None, right: dict[str, Any] | None) -> dict[str, Any]:
    """Shallow key-by-key merge; keys from later updates overwrite earlier ones."""
    return {**(left or {}), **(right or {})}


class RunState(TypedDict, total=False):
    user_id: str
    message: str
    history: list[dict[str, Any]]  # snapshot of stored exchanges, oldest first
    context: Annotated[dict[str, Any], merge_context]
    step: str
    category: str
    urgency: str
    confidence: float
    needs_followup: bool
    response: str
    next_node: str
