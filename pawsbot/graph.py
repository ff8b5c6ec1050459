"""LangGraph: start -> classify -> (emergency -> end) | (health|behavior|nutrition|general -> followup|end).

`PawsBot` owns the compiled graph and the conversation store and is the caller-facing API.
"""
import asyncio
import time
from datetime import datetime, timezone
from typing import Any, Callable

from langgraph.graph import END, StateGraph

from pawsbot.backend import GenerationBackend
from pawsbot.classifier import Category, Urgency, classify, mentions_emergency
from pawsbot.config import get_context_turns, get_retention_hours, get_run_timeout_seconds
from pawsbot.errors import PawsBotError, UnknownNodeError
from pawsbot.fallback import caller_fallback
from pawsbot.handlers import BEHAVIOR, GENERAL, HEALTH, NUTRITION, emergency_node, followup_node, run_topic_handler
from pawsbot.log_config import LOG, log_classification, log_node_step, log_turn
from pawsbot.prompts import emergency_check_message, summary_message
from pawsbot.state import TOPIC_NODES, Node, RunState
from pawsbot.store import CleanupSweep, ConversationStore, Exchange

SUMMARIZER_USER_ID = "system-summarizer"

# Allowed transitions. Every node names its successor in `next_node`; routing rejects anything else.
EDGES: dict[Node, tuple[Node, ...]] = {
    Node.START: (Node.CLASSIFY,),
    Node.CLASSIFY: TOPIC_NODES,
    Node.EMERGENCY: (Node.END,),
    Node.HEALTH: (Node.FOLLOWUP, Node.END),
    Node.BEHAVIOR: (Node.FOLLOWUP, Node.END),
    Node.NUTRITION: (Node.FOLLOWUP, Node.END),
    Node.GENERAL: (Node.FOLLOWUP, Node.END),
    Node.FOLLOWUP: (Node.END,),
}


def _start_node(state: RunState) -> RunState:
    log_node_step(Node.START.value, f"user={state.get('user_id')}")
    return {"step": "classification", "next_node": Node.CLASSIFY.value}


def _classify_node(state: RunState) -> RunState:
    result = classify(state.get("message", ""))
    log_classification(result.category.value, result.urgency.value, result.confidence)
    return {
        "step": "handling",
        "category": result.category.value,
        "urgency": result.urgency.value,
        "confidence": result.confidence,
        "context": {"last_category": result.category.value, "last_urgency": result.urgency.value},
        # Category values double as handler node ids.
        "next_node": result.category.value,
    }


def _make_router(source: Node, allowed: tuple[Node, ...]) -> Callable[[RunState], str]:
    allowed_values = {n.value for n in allowed}

    def route(state: RunState) -> str:
        target = state.get("next_node") or ""
        if target not in allowed_values:
            raise UnknownNodeError(source.value, target)
        log_node_step("route", f"{source.value} -> {target}")
        return target

    route.__name__ = f"_route_after_{source.value}"
    return route


def build_graph(backend: GenerationBackend | None, context_turns: int | None = None):
    """Build and compile the conversation graph. `backend=None` sends every topic to its fallback."""
    turns = get_context_turns() if context_turns is None else context_turns

    async def health(s: RunState):
        return await run_topic_handler(s, backend, HEALTH)
    async def behavior(s: RunState):
        return await run_topic_handler(s, backend, BEHAVIOR)
    async def nutrition(s: RunState):
        return await run_topic_handler(s, backend, NUTRITION)
    async def general(s: RunState):
        return await run_topic_handler(s, backend, GENERAL, context_turns=turns)

    nodes = {
        Node.START: _start_node,
        Node.CLASSIFY: _classify_node,
        Node.EMERGENCY: emergency_node,
        Node.HEALTH: health,
        Node.BEHAVIOR: behavior,
        Node.NUTRITION: nutrition,
        Node.GENERAL: general,
        Node.FOLLOWUP: followup_node,
    }

    graph = StateGraph(RunState)
    for node, fn in nodes.items():
        graph.add_node(node.value, fn)
    for source, targets in EDGES.items():
        path_map = {t.value: (END if t is Node.END else t.value) for t in targets}
        graph.add_conditional_edges(source.value, _make_router(source, targets), path_map)
    graph.set_entry_point(Node.START.value)
    return graph.compile()


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


class PawsBot:
    """Conversation engine: one graph run per message, history kept per user.

    include_confidence: add the classifier's confidence to every result.
    persist_context: keep caller context and handler context updates in the stored
        conversation state. When False they only live for the run.
    history_limit: exchanges kept per user by the store built here. Ignored when `store` is given.
    """

    def __init__(
        self,
        backend: GenerationBackend | None = None,
        store: ConversationStore | None = None,
        *,
        include_confidence: bool = True,
        persist_context: bool = True,
        history_limit: int | None = None,
        context_turns: int | None = None,
        run_timeout_s: float | None = None,
    ):
        self.backend = backend
        self.store = store if store is not None else ConversationStore(history_limit)
        self.include_confidence = include_confidence
        self.persist_context = persist_context
        self.run_timeout_s = run_timeout_s if run_timeout_s is not None else get_run_timeout_seconds()
        self.graph = build_graph(backend, context_turns)

    async def run(self, user_id: str, message: str, context: dict[str, Any] | None = None) -> dict[str, Any]:
        """Traverse the graph for one message. Raises only for internal errors."""
        history, stored_context = self.store.snapshot(user_id)
        initial: RunState = {
            "user_id": user_id,
            "message": message,
            "history": [e.to_dict() for e in history],
            "context": {**stored_context, **(context or {})},
            "next_node": Node.START.value,
        }
        t0 = time.perf_counter()
        final = await self.graph.ainvoke(initial)
        response = final.get("response")
        if not response:
            raise PawsBotError(f"Graph finished without a response (category={final.get('category')})")

        category = final.get("category") or Category.GENERAL.value
        urgency = final.get("urgency") or Urgency.LOW.value
        run_context = dict(final.get("context") or {})
        self.store.update(
            user_id,
            Exchange(user_message=message, bot_response=response, category=category, urgency=urgency),
            context=run_context if self.persist_context else None,
        )
        log_turn(user_id, time.perf_counter() - t0, category)

        result = {
            "response": response,
            "urgency": urgency,
            "category": category,
            "needs_followup": bool(final.get("needs_followup", False)),
            "confidence": final.get("confidence", 0.0),
            "context": run_context,
            "timestamp": _now(),
        }
        if not self.include_confidence:
            result.pop("confidence")
        return result

    async def process_message(
        self,
        user_id: str,
        message: str,
        context: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        """Caller contract: never raises. `success` is False only when the run itself failed."""
        timeout = timeout if timeout is not None else self.run_timeout_s
        try:
            if timeout:
                result = await asyncio.wait_for(self.run(user_id, message, context), timeout)
            else:
                result = await self.run(user_id, message, context)
        except asyncio.TimeoutError:
            LOG.warning("PawsBot run timed out after %.1fs | user=%s", timeout, user_id)
            return self._failure(message, "timeout")
        except Exception:
            LOG.exception("PawsBot run failed | user=%s", user_id)
            return self._failure(message, "error")
        return {"success": True, **result}

    def _failure(self, message: str, reason: str) -> dict[str, Any]:
        urgent = mentions_emergency(message)
        result = {
            "success": False,
            "response": caller_fallback(message),
            "urgency": Urgency.CRITICAL.value if urgent else Urgency.LOW.value,
            "category": Category.EMERGENCY.value if urgent else Category.GENERAL.value,
            "needs_followup": False,
            "confidence": 0.0,
            "context": {"fallback": True, "error": reason},
            "timestamp": _now(),
        }
        if not self.include_confidence:
            result.pop("confidence")
        return result

    def cleanup(self, max_age_hours: float | None = None) -> int:
        """Evict conversation state idle longer than the retention window. Meant for a fixed timer."""
        hours = max_age_hours if max_age_hours is not None else get_retention_hours()
        return self.store.sweep(hours)

    def sweeper(self, interval_seconds: float | None = None) -> CleanupSweep:
        """Background sweep bound to this engine's store."""
        return CleanupSweep(self.store, interval_seconds=interval_seconds)

    async def assess_emergency(
        self,
        user_id: str,
        symptoms: str,
        pet_info: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        context = {"type": "emergency", "urgent": True}
        if pet_info:
            context["petInfo"] = pet_info
        result = await self.process_message(user_id, emergency_check_message(symptoms, pet_info), context)
        urgency = result["urgency"]
        return {
            "symptoms": symptoms,
            "assessment": result["response"],
            "urgency_level": urgency,
            "category": result["category"],
            "immediate_action": urgency in (Urgency.CRITICAL.value, Urgency.HIGH.value),
            "vet_recommended": urgency != Urgency.LOW.value,
            "confidence": result.get("confidence"),
            "timestamp": result["timestamp"],
        }

    async def summarize_answers(self, post_id: str, answers: list) -> dict[str, Any]:
        if not answers:
            raise ValueError("answers must be a non-empty list")
        result = await self.process_message(
            SUMMARIZER_USER_ID,
            summary_message(answers),
            {"type": "summary", "postId": post_id},
        )
        return {
            "post_id": post_id,
            "summary": result["response"],
            "answers_count": len(answers),
            "confidence": result.get("confidence"),
            "timestamp": result["timestamp"],
        }
