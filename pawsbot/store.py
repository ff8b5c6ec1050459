"""In-memory per-user conversation state, plus the periodic sweep that evicts stale users."""
import asyncio
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from pawsbot.config import get_history_limit, get_retention_hours, get_sweep_interval_seconds
from pawsbot.log_config import LOG, log_sweep


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass
class Exchange:
    user_message: str
    bot_response: str
    category: str
    urgency: str
    timestamp: datetime = field(default_factory=_now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_message": self.user_message,
            "bot_response": self.bot_response,
            "category": self.category,
            "urgency": self.urgency,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class ConversationState:
    user_id: str
    history: list[Exchange] = field(default_factory=list)
    context: dict[str, Any] = field(default_factory=dict)
    last_interaction: datetime = field(default_factory=_now)


class ConversationStore:
    """Owns every user's ConversationState.

    One lock guards the map and the states in it. All methods are synchronous and
    never await while holding the lock, so the store is safe to share between the
    engine and the sweep on one event loop or across threads.
    """

    def __init__(self, history_limit: int | None = None):
        self.history_limit = history_limit if history_limit is not None else get_history_limit()
        self._states: dict[str, ConversationState] = {}
        self._lock = threading.Lock()

    def _get_or_create(self, user_id: str) -> ConversationState:
        # Caller holds the lock.
        state = self._states.get(user_id)
        if state is None:
            state = ConversationState(user_id=user_id)
            self._states[user_id] = state
        return state

    def get(self, user_id: str) -> ConversationState:
        """Return the user's state, creating an empty one on first access."""
        with self._lock:
            return self._get_or_create(user_id)

    def peek(self, user_id: str) -> ConversationState | None:
        with self._lock:
            return self._states.get(user_id)

    def snapshot(self, user_id: str) -> tuple[list[Exchange], dict[str, Any]]:
        """Copies of the user's history and context for one graph run."""
        with self._lock:
            state = self._get_or_create(user_id)
            return list(state.history), dict(state.context)

    def update(self, user_id: str, exchange: Exchange, context: dict[str, Any] | None = None) -> ConversationState:
        """Append an exchange (keeping the most recent `history_limit`), merge context, touch the state."""
        with self._lock:
            state = self._get_or_create(user_id)
            state.history.append(exchange)
            if len(state.history) > self.history_limit:
                state.history = state.history[-self.history_limit:]
            if context:
                state.context = {**state.context, **context}
            state.last_interaction = _now()
            return state

    def remove(self, user_id: str) -> bool:
        with self._lock:
            return self._states.pop(user_id, None) is not None

    def sweep(self, max_age_hours: float = 24) -> int:
        """Evict states whose last interaction is older than `max_age_hours`. Returns the count removed."""
        cutoff = _now() - timedelta(hours=max_age_hours)
        with self._lock:
            stale = [uid for uid, s in self._states.items() if s.last_interaction < cutoff]
            for uid in stale:
                del self._states[uid]
            remaining = len(self._states)
        log_sweep(len(stale), remaining)
        return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._states


class CleanupSweep:
    """Background asyncio task calling `store.sweep()` every `interval_seconds`."""

    def __init__(
        self,
        store: ConversationStore,
        interval_seconds: float | None = None,
        max_age_hours: float | None = None,
    ):
        self.store = store
        self.interval_seconds = interval_seconds if interval_seconds is not None else get_sweep_interval_seconds()
        self.max_age_hours = max_age_hours if max_age_hours is not None else get_retention_hours()
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._loop(), name="pawsbot-cleanup-sweep")

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                self.store.sweep(self.max_age_hours)
            except Exception:
                LOG.exception("Sweep failed; will retry next interval")

    async def __aenter__(self) -> "CleanupSweep":
        self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.stop()
