"""Structured logging for node steps, generation timings and fallbacks."""
import logging
import sys

LOG = logging.getLogger("pawsbot")

def setup_logging(level: int = logging.DEBUG) -> None:
    """Configure pawsbot logger to stderr with timestamps."""
    if LOG.handlers:
        return
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)-5s %(message)s", datefmt="%H:%M:%S"))
    LOG.addHandler(h)
    LOG.setLevel(level)

def log_node_step(node: str, detail: str = "") -> None:
    setup_logging()
    LOG.debug("Node | %s%s", node, f" | {detail}" if detail else "")

def log_classification(category: str, urgency: str, confidence: float) -> None:
    setup_logging()
    LOG.info("Classified | category=%s | urgency=%s | confidence=%.2f", category, urgency, confidence)

def log_generation(model: str, api_time_s: float) -> None:
    setup_logging()
    LOG.info("Generation | model=%s | api_time=%.2fs", model, api_time_s)

def log_fallback(category: str, error) -> None:
    setup_logging()
    LOG.warning("Fallback [%s] | error=%s", category, str(error)[:300] if error else "(none)")

def log_reply(source: str, content) -> None:
    setup_logging()
    s = str(content)[:300] if content else "(empty)"
    LOG.info("Reply [%s] | %s", source, s)

def log_turn(user_id: str, cycle_time_s: float, category: str) -> None:
    setup_logging()
    LOG.info("Turn | user=%s | category=%s | cycle_time=%.2fs", user_id, category, cycle_time_s)

def log_sweep(removed: int, remaining: int) -> None:
    setup_logging()
    LOG.info("Sweep | removed=%d | remaining=%d", removed, remaining)

def log_session_summary(turn_count: int, avg_cycle_s: float) -> None:
    setup_logging()
    LOG.info("Session end | turns=%d | avg_cycle_time=%.2fs", turn_count, avg_cycle_s)
