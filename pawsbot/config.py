"""Configuration: env-driven settings for the engine and the Gemini backend."""
import os

DEFAULT_MODEL = "gemini-2.5-flash-lite"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


def _env_float(name: str, default: float | None) -> float | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


def get_api_key() -> str:
    api_key = os.environ.get("GOOGLE_API_KEY") or os.environ.get("GEMINI_API_KEY")
    if not api_key:
        raise ValueError("Set GOOGLE_API_KEY or GEMINI_API_KEY in .env")
    return api_key


def has_api_key() -> bool:
    return bool(os.environ.get("GOOGLE_API_KEY") or os.environ.get("GEMINI_API_KEY"))


def get_model_name() -> str:
    return os.environ.get("GEMINI_MODEL", DEFAULT_MODEL)


def get_temperature() -> float:
    return _env_float("GEMINI_TEMPERATURE", 0.7)


def get_max_output_tokens() -> int:
    return _env_int("GEMINI_MAX_OUTPUT_TOKENS", 800)


def get_history_limit() -> int:
    """How many exchanges each user's history keeps (oldest dropped first)."""
    return _env_int("PAWSBOT_HISTORY_LIMIT", 10)


def get_context_turns() -> int:
    """How many recent exchanges the general handler quotes back to the model."""
    return _env_int("PAWSBOT_CONTEXT_TURNS", 2)


def get_retention_hours() -> float:
    return _env_float("PAWSBOT_RETENTION_HOURS", 24.0)


def get_sweep_interval_seconds() -> float:
    return _env_float("PAWSBOT_SWEEP_INTERVAL_SECONDS", 3600.0)


def get_run_timeout_seconds() -> float | None:
    """Caller-side timeout for a whole run. Unset means no timeout."""
    return _env_float("PAWSBOT_RUN_TIMEOUT_SECONDS", None)
