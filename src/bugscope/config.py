import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    try:
        return float(raw) if raw.strip() else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw) if raw.strip() else default
    except ValueError:
        return default


LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "").upper()

# --- Provider calls ---
# Upper bound for a single provider round trip; keeps every dispatch finite.
REQUEST_TIMEOUT_S = _float_env("BUGSCOPE_REQUEST_TIMEOUT_S", 60.0)
MAX_OUTPUT_TOKENS = _int_env("BUGSCOPE_MAX_OUTPUT_TOKENS", 1024)
TEMPERATURE = _float_env("BUGSCOPE_TEMPERATURE", 0.7)
