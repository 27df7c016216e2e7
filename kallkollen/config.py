"""Runtime settings read from the environment (and `.env` via python-dotenv in app.py)."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_IMPULSE_DELAY = 6.0


def default_state_file() -> Path:
    """Where the participant name is remembered between sessions."""
    return Path.home() / ".kallkollen" / "state.json"


def _env_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_float(value: Optional[str], default: float) -> float:
    try:
        parsed = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return parsed if parsed >= 0 else default


@dataclass(frozen=True)
class Settings:
    """Configuration for one app process."""

    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_MODEL
    state_file: Path = Path(".kallkollen-state.json")
    impulse_delay: float = DEFAULT_IMPULSE_DELAY
    strict: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        state_file = env.get("KALLKOLLEN_STATE_FILE", "").strip()
        return cls(
            gemini_api_key=env.get("GEMINI_API_KEY", "").strip(),
            gemini_model=env.get("GEMINI_MODEL", "").strip() or DEFAULT_MODEL,
            state_file=Path(state_file).expanduser() if state_file else default_state_file(),
            impulse_delay=_env_float(env.get("KALLKOLLEN_IMPULSE_DELAY"), DEFAULT_IMPULSE_DELAY),
            strict=_env_bool(env.get("KALLKOLLEN_STRICT")),
            log_level=(env.get("KALLKOLLEN_LOG_LEVEL", "").strip() or "INFO").upper(),
        )
