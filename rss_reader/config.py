from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

__version__ = "0.1.0"

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = f"rss-reader/{__version__}"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    timeout_sec: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    escape_html: bool = True
    log_level: str = "WARNING"


def _as_bool(name: str, raw: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def load_settings(env: Optional[Mapping[str, str]] = None, *, dotenv: bool = True) -> Settings:
    """
    Build Settings from environment variables.

    Reads a .env file first (existing variables win) unless `dotenv` is False.
    Pass `env` to read from a mapping instead of os.environ.
    """
    if dotenv and env is None:
        load_dotenv()
    source = os.environ if env is None else env

    timeout = DEFAULT_TIMEOUT
    raw = source.get("RSS_READER_TIMEOUT")
    if raw:
        try:
            timeout = float(raw)
        except ValueError as e:
            raise ValueError(f"RSS_READER_TIMEOUT must be a number, got {raw!r}") from e
        if timeout <= 0:
            raise ValueError("RSS_READER_TIMEOUT must be positive")

    escape = True
    raw = source.get("RSS_READER_ESCAPE_HTML")
    if raw:
        escape = _as_bool("RSS_READER_ESCAPE_HTML", raw)

    return Settings(
        timeout_sec=timeout,
        user_agent=source.get("RSS_READER_USER_AGENT") or DEFAULT_USER_AGENT,
        escape_html=escape,
        log_level=(source.get("RSS_READER_LOG_LEVEL") or "WARNING").upper(),
    )
