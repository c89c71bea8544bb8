"""Settings loaded from environment variables.

One ``Settings`` object is shared by the server and the board client. Every
variable is optional; unset or malformed values fall back to the defaults
below.
"""

import os
from dataclasses import dataclass, field

ENV_PREFIX = "TODO_BOARD"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5002
DEFAULT_API_URL = f"http://localhost:{DEFAULT_PORT}/api"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    reload: bool = False
    api_url: str = DEFAULT_API_URL
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    seed: bool = True
    log_level: str = "INFO"
    http_timeout: float = 5.0

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=_env(_k("HOST"), DEFAULT_HOST),
            port=_env_int(_k("PORT"), DEFAULT_PORT),
            reload=_env_bool(_k("RELOAD"), False),
            api_url=_env(_k("API_URL"), DEFAULT_API_URL).rstrip("/"),
            cors_origins=_env_list(_k("CORS_ORIGINS"), ["*"]),
            seed=_env_bool(_k("SEED"), True),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            http_timeout=_env_float(_k("HTTP_TIMEOUT"), 5.0),
        )


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings.from_env()
