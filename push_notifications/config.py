"""Environment-variable configuration.

Every runtime knob is read from the process environment. Scripts may seed the
environment from a `.env` file first, but never override values already set.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class HttpSettings:
    host: str
    port: int
    push_path: str
    cors_origins: tuple[str, ...]


@dataclass(frozen=True)
class FcmSettings:
    credentials_path: str | None
    project_id: str | None
    base_url: str
    timeout_seconds: float


def load_http_settings() -> HttpSettings:
    port = int(env_float("HTTP_PORT", 8080))
    if port <= 0:
        raise RuntimeError("HTTP_PORT must be > 0")
    push_path = os.getenv("HTTP_PUSH_PATH", "/sendTestNotification").strip()
    if not push_path.startswith("/"):
        push_path = f"/{push_path}"
    return HttpSettings(
        host=os.getenv("HTTP_HOST", "0.0.0.0").strip(),
        port=port,
        push_path=push_path,
        cors_origins=tuple(env_csv("CORS_ORIGINS", default="*")),
    )


def load_fcm_settings() -> FcmSettings:
    timeout_seconds = env_float("FCM_TIMEOUT_SECONDS", 10.0)
    if timeout_seconds <= 0:
        raise RuntimeError("FCM_TIMEOUT_SECONDS must be > 0")
    return FcmSettings(
        credentials_path=optional_env("FIREBASE_CREDENTIALS_PATH"),
        project_id=optional_env("FIREBASE_PROJECT_ID"),
        base_url=os.getenv("FCM_API_BASE_URL", "https://fcm.googleapis.com").rstrip("/"),
        timeout_seconds=timeout_seconds,
    )


def optional_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"Invalid numeric value for {name}: {raw!r}") from exc


def env_csv(name: str, *, default: str = "") -> list[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_env_file(path: Path) -> None:
    """Seed `os.environ` from a simple KEY=VALUE file without overriding."""
    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        text = line.strip()
        if not text or text.startswith("#") or "=" not in text:
            continue
        key, value = text.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if value.startswith(("'", '"')) and value.endswith(("'", '"')) and len(value) >= 2:
            value = value[1:-1]
        os.environ.setdefault(key, value)
