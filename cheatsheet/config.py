from __future__ import annotations

from dataclasses import dataclass
import os


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    content_dir: str
    build_id: str
    run_validation: bool
    min_content_chars: int
    log_level: str
    audit_report_path: str


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw!r})")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer (got {raw!r})") from None


def get_settings() -> Settings:
    build_id = os.getenv("BUILD_ID", "dev").strip() or "dev"
    return Settings(
        content_dir=os.getenv("CONTENT_DIR", "content"),
        build_id=build_id,
        # Validation defaults to on for dev builds only; RUN_VALIDATION overrides either way.
        run_validation=_env_bool("RUN_VALIDATION", build_id == "dev"),
        min_content_chars=_env_int("MIN_CONTENT_CHARS", 50),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        audit_report_path=os.getenv("AUDIT_REPORT_PATH", "reports/kb_audit.md"),
    )
