"""Runtime settings resolved from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_CONTROL_ACCOUNT = "1100"
DEFAULT_LOG_LEVEL = "WARNING"
SYSTEM_ACTOR = "SYSTEM"


@dataclass(frozen=True)
class Settings:
    """Settings shared by the CLI and the batch services."""

    db_path: Optional[str] = None
    database_url: Optional[str] = None
    control_account: str = DEFAULT_CONTROL_ACCOUNT
    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = False


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Settings instance; unset or blank variables fall back to defaults
    """
    if environ is None:
        environ = os.environ

    control_account = (environ.get("AUTOLEDGER_CONTROL_ACCOUNT") or "").strip()
    log_level = (environ.get("AUTOLEDGER_LOG_LEVEL") or "").strip().upper()

    return Settings(
        db_path=environ.get("AUTOLEDGER_DB_PATH") or None,
        database_url=environ.get("AUTOLEDGER_DATABASE_URL") or None,
        control_account=control_account or DEFAULT_CONTROL_ACCOUNT,
        log_level=log_level or DEFAULT_LOG_LEVEL,
        log_json=_flag(environ.get("AUTOLEDGER_LOG_JSON")),
    )
