"""
Centralized configuration for the account core.

- Frozen dataclass loaded from OS env; a .env file at the project root is
  read through python-dotenv first (existing env vars win).
- Validation in __post_init__.
- Immutable singleton via functools.lru_cache.
- Secrets never logged (masked).
"""

from __future__ import annotations

import functools
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, cast

from dotenv import load_dotenv

# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------
def _get_env_str(key: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    v = os.getenv(key, default)
    if required and (v is None or str(v).strip() == ""):
        raise ValueError(f"Missing required env var: {key}")
    return v


def _get_env_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v is None:
        return default
    v = v.strip().lower()
    return v in {"1", "true", "t", "yes", "y", "on"}


def _get_env_int(key: str, default: int) -> int:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    try:
        return int(v)
    except ValueError:
        raise ValueError(f"Env var {key} must be an integer") from None


def _validate_choice(value: str, *, choices: tuple[str, ...], key: str) -> str:
    if value not in choices:
        raise ValueError(f"{key} must be one of {choices}, got {value!r}")
    return value


def _validate_database_url(value: str, *, key: str) -> str:
    if not value.startswith(("postgresql+asyncpg://", "sqlite+aiosqlite://")):
        raise ValueError(f"{key} must start with postgresql+asyncpg:// or sqlite+aiosqlite://")
    return value


def _mask_dsn(value: str) -> str:
    # hide credentials between scheme and host
    return re.sub(r"//[^@/]+@", "//***@", value)


# ------------------------------------------------------------------------------
# Settings dataclass (immutable)
# ------------------------------------------------------------------------------
EnvName = Literal["local", "dev", "staging", "prod"]


@dataclass(frozen=True)
class Settings:
    # Environment
    environment: EnvName = "local"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./accounts.db"
    database_echo: bool = False
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Observability
    log_level: str = "INFO"
    log_json: bool = True

    # Credential hashing (Argon2id)
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536  # KiB
    argon2_parallelism: int = 4
    argon2_hash_len: int = 32

    def __post_init__(self) -> None:
        _validate_choice(self.environment, choices=("local", "dev", "staging", "prod"), key="ENVIRONMENT")
        _validate_database_url(self.database_url, key="DATABASE_URL")

        if self.database_pool_size <= 0:
            raise ValueError("DATABASE_POOL_SIZE must be > 0")
        if self.database_max_overflow < 0:
            raise ValueError("DATABASE_MAX_OVERFLOW must be >= 0")

        if not re.fullmatch(r"(?i)DEBUG|INFO|WARNING|ERROR|CRITICAL", self.log_level.strip()):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")

        # Argon2 parameter floor (RFC 9106: memory >= 8 * parallelism KiB)
        if self.argon2_time_cost < 1:
            raise ValueError("ARGON2_TIME_COST must be >= 1")
        if self.argon2_parallelism < 1:
            raise ValueError("ARGON2_PARALLELISM must be >= 1")
        if self.argon2_memory_cost < 8 * self.argon2_parallelism:
            raise ValueError("ARGON2_MEMORY_COST must be >= 8 * ARGON2_PARALLELISM")
        if self.argon2_hash_len < 16:
            raise ValueError("ARGON2_HASH_LEN must be >= 16")

    @property
    def is_prod(self) -> bool:
        return self.environment == "prod"

    # Safe dict (for debug prints without secrets)
    def safe_dict(self) -> dict:
        return {
            "environment": self.environment,
            "debug": self.debug,
            "database_url": _mask_dsn(self.database_url),
            "database_echo": self.database_echo,
            "database_pool_size": self.database_pool_size,
            "database_max_overflow": self.database_max_overflow,
            "log_level": self.log_level,
            "log_json": self.log_json,
            "argon2_time_cost": self.argon2_time_cost,
            "argon2_memory_cost": self.argon2_memory_cost,
            "argon2_parallelism": self.argon2_parallelism,
            "argon2_hash_len": self.argon2_hash_len,
        }


# ------------------------------------------------------------------------------
# Loader (singleton)
# ------------------------------------------------------------------------------
def load_settings() -> Settings:
    """Build Settings from the current environment (no caching)."""
    return Settings(
        environment=cast(EnvName, _get_env_str("ENVIRONMENT", "local") or "local"),
        debug=_get_env_bool("DEBUG", False),
        database_url=_get_env_str("DATABASE_URL", Settings.database_url) or Settings.database_url,
        database_echo=_get_env_bool("DATABASE_ECHO", False),
        database_pool_size=_get_env_int("DATABASE_POOL_SIZE", 5),
        database_max_overflow=_get_env_int("DATABASE_MAX_OVERFLOW", 10),
        log_level=_get_env_str("LOG_LEVEL", "INFO") or "INFO",
        log_json=_get_env_bool("LOG_JSON", True),
        argon2_time_cost=_get_env_int("ARGON2_TIME_COST", 3),
        argon2_memory_cost=_get_env_int("ARGON2_MEMORY_COST", 65536),
        argon2_parallelism=_get_env_int("ARGON2_PARALLELISM", 4),
        argon2_hash_len=_get_env_int("ARGON2_HASH_LEN", 32),
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    # .env at repo root (../../.env relative to src/shared/)
    env_file = Path(__file__).resolve().parents[2] / ".env"
    if env_file.exists():
        load_dotenv(dotenv_path=str(env_file), override=False)
    return load_settings()
