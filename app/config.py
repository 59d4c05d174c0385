import os
from dataclasses import dataclass
from typing import List, Mapping, Optional
from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when a required setting is missing or malformed."""


def load_env_files():
    # load_dotenv never overrides, so config.env wins over .env
    load_dotenv("config.env")
    load_dotenv()


def _required(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if value is None:
        raise ConfigError(f"Missing required setting {name}")
    return value


def _int(env: Mapping[str, str], name: str, default: Optional[int] = None, positive: bool = False) -> int:
    raw = env.get(name)
    if raw is None:
        if default is None:
            raise ConfigError(f"Missing required setting {name}")
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")
    if positive and value <= 0:
        raise ConfigError(f"{name} must be greater than zero, got {value}")
    return value


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    CORS_ALLOW_ORIGIN: str
    APP_PORT: int
    RATE_LIMIT: int
    TIME_LIMIT: int
    REDIS_HOST: str
    REDIS_PORT: int
    REDIS_PASSWORD: str

    APP_HOST: str = "0.0.0.0"
    BMI_CACHE_TTL: int = 500
    CACHE_REQUIRED: bool = True
    RATE_LIMIT_STORAGE_URI: str = "memory://"

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ALLOW_ORIGIN.split(",") if origin.strip()]

    @property
    def rate_limit_expression(self) -> str:
        """Limit string in the `limits` notation, e.g. "10 per 60 seconds"."""
        return f"{self.RATE_LIMIT} per {self.TIME_LIMIT} seconds"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        if env is None:
            load_env_files()
            env = os.environ

        return cls(
            CORS_ALLOW_ORIGIN=_required(env, "CORS_ALLOW_ORIGIN"),
            APP_PORT=_int(env, "APP_PORT"),
            RATE_LIMIT=_int(env, "RATE_LIMIT", positive=True),
            TIME_LIMIT=_int(env, "TIME_LIMIT", positive=True),
            REDIS_HOST=_required(env, "REDIS_HOST"),
            REDIS_PORT=_int(env, "REDIS_PORT"),
            REDIS_PASSWORD=_required(env, "REDIS_PASSWORD"),
            APP_HOST=env.get("APP_HOST", "0.0.0.0"),
            BMI_CACHE_TTL=_int(env, "BMI_CACHE_TTL", default=500, positive=True),
            CACHE_REQUIRED=_bool(env, "CACHE_REQUIRED", default=True),
            RATE_LIMIT_STORAGE_URI=env.get("RATE_LIMIT_STORAGE_URI", "memory://"),
        )
