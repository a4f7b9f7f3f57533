from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields, replace
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateTable:
    """Pricing and credit constants, all amounts in cents."""

    tragedy_base: int = 40000
    tragedy_threshold: int = 30
    tragedy_over_rate: int = 1000
    comedy_base: int = 30000
    comedy_threshold: int = 20
    comedy_over_flat: int = 10000
    comedy_over_rate: int = 500
    comedy_per_attendee: int = 300
    base_credit_threshold: int = 30
    comedy_extra_credit_divisor: int = 5

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"Rate '{item.name}' must be a non-negative integer, got {value!r}")
        if self.comedy_extra_credit_divisor == 0:
            raise ConfigError("Rate 'comedy_extra_credit_divisor' must be greater than zero")

    def as_dict(self) -> Dict[str, int]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


DEFAULT_RATES = RateTable()


@dataclass(frozen=True)
class Config:
    rates: RateTable = field(default_factory=RateTable)
    log_level: str = "WARNING"


_ENV_PREFIX = "THEATER_"
_RATE_FIELDS = tuple(item.name for item in fields(RateTable))
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _find_pyproject(start_dir: Path) -> Path | None:
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / "pyproject.toml"
        if candidate.exists():
            return candidate
    return None


def _load_toml(path: Path) -> Dict[str, Any]:
    try:
        import tomllib  # py311+
    except ModuleNotFoundError:
        import tomli as tomllib

    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _to_rate(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"Rate '{name}' must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ConfigError(f"Rate '{name}' must be an integer, got {value!r}")


def _from_sources(raw: Dict[str, Any]) -> Config:
    raw_rates = raw.get("rates", {})
    if not isinstance(raw_rates, dict):
        raise ConfigError("[tool.theater.rates] must be a table")

    unknown = sorted(set(raw_rates) - set(_RATE_FIELDS))
    if unknown:
        logger.warning("Ignoring unknown rate keys in configuration: %s", ", ".join(unknown))

    overrides: Dict[str, int] = {}
    for name in _RATE_FIELDS:
        value = os.getenv(f"{_ENV_PREFIX}{name.upper()}", raw_rates.get(name))
        if value is not None:
            overrides[name] = _to_rate(name, value)

    log_level = str(os.getenv(f"{_ENV_PREFIX}LOG_LEVEL", raw.get("log_level", "WARNING"))).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"Unsupported log level: {log_level}")

    return Config(
        rates=replace(DEFAULT_RATES, **overrides),
        log_level=log_level,
    )


@lru_cache(maxsize=32)
def load_config(start_dir: str | os.PathLike[str] | None = None) -> Config:
    root = Path(start_dir or os.getcwd()).resolve()
    pyproject = _find_pyproject(root)
    if pyproject is None:
        return _from_sources({})

    parsed = _load_toml(pyproject)
    tool = parsed.get("tool", {}) if isinstance(parsed, dict) else {}
    theater = tool.get("theater", {}) if isinstance(tool, dict) else {}
    logger.debug("Loaded configuration from %s", pyproject)
    return _from_sources(theater if isinstance(theater, dict) else {})


def get_config() -> Config:
    return load_config(os.getcwd())


def refresh_config(start_dir: str | os.PathLike[str] | None = None) -> Config:
    load_config.cache_clear()
    return load_config(start_dir)
