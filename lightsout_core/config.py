from __future__ import annotations

import math
import os
from dataclasses import dataclass

DEFAULT_NROWS = 5
DEFAULT_NCOLS = 5
DEFAULT_CHANCE = 0.30
# How long the browser keeps the win celebration on screen.
DEFAULT_CELEBRATION_MS = 3000
# Web requests beyond this many rows or columns are refused.
DEFAULT_MAX_DIM = 50


class InvalidConfig(ValueError):
    """Raised when grid dimensions or the starting-light probability are out of range."""


@dataclass(frozen=True)
class GridConfig:
    """Fixed parameters of one game session: shape and how likely a light starts on."""
    nrows: int = DEFAULT_NROWS
    ncols: int = DEFAULT_NCOLS
    chance_light_starts_on: float = DEFAULT_CHANCE

    def validate(self) -> 'GridConfig':
        for name in ("nrows", "ncols"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfig(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidConfig(f"{name} must be positive, got {value}")
        p = self.chance_light_starts_on
        if isinstance(p, bool) or not isinstance(p, (int, float)) or math.isnan(p):
            raise InvalidConfig(f"chance_light_starts_on must be a number, got {p!r}")
        if not 0.0 <= p <= 1.0:
            raise InvalidConfig(f"chance_light_starts_on must be within [0, 1], got {p}")
        return self


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfig(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidConfig(f"{name} must be a number, got {raw!r}") from None


def default_config() -> GridConfig:
    """GridConfig from LIGHTSOUT_NROWS / LIGHTSOUT_NCOLS / LIGHTSOUT_CHANCE, falling back to 5x5 at 0.30."""
    return GridConfig(
        nrows=_env_int("LIGHTSOUT_NROWS", DEFAULT_NROWS),
        ncols=_env_int("LIGHTSOUT_NCOLS", DEFAULT_NCOLS),
        chance_light_starts_on=_env_float("LIGHTSOUT_CHANCE", DEFAULT_CHANCE),
    ).validate()


def celebration_ms() -> int:
    ms = _env_int("LIGHTSOUT_CELEBRATION_MS", DEFAULT_CELEBRATION_MS)
    if ms < 0:
        raise InvalidConfig(f"LIGHTSOUT_CELEBRATION_MS must not be negative, got {ms}")
    return ms


def max_dim() -> int:
    """Largest row or column count the web API will deal or accept (LIGHTSOUT_MAX_DIM)."""
    n = _env_int("LIGHTSOUT_MAX_DIM", DEFAULT_MAX_DIM)
    if n <= 0:
        raise InvalidConfig(f"LIGHTSOUT_MAX_DIM must be positive, got {n}")
    return n
