from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from hilite.model.font import DEFAULT_SIZE

_ENV_PREFIX = "HILITE_"


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class HighlighterConfig:
    theme: str = "default"
    font_family: str | None = None  # None = Courier, then monospace
    font_size: float = DEFAULT_SIZE
    ignore_illegals: bool = False
    fast_render: bool = True
    theme_dir: str | None = None  # extra directory of *.css themes
    host: str = "127.0.0.1"
    port: int = 5000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> HighlighterConfig:
        """Build a config from ``HILITE_*`` variables, defaulting the rest."""
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}
        if f"{_ENV_PREFIX}THEME" in env:
            kwargs["theme"] = env[f"{_ENV_PREFIX}THEME"]
        if f"{_ENV_PREFIX}FONT" in env:
            kwargs["font_family"] = env[f"{_ENV_PREFIX}FONT"] or None
        if f"{_ENV_PREFIX}FONT_SIZE" in env:
            kwargs["font_size"] = float(env[f"{_ENV_PREFIX}FONT_SIZE"])
        if f"{_ENV_PREFIX}IGNORE_ILLEGALS" in env:
            kwargs["ignore_illegals"] = _env_bool(env[f"{_ENV_PREFIX}IGNORE_ILLEGALS"])
        if f"{_ENV_PREFIX}FAST_RENDER" in env:
            kwargs["fast_render"] = _env_bool(env[f"{_ENV_PREFIX}FAST_RENDER"])
        if f"{_ENV_PREFIX}THEME_DIR" in env:
            kwargs["theme_dir"] = env[f"{_ENV_PREFIX}THEME_DIR"] or None
        if f"{_ENV_PREFIX}HOST" in env:
            kwargs["host"] = env[f"{_ENV_PREFIX}HOST"]
        if f"{_ENV_PREFIX}PORT" in env:
            kwargs["port"] = int(env[f"{_ENV_PREFIX}PORT"])
        return cls(**kwargs)
