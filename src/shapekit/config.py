"""
Configuration for the shapekit validation engine.

Defines EngineSettings, a frozen dataclass carrying runtime configuration for
``validate``/``explain``. Defaults are sourced from shapekit.core.constants.

Precedence
- environment (SHAPEKIT_*) > TOML (./shapekit.toml or [tool.shapekit.engine] in
  ./pyproject.toml) > defaults.

Notes
- Settings are passed explicitly (``validate(d, v, settings=...)``); the engine never
  reads the environment on its own.
- Invalid values are ignored and the lower-precedence value is kept.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from shapekit.core.constants import MAX_DEPTH as CORE_MAX_DEPTH
from shapekit.core.log import get_logger

__all__ = ["EngineSettings"]

logger = get_logger(__name__)

_TRUE = {"1", "true", "t", "yes", "y", "on"}
_FALSE = {"0", "false", "f", "no", "n", "off"}


@dataclass(frozen=True)
class EngineSettings:
    """
    Runtime settings for the validation engine.

    Attributes:
        max_depth (int): Maximum nesting of descriptor checks per call (>= 1). Exceeding
            it raises RecursionLimitError. Every descriptor on the path counts, so an
            optional object field costs three levels (optional, its derived union, the
            object) and the default admits about 85 such levels. Values above
            ``shapekit.core.validate.depth_ceiling()`` (about 450 under the default
            interpreter recursion limit) are capped to it.
        collect_all (bool): When True, ``explain`` reports every failing location;
            when False it stops at the first.

    Examples:
        >>> from shapekit.config import EngineSettings
        >>> EngineSettings(max_depth=64)
        EngineSettings(max_depth=64, collect_all=True)
    """

    max_depth: int = CORE_MAX_DEPTH
    collect_all: bool = True

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"EngineSettings max_depth must be >= 1, got {self.max_depth}")

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: EngineSettings, cfg: dict[str, Any] | None) -> EngineSettings:
        """Apply a loose config mapping onto EngineSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "max_depth" in cfg:
            try:
                depth = int(cfg["max_depth"])
            except (TypeError, ValueError):
                logger.warning("ignoring non-integer max_depth: %r", cfg["max_depth"])
            else:
                if depth >= 1:
                    s = replace(s, max_depth=depth)
                else:
                    logger.warning("ignoring max_depth < 1: %r", depth)

        if "collect_all" in cfg:
            v = cfg["collect_all"]
            if isinstance(v, bool):
                s = replace(s, collect_all=v)
            elif isinstance(v, str) and v.strip().lower() in _TRUE | _FALSE:
                s = replace(s, collect_all=v.strip().lower() in _TRUE)
            else:
                logger.warning("ignoring unrecognized collect_all: %r", v)

        return s

    @classmethod
    def from_env(cls, base: EngineSettings | None = None, prefix: str = "SHAPEKIT_") -> EngineSettings:
        """
        Build EngineSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - SHAPEKIT_MAX_DEPTH
            - SHAPEKIT_COLLECT_ALL (1/0/true/false/yes/no/on/off)
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("max_depth", "collect_all"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> EngineSettings:
        """
        Build EngineSettings from a TOML file.

        Search order when `path` is None:
            1) ./shapekit.toml (with either an [engine] table or top-level keys)
            2) ./pyproject.toml under [tool.shapekit.engine]

        Returns defaults if no file is present or none carries engine settings.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "shapekit.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("skipping unreadable settings file %s: %s", p, exc)
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                section = tool.get("shapekit", {}) if isinstance(tool, dict) else {}
                cfg = section.get("engine") if isinstance(section, dict) else None
            else:
                engine = data.get("engine")
                cfg = engine if isinstance(engine, dict) else data
            if cfg:
                logger.debug("loaded engine settings from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> EngineSettings:
        """
        Load EngineSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (shapekit.toml, pyproject.toml).

        Returns:
            EngineSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
