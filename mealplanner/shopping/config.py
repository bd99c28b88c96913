"""TOML configuration loader for the shopping module."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .aisles import default_aisle_labels

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class DisplayConfig:
    currency: str = "$CA"
    show_checked: bool = True
    # category code → aisle header
    aisle_labels: dict[str, str] = field(default_factory=default_aisle_labels)


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class ShoppingConfig:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> ShoppingConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The log level can be overridden via MEALPLANNER_LOG_LEVEL.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    dsp = raw.get("display", {})
    lg = raw.get("logging", {})

    # Merge custom aisle labels with defaults
    aisle_labels = {**default_aisle_labels(), **dsp.get("aisle_labels", {})}

    # Resolve log level: config file → environment variable
    level = lg.get("level", "") or os.environ.get("MEALPLANNER_LOG_LEVEL", "")

    return ShoppingConfig(
        display=DisplayConfig(
            currency=dsp.get("currency", "$CA"),
            show_checked=dsp.get("show_checked", True),
            aisle_labels=aisle_labels,
        ),
        logging=LoggingConfig(level=str(level or "WARNING").upper()),
    )
