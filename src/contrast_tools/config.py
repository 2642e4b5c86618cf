"""Configuration helpers for contrast tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional
import os
try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11 fallback
    import tomli as tomllib  # type: ignore[assignment]

from dotenv import load_dotenv

from .correction import MAX_SEARCH_STEPS, SATURATION_DAMPING_EXPONENT


DEFAULT_CONFIG_PATH = Path("config.toml")
DEFAULT_ENV_PATH = Path(".env")


@dataclass(slots=True)
class CorrectionConfig:
    """Tuning for the lightness search."""

    max_steps: int = MAX_SEARCH_STEPS
    damping_exponent: int = SATURATION_DAMPING_EXPONENT


@dataclass(slots=True)
class Config:
    """Application configuration."""

    background: str = "#0e0c13"
    contrast: float = 7.0
    background_env: str = "CONTRAST_BACKGROUND"
    contrast_env: str = "CONTRAST_RATIO"
    correction: CorrectionConfig = field(default_factory=CorrectionConfig)

    def get_background(self) -> str:
        return os.environ.get(self.background_env) or self.background

    def get_contrast(self) -> float:
        value = os.environ.get(self.contrast_env)
        return float(value) if value else self.contrast


def _load_dict(path: Path) -> Dict[str, object]:
    if not path.exists():
        return {}
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _integer(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def load_config(path: Optional[Path] = None, env_path: Optional[Path] = None) -> Config:
    """Load configuration from disk, falling back to defaults."""

    env_file = env_path or DEFAULT_ENV_PATH
    if env_file:
        load_dotenv(env_file)

    config_path = path or DEFAULT_CONFIG_PATH
    raw = _load_dict(config_path)

    correction_raw = raw.get("correction", {}) if isinstance(raw, dict) else {}

    default_correction = CorrectionConfig()
    correction = CorrectionConfig(
        max_steps=_integer(
            correction_raw.get("max_steps", default_correction.max_steps), "max_steps"
        ),
        damping_exponent=_integer(
            correction_raw.get("damping_exponent", default_correction.damping_exponent),
            "damping_exponent",
        ),
    )

    defaults = Config()

    return Config(
        background=str(raw.get("background", defaults.background)),
        contrast=float(raw.get("contrast", defaults.contrast)),
        background_env=str(raw.get("background_env", defaults.background_env)),
        contrast_env=str(raw.get("contrast_env", defaults.contrast_env)),
        correction=correction,
    )
