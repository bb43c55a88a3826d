"""Planner configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    """Read a float override, rejecting values that do not parse."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}.") from exc


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}.") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "debtpath"
    LOG_FILENAME = "debtpath.log"
    HORIZON_MONTHS = 60
    MIN_EXTRA_MONTHS = 12
    HIGH_INTEREST_THRESHOLD = 40.0
    SMALL_BALANCE_THRESHOLD = 5000.0
    LOCALE = "en"
    CURRENCY = "MXN"

    def __init__(self) -> None:
        self.DEV_MODE = _env_bool("DEBTPATH_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()
        self.LOCALE = os.getenv("DEBTPATH_LOCALE", self.LOCALE).strip().lower() or "en"
        self.CURRENCY = os.getenv("DEBTPATH_CURRENCY", self.CURRENCY).strip().upper()
        self.HORIZON_MONTHS = _env_int("DEBTPATH_HORIZON_MONTHS", self.HORIZON_MONTHS)
        self.MIN_EXTRA_MONTHS = _env_int("DEBTPATH_MIN_EXTRA_MONTHS", self.MIN_EXTRA_MONTHS)
        self.HIGH_INTEREST_THRESHOLD = _env_float(
            "DEBTPATH_HIGH_INTEREST_THRESHOLD", self.HIGH_INTEREST_THRESHOLD
        )
        self.SMALL_BALANCE_THRESHOLD = _env_float(
            "DEBTPATH_SMALL_BALANCE_THRESHOLD", self.SMALL_BALANCE_THRESHOLD
        )
        if self.HORIZON_MONTHS < 0 or self.MIN_EXTRA_MONTHS < 0:
            raise ValueError("DEBTPATH_HORIZON_MONTHS and DEBTPATH_MIN_EXTRA_MONTHS must be >= 0.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live.

        The directory is not created here; ``setup_logging`` creates it on demand.
        """

        data_root = os.getenv("DEBTPATH_DATA_DIR", "instance")
        return Path(data_root).expanduser().resolve()


class DevConfig(BaseConfig):
    """Development configuration with verbose console logging."""

    def __init__(self) -> None:
        super().__init__()
        # Always dev mode, whatever DEBTPATH_DEV_MODE says
        self.DEV_MODE = True
