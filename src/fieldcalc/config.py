"""
Configuration
=============
Central registry for the demo inputs and the logging settings.

Exports:
    DEMO_INPUTS (DemoInputs): Component values, source strengths and the
        evaluation distance used by ``fieldcalc.main``.
    LOG_LEVEL_ENV (str): Environment variable read by ``get_log_level``.
    LOG_FILE_ENV (str): Environment variable read by ``get_log_file``.
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

Components = Tuple[float, float, float]

LOG_LEVEL_ENV: str = "FIELDCALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL: int = logging.WARNING
LOG_FILE_ENV: str = "FIELDCALC_LOG_FILE"


@dataclass(frozen=True)
class DemoInputs:
    electric_1: Components = (0.0, 1e5, 1e3)
    electric_2: Components = (1e4, 2e5, 3e3)
    magnetic_1: Components = (0.0, 2.0, 1.0)
    magnetic_2: Components = (3.0, 1.0, 4.0)
    charge: float = 1e-6  # C
    current: float = 10.0  # A
    distance: float = 0.1  # m


def get_log_level() -> int:
    """
    Level named by $FIELDCALC_LOG_LEVEL (e.g. 'DEBUG'), WARNING if unset or unknown.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return DEFAULT_LOG_LEVEL
    return level


def get_log_file() -> Optional[str]:
    """Path named by $FIELDCALC_LOG_FILE, or None to log to stderr only."""
    path = os.environ.get(LOG_FILE_ENV, "").strip()
    return path or None


DEMO_INPUTS: DemoInputs = DemoInputs()
