"""
Configuration & Global Constants
================================
This module serves as the central registry for tunable constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps the magic numbers of the lab (cluster rectangles,
   learning rate, frame pacing, colours) out of the math and widget code.
2. Environment: It reads the few settings that may be overridden at launch
   (log level, log file, dataset seed) exactly once.

Exports:
    LOG_LEVEL (int): Logging level for the 'logitlab' logger.
    LOG_FILE (str | None): Optional path of a log file.
    DATA_SEED (int | None): Optional seed for the dataset generator.
"""
from __future__ import annotations

import logging
import os
from typing import Optional


def _env_log_level(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    if isinstance(level, int):
        return level
    print(f"WARNING: Unknown log level '{raw}' in {name}, using default.")
    return default


def _env_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        print(f"WARNING: {name} must be an integer, got '{raw}'. Ignoring.")
        return None


# --- Environment overrides ---
LOG_LEVEL: int = _env_log_level("LOGITLAB_LOG_LEVEL", logging.INFO)
LOG_FILE: Optional[str] = os.environ.get("LOGITLAB_LOG_FILE") or None
DATA_SEED: Optional[int] = _env_int("LOGITLAB_SEED")

# --- Dataset ---
NUM_POINTS: int = 60
# (x_min, x_max, y_min, y_max) in unit-square coordinates, upper bounds open
NEGATIVE_CLUSTER: tuple[float, float, float, float] = (0.2, 0.5, 0.6, 0.9)
POSITIVE_CLUSTER: tuple[float, float, float, float] = (0.5, 0.8, 0.1, 0.4)

# --- Model ---
FEATURE_SCALE: float = 10.0  # [0, 1] -> [-5, 5]
LOGIT_CLAMP: float = 40.0
DEFAULT_W1: float = 1.0
DEFAULT_W2: float = 1.0
DEFAULT_BIAS: float = 0.0

# --- Optimizer ---
LEARNING_RATE: float = 0.5
EPOCHS: int = 50
STEP_DELAY_MS: int = 20

# --- Rendering ---
FRAME_INTERVAL_MS: int = 16
HEATMAP_RESOLUTION: int = 20  # px per heatmap cell
BOUNDARY_STEP: float = 0.1  # sampling step in normalized units
SIGMOID_PANEL_HEIGHT: int = 120
POINT_RADIUS: float = 6.0

BOUNDARY_COLOR: str = "#00ff88"
POSITIVE_COLOR: str = "#00d4ff"
NEGATIVE_COLOR: str = "#ff4757"
BACKGROUND_COLOR: str = "#0f1220"

# --- Controls ---
SLIDER_MIN: float = -10.0
SLIDER_MAX: float = 10.0
SLIDER_STEP: float = 0.1
WRONG_ANSWER_LOCK_MS: int = 2000
