"""
Shared fixtures for the Qt-free part of the lab (model + controller).

Run with:
    pytest -v
"""
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import pytest

from logitlab.controller.commands import LabController, LabEvent
from logitlab.model.dataset import DataGenerator
from logitlab.model.state import LabState


class RecordingSurface:
    """DrawingSurface that only remembers what it was asked to draw."""

    def __init__(self, width: int = 100, height: int = 60) -> None:
        self._width = width
        self._height = height
        self.calls: list[tuple] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self) -> None:
        self.calls.append(("clear",))

    def fill_rect(self, x, y, w, h, color) -> None:
        self.calls.append(("rect", x, y, w, h, color))

    def stroke_polyline(self, points, color, width=1.0, dash: Optional[Sequence[float]] = None, glow=0.0) -> None:
        self.calls.append(("polyline", np.asarray(points, dtype=np.float64), color, width, dash, glow))

    def fill_circle(self, cx, cy, radius, color, outline=None, outline_width=1.0, glow=0.0) -> None:
        self.calls.append(("circle", cx, cy, radius, color, outline, glow))

    def of_kind(self, kind: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def generator() -> DataGenerator:
    return DataGenerator(seed=1234)


@pytest.fixture
def state(generator: DataGenerator) -> LabState:
    return LabState(generator=generator)


@pytest.fixture
def controller(state: LabState) -> LabController:
    return LabController(state)


@pytest.fixture
def events(controller: LabController) -> list[LabEvent]:
    """Every LabEvent the controller emits, in order."""
    received: list[LabEvent] = []
    controller.subscribe(received.append)
    return received


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
