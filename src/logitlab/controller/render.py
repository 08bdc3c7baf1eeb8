"""
Render Coordinator
==================
Turns the lab state into drawing commands, once per frame.

Why is this file needed?
------------------------
1. Separation: The widgets only know how to paint primitives; this module
   knows WHAT to paint (heatmap, boundary, points, sigmoid curve).
2. Testability: It talks to an abstract DrawingSurface, so the whole frame
   can be checked against a recording surface without a display.

The only coordinate math here is the affine scale from unit-square data
coordinates to device pixels (x * width, y * height).
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence, Union, TYPE_CHECKING

import numpy as np

from logitlab import config
from logitlab.controller.geometry import BoundaryGeometry
from logitlab.model.classifier import sigmoid

if TYPE_CHECKING:
    import numpy.typing as npt
    from logitlab.model.state import LabState

logger = logging.getLogger(__name__)

# Either a hex string or (red, green, blue, alpha) with alpha in [0, 1]
Color = Union[str, tuple[int, int, int, float]]
PointList = Union[Sequence[tuple[float, float]], "npt.NDArray[np.float64]"]

AXIS_COLOR: Color = (255, 255, 255, 0.1)
OUTLINE_COLOR: Color = "#ffffff"


class DrawingSurface(Protocol):
    """The few primitives the coordinator needs from a canvas."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def clear(self) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def stroke_polyline(
        self,
        points: PointList,
        color: Color,
        width: float = 1.0,
        dash: Optional[Sequence[float]] = None,
        glow: float = 0.0,
    ) -> None: ...

    def fill_circle(
        self,
        cx: float,
        cy: float,
        radius: float,
        color: Color,
        outline: Optional[Color] = None,
        outline_width: float = 1.0,
        glow: float = 0.0,
    ) -> None: ...


def heatmap_color(prob: float) -> tuple[int, int, int, float]:
    """Red for label 0, blue for label 1, always faint."""
    blue = int(np.floor(prob * 150))
    red = int(np.floor((1 - prob) * 150))
    return red, int(blue * 0.5), blue, 0.2


class RenderCoordinator:
    """
    Paints the main canvas and the sigmoid panel from a LabState.

    Args:
        state: The lab state, read on every call.
        geometry: Boundary sampler; a default one is created if omitted.
        resolution: Heatmap cell size in device pixels.
    """

    def __init__(
        self,
        state: LabState,
        geometry: Optional[BoundaryGeometry] = None,
        resolution: int = config.HEATMAP_RESOLUTION,
    ) -> None:
        if resolution <= 0:
            raise ValueError(f"'resolution' must be positive, got {resolution}.")
        self.state = state
        self.geometry = geometry if geometry is not None else BoundaryGeometry()
        self.resolution = resolution

    # ------------------------------------------------------------------
    # Main canvas
    # ------------------------------------------------------------------

    def render_main(self, surface: DrawingSurface) -> None:
        """Heatmap first, then the boundary, then the points on top."""
        surface.clear()
        if surface.width <= 0 or surface.height <= 0:
            return
        self.draw_heatmap(surface)
        self.draw_boundary(surface)
        self.draw_points(surface)

    def draw_heatmap(self, surface: DrawingSurface) -> None:
        w, h, res = surface.width, surface.height, self.resolution
        xs = np.arange(0, w, res, dtype=np.float64)
        ys = np.arange(0, h, res, dtype=np.float64)
        if xs.size == 0 or ys.size == 0:
            return

        # Probability sampled at the top-left corner of every cell
        gx, gy = np.meshgrid(xs, ys, indexing="ij")
        prob = self.state.classifier.probability(gx / w, gy / h)

        for i, x in enumerate(xs):
            for j, y in enumerate(ys):
                surface.fill_rect(float(x), float(y), res, res, heatmap_color(float(prob[i, j])))

    def draw_boundary(self, surface: DrawingSurface) -> None:
        w, h = surface.width, surface.height
        for polyline in self.geometry.compute(self.state.parameters):
            device = self.geometry.to_device(polyline, w, h)
            device = device[np.all(np.isfinite(device), axis=1)]
            if len(device) < 2:
                continue
            surface.stroke_polyline(
                device,
                config.BOUNDARY_COLOR,
                width=3.0,
                dash=(10.0, 5.0),
                glow=15.0,
            )

    def draw_points(self, surface: DrawingSurface) -> None:
        w, h = surface.width, surface.height
        for point in self.state.dataset:
            color = config.POSITIVE_COLOR if point.label == 1 else config.NEGATIVE_COLOR
            surface.fill_circle(
                point.x * w,
                point.y * h,
                config.POINT_RADIUS,
                color,
                outline=OUTLINE_COLOR,
                outline_width=1.0,
                glow=10.0,
            )

    # ------------------------------------------------------------------
    # Sigmoid panel
    # ------------------------------------------------------------------

    def demo_logit(self) -> float:
        """
        Stand-in logit shown as the marker on the sigmoid curve.

        It is not tied to any data point; it just moves with the sliders.
        """
        w1, w2, b = self.state.parameters.as_tuple()
        return (w1 + w2) / 2 + b

    def render_sigmoid(self, surface: DrawingSurface) -> None:
        surface.clear()
        sw, sh = surface.width, surface.height
        if sw <= 0 or sh <= 0:
            return

        # Axes crossing at z = 0, p = 0.5
        surface.stroke_polyline([(0.0, sh / 2), (float(sw), sh / 2)], AXIS_COLOR, width=1.0)
        surface.stroke_polyline([(sw / 2, 0.0), (sw / 2, float(sh))], AXIS_COLOR, width=1.0)

        # One vertex per pixel column, z from -5 to 5 across the panel
        px = np.arange(sw, dtype=np.float64)
        z = (px / sw - 0.5) * config.FEATURE_SCALE
        curve = np.column_stack([px, sh - sigmoid(z) * sh])
        surface.stroke_polyline(curve, config.POSITIVE_COLOR, width=2.0)

        demo_z = self.demo_logit()
        dot_x = (demo_z / config.FEATURE_SCALE + 0.5) * sw
        dot_y = sh - float(sigmoid(demo_z)) * sh
        surface.fill_circle(
            float(np.clip(dot_x, 0, sw)),
            float(np.clip(dot_y, 0, sh)),
            5.0,
            config.BOUNDARY_COLOR,
            glow=10.0,
        )
