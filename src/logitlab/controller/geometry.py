"""
Decision Boundary Geometry
==========================
The boundary is the set of points where the probability equals 0.5, i.e.
where the logit w1*nx + w2*ny + b is zero. In normalized space this is a
straight line, sampled here as a polyline and mapped back to the unit square.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from logitlab import config
from logitlab.model.classifier import ModelParameters, denormalize

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class BoundaryGeometry:
    """
    Samples the line w1*nx + w2*ny + b = 0 over the visible square.

    Args:
        step: Sampling step along nx in normalized units.
        extent: Half-width of the normalized square ([-extent, extent]).
    """

    def __init__(self, step: float = config.BOUNDARY_STEP, extent: float | None = None) -> None:
        if step <= 0:
            raise ValueError(f"'step' must be positive, got {step}.")
        self.step = step
        self.extent = extent if extent is not None else config.FEATURE_SCALE / 2

    def samples(self) -> npt.NDArray[np.float64]:
        """nx sample positions from -extent to +extent inclusive."""
        n = int(round(2 * self.extent / self.step)) + 1
        return np.linspace(-self.extent, self.extent, n)

    def compute(self, params: ModelParameters) -> list[npt.NDArray[np.float64]]:
        """
        Boundary polylines in unit-square coordinates.

        Returns:
            Zero or more (N, 2) arrays with N >= 2. Empty when the line misses
            the square or when both weights are zero (constant probability).
        """
        w1, w2, b = params.as_tuple()

        if w2 == 0.0:
            return self._vertical(w1, b)

        nx = self.samples()
        ny = -(w1 * nx + b) / w2

        inside = np.flatnonzero((ny >= -self.extent) & (ny <= self.extent))

        # Consecutive retained samples form one polyline
        breaks = np.flatnonzero(np.diff(inside) > 1) + 1
        polylines = []
        for run in np.split(inside, breaks):
            if run.size < 2:
                continue
            polylines.append(np.column_stack([denormalize(nx[run]), denormalize(ny[run])]))

        if not polylines and w1 != 0.0:
            # Too steep for the nx sampling: clip against the top and bottom edges instead
            return self._steep(w1, w2, b, nx[inside], ny[inside])
        return polylines

    def _steep(
        self,
        w1: float,
        w2: float,
        b: float,
        nx_inside: npt.NDArray[np.float64],
        ny_inside: npt.NDArray[np.float64],
    ) -> list[npt.NDArray[np.float64]]:
        edge_ny = np.array([-self.extent, self.extent])
        edge_nx = -(w2 * edge_ny + b) / w1
        keep = np.abs(edge_nx) <= self.extent

        nx = np.concatenate([nx_inside, edge_nx[keep]])
        ny = np.concatenate([ny_inside, edge_ny[keep]])
        if nx.size < 2:
            return []

        order = np.argsort(nx, kind="stable")
        line = np.column_stack([denormalize(nx[order]), denormalize(ny[order])])
        # A line grazing a corner yields the same vertex twice
        if np.allclose(line[0], line[-1]):
            return []
        logger.debug(f"Steep boundary clipped at the edges: {len(line)} vertices.")
        return [line]

    def _vertical(self, w1: float, b: float) -> list[npt.NDArray[np.float64]]:
        if w1 == 0.0:
            logger.debug("Both weights are zero; no decision boundary exists.")
            return []

        nx = -b / w1
        if not -self.extent <= nx <= self.extent:
            return []

        logger.debug(f"w2 == 0; boundary is the vertical line nx = {nx:.3f}.")
        x = float(denormalize(nx))
        y0 = float(denormalize(-self.extent))
        y1 = float(denormalize(self.extent))
        return [np.array([[x, y0], [x, y1]], dtype=np.float64)]

    @staticmethod
    def to_device(polyline: npt.NDArray[np.float64], width: float, height: float) -> npt.NDArray[np.float64]:
        """Scale unit-square coordinates to device pixels."""
        return np.asarray(polyline, dtype=np.float64) * np.array([width, height], dtype=np.float64)
