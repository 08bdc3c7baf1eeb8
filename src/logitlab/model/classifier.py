"""
Logistic Regression Math
========================
Linear score, sigmoid probability, classification and metrics for the
2-feature model z = w1*x1 + w2*x2 + b.

Coordinates live in the unit square on screen but are rescaled to [-5, 5]
before scoring so that slider values around 1 already give visible slopes.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import math
from typing import Optional, Union, TYPE_CHECKING

import numpy as np

from logitlab import config
from logitlab.exceptions import EmptyDatasetError, NonFiniteParameterError, UnknownParameterError
from logitlab.model.dataset import Dataset, Point

if TYPE_CHECKING:
    import numpy.typing as npt

Coordinate = Union[float, "npt.NDArray[np.float64]"]


def normalize(v: Coordinate) -> Coordinate:
    """Map a unit-square coordinate to normalized model space [-5, 5]."""
    return (np.asarray(v, dtype=np.float64) - 0.5) * config.FEATURE_SCALE


def denormalize(n: Coordinate) -> Coordinate:
    """Inverse of normalize(): map [-5, 5] back to [0, 1]."""
    return np.asarray(n, dtype=np.float64) / config.FEATURE_SCALE + 0.5


def sigmoid(z: Coordinate) -> Coordinate:
    """
    Logistic function 1 / (1 + e^-z).

    z is clamped to +/- LOGIT_CLAMP first; beyond that the result is already
    1 or 0 to double precision, and exp() can no longer overflow.
    """
    z = np.clip(z, -config.LOGIT_CLAMP, config.LOGIT_CLAMP)
    return 1.0 / (1.0 + np.exp(-z))


@dataclass(frozen=True)
class ModelParameters:
    """Snapshot of the model weights and bias."""
    w1: float = config.DEFAULT_W1
    w2: float = config.DEFAULT_W2
    b: float = config.DEFAULT_BIAS

    def __post_init__(self) -> None:
        for name in ("w1", "w2", "b"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise NonFiniteParameterError(f"Parameter '{name}' must be finite, got {value!r}.")
            # Store plain floats even when fed numpy scalars
            object.__setattr__(self, name, float(value))

    def with_value(self, name: str, value: float) -> ModelParameters:
        """Return a copy with one parameter changed."""
        if name not in ("w1", "w2", "b"):
            raise UnknownParameterError(f"Unknown parameter '{name}'.")
        return replace(self, **{name: value})

    def as_tuple(self) -> tuple[float, float, float]:
        return self.w1, self.w2, self.b


@dataclass(frozen=True)
class Metrics:
    """Accuracy in percent [0, 100] and mean squared error of the probabilities."""
    accuracy: float
    mean_squared_error: float


class LinearClassifier:
    """
    Scores points with a fixed ModelParameters snapshot.

    Every method accepts either a Point or an (x, y) pair of unit-square
    coordinates; x and y may be scalars or numpy arrays of the same shape.
    """

    def __init__(self, params: Optional[ModelParameters] = None) -> None:
        self.params = params if params is not None else ModelParameters()

    @staticmethod
    def _coords(point_or_x: Union[Point, Coordinate], y: Optional[Coordinate]) -> tuple[Coordinate, Coordinate]:
        if isinstance(point_or_x, Point):
            return point_or_x.x, point_or_x.y
        if y is None:
            raise TypeError("y is required when the first argument is not a Point.")
        return point_or_x, y

    def score(self, point_or_x: Union[Point, Coordinate], y: Optional[Coordinate] = None) -> Coordinate:
        """Linear logit z = w1*nx + w2*ny + b on normalized coordinates."""
        x, y = self._coords(point_or_x, y)
        p = self.params
        return p.w1 * normalize(x) + p.w2 * normalize(y) + p.b

    def probability(self, point_or_x: Union[Point, Coordinate], y: Optional[Coordinate] = None) -> Coordinate:
        """Probability of label 1, in (0, 1)."""
        return sigmoid(self.score(point_or_x, y))

    def classify(
        self,
        point_or_x: Union[Point, Coordinate],
        y: Optional[Coordinate] = None
    ) -> Union[int, npt.NDArray[np.int_]]:
        """Predicted label; a probability of exactly 0.5 counts as label 1."""
        prob = self.probability(point_or_x, y)
        if np.ndim(prob) == 0:
            return int(prob >= 0.5)
        return (prob >= 0.5).astype(np.int_)

    def metrics(self, dataset: Dataset) -> Metrics:
        """
        Accuracy and mean squared error over the whole dataset.

        Raises:
            EmptyDatasetError: If the dataset has no points.
        """
        m = len(dataset)
        if m == 0:
            raise EmptyDatasetError("Cannot compute metrics on an empty dataset.")

        xy = dataset.xy
        labels = dataset.labels
        prob = self.probability(xy[:, 0], xy[:, 1])

        correct = np.count_nonzero((prob >= 0.5).astype(np.int_) == labels)
        accuracy = 100.0 * correct / m
        mse = float(np.mean((prob - labels) ** 2))
        return Metrics(accuracy=float(accuracy), mean_squared_error=mse)
