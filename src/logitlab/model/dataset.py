"""
Dataset & Data Generator
========================
This module defines the labelled point cloud the model is scored against.

Why is this file needed?
------------------------
1. Data: It holds the immutable Point/Dataset containers with numpy views
   for the vectorised math in the classifier and the optimizer.
2. Generation: It samples the two synthetic clusters (label 0 top-left,
   label 1 bottom-right in screen space) that make up every fresh dataset.

Classes:
    Point: A single labelled sample in the unit square.
    Dataset: Ordered, immutable collection of Points.
    DataGenerator: Produces a new Dataset on every call to generate().
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Iterator, Optional, TYPE_CHECKING

import numpy as np

from logitlab import config

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Rect = tuple[float, float, float, float]


@dataclass(frozen=True)
class Point:
    """A labelled sample. x and y are normalized screen coordinates in [0, 1]."""
    x: float
    y: float
    label: int

    def __post_init__(self) -> None:
        if self.label not in (0, 1):
            raise ValueError(f"Point label must be 0 or 1, got {self.label!r}.")
        if not (0.0 <= self.x <= 1.0 and 0.0 <= self.y <= 1.0):
            raise ValueError(f"Point ({self.x}, {self.y}) lies outside the unit square.")


class Dataset:
    """
    Ordered, read-only sequence of Points.

    The coordinates and labels are also exposed as numpy arrays so that
    scoring the whole set is a single vectorised expression.
    """

    def __init__(self, points: Iterable[Point]) -> None:
        self._points: tuple[Point, ...] = tuple(points)

        xy = np.array([(p.x, p.y) for p in self._points], dtype=np.float64).reshape(-1, 2)
        labels = np.array([p.label for p in self._points], dtype=np.int_)
        xy.setflags(write=False)
        labels.setflags(write=False)
        self._xy = xy
        self._labels = labels

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __repr__(self) -> str:
        return f"Dataset(n={len(self)}, positives={self.count(1)})"

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    @property
    def xy(self) -> npt.NDArray[np.float64]:
        """(N, 2) array of unit-square coordinates."""
        return self._xy

    @property
    def labels(self) -> npt.NDArray[np.int_]:
        """(N,) array of 0/1 labels."""
        return self._labels

    def count(self, label: int) -> int:
        """Number of points carrying the given label."""
        return int(np.count_nonzero(self._labels == label))


class DataGenerator:
    """
    Samples two uniform clusters with distinct labels.

    Every call to generate() returns a brand new Dataset; the previous one is
    never modified. Passing a seed makes the sequence of datasets reproducible.
    """

    def __init__(
        self,
        num_points: int = config.NUM_POINTS,
        seed: Optional[int] = None,
        negative_cluster: Rect = config.NEGATIVE_CLUSTER,
        positive_cluster: Rect = config.POSITIVE_CLUSTER,
    ) -> None:
        if num_points < 2:
            raise ValueError(f"Need at least 2 points (one per label), got {num_points}.")
        self.num_points = num_points
        self.negative_cluster = negative_cluster
        self.positive_cluster = positive_cluster
        self._rng = np.random.default_rng(seed)

    def generate(self) -> Dataset:
        """Sample a fresh dataset: first the label-0 cluster, then the label-1 cluster."""
        n_negative = self.num_points // 2
        n_positive = self.num_points - n_negative

        points = self._sample_cluster(self.negative_cluster, n_negative, label=0)
        points += self._sample_cluster(self.positive_cluster, n_positive, label=1)

        dataset = Dataset(points)
        logger.debug(f"Generated {dataset!r}")
        return dataset

    def _sample_cluster(self, rect: Rect, n: int, label: int) -> list[Point]:
        x_min, x_max, y_min, y_max = rect
        # Generator.uniform samples the half-open interval [low, high)
        xs = self._rng.uniform(x_min, x_max, size=n)
        ys = self._rng.uniform(y_min, y_max, size=n)
        return [Point(float(x), float(y), label) for x, y in zip(xs, ys)]
