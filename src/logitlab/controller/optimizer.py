"""
Gradient Descent Optimizer
==========================
Full-batch gradient descent on (w1, w2, b).

The update uses the error term (p - label) times the normalized feature,
i.e. the gradient of the cross-entropy loss, while the lab displays the mean
squared error. The "Auto-Train" button uses exactly this pairing.

The optimizer itself never sleeps and never touches the lab state. step()
computes one epoch from whatever parameters and dataset it is given, and
run() chains epochs into a lazy iterator of parameter snapshots.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator

import numpy as np

from logitlab import config
from logitlab.exceptions import EmptyDatasetError
from logitlab.model.classifier import LinearClassifier, ModelParameters, normalize
from logitlab.model.dataset import Dataset

logger = logging.getLogger(__name__)


def gradient(dataset: Dataset, params: ModelParameters) -> tuple[float, float, float]:
    """
    Summed (not averaged) gradient over every point.

    Returns:
        (dw1, dw2, db) with dw1 = sum(e * nx), dw2 = sum(e * ny), db = sum(e),
        where e = probability - label.
    """
    xy = dataset.xy
    nx = normalize(xy[:, 0])
    ny = normalize(xy[:, 1])

    prob = LinearClassifier(params).probability(xy[:, 0], xy[:, 1])
    error = prob - dataset.labels

    return float(np.sum(error * nx)), float(np.sum(error * ny)), float(np.sum(error))


@dataclass(frozen=True)
class GradientDescentOptimizer:
    learning_rate: float = config.LEARNING_RATE
    epochs: int = config.EPOCHS

    def __post_init__(self) -> None:
        if self.epochs < 0:
            raise ValueError(f"'epochs' must be non-negative, got {self.epochs}.")

    def run(self, dataset: Dataset, initial: ModelParameters) -> Iterator[ModelParameters]:
        """
        Start a training run from the given parameters.

        Args:
            dataset: Points to fit. Captured for the whole run.
            initial: Starting parameters; the snapshot is not modified.

        Returns:
            An iterator yielding exactly 'epochs' parameter snapshots, one per epoch.

        Raises:
            EmptyDatasetError: If the dataset has no points (raised here, not on first next()).
        """
        if len(dataset) == 0:
            raise EmptyDatasetError("Cannot run gradient descent on an empty dataset.")
        logger.info(
            f"Gradient descent: {self.epochs} epochs, lr={self.learning_rate}, "
            f"{len(dataset)} points, start {initial.as_tuple()}"
        )
        return self._steps(dataset, initial)

    def step(self, dataset: Dataset, params: ModelParameters) -> ModelParameters:
        """
        One full-batch epoch from the given parameters.

        Raises:
            EmptyDatasetError: If the dataset has no points.
        """
        m = len(dataset)
        if m == 0:
            raise EmptyDatasetError("Cannot run gradient descent on an empty dataset.")
        lr = self.learning_rate
        dw1, dw2, db = gradient(dataset, params)
        return ModelParameters(
            w1=params.w1 - lr * dw1 / m,
            w2=params.w2 - lr * dw2 / m,
            b=params.b - lr * db / m,
        )

    def _steps(self, dataset: Dataset, params: ModelParameters) -> Iterator[ModelParameters]:
        for epoch in range(self.epochs):
            params = self.step(dataset, params)
            logger.debug(f"Epoch {epoch + 1}/{self.epochs}: {params.as_tuple()}")
            yield params
