"""
Training Playback
=================
Runs the optimizer one epoch at a time against the lab state, so the user
can watch the boundary move epoch by epoch.

The pacing (one step per timer tick) is decided by the Qt player in
'logitlab.controller.player'; this class only knows how to take one step.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, TYPE_CHECKING

from logitlab.controller.optimizer import GradientDescentOptimizer
from logitlab.model.classifier import LinearClassifier, Metrics, ModelParameters

if TYPE_CHECKING:
    from logitlab.model.dataset import Dataset
    from logitlab.model.state import LabState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingRecord:
    """Metrics after one epoch, measured on the dataset that epoch was fitted to."""
    epoch: int
    parameters: ModelParameters
    metrics: Metrics


class TrainingRun:
    """
    One optimizer run bound to a lab state.

    Every epoch starts from the state's current parameters and dataset, so a
    slider edit mid-run steers the remaining epochs and "New Data" mid-run
    makes the rest of the run fit the new points.
    """

    def __init__(self, state: LabState, optimizer: Optional[GradientDescentOptimizer] = None) -> None:
        self.state = state
        self.optimizer = optimizer if optimizer is not None else GradientDescentOptimizer()

        # Raises EmptyDatasetError before anything is recorded
        initial = LinearClassifier(state.parameters).metrics(state.dataset)
        self.history: list[TrainingRecord] = [TrainingRecord(0, state.parameters, initial)]
        self.finished: bool = False
        logger.info(
            f"Gradient descent: {self.total_epochs} epochs, lr={self.optimizer.learning_rate}, "
            f"{len(state.dataset)} points, start {state.parameters.as_tuple()}"
        )

    @property
    def epoch(self) -> int:
        return self.history[-1].epoch

    @property
    def total_epochs(self) -> int:
        return self.optimizer.epochs

    def step(self) -> bool:
        """
        Apply one epoch to the state.

        Returns:
            True if a step was applied, False if the run was already exhausted.
        """
        if self.finished:
            return False
        if self.epoch >= self.total_epochs:
            self._finish()
            return False

        dataset: Dataset = self.state.dataset
        params = self.optimizer.step(dataset, self.state.parameters)
        self.state.set_parameters(params)
        metrics = LinearClassifier(params).metrics(dataset)
        self.history.append(TrainingRecord(self.epoch + 1, params, metrics))
        logger.debug(f"Epoch {self.epoch}/{self.total_epochs}: {params.as_tuple()}")

        if self.epoch >= self.total_epochs:
            self._finish()
        return True

    def _finish(self) -> None:
        self.finished = True
        logger.info(f"Training finished after {self.epoch} epochs: {self.history[-1].metrics}")

    def run_to_end(self) -> ModelParameters:
        """Apply every remaining step without pacing and return the final parameters."""
        while self.step():
            pass
        return self.state.parameters
