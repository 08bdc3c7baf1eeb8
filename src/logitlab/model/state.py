"""
Lab State (Data Model)
======================
This module defines the central data structure for the running lab.

Why is this file needed?
------------------------
1. State Management: It holds the current model parameters, the dataset and
   the selected level in one place. There is exactly one instance per window.
2. Single Writer Path: Sliders, the optimizer and the reset button all write
   through the setters below, so the renderer never sees two diverging copies.
3. Decoupling: Views read from this object; Controllers write to this object.

Classes:
    LabState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional

from logitlab import config
from logitlab.exceptions import LevelError, UnknownParameterError
from logitlab.model.classifier import LinearClassifier, Metrics, ModelParameters
from logitlab.model.dataset import DataGenerator, Dataset
from logitlab.model.quiz import LEVELS

logger = logging.getLogger(__name__)


@dataclass
class LabState:
    """
    Owner of everything the renderer and the metrics panel read.

    'revision' increases on every mutation; the frame loop compares it with
    the last value it saw to decide whether text readouts need a refresh.
    """
    generator: DataGenerator = field(default_factory=lambda: DataGenerator(seed=config.DATA_SEED))
    parameters: ModelParameters = field(default_factory=ModelParameters)
    dataset: Optional[Dataset] = None
    level: int = 1
    revision: int = 0

    def __post_init__(self) -> None:
        if self.dataset is None:
            self.dataset = self.generator.generate()

    # --- Derived values ---

    @property
    def classifier(self) -> LinearClassifier:
        return LinearClassifier(self.parameters)

    def metrics(self) -> Metrics:
        """Accuracy and MSE of the current parameters on the current dataset."""
        return self.classifier.metrics(self.dataset)

    # --- Setters ---

    def set_parameters(self, params: ModelParameters) -> None:
        self.parameters = params
        self._touch()

    def set_weight(self, name: str, value: float) -> None:
        """Set 'w1' or 'w2'."""
        if name not in ("w1", "w2"):
            raise UnknownParameterError(f"Unknown weight '{name}'.")
        self.set_parameters(self.parameters.with_value(name, value))

    def set_bias(self, value: float) -> None:
        self.set_parameters(self.parameters.with_value("b", value))

    def reset_dataset(self) -> Dataset:
        """Replace the dataset wholesale. Parameters are left untouched."""
        self.dataset = self.generator.generate()
        self._touch()
        logger.info(f"Dataset regenerated: {self.dataset!r}")
        return self.dataset

    def set_level(self, level: int) -> None:
        if level not in LEVELS:
            raise LevelError(f"Unknown level {level}; expected one of {sorted(LEVELS)}.")
        self.level = level
        self._touch()
        logger.info(f"Level changed to {level}.")

    def reset(self) -> None:
        """Back to default parameters, level 1 and a fresh dataset."""
        self.parameters = ModelParameters()
        self.level = 1
        self.dataset = self.generator.generate()
        self._touch()
        logger.info("Lab state has been reset.")

    def _touch(self) -> None:
        self.revision += 1
