"""
Commands & Lab Controller
=========================
User intent arrives as small command objects; the controller applies them
to the LabState and tells subscribers what changed.

Why is this file needed?
------------------------
1. Decoupling: Slider and button slots only build a command. They never
   touch the model parameters or the dataset directly.
2. Single Entry Point: Every mutation goes through dispatch(), which is the
   one place that logs, rejects invalid input and enforces "one training run
   at a time".

Classes:
    SetWeight, SetBias, SetParameters, RunOptimizer, ResetDataset, SetLevel, ResetLab
    LabEvent: What changed, passed to subscribers.
    LabController: Applies commands and drives the active training run.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import logging
from typing import Callable, Optional, Union

from logitlab.controller.optimizer import GradientDescentOptimizer
from logitlab.controller.playback import TrainingRun
from logitlab.exceptions import LogitLabError
from logitlab.model.classifier import ModelParameters
from logitlab.model.state import LabState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetWeight:
    name: str  # "w1" or "w2"
    value: float


@dataclass(frozen=True)
class SetBias:
    value: float


@dataclass(frozen=True)
class SetParameters:
    parameters: ModelParameters


@dataclass(frozen=True)
class RunOptimizer:
    pass


@dataclass(frozen=True)
class ResetDataset:
    pass


@dataclass(frozen=True)
class SetLevel:
    level: int


@dataclass(frozen=True)
class ResetLab:
    pass


Command = Union[SetWeight, SetBias, SetParameters, RunOptimizer, ResetDataset, SetLevel, ResetLab]


class LabEvent(Enum):
    PARAMETERS_CHANGED = auto()
    DATASET_CHANGED = auto()
    LEVEL_CHANGED = auto()
    TRAINING_STARTED = auto()
    TRAINING_STEP = auto()
    TRAINING_FINISHED = auto()
    LAB_RESET = auto()


Listener = Callable[[LabEvent], None]


class LabController:
    """Applies commands to one LabState and owns the (single) active training run."""

    def __init__(self, state: LabState, optimizer: Optional[GradientDescentOptimizer] = None) -> None:
        self.state = state
        self.optimizer = optimizer if optimizer is not None else GradientDescentOptimizer()
        self.training: Optional[TrainingRun] = None
        self.last_run: Optional[TrainingRun] = None
        self._listeners: list[Listener] = []

    # --- Subscribers ---

    def subscribe(self, listener: Listener) -> Listener:
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event: LabEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # --- Commands ---

    @property
    def is_training(self) -> bool:
        return self.training is not None

    def dispatch(self, command: Command) -> bool:
        """
        Apply a command.

        Returns:
            True if the state changed (or a run started), False if the command
            was rejected. Invalid values, names and levels are logged and
            rejected; only an unsupported command type raises TypeError.
        """
        try:
            if isinstance(command, SetWeight):
                self.state.set_weight(command.name, command.value)
                event = LabEvent.PARAMETERS_CHANGED
            elif isinstance(command, SetBias):
                self.state.set_bias(command.value)
                event = LabEvent.PARAMETERS_CHANGED
            elif isinstance(command, SetParameters):
                self.state.set_parameters(command.parameters)
                event = LabEvent.PARAMETERS_CHANGED
            elif isinstance(command, ResetDataset):
                self.state.reset_dataset()
                event = LabEvent.DATASET_CHANGED
            elif isinstance(command, SetLevel):
                self.state.set_level(command.level)
                event = LabEvent.LEVEL_CHANGED
            elif isinstance(command, ResetLab):
                self.abort_training()
                self.state.reset()
                event = LabEvent.LAB_RESET
            elif isinstance(command, RunOptimizer):
                if not self._start_training():
                    return False
                event = LabEvent.TRAINING_STARTED
            else:
                raise TypeError(f"Unsupported command: {command!r}")
        except LogitLabError as e:
            logger.warning(f"Command {command!r} rejected: {e}")
            return False

        self._notify(event)
        return True

    # --- Training ---

    def _start_training(self) -> bool:
        if self.is_training:
            logger.warning("A training run is already active; ignoring RunOptimizer.")
            return False
        self.training = TrainingRun(self.state, self.optimizer)
        self.last_run = self.training
        logger.info(f"Training started from {self.state.parameters.as_tuple()}")
        return True

    def step_training(self) -> bool:
        """
        Advance the active run by one epoch.

        Returns:
            True if a step was applied, False if there is no active run left.
        """
        run = self.training
        if run is None:
            return False

        applied = run.step()
        if applied:
            self._notify(LabEvent.TRAINING_STEP)
        if run.finished:
            self.training = None
            self._notify(LabEvent.TRAINING_FINISHED)
        return applied

    def abort_training(self) -> None:
        """Drop the active run, keeping whatever parameters it already applied."""
        if self.training is None:
            return
        logger.warning(f"Training aborted at epoch {self.training.epoch}.")
        self.training = None
        self._notify(LabEvent.TRAINING_FINISHED)
