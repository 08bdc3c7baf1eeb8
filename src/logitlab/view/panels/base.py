from __future__ import annotations

from PySide6.QtWidgets import QWidget

from logitlab.controller.commands import Command, LabController
from logitlab.model.state import LabState


class BasePanel(QWidget):
    """Base class for left-side panels. Holds a reference to the lab controller."""
    def __init__(self, controller: LabController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller

    @property
    def state(self) -> LabState:
        return self.controller.state

    def send(self, command: Command) -> bool:
        """Forward a command; panels never write the state directly."""
        return self.controller.dispatch(command)
