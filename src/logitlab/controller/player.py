"""
Training Player (Qt Timer)
==========================
Paces the active training run on the Qt event loop.

Why is this file needed?
------------------------
1. Responsiveness: Running all epochs in one go would jump straight to the
   final boundary. One epoch per timer tick lets every frame show an
   intermediate state.
2. No Threads: The optimizer is cheap, so a QTimer on the GUI thread is
   enough; state is only ever written from that thread.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Signal

from logitlab import config
from logitlab.controller.commands import LabController, LabEvent

logger = logging.getLogger(__name__)


class TrainingPlayer(QObject):
    # Signals to update the UI from the timer
    step_applied = Signal(int)  # epoch number just applied
    finished = Signal()

    def __init__(self, controller: LabController, interval_ms: int = config.STEP_DELAY_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.controller = controller

        self.timer = QTimer(self)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self.advance)

        controller.subscribe(self._on_lab_event)

    def _on_lab_event(self, event: LabEvent) -> None:
        if event is LabEvent.TRAINING_STARTED:
            self.timer.start()

    def is_running(self) -> bool:
        return self.timer.isActive()

    def advance(self) -> None:
        """Timer slot: apply one epoch, stop once the run is done."""
        try:
            applied = self.controller.step_training()
        except Exception:
            logger.exception("Training step failed; stopping playback.")
            self.controller.abort_training()
            self.timer.stop()
            self.finished.emit()
            return

        run = self.controller.last_run
        if applied and run is not None:
            self.step_applied.emit(run.epoch)

        if not self.controller.is_training:
            self.timer.stop()
            self.finished.emit()

    def stop(self) -> None:
        self.timer.stop()
