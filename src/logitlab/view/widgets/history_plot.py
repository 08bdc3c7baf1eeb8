"""Per-epoch plot of the latest training run (MSE and accuracy)."""
from __future__ import annotations

from typing import Sequence

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QWidget

from logitlab import config
from logitlab.controller.playback import TrainingRecord


class TrainingHistoryPlot(pg.PlotWidget):
    """
    Two curves over the epochs of one run.

    Accuracy is plotted as a fraction so both curves share the [0, 1] axis.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumHeight(160)
        self.showGrid(x=True, y=True, alpha=0.3)
        self.setLabel('bottom', 'Epoch')
        self.setLabel('left', 'Value')
        self.setTitle('Training History', size='10pt')
        self.setMouseEnabled(x=False, y=False)
        self.setXRange(0, config.EPOCHS)
        self.setYRange(0, 1)
        self.addLegend(offset=(10, 10))

        self.mse_curve = self.plot(
            [], [],
            pen=pg.mkPen(color=config.NEGATIVE_COLOR, width=2),
            name='MSE',
        )
        self.accuracy_curve = self.plot(
            [], [],
            pen=pg.mkPen(color=config.POSITIVE_COLOR, width=2, style=pg.QtCore.Qt.DashLine),
            name='Accuracy / 100',
        )

    def set_history(self, history: Sequence[TrainingRecord]) -> None:
        if not history:
            self.clear_history()
            return
        epochs = np.array([r.epoch for r in history], dtype=np.float64)
        mse = np.array([r.metrics.mean_squared_error for r in history], dtype=np.float64)
        accuracy = np.array([r.metrics.accuracy for r in history], dtype=np.float64) / 100.0

        self.mse_curve.setData(epochs, mse)
        self.accuracy_curve.setData(epochs, accuracy)
        self.setXRange(0, max(config.EPOCHS, int(epochs[-1])))

    def clear_history(self) -> None:
        self.mse_curve.setData([], [])
        self.accuracy_curve.setData([], [])
