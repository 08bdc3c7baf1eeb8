"""
Metrics Panel
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFormLayout, QGroupBox, QLabel, QProgressBar, QVBoxLayout, QWidget

from logitlab.controller.commands import LabController
from logitlab.exceptions import EmptyDatasetError
from logitlab.model.readout import MetricsReadout, equation_text
from logitlab.view.panels.base import BasePanel

logger = logging.getLogger(__name__)


class MetricsPanel(BasePanel):
    """Accuracy and loss meters plus the current equation."""

    def __init__(self, controller: LabController, parent: QWidget | None = None) -> None:
        super().__init__(controller, parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        grp = QGroupBox("Model Performance")
        form = QFormLayout(grp)

        self.accuracy_bar = self._make_meter("#00d4ff")
        form.addRow("Accuracy:", self.accuracy_bar)

        self.loss_bar = self._make_meter("#ff4757")
        form.addRow("Error (MSE):", self.loss_bar)

        self.lbl_formula = QLabel()
        self.lbl_formula.setAlignment(Qt.AlignCenter)
        self.lbl_formula.setStyleSheet("font-family: monospace; font-size: 13px; padding: 4px;")
        form.addRow(self.lbl_formula)

        layout.addWidget(grp)

        self.update_from_state()

    @staticmethod
    def _make_meter(color: str) -> QProgressBar:
        # Range 0..1000 keeps one decimal of the percentage
        bar = QProgressBar()
        bar.setRange(0, 1000)
        bar.setTextVisible(True)
        bar.setStyleSheet(f"QProgressBar::chunk {{ background-color: {color}; }}")
        return bar

    def update_from_state(self) -> None:
        try:
            readout = MetricsReadout.from_metrics(self.state.metrics())
        except EmptyDatasetError as e:
            logger.warning(f"Metrics unavailable: {e}")
            readout = MetricsReadout.unavailable()

        self.accuracy_bar.setValue(round(readout.accuracy_fill * 10))
        self.accuracy_bar.setFormat(readout.accuracy_text)
        self.loss_bar.setValue(round(readout.loss_fill * 10))
        self.loss_bar.setFormat(readout.loss_text)
        self.lbl_formula.setText(equation_text(self.state.parameters))

    @property
    def formula_text(self) -> str:
        return self.lbl_formula.text()
