"""
Parameter Control Panel
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QGroupBox, QHBoxLayout, QLabel, QPushButton, QSlider, QVBoxLayout, QWidget, QFormLayout
)

from logitlab import config
from logitlab.controller.commands import LabController, ResetDataset, RunOptimizer, SetBias, SetWeight
from logitlab.model.readout import format_value
from logitlab.view.panels.base import BasePanel

logger = logging.getLogger(__name__)

# QSlider is integer-only; one tick is one SLIDER_STEP
_SCALE = round(1 / config.SLIDER_STEP)


class ParameterSlider(QWidget):
    """Horizontal slider with a live value label, in model units."""

    # Only emitted for user moves, never for set_value()
    value_changed = Signal(float)

    def __init__(self, value: float = 0.0, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(round(config.SLIDER_MIN * _SCALE), round(config.SLIDER_MAX * _SCALE))
        self.slider.setSingleStep(1)
        self.slider.setPageStep(_SCALE)
        self.slider.valueChanged.connect(self._on_slider_moved)
        layout.addWidget(self.slider, 1)

        self.lbl_value = QLabel()
        self.lbl_value.setMinimumWidth(40)
        self.lbl_value.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        layout.addWidget(self.lbl_value)

        self.set_value(value)

    def value(self) -> float:
        return self.slider.value() / _SCALE

    def set_value(self, value: float) -> None:
        """Move the handle without emitting value_changed. Out-of-range values pin the handle to the end."""
        self.slider.blockSignals(True)
        try:
            self.slider.setValue(round(value * _SCALE))
        finally:
            self.slider.blockSignals(False)
        # The label shows the real value even when the handle is pinned
        self.lbl_value.setText(format_value(value))

    def _on_slider_moved(self, raw: int) -> None:
        value = raw / _SCALE
        self.lbl_value.setText(format_value(value))
        self.value_changed.emit(value)


class ParameterControlPanel(BasePanel):
    """Sliders for w1, w2 and b plus the training and reset buttons."""

    def __init__(self, controller: LabController, parent: QWidget | None = None) -> None:
        super().__init__(controller, parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # --- Parameters Group ---
        grp = QGroupBox("Model Parameters")
        form = QFormLayout(grp)

        params = self.state.parameters
        self.w1_slider = ParameterSlider(params.w1)
        self.w1_slider.value_changed.connect(self.on_w1_changed)
        form.addRow("Weight w₁:", self.w1_slider)

        self.w2_slider = ParameterSlider(params.w2)
        self.w2_slider.value_changed.connect(self.on_w2_changed)
        form.addRow("Weight w₂:", self.w2_slider)

        self.b_slider = ParameterSlider(params.b)
        self.b_slider.value_changed.connect(self.on_b_changed)
        form.addRow("Bias b:", self.b_slider)

        layout.addWidget(grp)

        # --- Actions ---
        hbox = QHBoxLayout()

        self.btn_train = QPushButton("Auto-Train")
        self.btn_train.setMinimumHeight(36)
        self.btn_train.setToolTip(f"Run {config.EPOCHS} epochs of gradient descent")
        self.btn_train.clicked.connect(self.on_train_clicked)
        hbox.addWidget(self.btn_train)

        self.btn_reset = QPushButton("New Data")
        self.btn_reset.setMinimumHeight(36)
        self.btn_reset.clicked.connect(self.on_reset_clicked)
        hbox.addWidget(self.btn_reset)

        layout.addLayout(hbox)

    # --- SLOTS ---

    def on_w1_changed(self, value: float) -> None:
        self.send(SetWeight("w1", value))

    def on_w2_changed(self, value: float) -> None:
        self.send(SetWeight("w2", value))

    def on_b_changed(self, value: float) -> None:
        self.send(SetBias(value))

    def on_train_clicked(self) -> None:
        if not self.send(RunOptimizer()):
            logger.info("Auto-Train request was not started.")

    def on_reset_clicked(self) -> None:
        self.send(ResetDataset())

    # --- STATE SYNC ---

    def sync_from_state(self) -> None:
        """Move the handles to the current parameters (after training steps or a reset)."""
        params = self.state.parameters
        self.w1_slider.set_value(params.w1)
        self.w2_slider.set_value(params.w2)
        self.b_slider.set_value(params.b)

    def set_training(self, running: bool) -> None:
        self.btn_train.setEnabled(not running)
        self.btn_train.setText("Training..." if running else "Auto-Train")
