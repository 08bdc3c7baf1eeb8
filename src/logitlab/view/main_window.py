"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the level tabs, the
control column and the two canvases.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It subscribes to the LabController and fans each LabEvent out to
   the panels that care about it.
3. Render Loop: It owns the frame timer that repaints the canvases and
   refreshes the readouts whenever the state revision moves.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow, QScrollArea, QSplitter, QTabBar, QVBoxLayout, QWidget
)

from logitlab import config
from logitlab.controller.commands import LabController, LabEvent, ResetDataset, ResetLab, RunOptimizer, SetLevel
from logitlab.controller.player import TrainingPlayer
from logitlab.controller.render import RenderCoordinator
from logitlab.model.quiz import LEVELS
from logitlab.model.state import LabState
from logitlab.view.panels.controls import ParameterControlPanel
from logitlab.view.panels.metrics import MetricsPanel
from logitlab.view.panels.quiz import QuizPanel
from logitlab.view.widgets.canvas import LabCanvas, SigmoidCanvas
from logitlab.view.widgets.history_plot import TrainingHistoryPlot

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "The Logit Lab"


class MainWindow(QMainWindow):
    def __init__(self, lab_state: LabState) -> None:
        super().__init__()
        self.state: LabState = lab_state
        self.controller = LabController(lab_state)
        self.coordinator = RenderCoordinator(lab_state)
        self.player = TrainingPlayer(self.controller, parent=self)
        self._seen_revision: int = -1

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1280, 820)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        # Vertical Layout: Level tabs on top, splitter below
        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # --- 1. LEVEL TAB BAR ---
        self.tab_bar = QTabBar()
        self.tab_bar.setDrawBase(True)
        self.tab_bar.setExpanding(True)
        for level, info in sorted(LEVELS.items()):
            self.tab_bar.addTab(f"{level}. {info.title}")
        self.tab_bar.setStyleSheet("""
                    QTabBar::tab { height: 35px; min-width: 100px; }
                    QTabBar::tab:selected { font-weight: bold; }
                """)
        main_layout.addWidget(self.tab_bar)

        # --- 2. SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Horizontal)
        splitter.setChildrenCollapsible(False)
        main_layout.addWidget(splitter, 1)

        # --- LEFT SIDE: Control column (scrollable) ---
        column = QWidget()
        column_layout = QVBoxLayout(column)

        self.metrics_panel = MetricsPanel(self.controller)
        self.controls_panel = ParameterControlPanel(self.controller)
        self.history_plot = TrainingHistoryPlot()
        self.quiz_panel = QuizPanel(self.controller)

        column_layout.addWidget(self.metrics_panel)
        column_layout.addWidget(self.controls_panel)
        column_layout.addWidget(self.history_plot)
        column_layout.addWidget(self.quiz_panel)
        column_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        scroll.setWidget(column)
        splitter.addWidget(scroll)

        # --- RIGHT SIDE: Canvases ---
        canvases = QWidget()
        canvas_layout = QVBoxLayout(canvases)
        canvas_layout.setContentsMargins(0, 0, 0, 0)
        self.canvas = LabCanvas(self.coordinator)
        self.sigmoid_canvas = SigmoidCanvas(self.coordinator)
        canvas_layout.addWidget(self.canvas, 1)
        canvas_layout.addWidget(self.sigmoid_canvas)
        splitter.addWidget(canvases)

        # Set initial proportions (sidebar : canvas)
        splitter.setSizes([380, 900])

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # --- SIGNAL CONNECTIONS ---
        self.tab_bar.currentChanged.connect(self.on_level_tab_changed)
        self.controller.subscribe(self.on_lab_event)

        # --- RENDER LOOP ---
        self.frame_timer = QTimer(self)
        self.frame_timer.setInterval(config.FRAME_INTERVAL_MS)
        self.frame_timer.timeout.connect(self.on_frame)
        self.frame_timer.start()

        # Initial state
        self.quiz_panel.start_level(self.state.level)
        self.on_frame()

    def _create_actions(self) -> None:
        self.act_train = QAction("Auto-Train", self)
        self.act_train.setShortcut("Ctrl+T")
        self.act_train.triggered.connect(lambda: self.controller.dispatch(RunOptimizer()))

        self.act_new_data = QAction("New Data", self)
        self.act_new_data.setShortcut("Ctrl+N")
        self.act_new_data.triggered.connect(lambda: self.controller.dispatch(ResetDataset()))

        self.act_reset = QAction("Reset Lab", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(lambda: self.controller.dispatch(ResetLab()))

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        lab_menu = menu_bar.addMenu("&Lab")
        lab_menu.addAction(self.act_train)
        lab_menu.addAction(self.act_new_data)
        lab_menu.addSeparator()
        lab_menu.addAction(self.act_reset)
        lab_menu.addSeparator()
        lab_menu.addAction(self.act_exit)

    # --- SLOTS ---

    def on_frame(self) -> None:
        """Frame tick: repaint both canvases, refresh text only when the state moved."""
        if self.state.revision != self._seen_revision:
            self._seen_revision = self.state.revision
            self.metrics_panel.update_from_state()
        self.canvas.update()
        self.sigmoid_canvas.update()

    def on_level_tab_changed(self, index: int) -> None:
        self.controller.dispatch(SetLevel(index + 1))

    def on_lab_event(self, event: LabEvent) -> None:
        if event is LabEvent.TRAINING_STARTED:
            self.controls_panel.set_training(True)
            self.act_train.setEnabled(False)
            self.history_plot.clear_history()
        elif event is LabEvent.TRAINING_STEP:
            self.controls_panel.sync_from_state()
            if self.controller.last_run is not None:
                self.history_plot.set_history(self.controller.last_run.history)
        elif event is LabEvent.TRAINING_FINISHED:
            self.controls_panel.set_training(False)
            self.act_train.setEnabled(True)
        elif event is LabEvent.LEVEL_CHANGED:
            self.quiz_panel.start_level(self.state.level)
        elif event is LabEvent.LAB_RESET:
            self.player.stop()
            self.controls_panel.sync_from_state()
            self.history_plot.clear_history()
            self.tab_bar.blockSignals(True)
            try:
                self.tab_bar.setCurrentIndex(self.state.level - 1)
            finally:
                self.tab_bar.blockSignals(False)
            self.quiz_panel.start_level(self.state.level)

    def closeEvent(self, event, /) -> None:
        """Stop the timers before the widgets go away."""
        self.frame_timer.stop()
        self.player.stop()
        self.controller.unsubscribe(self.on_lab_event)
        event.accept()
