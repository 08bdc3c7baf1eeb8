"""
Level Info & Quiz Panel
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QGroupBox, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from logitlab import config
from logitlab.controller.commands import LabController
from logitlab.exceptions import LogitLabError
from logitlab.model.quiz import COMPLETION_MESSAGE, QuizSession, level_info
from logitlab.view.panels.base import BasePanel

logger = logging.getLogger(__name__)

_CORRECT_STYLE = "background-color: #2ecc71; color: white;"
_INCORRECT_STYLE = "background-color: #e74c3c; color: white;"


class QuizPanel(BasePanel):
    """Explains the current level and runs its quiz."""

    def __init__(self, controller: LabController, parent: QWidget | None = None) -> None:
        super().__init__(controller, parent)
        self.session = QuizSession()
        self.option_buttons: list[QPushButton] = []
        # Bumped on every new question so a pending unlock timer can tell it is stale
        self._question_token = 0

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # --- Level Info ---
        grp_info = QGroupBox("Module")
        l_info = QVBoxLayout(grp_info)

        self.lbl_title = QLabel()
        self.lbl_title.setStyleSheet("font-weight: bold; font-size: 14px;")
        l_info.addWidget(self.lbl_title)

        self.lbl_desc = QLabel()
        self.lbl_desc.setWordWrap(True)
        self.lbl_desc.setTextFormat(Qt.RichText)
        l_info.addWidget(self.lbl_desc)

        layout.addWidget(grp_info)

        # --- Quiz ---
        grp_quiz = QGroupBox("Quiz")
        l_quiz = QVBoxLayout(grp_quiz)

        header = QHBoxLayout()
        self.lbl_question = QLabel()
        self.lbl_question.setWordWrap(True)
        header.addWidget(self.lbl_question, 1)
        self.lbl_progress = QLabel()
        self.lbl_progress.setAlignment(Qt.AlignRight | Qt.AlignTop)
        header.addWidget(self.lbl_progress)
        l_quiz.addLayout(header)

        self.options_layout = QVBoxLayout()
        l_quiz.addLayout(self.options_layout)

        self.lbl_feedback = QLabel()
        self.lbl_feedback.setWordWrap(True)
        self.lbl_feedback.setVisible(False)
        l_quiz.addWidget(self.lbl_feedback)

        self.btn_next = QPushButton("Next Question →")
        self.btn_next.setVisible(False)
        self.btn_next.clicked.connect(self.on_next_clicked)
        l_quiz.addWidget(self.btn_next)

        layout.addWidget(grp_quiz)

    # --- PUBLIC ---

    def start_level(self, level: int) -> None:
        """Show the level text and restart its quiz from the first question."""
        try:
            info = level_info(level)
            self.session.start(level)
        except LogitLabError as e:
            logger.warning(f"Cannot show level {level}: {e}")
            return
        self.lbl_title.setText(info.title)
        self.lbl_desc.setText(info.description)
        self._show_question()

    # --- INTERNALS ---

    def _show_question(self) -> None:
        question = self.session.current
        if question is None:
            return
        self._question_token += 1

        self.lbl_question.setText(question.prompt)
        self.lbl_progress.setText(self.session.progress_text)
        self.lbl_feedback.setVisible(False)
        self.btn_next.setVisible(False)

        for btn in self.option_buttons:
            self.options_layout.removeWidget(btn)
            btn.deleteLater()
        self.option_buttons = []

        for idx, text in enumerate(question.options):
            btn = QPushButton(text)
            btn.clicked.connect(lambda _checked=False, i=idx: self.on_option_clicked(i))
            self.options_layout.addWidget(btn)
            self.option_buttons.append(btn)

    def _set_feedback(self, correct: bool, message: str) -> None:
        color = "#2ecc71" if correct else "#e74c3c"
        self.lbl_feedback.setText(message)
        self.lbl_feedback.setStyleSheet(f"color: {color};")
        self.lbl_feedback.setVisible(True)

    def _set_options_enabled(self, enabled: bool) -> None:
        for btn in self.option_buttons:
            btn.setEnabled(enabled)

    # --- SLOTS ---

    def on_option_clicked(self, index: int) -> None:
        try:
            result = self.session.answer(index)
        except LogitLabError as e:
            logger.warning(f"Answer ignored: {e}")
            return

        self._set_options_enabled(False)
        button = self.option_buttons[index]

        if result.correct:
            button.setStyleSheet(_CORRECT_STYLE)
            self._set_feedback(True, result.message)
            self.btn_next.setText(self.session.next_button_text)
            self.btn_next.setVisible(True)
            return

        button.setStyleSheet(_INCORRECT_STYLE)
        self._set_feedback(False, result.message)
        token = self._question_token
        QTimer.singleShot(config.WRONG_ANSWER_LOCK_MS, lambda: self._unlock_options(token))

    def _unlock_options(self, token: int) -> None:
        if token != self._question_token:
            return
        for btn in self.option_buttons:
            btn.setEnabled(True)
            btn.setStyleSheet("")

    def on_next_clicked(self) -> None:
        try:
            more = self.session.advance()
        except LogitLabError as e:
            logger.warning(f"Cannot advance quiz: {e}")
            return

        if more:
            self._show_question()
        else:
            self._set_feedback(True, COMPLETION_MESSAGE)
            self.btn_next.setVisible(False)
