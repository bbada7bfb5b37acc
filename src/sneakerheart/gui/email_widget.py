# -*- coding: utf-8 -*-
"""Email capture form shown once per device."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from sneakerheart.constants import (
    EMAIL_HEADLINE,
    EMAIL_PLACEHOLDER,
    EMAIL_SUBMITTING_LABEL,
    EMAIL_SUBMIT_LABEL,
)
from sneakerheart.models.session import SubmissionStatus


class EmailCaptureWidget(QWidget):
    """Red brand band on top, white form below."""

    submit_requested = pyqtSignal(str)
    text_edited = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.brand_label = QLabel("Tinker")
        self.brand_label.setObjectName("brandBand")
        self.brand_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.headline_label = QLabel(EMAIL_HEADLINE)
        self.headline_label.setObjectName("formHeadline")
        self.headline_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.email_input = QLineEdit()
        self.email_input.setPlaceholderText(EMAIL_PLACEHOLDER)
        self.email_input.setAccessibleName("Correo electrónico")
        self.email_input.textEdited.connect(lambda _text: self.text_edited.emit())
        self.email_input.returnPressed.connect(self._on_submit)

        self.error_label = QLabel("")
        self.error_label.setObjectName("errorText")
        self.error_label.setWordWrap(True)
        self.error_label.hide()

        self.submit_button = QPushButton(EMAIL_SUBMIT_LABEL)
        self.submit_button.setObjectName("primaryButton")
        self.submit_button.clicked.connect(self._on_submit)

        form = QWidget()
        form.setObjectName("formArea")
        form_layout = QVBoxLayout(form)
        form_layout.setContentsMargins(24, 24, 24, 24)
        form_layout.setSpacing(10)
        form_layout.addStretch(1)
        form_layout.addWidget(self.headline_label)
        form_layout.addWidget(self.email_input)
        form_layout.addWidget(self.error_label)
        form_layout.addWidget(self.submit_button)
        form_layout.addStretch(1)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self.brand_label, 1)
        layout.addWidget(form, 2)

    def _on_submit(self) -> None:
        if not self.submit_button.isEnabled():
            return
        self.submit_requested.emit(self.email_input.text())

    def set_status(self, status: SubmissionStatus) -> None:
        busy = status.is_submitting
        self.email_input.setEnabled(not busy)
        self.submit_button.setEnabled(not busy)
        self.submit_button.setText(EMAIL_SUBMITTING_LABEL if busy else EMAIL_SUBMIT_LABEL)
        if status.is_error:
            self.error_label.setText(status.message)
            self.error_label.show()
        else:
            self.error_label.clear()
            self.error_label.hide()
