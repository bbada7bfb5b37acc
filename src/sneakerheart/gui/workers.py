# -*- coding: utf-8 -*-
"""Worker classes for asynchronous background processing."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from sneakerheart.core.email_gate import EmailGate
from sneakerheart.models.session import EmailEntry

logger = logging.getLogger(__name__)


class EmailSubmitWorker(QObject):
    """Send one email entry to the remote sink off the GUI thread."""
    finished = pyqtSignal()
    error = pyqtSignal(str)

    def __init__(self, gate: EmailGate, entry: EmailEntry) -> None:
        super().__init__()
        self.gate = gate
        self.entry = entry

    def run(self) -> None:
        try:
            logger.info("EmailSubmitWorker: inserting email entry")
            self.gate.deliver(self.entry)
            self.finished.emit()
        except Exception as e:
            logger.exception("EmailSubmitWorker: insert failed")
            self.error.emit(str(e))
