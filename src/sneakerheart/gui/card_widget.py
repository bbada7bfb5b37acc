# -*- coding: utf-8 -*-
"""Swipeable sneaker card painted with QPainter."""

from __future__ import annotations

import re

from PyQt6.QtCore import QEasingCurve, QPointF, QRectF, Qt, QVariantAnimation, pyqtSignal
from PyQt6.QtGui import QColor, QFont, QMouseEvent, QPainter, QPainterPath, QPen, QPixmap
from PyQt6.QtWidgets import QSizePolicy, QWidget

from sneakerheart.constants import BRAND_LABEL, BRAND_RED, OVERLAY_GREEN, OVERLAY_RED
from sneakerheart.core.overlay import NO_OVERLAY, OverlayKind, OverlayState
from sneakerheart.models.sneaker import SneakerProfile


_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}\b")

MOUSE_POINTER_ID = 0
ROTATION_DIVISOR = 20.0


def color_from_token(token: str | None, default: str = BRAND_RED) -> str:
    """Extract a hex color from tokens like 'bg-[#788d42]' or '#788d42'."""
    if not token:
        return default
    match = _HEX_COLOR.search(token)
    return match.group(0) if match else default


class SneakerCardWidget(QWidget):
    """Render the current sneaker and forward pointer input as drag signals."""

    drag_started = pyqtSignal(int, float)
    drag_moved = pyqtSignal(float)
    drag_finished = pyqtSignal(int)
    drag_cancelled = pyqtSignal()

    def __init__(self, spring_back_ms: int = 300, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._sneaker: SneakerProfile | None = None
        self._pixmap = QPixmap()
        self._overlay: OverlayState = NO_OVERLAY
        self._offset = 0.0
        self._pressed = False
        self._input_enabled = True

        self._spring = QVariantAnimation(self)
        self._spring.setDuration(max(0, int(spring_back_ms)))
        self._spring.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._spring.valueChanged.connect(self._on_spring_value)

        self.setMinimumSize(280, 420)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.CursorShape.OpenHandCursor)

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def overlay(self) -> OverlayState:
        return self._overlay

    def sneaker(self) -> SneakerProfile | None:
        return self._sneaker

    def set_sneaker(self, sneaker: SneakerProfile | None, pixmap: QPixmap) -> None:
        self._spring.stop()
        self._sneaker = sneaker
        self._pixmap = pixmap
        self._offset = 0.0
        self._overlay = NO_OVERLAY
        self.update()

    def set_input_enabled(self, enabled: bool) -> None:
        self._input_enabled = enabled
        self.setCursor(Qt.CursorShape.OpenHandCursor if enabled else Qt.CursorShape.ArrowCursor)

    def set_feedback(self, displacement: float, overlay: OverlayState) -> None:
        """Follow the finger while pressed; spring back to center once released."""
        self._overlay = overlay
        if self._pressed or displacement != 0:
            self._spring.stop()
            self._offset = displacement
        elif self._offset != 0 and self._spring.duration() > 0:
            self._spring.stop()
            self._spring.setStartValue(float(self._offset))
            self._spring.setEndValue(0.0)
            self._spring.start()
        else:
            self._offset = 0.0
        self.update()

    def _on_spring_value(self, value) -> None:
        self._offset = float(value)
        self.update()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton or not self._input_enabled:
            super().mousePressEvent(event)
            return
        self._pressed = True
        self.setCursor(Qt.CursorShape.ClosedHandCursor)
        self.drag_started.emit(MOUSE_POINTER_ID, event.globalPosition().x())
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if not self._pressed:
            super().mouseMoveEvent(event)
            return
        self.drag_moved.emit(event.globalPosition().x())
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if not self._pressed or event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self._pressed = False
        self.setCursor(Qt.CursorShape.OpenHandCursor if self._input_enabled else Qt.CursorShape.ArrowCursor)
        self.drag_finished.emit(MOUSE_POINTER_ID)
        event.accept()

    def hideEvent(self, event) -> None:  # type: ignore[override]
        if self._pressed:
            self._pressed = False
            self.drag_cancelled.emit()
        super().hideEvent(event)

    def paintEvent(self, event) -> None:  # type: ignore[override]
        del event
        if self._sneaker is None:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)

        center = QPointF(self.width() / 2.0 + self._offset, self.height() / 2.0)
        painter.translate(center)
        painter.rotate(self._offset / ROTATION_DIVISOR)
        painter.translate(-self.width() / 2.0, -self.height() / 2.0)

        card = QRectF(self.rect()).adjusted(8, 8, -8, -8)
        clip = QPainterPath()
        clip.addRoundedRect(card, 16, 16)
        painter.setClipPath(clip)
        painter.fillRect(card, QColor("white"))

        image_height = min(card.width() * 2.0 / 3.0, card.height() * 0.5)
        image_rect = QRectF(card.left(), card.top(), card.width(), image_height)
        self._paint_image(painter, image_rect)

        info_rect = QRectF(card.left(), image_rect.bottom(), card.width(), card.bottom() - image_rect.bottom())
        self._paint_info(painter, info_rect, self._sneaker)
        self._paint_overlay(painter, card)
        painter.end()

    def _paint_image(self, painter: QPainter, rect: QRectF) -> None:
        painter.fillRect(rect, QColor("#f3f4f6"))
        if self._pixmap.isNull():
            return
        scaled = self._pixmap.scaled(
            int(rect.width()),
            int(rect.height()),
            Qt.AspectRatioMode.KeepAspectRatioByExpanding,
            Qt.TransformationMode.SmoothTransformation,
        )
        source = QRectF(
            (scaled.width() - rect.width()) / 2.0,
            (scaled.height() - rect.height()) / 2.0,
            rect.width(),
            rect.height(),
        )
        painter.drawPixmap(rect, scaled, source)

    def _paint_info(self, painter: QPainter, rect: QRectF, sneaker: SneakerProfile) -> None:
        painter.fillRect(rect, QColor(color_from_token(sneaker.info_box_bg)))

        brand_font = QFont()
        brand_font.setBold(True)
        brand_font.setPointSize(10)
        name_font = QFont()
        name_font.setWeight(QFont.Weight.ExtraBold)
        name_font.setPointSize(18)
        label_font = QFont()
        label_font.setPointSize(8)
        value_font = QFont()
        value_font.setBold(True)
        value_font.setPointSize(11)

        top = rect.top() + 10
        painter.setPen(QColor("black"))
        painter.setFont(brand_font)
        painter.drawText(QRectF(rect.left(), top, rect.width(), 18), Qt.AlignmentFlag.AlignCenter, BRAND_LABEL)
        painter.setFont(name_font)
        painter.drawText(
            QRectF(rect.left(), top + 18, rect.width(), 32), Qt.AlignmentFlag.AlignCenter, sneaker.name.upper()
        )

        box = QRectF(rect.left() + 14, top + 60, rect.width() - 28, rect.bottom() - top - 74)
        if box.height() <= 0:
            return
        rows = (
            ("Tipo de compra", sneaker.purchase_type),
            ("Disponibilidad", sneaker.availability_type),
            ("Sobre mi", sneaker.description),
        )
        painter.setPen(QPen(QColor("black"), 1))
        painter.drawRect(box)
        row_height = box.height() / len(rows)
        for index, (label, value) in enumerate(rows):
            row = QRectF(box.left(), box.top() + index * row_height, box.width(), row_height)
            if index:
                painter.setPen(QPen(QColor("black"), 1))
                painter.drawLine(row.topLeft(), row.topRight())
            painter.setPen(QColor("black"))
            painter.setFont(label_font)
            painter.drawText(row.adjusted(8, 4, -8, 0), Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop, label)
            painter.setPen(QColor("white"))
            painter.setFont(value_font)
            painter.drawText(
                row.adjusted(8, 18, -8, -4),
                Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop | Qt.TextFlag.TextWordWrap,
                value.upper(),
            )

    def _paint_overlay(self, painter: QPainter, rect: QRectF) -> None:
        if self._overlay.kind is OverlayKind.NONE or self._overlay.intensity <= 0:
            return
        is_like = self._overlay.kind is OverlayKind.LIKE
        painter.save()
        painter.setOpacity(self._overlay.intensity)
        painter.fillRect(rect, QColor(OVERLAY_GREEN if is_like else OVERLAY_RED))
        icon_font = QFont()
        icon_font.setBold(True)
        # Heart drawn larger than the cross for visual balance
        icon_font.setPointSize(96 if is_like else 76)
        painter.setFont(icon_font)
        painter.setPen(QColor(255, 255, 255, 204))
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, "♥" if is_like else "✕")
        painter.restore()
