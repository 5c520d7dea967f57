"""In-window notice overlay for warnings and the memory victory."""

from __future__ import annotations

from PySide6.QtCore import QEvent, QObject, Qt, Signal
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from lerndeutsch.ui.colors import HomeColors

_DIM = QColor(20, 10, 50, 70)


class NoticeOverlay(QWidget):
    """Dims its parent and shows a message card with an OK button.

    Clicking the dimmed area or OK closes the notice. The overlay follows
    the parent's size while it exists.
    """

    closed = Signal()

    def __init__(self, parent: QWidget) -> None:
        super().__init__(parent)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addStretch(1)
        row = QHBoxLayout()
        row.addStretch(1)
        self._card = self._build_card()
        row.addWidget(self._card)
        row.addStretch(1)
        outer.addLayout(row)
        outer.addStretch(1)

        parent.installEventFilter(self)
        self.hide()

    def _build_card(self) -> QFrame:
        card = QFrame()
        card.setObjectName("noticeCard")
        card.setFixedWidth(420)
        card.setStyleSheet(
            f"""
            QFrame#noticeCard {{
                background: #ffffff;
                border: 1px solid {HomeColors.PRIMARY_LIGHT};
                border-radius: 18px;
            }}
            """
        )
        glow = QGraphicsDropShadowEffect(card)
        glow.setBlurRadius(24)
        glow.setOffset(0, 4)
        glow.setColor(QColor(HomeColors.PRIMARY_DARK).darker(150))
        card.setGraphicsEffect(glow)

        body = QVBoxLayout(card)
        body.setContentsMargins(26, 22, 26, 22)
        body.setSpacing(16)

        title_row = QHBoxLayout()
        title_row.setSpacing(10)
        self._icon_label = QLabel("!")
        self._icon_label.setFixedSize(40, 40)
        self._icon_label.setAlignment(Qt.AlignCenter)
        title_row.addWidget(self._icon_label)
        self._title_label = QLabel("")
        title_row.addWidget(self._title_label, 1)
        body.addLayout(title_row)

        self._message_label = QLabel("")
        self._message_label.setWordWrap(True)
        self._message_label.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 14px;")
        body.addWidget(self._message_label)

        ok_btn = QPushButton("OK")
        ok_btn.setCursor(Qt.PointingHandCursor)
        ok_btn.setStyleSheet(
            f"""
            QPushButton {{
                background: {HomeColors.PRIMARY};
                color: white;
                border: none;
                border-radius: 12px;
                padding: 10px;
                font-size: 14px;
                font-weight: 700;
            }}
            QPushButton:hover {{ background: {HomeColors.PRIMARY_DARK}; }}
            """
        )
        ok_btn.clicked.connect(self.dismiss)
        body.addWidget(ok_btn)
        return card

    def show_notice(self, title: str, message: str, *, icon: str = "!", color: str = HomeColors.PRIMARY) -> None:
        self._icon_label.setText(icon)
        self._icon_label.setStyleSheet(
            f"background: {HomeColors.BG_TOP}; border-radius: 12px;"
            f" color: {color}; font-size: 20px; font-weight: 900;"
        )
        self._title_label.setText(title)
        self._title_label.setStyleSheet(f"color: {color}; font-size: 18px; font-weight: 800;")
        self._message_label.setText(message)
        self.setGeometry(self.parentWidget().rect())
        self.raise_()
        self.show()

    def dismiss(self) -> None:
        if not self.isVisible():
            return
        self.hide()
        self.closed.emit()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), _DIM)
        painter.end()

    def mousePressEvent(self, event) -> None:
        if not self._card.geometry().contains(event.position().toPoint()):
            self.dismiss()
        event.accept()

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self.setGeometry(obj.rect())
        return super().eventFilter(obj, event)
