"""Shared widgets: background, glass card, word card and game card."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, QPoint
from PySide6.QtGui import QColor, QLinearGradient, QPainter, QRadialGradient
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from lerndeutsch.core.words import WordEntry
from lerndeutsch.ui.colors import HomeColors, blend_hex
from lerndeutsch.ui.models import GameOption


class CoolBackground(QWidget):
    """Purple gradient with faint umlaut letters drawn in the corners."""

    LETTERS = (("Ä", 0.08, 0.22), ("Ö", 0.86, 0.35), ("Ü", 0.14, 0.78), ("ß", 0.78, 0.83))
    GLOWS = ((0.85, 0.15, 220), (0.12, 0.82, 170))

    def paintEvent(self, event) -> None:
        w, h = self.width(), self.height()
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        sky = QLinearGradient(0, 0, 0, h)
        for stop, color in ((0.0, HomeColors.BG_TOP), (0.5, HomeColors.BG_MIDDLE), (1.0, HomeColors.BG_BOTTOM)):
            sky.setColorAt(stop, QColor(color))
        painter.fillRect(self.rect(), sky)

        painter.setPen(Qt.NoPen)
        for fx, fy, radius in self.GLOWS:
            center = QPoint(int(w * fx), int(h * fy))
            glow = QRadialGradient(center.x(), center.y(), radius)
            glow.setColorAt(0, QColor(255, 255, 255, 70))
            glow.setColorAt(1, QColor(255, 255, 255, 0))
            painter.setBrush(glow)
            painter.drawEllipse(center, radius, radius)

        font = painter.font()
        font.setPointSize(90)
        font.setBold(True)
        painter.setFont(font)
        painter.setOpacity(0.06)
        painter.setPen(QColor(HomeColors.PRIMARY_DARK))
        for letter, fx, fy in self.LETTERS:
            painter.drawText(int(w * fx), int(h * fy), letter)
        painter.end()


class GlassCard(QFrame):
    """Glassmorphism card."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("glassCard")
        self.setStyleSheet(
            f"""
            QFrame#glassCard {{
                background: {HomeColors.CARD_BG};
                border: 1px solid {HomeColors.CARD_BORDER};
                border-radius: 20px;
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(30)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(40, 20, 90, 40))
        self.setGraphicsEffect(shadow)


class WordCard(QFrame):
    """One vocabulary item in the learn view."""

    def __init__(self, entry: WordEntry, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("wordCard")
        self.setStyleSheet(
            f"""
            QFrame#wordCard {{
                background: {HomeColors.CARD_BG};
                border: 1px solid {HomeColors.CARD_BORDER};
                border-radius: 16px;
            }}
            """
        )
        layout = QVBoxLayout(self)
        layout.setContentsMargins(18, 14, 18, 14)
        layout.setSpacing(4)

        german = QLabel(entry.german)
        german.setStyleSheet(f"color: {HomeColors.PRIMARY}; font-size: 18px; font-weight: 800;")
        layout.addWidget(german)
        czech = QLabel(entry.czech)
        czech.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 14px; font-weight: 600;")
        layout.addWidget(czech)
        if entry.plural_label:
            plural = QLabel(entry.plural_label)
            plural.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 12px;")
            layout.addWidget(plural)
        if entry.example:
            example = QLabel(f'"{entry.example}"')
            example.setWordWrap(True)
            example.setStyleSheet(f"color: {HomeColors.TEXT_MUTED}; font-size: 12px; font-style: italic;")
            layout.addWidget(example)


class GameCard(QFrame):
    """Clickable card in the game selection grid."""

    def __init__(
        self,
        option: GameOption,
        on_click: Callable[[GameOption], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._option = option
        self._on_click = on_click
        self._hovered = False
        self.setObjectName("gameCard")
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumHeight(120)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(18, 14, 18, 14)
        layout.setSpacing(16)

        icon_box = QFrame()
        icon_box.setObjectName("gameIconBox")
        icon_box.setFixedSize(56, 56)
        icon_box.setStyleSheet(
            f"""
            QFrame#gameIconBox {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 {HomeColors.PRIMARY_LIGHT}, stop:1 {HomeColors.PRIMARY});
                border-radius: 16px;
            }}
            """
        )
        icon_layout = QVBoxLayout(icon_box)
        icon_layout.setContentsMargins(0, 0, 0, 0)
        icon_label = QLabel(option.icon)
        icon_label.setAlignment(Qt.AlignCenter)
        icon_label.setStyleSheet("color: white; font-size: 24px; font-weight: 900;")
        icon_layout.addWidget(icon_label)
        layout.addWidget(icon_box)

        info = QVBoxLayout()
        info.setSpacing(4)
        title = QLabel(option.title)
        title.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 16px; font-weight: 800;")
        info.addWidget(title)
        description = QLabel(option.description)
        description.setWordWrap(True)
        description.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 12px;")
        info.addWidget(description)
        layout.addLayout(info, 1)

        self._apply_style()

    def _apply_style(self) -> None:
        border = HomeColors.PRIMARY if self._hovered else blend_hex(HomeColors.PRIMARY_LIGHT, "#ffffff", 0.6)
        background = HomeColors.CARD_BG_HOVER if self._hovered else HomeColors.CARD_BG
        self.setStyleSheet(
            f"""
            QFrame#gameCard {{
                background: {background};
                border: 1px solid {border};
                border-radius: 18px;
            }}
            """
        )

    def enterEvent(self, event) -> None:
        self._hovered = True
        self._apply_style()
        super().enterEvent(event)

    def leaveEvent(self, event) -> None:
        self._hovered = False
        self._apply_style()
        super().leaveEvent(event)

    def mousePressEvent(self, event) -> None:
        self._on_click(self._option)
        super().mousePressEvent(event)
