from __future__ import annotations

from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QApplication

from boxtimer.core.timer import Phase


THEME_QSS = """
QWidget {
    color: #ffffff;
    font-size: 20px;
}

QLabel {
    background: transparent;
}

QLabel#RoundsLabel {
    font-size: 20px;
}

QPushButton {
    border: none;
    border-right: 7px solid #000000;
    border-bottom: 7px solid #000000;
    background: #ffffff;
    color: #000000;
    min-width: 100px;
    min-height: 50px;
    font-size: 18px;
}

QPushButton:pressed {
    border: none;
    border-left: 7px solid transparent;
    border-top: 7px solid transparent;
}

QPushButton#SecondaryButton {
    border-right: none;
    border-left: 7px solid #000000;
}

QLineEdit, QSpinBox {
    background: #ffffff;
    color: #000000;
    border: 1px solid rgba(128, 128, 128, 0.6);
    border-right: 10px solid #000000;
    border-bottom: 5px solid #000000;
    min-height: 35px;
}
"""


# (dark, bright) per phase; idle uses the rest palette
WORK_COLORS = (QColor.fromHsvF(0.33, 0.2, 0.35), QColor.fromHsvF(0.35, 1.0, 0.85))
REST_COLORS = (QColor.fromHsvF(0.0, 0.2, 0.35), QColor.fromHsvF(0.0, 1.0, 0.85))

SEGMENT_WORK = QColor("#4caf50")
SEGMENT_REST = QColor("#f44336")


def phase_colors(phase: Phase) -> tuple[QColor, QColor]:
    return WORK_COLORS if phase == Phase.WORKING else REST_COLORS


def apply_theme(app: QApplication) -> None:
    app.setStyleSheet(THEME_QSS)
