from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QLineEdit, QWidget

from boxtimer.core.config import MAX_PHASE_SECONDS, MIN_PHASE_SECONDS


def format_clock(seconds: float) -> str:
    """Countdown text, ``m:ss``."""
    total = max(0, int(seconds))
    return f"{total // 60}:{total % 60:02d}"


def format_field(seconds: float, min_seconds: int = MIN_PHASE_SECONDS, max_seconds: int = MAX_PHASE_SECONDS) -> str:
    total = max(min_seconds, min(max_seconds, int(seconds)))
    return f"{total // 60:02d}:{total % 60:02d}"


def parse_masked(
    text: str,
    min_seconds: int = MIN_PHASE_SECONDS,
    max_seconds: int = MAX_PHASE_SECONDS,
) -> tuple[str, int]:
    """Read typed digits as ``mm:ss``: the last four digits count, seconds cap at 59."""
    digits = "".join(ch for ch in text if ch.isdigit())
    padded = digits[-4:].rjust(4, "0")
    minutes = int(padded[:2])
    seconds = min(int(padded[2:]), 59)
    total = max(min_seconds, min(max_seconds, minutes * 60 + seconds))
    return f"{minutes:02d}:{seconds:02d}", total


class MaskedTimeEdit(QLineEdit):
    seconds_changed = pyqtSignal(float)

    def __init__(
        self,
        seconds: float = 0,
        parent: QWidget | None = None,
        min_seconds: int = MIN_PHASE_SECONDS,
        max_seconds: int = MAX_PHASE_SECONDS,
    ) -> None:
        super().__init__(parent)
        self.min_seconds = min_seconds
        self.max_seconds = max_seconds
        self._seconds = float(max(min_seconds, min(max_seconds, int(seconds))))
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFixedWidth(80)
        self.setText(format_field(self._seconds, min_seconds, max_seconds))
        self.textEdited.connect(self._on_text_edited)

    @property
    def seconds(self) -> float:
        return self._seconds

    def set_seconds(self, seconds: float) -> None:
        self._seconds = float(max(self.min_seconds, min(self.max_seconds, int(seconds))))
        self.setText(format_field(self._seconds, self.min_seconds, self.max_seconds))

    def _on_text_edited(self, text: str) -> None:
        formatted, total = parse_masked(text, self.min_seconds, self.max_seconds)
        if formatted != text:
            self.setText(formatted)
        if float(total) != self._seconds:
            self._seconds = float(total)
            self.seconds_changed.emit(self._seconds)
