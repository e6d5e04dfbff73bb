from __future__ import annotations

from PyQt6.QtCore import QEasingCurve, QPointF, QRectF, Qt, QTimer, QVariantAnimation, pyqtSignal
from PyQt6.QtGui import QAction, QColor, QConicalGradient, QKeySequence, QPainter, QPen
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from boxtimer.core.app_state import TimerModel
from boxtimer.core.config import MAX_ROUNDS, MIN_ROUNDS, WorkoutConfig
from boxtimer.core.plan import Segment, fill_fractions, session_progress, session_segments
from boxtimer.core.timer import Phase, TimerSnapshot
from boxtimer.ui.styles import SEGMENT_REST, SEGMENT_WORK, phase_colors
from boxtimer.ui.time_field import MaskedTimeEdit, format_clock


PULSE_INTERVAL_MS = 1000
INITIAL_CENTER = 0.792


def pulse_centers(phase: Phase, pulsing_up: bool) -> tuple[float, float] | None:
    """Gradient centre heights (left, right) after a pulse; None leaves them where they are."""
    if phase == Phase.WORKING:
        center = 0.99 if pulsing_up else 0.01
        return center, center
    if phase == Phase.RESTING:
        return (0.5, 0.75) if pulsing_up else (0.75, 0.5)
    return None


class GradientBackground(QWidget):
    """Two mirrored conical gradients; the centres pulse once a second while running."""

    clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._phase = Phase.IDLE
        self._running = False
        self._pulsing_up = True
        self._centers = QPointF(INITIAL_CENTER, INITIAL_CENTER)

        self._animation = QVariantAnimation(self)
        self._animation.setDuration(PULSE_INTERVAL_MS)
        self._animation.setEasingCurve(QEasingCurve.Type.InOutQuad)
        self._animation.valueChanged.connect(self._on_animation_value)

        self._pulse_timer = QTimer(self)
        self._pulse_timer.setInterval(PULSE_INTERVAL_MS)
        self._pulse_timer.timeout.connect(self.pulse)

    @property
    def pulsing(self) -> bool:
        return self._pulse_timer.isActive()

    @property
    def centers(self) -> tuple[float, float]:
        return self._centers.x(), self._centers.y()

    def set_state(self, phase: Phase, running: bool) -> None:
        if phase != self._phase:
            self._phase = phase
            self.update()
        if running != self._running:
            self._running = running
            if running:
                self._pulse_timer.start()
            else:
                self._pulse_timer.stop()

    def pulse(self) -> None:
        if not self._running:
            return
        self._pulsing_up = not self._pulsing_up
        target = pulse_centers(self._phase, self._pulsing_up)
        if target is None:
            return
        self._animation.stop()
        self._animation.setStartValue(self._centers)
        self._animation.setEndValue(QPointF(*target))
        self._animation.start()

    def _on_animation_value(self, value) -> None:
        self._centers = value
        self.update()

    def mousePressEvent(self, event) -> None:  # noqa: N802
        self.clicked.emit()
        super().mousePressEvent(event)

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        half = self.width() / 2
        height = self.height()
        dark, bright = phase_colors(self._phase)

        # left half is drawn flipped around its own vertical axis
        painter.save()
        painter.translate(half, 0)
        painter.scale(-1, 1)
        self._paint_half(painter, half, height, self._centers.x(), dark, bright)
        painter.restore()

        painter.save()
        painter.translate(half, 0)
        self._paint_half(painter, half, height, self._centers.y(), dark, bright)
        painter.restore()

    def _paint_half(self, painter: QPainter, width: float, height: float, center_y: float, dark, bright) -> None:
        gradient = QConicalGradient(QPointF(width * 0.97, height * center_y), 0)
        gradient.setColorAt(0.0, dark)
        gradient.setColorAt(1.0, bright)
        painter.fillRect(QRectF(0, 0, width, height), gradient)


class ProgressRing(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFixedSize(200, 200)
        self._progress = 0.0
        self._text = format_clock(0)

    def set_state(self, progress: float, text: str) -> None:
        self._progress = max(0.0, min(1.0, progress))
        self._text = text
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        circle_rect = self.rect().adjusted(10, 10, -10, -10)

        painter.setPen(QPen(QColor(255, 255, 255, 77), 12))
        painter.drawEllipse(circle_rect)
        pen = QPen(QColor("#ffffff"), 12)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        span = int(-360 * 16 * self._progress)
        painter.drawArc(circle_rect, 90 * 16, span)

        font = painter.font()
        font.setPixelSize(48)
        font.setBold(True)
        painter.setFont(font)
        painter.drawText(circle_rect, Qt.AlignmentFlag.AlignCenter, self._text)


class SegmentBar(QWidget):
    """Session plan: work (green) and rest (red) segments, filled as the session advances."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFixedHeight(6)
        self._segments: list[Segment] = []
        self._fills: list[float] = []

    def set_plan(self, segments: list[Segment], progress: float) -> None:
        self._segments = segments
        self._fills = fill_fractions(segments, progress)
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        width = self.width()
        height = self.height()
        x = 0.0
        for segment, fill in zip(self._segments, self._fills):
            color = QColor(SEGMENT_WORK if segment.is_work else SEGMENT_REST)
            background = QColor(color)
            background.setAlphaF(0.2)
            painter.fillRect(QRectF(x, 0, width * segment.fraction, height), background)
            if fill > 0:
                painter.fillRect(QRectF(x, 0, width * fill, height), color)
            x += width * segment.fraction


class MainWindow(QMainWindow):
    def __init__(self, model: TimerModel) -> None:
        super().__init__()
        self.setWindowTitle("Box Timer")
        self.resize(420, 720)
        self.model = model
        self._shown = False

        self._build_ui()
        self._connect_signals()
        self._sync_config(self.model.config)
        self._render(self.model.snapshot)

    def _build_ui(self) -> None:
        self.background = GradientBackground(self)
        self.setCentralWidget(self.background)

        root_layout = QVBoxLayout(self.background)
        root_layout.setContentsMargins(40, 50, 40, 40)
        root_layout.setSpacing(30)
        root_layout.addStretch()

        self.ring = ProgressRing()
        root_layout.addWidget(self.ring, 0, Qt.AlignmentFlag.AlignHCenter)

        self.plan_bar = SegmentBar()
        root_layout.addWidget(self.plan_bar)

        rounds_row = QHBoxLayout()
        self.rounds_label = QLabel()
        self.rounds_label.setObjectName("RoundsLabel")
        self.rounds_spin = QSpinBox()
        self.rounds_spin.setRange(MIN_ROUNDS, MAX_ROUNDS)
        rounds_row.addWidget(self.rounds_label)
        rounds_row.addStretch()
        rounds_row.addWidget(self.rounds_spin)
        root_layout.addLayout(rounds_row)

        work_row = QHBoxLayout()
        self.work_edit = MaskedTimeEdit()
        work_row.addWidget(QLabel("Work Time:"))
        work_row.addStretch()
        work_row.addWidget(self.work_edit)
        root_layout.addLayout(work_row)

        rest_row = QHBoxLayout()
        self.rest_edit = MaskedTimeEdit()
        rest_row.addWidget(QLabel("Rest:"))
        rest_row.addStretch()
        rest_row.addWidget(self.rest_edit)
        root_layout.addLayout(rest_row)

        controls = QHBoxLayout()
        controls.setSpacing(40)
        self.start_btn = QPushButton("Start")
        self.start_btn.setObjectName("PrimaryButton")
        self.pause_btn = QPushButton("Reset")
        self.pause_btn.setObjectName("SecondaryButton")
        controls.addStretch()
        controls.addWidget(self.start_btn)
        controls.addWidget(self.pause_btn)
        controls.addStretch()
        root_layout.addLayout(controls)
        root_layout.addStretch()

        space_action = QAction(self)
        space_action.setShortcut(QKeySequence(Qt.Key.Key_Space))
        space_action.triggered.connect(self.model.toggle)
        self.addAction(space_action)

    def _connect_signals(self) -> None:
        self.start_btn.clicked.connect(self.model.primary_action)
        self.pause_btn.clicked.connect(self.model.secondary_action)
        self.rounds_spin.valueChanged.connect(self._on_rounds_changed)
        self.work_edit.seconds_changed.connect(lambda value: self.model.configure(work_duration=value))
        self.rest_edit.seconds_changed.connect(lambda value: self.model.configure(rest_duration=value))
        self.model.state_changed.connect(self._render)
        self.model.config_changed.connect(self._sync_config)
        self.background.clicked.connect(self.end_editing)

    def _on_rounds_changed(self, value: int) -> None:
        config = self.model.configure(total_rounds=value)
        if config.total_rounds != value:
            self.rounds_spin.setValue(config.total_rounds)

    def _sync_config(self, config: WorkoutConfig) -> None:
        if self.rounds_spin.value() != config.total_rounds:
            self.rounds_spin.setValue(config.total_rounds)
        if self.work_edit.seconds != config.work_duration:
            self.work_edit.set_seconds(config.work_duration)
        if self.rest_edit.seconds != config.rest_duration:
            self.rest_edit.set_seconds(config.rest_duration)
        self._render(self.model.snapshot)

    def _render(self, snapshot: TimerSnapshot) -> None:
        self.background.set_state(snapshot.phase, snapshot.is_running)
        self.ring.set_state(snapshot.progress, format_clock(snapshot.time_remaining))
        config = self.model.config
        self.plan_bar.set_plan(session_segments(config), session_progress(config, snapshot))
        self.rounds_label.setText(f"Rounds: {snapshot.rounds_left}")
        self.pause_btn.setText("Pause" if snapshot.is_running else "Reset")

    def end_editing(self) -> None:
        focused = self.focusWidget()
        if focused is not None:
            focused.clearFocus()

    def showEvent(self, event) -> None:  # noqa: N802
        super().showEvent(event)
        if event.spontaneous() or self._shown:
            return
        # fresh session the first time the window appears
        self._shown = True
        self.model.reset()

    def closeEvent(self, event) -> None:  # noqa: N802
        self.model.reset()
        event.accept()
