from __future__ import annotations

"""Точка входа приложения Box Timer.

Модуль настраивает логирование, создает Qt-приложение, движок интервального
таймера с тиками от QTimer и запускает главное окно.
"""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication


from boxtimer.core.app_state import TimerModel
from boxtimer.core.config import WorkoutConfig
from boxtimer.core.driver import QtTickDriver
from boxtimer.core.timer import IntervalTimer
from boxtimer.ui.main_window import MainWindow
from boxtimer.ui.styles import apply_theme


LOG_LEVEL_ENV = "BOXTIMER_LOG_LEVEL"


def configure_logging() -> None:
    """Настраивает корневой логгер; уровень берется из BOXTIMER_LOG_LEVEL."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_timer(app: QApplication, config: WorkoutConfig | None = None) -> IntervalTimer:
    """Создает движок с драйвером тиков, привязанным к приложению."""
    config = (config or WorkoutConfig()).clamped()
    return IntervalTimer(
        QtTickDriver(app),
        total_rounds=config.total_rounds,
        work_duration=config.work_duration,
        rest_duration=config.rest_duration,
    )


def main() -> int:
    """Создает зависимости приложения и запускает главный UI-цикл."""
    configure_logging()
    app = QApplication(sys.argv)
    apply_theme(app)

    model = TimerModel(build_timer(app))

    window = MainWindow(model=model)

    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
