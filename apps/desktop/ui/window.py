"""
Main window: a single sidebar column showing the current model, the models
that ran before it and the most used models.
"""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QVBoxLayout, QWidget

from modeldash.core.dashboard import Dashboard
from modeldash.core.projector.snapshot import PresentationSnapshot
from modeldash.core.transport.messages import ControllerInput
from modeldash.shared.config import AppConfig

from .components import Card, ModelList, ModelRow, StatusPill
from .theme import Theme

log = logging.getLogger(__name__)


def format_controls(controls: ControllerInput) -> str:
    buttons = [name for name, pressed in (
        ("jump", controls.jump),
        ("boost", controls.boost),
        ("handbrake", controls.handbrake),
    ) if pressed]
    axes = (
        f"throttle {controls.throttle:+.2f}  steer {controls.steer:+.2f}\n"
        f"pitch {controls.pitch:+.2f}  yaw {controls.yaw:+.2f}  roll {controls.roll:+.2f}"
    )
    return axes + "\n" + (", ".join(buttons) if buttons else "no buttons")


class MainWindow(QMainWindow):
    def __init__(self, config: AppConfig, dashboard: Optional[Dashboard] = None) -> None:
        super().__init__()
        self.setWindowTitle("Model Selection")
        self.resize(360, 640)
        self.setMinimumSize(300, 400)

        self.cfg = config
        self.theme = Theme("dark" if config.dark_mode else "light")
        self._live: Optional[bool] = None

        self.dashboard = dashboard or Dashboard(config)
        self.dashboard.on_snapshot(self._render)

        self._build_ui()
        self._apply_theme()
        self.dashboard.start()

    def _apply_theme(self) -> None:
        self.setStyleSheet(self.theme.get_stylesheet())

    def _build_ui(self) -> None:
        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        header = QHBoxLayout()
        title = QLabel("Model Selection")
        title.setObjectName("TitleLabel")
        header.addWidget(title)
        header.addStretch()
        self.status_pill = StatusPill("CONNECTING", active=False)
        header.addWidget(self.status_pill)
        layout.addLayout(header)

        current_card = Card("Current Model")
        self.current_row = ModelRow(name_object="CurrentModelName")
        current_card.layout.addWidget(self.current_row)
        layout.addWidget(current_card)

        self.previous_card = Card("Previous Models")
        self.previous_list = ModelList()
        self.previous_card.layout.addWidget(self.previous_list)
        layout.addWidget(self.previous_card)

        self.popular_card = Card("Most Popular Models")
        self.popular_list = ModelList()
        self.popular_card.layout.addWidget(self.popular_list)
        layout.addWidget(self.popular_card)

        self.controls_card = Card("Controls")
        self.controls_label = QLabel("")
        self.controls_label.setObjectName("ModelDetail")
        self.controls_card.layout.addWidget(self.controls_label)
        layout.addWidget(self.controls_card)

        layout.addStretch()

        self.previous_card.hide()
        self.popular_card.hide()
        self.controls_card.hide()

    def _render(self, snapshot: PresentationSnapshot) -> None:
        self.current_row.set_view(snapshot.current_model)

        if snapshot.live != self._live:
            self._live = snapshot.live
            self.status_pill.setText("LIVE" if snapshot.live else "CONNECTING")
            self.status_pill.set_active(snapshot.live)
            self.status_pill.setStyleSheet(self.theme.get_stylesheet())

        self.previous_card.setVisible(bool(snapshot.previous_models))
        self.previous_list.set_views(snapshot.previous_models)
        self.previous_card.setEnabled(snapshot.live)

        self.popular_card.setVisible(bool(snapshot.popular_models))
        self.popular_list.set_views(snapshot.popular_models)
        self.popular_card.setEnabled(snapshot.live)

        if snapshot.controls is not None:
            self.controls_label.setText(format_controls(snapshot.controls))
            self.controls_card.show()
        else:
            self.controls_card.hide()

    def closeEvent(self, event: QCloseEvent) -> None:
        log.info("Window closing, stopping dashboard")
        self.dashboard.stop()
        super().closeEvent(event)
