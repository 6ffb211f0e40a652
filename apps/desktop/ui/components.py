"""
Reusable sidebar widgets: cards, status pill and model rows.
"""

from __future__ import annotations

from typing import Sequence

from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from modeldash.core.projector.snapshot import ModelView


class Card(QFrame):
    """Rounded container with a small uppercase label on top."""

    def __init__(self, label: str = "", parent=None):
        super().__init__(parent)
        self.setObjectName("Card")
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(16, 16, 16, 16)
        self.layout.setSpacing(8)
        if label:
            title = QLabel(label)
            title.setObjectName("SectionLabel")
            self.layout.addWidget(title)


class StatusPill(QLabel):
    def __init__(self, text: str = "", active: bool = False, parent=None):
        super().__init__(text, parent)
        self.set_active(active)

    def set_active(self, active: bool) -> None:
        self.setObjectName("StatusPillActive" if active else "StatusPill")


class ModelRow(QWidget):
    """Name on the left, detail (duration or share) on the right."""

    def __init__(self, name_object: str = "ModelName", parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)

        self.name_label = QLabel("")
        self.name_label.setObjectName(name_object)
        layout.addWidget(self.name_label, 1)

        self.detail_label = QLabel("")
        self.detail_label.setObjectName("ModelDetail")
        layout.addWidget(self.detail_label)

    def set_view(self, view: ModelView) -> None:
        self.name_label.setText(view.name)
        self.detail_label.setText(view.detail)


class ModelList(QWidget):
    """Vertical list of ModelRow widgets, reusing rows between updates."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(6)
        self._rows: list[ModelRow] = []

    def set_views(self, views: Sequence[ModelView]) -> None:
        while len(self._rows) < len(views):
            row = ModelRow(parent=self)
            self._layout.addWidget(row)
            self._rows.append(row)
        for idx, row in enumerate(self._rows):
            if idx < len(views):
                row.set_view(views[idx])
                row.show()
            else:
                row.hide()
