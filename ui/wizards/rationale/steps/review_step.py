# -*- coding: utf-8 -*-
"""
Review Step - Step 6 of the rationale wizard.

Renders the review projection built by the navigator and shows the
latest generation error, if any. Collects nothing.
"""

import html
from typing import Any, Dict, Optional

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QLabel, QScrollArea, QVBoxLayout, QWidget

from app.config import Config
from services.wizard.review_projection import ReviewProjection, ReviewSection
from ui.wizards.framework import BaseStep


def render_section_html(section: ReviewSection) -> str:
    """Rich-text rendering of one review section (values are escaped)."""
    parts = [f"<h3>{html.escape(section.title)}</h3>"]
    for item in section.items:
        label = html.escape(item.label)
        value = html.escape(item.value)
        if item.block:
            parts.append(f"<p><b>{label}:</b></p><pre>{value}</pre>")
        else:
            parts.append(f"<p><b>{label}:</b> {value}</p>")
    return "".join(parts)


class ReviewStep(BaseStep):
    """Step 6: Review & Generate."""

    def __init__(self, definition, parent=None):
        super().__init__(definition, parent)
        self.projection: Optional[ReviewProjection] = None
        self.initialize()

    def setup_ui(self):
        heading = QLabel(f"Step {self.definition.number}: {self.definition.title}")
        heading.setStyleSheet(f"font-size: 15px; font-weight: bold; color: {Config.TEXT_COLOR};")
        self.main_layout.addWidget(heading)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        content = QWidget()
        self.sections_layout = QVBoxLayout(content)
        self.sections_layout.setContentsMargins(0, 0, 0, 0)
        self.sections_layout.setSpacing(16)
        self.sections_layout.addStretch()
        scroll.setWidget(content)
        self.main_layout.addWidget(scroll, 1)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
        self.main_layout.addWidget(self.error_label)

    def show_projection(self, projection: ReviewProjection):
        """Replace the rendered sections with ``projection``."""
        self.projection = projection
        self.set_error_message("")

        while self.sections_layout.count() > 1:
            item = self.sections_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

        if projection.is_empty:
            self.sections_layout.insertWidget(0, QLabel("Nothing has been entered yet."))
            return

        for index, section in enumerate(projection.sections):
            label = QLabel(render_section_html(section))
            label.setTextFormat(Qt.RichText)
            label.setWordWrap(True)
            label.setTextInteractionFlags(Qt.TextSelectableByMouse)
            self.sections_layout.insertWidget(index, label)

    def set_error_message(self, message: str):
        self.error_label.setText(message)

    def error_message(self) -> str:
        return self.error_label.text()

    def read_values(self) -> Dict[str, Any]:
        return {}
