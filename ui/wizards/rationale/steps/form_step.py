# -*- coding: utf-8 -*-
"""
Form Step - generic input page built from a step definition.

Single-line and numeric fields use QLineEdit, multiline fields use
QPlainTextEdit. Fields with a maximum length get a live character
counter.
"""

from typing import Any, Dict, Union

from PyQt5.QtWidgets import QFormLayout, QLabel, QLineEdit, QPlainTextEdit, QVBoxLayout, QWidget

from app.config import Config
from services.wizard.step_definitions import FieldDefinition
from ui.wizards.framework import BaseStep

InputWidget = Union[QLineEdit, QPlainTextEdit]


class FormStep(BaseStep):
    """Input page for steps 1..5."""

    def __init__(self, definition, parent=None):
        super().__init__(definition, parent)
        self.inputs: Dict[str, InputWidget] = {}
        self.counters: Dict[str, QLabel] = {}
        # Inputs must exist before the navigator reads them
        self.initialize()

    def setup_ui(self):
        heading = QLabel(f"Step {self.definition.number}: {self.definition.title}")
        heading.setStyleSheet(f"font-size: 15px; font-weight: bold; color: {Config.TEXT_COLOR};")
        self.main_layout.addWidget(heading)

        form = QFormLayout()
        form.setSpacing(10)
        for field_def in self.definition.fields:
            form.addRow(self._make_label(field_def), self._make_input(field_def))
        self.main_layout.addLayout(form)
        self.main_layout.addStretch()

    def _make_label(self, field_def: FieldDefinition) -> QLabel:
        text = field_def.label + (" *" if field_def.required else "")
        return QLabel(text)

    def _make_input(self, field_def: FieldDefinition) -> QWidget:
        if field_def.multiline:
            widget = QPlainTextEdit()
            widget.setPlainText(field_def.default)
            widget.setMinimumHeight(90)
        else:
            widget = QLineEdit(field_def.default)
        if field_def.placeholder:
            widget.setPlaceholderText(field_def.placeholder)
        widget.setObjectName(field_def.field_id)
        self.inputs[field_def.field_id] = widget

        if field_def.max_length is None:
            return widget

        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(widget)

        counter = QLabel()
        self.counters[field_def.field_id] = counter
        layout.addWidget(counter)

        widget.textChanged.connect(lambda *_: self._update_counter(field_def))
        self._update_counter(field_def)
        return container

    def _update_counter(self, field_def: FieldDefinition):
        count = len(self.get_value(field_def.field_id))
        counter = self.counters[field_def.field_id]
        counter.setText(f"{count} / {field_def.max_length}")
        color = Config.ERROR_COLOR if count > field_def.max_length else Config.TEXT_LIGHT
        counter.setStyleSheet(f"color: {color};")

    # =========================================================================
    # Values
    # =========================================================================

    def get_value(self, field_id: str) -> str:
        widget = self.inputs.get(field_id)
        if widget is None:
            return ""
        if isinstance(widget, QPlainTextEdit):
            return widget.toPlainText()
        return widget.text()

    def set_value(self, field_id: str, text: str):
        widget = self.inputs[field_id]
        if isinstance(widget, QPlainTextEdit):
            widget.setPlainText(text)
        else:
            widget.setText(text)

    def read_values(self) -> Dict[str, Any]:
        return {field_id: self.get_value(field_id) for field_id in self.inputs}

    def focus_field(self, field_id: str):
        widget = self.inputs.get(field_id)
        if widget is not None:
            widget.setFocus()

    def counter_text(self, field_id: str) -> str:
        counter = self.counters.get(field_id)
        return counter.text() if counter else ""
