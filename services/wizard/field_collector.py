# -*- coding: utf-8 -*-
"""
Field collection for the rationale wizard.

Reads the current input values of one step and turns them into a
partial working record.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from models.working_record import RecordValue
from services.wizard.field_parsers import collected_tally
from services.wizard.step_definitions import StepDefinition


class InputSource(ABC):
    """Where the wizard reads in-progress (not yet collected) input values."""

    @abstractmethod
    def read_step(self, step: StepDefinition) -> Dict[str, Any]:
        """
        Return the raw values of every field of ``step``.

        Missing inputs are reported as empty strings.
        """
        pass


class DictInputSource(InputSource):
    """Input source backed by a plain dictionary of field id -> text."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self.values: Dict[str, Any] = dict(values or {})

    def set(self, field_id: str, value: Any):
        self.values[field_id] = value

    def update(self, values: Mapping[str, Any]):
        self.values.update(values)

    def read_step(self, step: StepDefinition) -> Dict[str, Any]:
        return {field_id: self.values.get(field_id, "") for field_id in step.field_ids}


class FieldCollector:
    """Collects a step's values into a partial record."""

    def collect(self, step: StepDefinition, values: Mapping[str, Any]) -> Dict[str, RecordValue]:
        """
        Build the partial record for one step.

        Every field is stored as trimmed text; numeric tally fields are
        stored as a non-negative int, or None when empty, non-numeric or
        negative.
        """
        partial: Dict[str, RecordValue] = {}
        for f in step.fields:
            raw = values.get(f.field_id)
            text = "" if raw is None else str(raw).strip()
            if f.numeric:
                partial[f.field_id] = collected_tally(text)
            else:
                partial[f.field_id] = text
        return partial
