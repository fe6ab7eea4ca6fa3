# -*- coding: utf-8 -*-
"""
Wizard Context - Session state shared by the navigator and the steps.

Holds:
- The working record (single source of truth for collected data)
- The current step number (1-based)
- Step completion tracking
- Session reference number
"""

from typing import Dict, Any, Optional
from datetime import datetime
import uuid

from models.working_record import WorkingRecord


class WizardContext:
    """
    Base class for wizard context.

    One context exists per wizard session and is discarded with it.
    """

    def __init__(self):
        """Initialize base context properties."""
        self.wizard_id: str = str(uuid.uuid4())
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_step: int = 1
        self.reference_number: str = self._generate_reference_number()

        self.completed_steps: set = set()
        self.record = WorkingRecord()

        # Latest review projection (rebuilt on entering the review step)
        self.review: Optional[Any] = None

    def _generate_reference_number(self) -> str:
        """
        Generate a reference number for the wizard session.

        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: WIZ-20260118153045-A3F2
        """
        timestamp = self.created_at.strftime("%Y%m%d%H%M%S")
        short_id = self.wizard_id[:4].upper()
        prefix = self._get_reference_prefix()
        return f"{prefix}-{timestamp}-{short_id}"

    def _get_reference_prefix(self) -> str:
        """Get the prefix for reference number. Override in subclasses."""
        return "WIZ"

    def mark_step_completed(self, step_number: int):
        """Mark a step as completed."""
        self.completed_steps.add(step_number)
        self.updated_at = datetime.now()

    def is_step_completed(self, step_number: int) -> bool:
        return step_number in self.completed_steps

    def merge(self, partial: Dict[str, Any]):
        """Merge collected step values into the working record."""
        self.record.merge(partial)
        self.updated_at = datetime.now()

    def reset(self):
        """Discard collected data and return to step 1."""
        self.record.clear()
        self.completed_steps.clear()
        self.current_step = 1
        self.review = None
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize context to dictionary (for logging and completion signals).

        Subclasses should call super().to_dict() and add their own fields.
        """
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step": self.current_step,
            "completed_steps": sorted(self.completed_steps),
            "data": self.record.snapshot()
        }
