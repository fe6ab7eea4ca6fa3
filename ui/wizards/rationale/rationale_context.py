# -*- coding: utf-8 -*-
"""
Rationale Context - Wizard context for the CIP-136 rationale wizard.
"""

from typing import Any, Dict, Optional

from services.document.schema_profiles import SchemaProfile, get_schema_profile
from ui.wizards.framework import WizardContext


class RationaleContext(WizardContext):
    """Context carrying the schema profile chosen for the session."""

    def __init__(self, profile: Optional[SchemaProfile] = None):
        super().__init__()
        self.profile = profile or get_schema_profile()
        self.last_output_path: Optional[str] = None

    def _get_reference_prefix(self) -> str:
        return "RAT"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            "schema_profile": self.profile.name,
            "last_output_path": self.last_output_path,
        })
        return data
