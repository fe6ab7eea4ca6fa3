# -*- coding: utf-8 -*-
"""
Entries parsed from free-text fields of the rationale wizard.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class AuthorEntry:
    """A named author of the rationale (CIP-100 ``authors`` item)."""

    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name}


@dataclass(frozen=True)
class ReferenceEntry:
    """A labeled reference parsed from a ``label | uri`` line."""

    label: str
    uri: str

    def to_dict(self, ref_type: str = None) -> Dict[str, str]:
        """
        Serialize for the output document.

        Args:
            ref_type: Optional CIP-100 reference ``@type`` ("Other",
                "RelevantArticles", ...), emitted first when given
        """
        data = {}
        if ref_type:
            data["@type"] = ref_type
        data["label"] = self.label
        data["uri"] = self.uri
        return data
