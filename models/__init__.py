# -*- coding: utf-8 -*-
"""
CIP-136 Rationale Wizard Data Models
"""

from .working_record import WorkingRecord, RecordValue
from .rationale import AuthorEntry, ReferenceEntry

__all__ = [
    "WorkingRecord",
    "RecordValue",
    "AuthorEntry",
    "ReferenceEntry",
]
