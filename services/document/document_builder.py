# -*- coding: utf-8 -*-
"""
Document Builder - turns the working record into the rationale document.

The build is a pure function of the record: rebuilding an unchanged
record gives an identical document, except for the profile's timestamp
key when it has one.
"""

import json
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from app.config import Config
from models.working_record import WorkingRecord
from services.document.schema_profiles import (
    DocumentParts, SchemaProfile, get_schema_profile
)
from services.wizard import step_definitions as fields
from services.wizard.field_parsers import parse_authors, parse_references

OPTIONAL_NARRATIVE_FIELDS = (
    fields.PRECEDENT_DISCUSSION,
    fields.COUNTERARGUMENT_DISCUSSION,
    fields.CONCLUSION,
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DocumentBuilder:
    """Builds and serializes the output document for one schema profile."""

    def __init__(self, profile: Optional[SchemaProfile] = None,
                 clock: Callable[[], datetime] = _utc_now,
                 indent: int = Config.JSON_INDENT):
        self.profile = profile or get_schema_profile()
        self.clock = clock
        self.indent = indent

    def build_internal_vote(self, record: WorkingRecord) -> Dict[str, int]:
        """Tally keys whose collected value is an integer; others are omitted."""
        internal_vote = {}
        for field_id, key in fields.TALLY_FIELDS.items():
            value = record.get(field_id)
            if isinstance(value, int) and not isinstance(value, bool):
                internal_vote[key] = value
        return internal_vote

    def build_body(self, record: WorkingRecord) -> Dict[str, Any]:
        body = {
            "summary": record.get(fields.SUMMARY) or "",
            "rationaleStatement": record.get(fields.RATIONALE_STATEMENT) or "",
        }

        for field_id in OPTIONAL_NARRATIVE_FIELDS:
            text = record.text(field_id)
            if text:
                body[field_id] = text

        internal_vote = self.build_internal_vote(record)
        if internal_vote:
            body["internalVote"] = internal_vote

        return body

    def build_parts(self, record: WorkingRecord) -> DocumentParts:
        return DocumentParts(
            identifier=record.text(self.profile.identifier_field),
            authors=parse_authors(record.text(fields.AUTHORS)),
            body=self.build_body(record),
            relevant_articles=parse_references(record.text(fields.RELEVANT_ARTICLES)),
            other_references=parse_references(record.text(fields.OTHER_REFERENCES)),
        )

    def build(self, record: WorkingRecord) -> Dict[str, Any]:
        """
        Build a fresh document from the record.

        Never fails on missing optional data; required content is expected
        to have been validated by the caller.
        """
        published_at = None
        if self.profile.timestamp_key:
            published_at = self.clock().astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return self.profile.assemble(self.build_parts(record), published_at)

    def serialize(self, document: Dict[str, Any]) -> str:
        """Pretty-print the document; key order is the build order."""
        return json.dumps(document, indent=self.indent, ensure_ascii=False)
