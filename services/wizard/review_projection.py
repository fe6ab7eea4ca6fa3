# -*- coding: utf-8 -*-
"""
Review projection - read-only view of the working record for the review step.

Pure function of the record; the review page renders it and never
writes back.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from models.working_record import WorkingRecord
from services.wizard.field_parsers import parse_references
from services.wizard import step_definitions as fields


@dataclass(frozen=True)
class ReviewItem:
    label: str
    value: str
    block: bool = False  # multi-line text shown preformatted


@dataclass
class ReviewSection:
    title: str
    items: List[ReviewItem] = field(default_factory=list)


@dataclass
class ReviewProjection:
    sections: List[ReviewSection] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def section(self, title: str) -> Optional[ReviewSection]:
        for section in self.sections:
            if section.title == title:
                return section
        return None

    def titles(self) -> List[str]:
        return [section.title for section in self.sections]


def _text_items(record: WorkingRecord, field_ids, block: bool) -> List[ReviewItem]:
    return [
        ReviewItem(fields.FIELD_LABELS[field_id], record.text(field_id), block=block)
        for field_id in field_ids
        if record.has_text(field_id)
    ]


def build_review_projection(record: WorkingRecord) -> ReviewProjection:
    """
    Group the record into labeled sections.

    Sections: Basic Information, Core Rationale, Supporting Discussion,
    Internal Votes, References. Empty sections are left out.
    """
    sections = [
        ReviewSection(
            "Basic Information",
            _text_items(
                record, (fields.HASH_ALGORITHM, fields.SUBJECT, fields.AUTHORS), block=False
            ),
        ),
        ReviewSection(
            "Core Rationale",
            _text_items(record, (fields.SUMMARY, fields.RATIONALE_STATEMENT), block=True),
        ),
        ReviewSection(
            "Supporting Discussion",
            _text_items(
                record,
                (fields.PRECEDENT_DISCUSSION, fields.COUNTERARGUMENT_DISCUSSION, fields.CONCLUSION),
                block=True,
            ),
        ),
    ]

    votes = ReviewSection("Internal Votes")
    for field_id in fields.TALLY_FIELDS:
        value = record.get(field_id)
        if isinstance(value, int) and not isinstance(value, bool):
            votes.items.append(ReviewItem(fields.FIELD_LABELS[field_id], str(value)))
    sections.append(votes)

    references = parse_references(record.text(fields.RELEVANT_ARTICLES))
    references += parse_references(record.text(fields.OTHER_REFERENCES))
    sections.append(ReviewSection(
        "References",
        [ReviewItem(ref.label, ref.uri) for ref in references],
    ))

    return ReviewProjection([section for section in sections if section.items])
