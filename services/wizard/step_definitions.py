# -*- coding: utf-8 -*-
"""
Static step definitions for the rationale wizard.

Six steps: identification, core rationale, supporting discussion,
internal votes, references and a display-only review. Step 1 owns the
identifier field of the active schema profile (``hashAlgorithm`` or
``subject``).
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from app.config import Config
from services.validation import (
    ValidationStrategy, MaxLengthValidator, NonNegativeIntegerValidator
)

STEP_BASIC_INFO = 1
STEP_CORE_RATIONALE = 2
STEP_DISCUSSION = 3
STEP_INTERNAL_VOTES = 4
STEP_REFERENCES = 5
STEP_REVIEW = Config.TOTAL_STEPS

# Field ids
HASH_ALGORITHM = "hashAlgorithm"
SUBJECT = "subject"
AUTHORS = "authors"
SUMMARY = "summary"
RATIONALE_STATEMENT = "rationaleStatement"
PRECEDENT_DISCUSSION = "precedentDiscussion"
COUNTERARGUMENT_DISCUSSION = "counterargumentDiscussion"
CONCLUSION = "conclusion"
RELEVANT_ARTICLES = "relevantArticles"
OTHER_REFERENCES = "otherReferences"

# Tally input id -> internalVote key
TALLY_FIELDS: Dict[str, str] = {
    "internal_constitutional_votes": "constitutional",
    "internal_unconstitutional_votes": "unconstitutional",
    "internal_abstain_votes": "abstain",
    "internal_did_not_vote": "didNotVote",
}

FIELD_LABELS: Dict[str, str] = {
    HASH_ALGORITHM: "Hash Algorithm",
    SUBJECT: "Subject",
    AUTHORS: "Authors",
    SUMMARY: "Summary",
    RATIONALE_STATEMENT: "Rationale Statement",
    PRECEDENT_DISCUSSION: "Precedent Discussion",
    COUNTERARGUMENT_DISCUSSION: "Counterargument Discussion",
    CONCLUSION: "Conclusion",
    "internal_constitutional_votes": "Constitutional",
    "internal_unconstitutional_votes": "Unconstitutional",
    "internal_abstain_votes": "Abstain",
    "internal_did_not_vote": "Did Not Vote",
    RELEVANT_ARTICLES: "Relevant Articles",
    OTHER_REFERENCES: "Other References",
}


@dataclass(frozen=True)
class FieldDefinition:
    """One input of a step."""

    field_id: str
    label: str
    required: bool = False
    multiline: bool = False
    numeric: bool = False
    max_length: Optional[int] = None
    default: str = ""
    placeholder: str = ""


@dataclass(frozen=True)
class StepDefinition:
    """Static declaration of a step's fields and extra constraints."""

    number: int
    title: str
    fields: Tuple[FieldDefinition, ...] = ()
    constraints: Tuple[ValidationStrategy, ...] = field(default=(), compare=False)
    is_review: bool = False

    @property
    def field_ids(self) -> Tuple[str, ...]:
        return tuple(f.field_id for f in self.fields)

    @property
    def required_fields(self) -> Tuple[str, ...]:
        return tuple(f.field_id for f in self.fields if f.required)


def _identifier_field(identifier_field: str) -> FieldDefinition:
    if identifier_field == HASH_ALGORITHM:
        return FieldDefinition(
            HASH_ALGORITHM, FIELD_LABELS[HASH_ALGORITHM], required=True,
            default=Config.DEFAULT_HASH_ALGORITHM
        )
    if identifier_field == SUBJECT:
        return FieldDefinition(
            SUBJECT, FIELD_LABELS[SUBJECT], required=True,
            placeholder="Governance action being explained"
        )
    raise ValueError(f"Unknown identifier field: {identifier_field}")


def build_step_definitions(identifier_field: str = HASH_ALGORITHM) -> Tuple[StepDefinition, ...]:
    """
    Build the six step definitions.

    Args:
        identifier_field: ``hashAlgorithm`` or ``subject``, taken from the
            active schema profile

    Returns:
        Step definitions ordered by step number
    """
    tally_fields = tuple(
        FieldDefinition(field_id, FIELD_LABELS[field_id], numeric=True, placeholder="0")
        for field_id in TALLY_FIELDS
    )

    return (
        StepDefinition(
            number=STEP_BASIC_INFO,
            title="Basic Information",
            fields=(
                _identifier_field(identifier_field),
                FieldDefinition(
                    AUTHORS, FIELD_LABELS[AUTHORS], required=True, multiline=True,
                    placeholder="One author per line, or separated by semicolons"
                ),
            ),
        ),
        StepDefinition(
            number=STEP_CORE_RATIONALE,
            title="Core Rationale",
            fields=(
                FieldDefinition(
                    SUMMARY, FIELD_LABELS[SUMMARY], required=True, multiline=True,
                    max_length=Config.SUMMARY_MAX_LENGTH
                ),
                FieldDefinition(
                    RATIONALE_STATEMENT, FIELD_LABELS[RATIONALE_STATEMENT],
                    required=True, multiline=True
                ),
            ),
            constraints=(
                MaxLengthValidator(
                    SUMMARY, Config.SUMMARY_MAX_LENGTH, label=FIELD_LABELS[SUMMARY]
                ),
            ),
        ),
        StepDefinition(
            number=STEP_DISCUSSION,
            title="Supporting Discussion",
            fields=(
                FieldDefinition(
                    PRECEDENT_DISCUSSION, FIELD_LABELS[PRECEDENT_DISCUSSION], multiline=True
                ),
                FieldDefinition(
                    COUNTERARGUMENT_DISCUSSION, FIELD_LABELS[COUNTERARGUMENT_DISCUSSION],
                    multiline=True
                ),
                FieldDefinition(CONCLUSION, FIELD_LABELS[CONCLUSION], multiline=True),
            ),
        ),
        StepDefinition(
            number=STEP_INTERNAL_VOTES,
            title="Internal Votes",
            fields=tally_fields,
            constraints=(
                NonNegativeIntegerValidator(TALLY_FIELDS.keys(), FIELD_LABELS),
            ),
        ),
        StepDefinition(
            number=STEP_REFERENCES,
            title="References",
            fields=(
                FieldDefinition(
                    RELEVANT_ARTICLES, FIELD_LABELS[RELEVANT_ARTICLES], multiline=True,
                    placeholder="Label | URI (one per line)"
                ),
                FieldDefinition(
                    OTHER_REFERENCES, FIELD_LABELS[OTHER_REFERENCES], multiline=True,
                    placeholder="Label | URI (one per line)"
                ),
            ),
        ),
        StepDefinition(number=STEP_REVIEW, title="Review", is_review=True),
    )


def step_owning_field(steps: Tuple[StepDefinition, ...], field_id: str) -> Optional[int]:
    """Return the number of the step that collects ``field_id``."""
    for step in steps:
        if field_id in step.field_ids:
            return step.number
    return None
