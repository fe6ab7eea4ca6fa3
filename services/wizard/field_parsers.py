# -*- coding: utf-8 -*-
"""
Parsers for the free-text and numeric fields of the rationale wizard.

Shared by the field collector, the document builder and the review
projection so that all three read user input the same way.
"""

import re
from typing import Any, List, Optional

from models.rationale import AuthorEntry, ReferenceEntry

_AUTHOR_SEPARATORS = re.compile(r"[\n;]+")
_LEADING_INTEGER = re.compile(r"^[+-]?[0-9]+")


def parse_authors(authors_text: Optional[str]) -> List[AuthorEntry]:
    """
    Split an authors field on newlines/semicolons.

    >>> parse_authors("Alice Smith; Bob Jones\\nCarol Lee")
    [AuthorEntry(name='Alice Smith'), AuthorEntry(name='Bob Jones'), AuthorEntry(name='Carol Lee')]
    """
    if not authors_text:
        return []
    names = (part.strip() for part in _AUTHOR_SEPARATORS.split(authors_text))
    return [AuthorEntry(name=name) for name in names if name]


def parse_references(references_text: Optional[str]) -> List[ReferenceEntry]:
    """
    Parse one reference per line in ``label | uri`` form.

    The uri falls back to the label when the line has no pipe. Lines whose
    label or uri ends up empty are dropped.
    """
    if not references_text:
        return []

    entries = []
    for line in references_text.split("\n"):
        line = line.strip()
        if not line:
            continue
        parts = line.split("|")
        label = parts[0].strip()
        uri = parts[1].strip() if len(parts) > 1 else label
        if label and uri:
            entries.append(ReferenceEntry(label=label, uri=uri))
    return entries


def parse_tally(value: Any) -> Optional[int]:
    """
    Parse the leading integer of a vote tally input.

    Returns None when the text does not start with an integer
    ("7 votes" -> 7, "3.9" -> 3, "abc" -> None).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INTEGER.match(str(value).strip())
    if not match:
        return None
    return int(match.group(0))


def collected_tally(value: Any) -> Optional[int]:
    """Tally as stored in the working record: non-negative int or None."""
    parsed = parse_tally(value)
    if parsed is None or parsed < 0:
        return None
    return parsed
