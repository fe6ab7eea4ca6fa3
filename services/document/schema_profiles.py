# -*- coding: utf-8 -*-
"""
Schema Profiles - output-shaping strategies for the rationale document.

Both profiles share the working record and the field parsing; they only
differ in which identifier they key on and how references are nested.
"""

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from app.config import Config
from models.rationale import AuthorEntry, ReferenceEntry
from services.wizard.step_definitions import HASH_ALGORITHM, SUBJECT

CIP100 = "https://github.com/cardano-foundation/CIPs/blob/master/CIP-0100/README.md#"
CIP136 = "https://github.com/cardano-foundation/CIPs/blob/master/CIP-0136/README.md#"

REFERENCE_TYPE_OTHER = "Other"
REFERENCE_TYPE_RELEVANT_ARTICLES = "RelevantArticles"


@dataclass
class DocumentParts:
    """Profile-independent pieces assembled from the working record."""

    identifier: str
    authors: List[AuthorEntry] = field(default_factory=list)
    body: Dict[str, Any] = field(default_factory=dict)
    relevant_articles: List[ReferenceEntry] = field(default_factory=list)
    other_references: List[ReferenceEntry] = field(default_factory=list)


def _body_context(extra_terms: Dict[str, Any]) -> Dict[str, Any]:
    terms = {
        "references": {
            "@id": "CIP100:references",
            "@container": "@set",
            "@context": {
                "GovernanceMetadata": "CIP100:GovernanceMetadataReference",
                "Other": "CIP100:OtherReference",
                "label": "CIP100:reference-label",
                "uri": "CIP100:reference-uri",
                "RelevantArticles": "CIP136:RelevantArticles"
            }
        },
        "summary": "CIP136:summary",
        "rationaleStatement": "CIP136:rationaleStatement",
        "precedentDiscussion": "CIP136:precedentDiscussion",
        "counterargumentDiscussion": "CIP136:counterargumentDiscussion",
        "conclusion": "CIP136:conclusion",
        "internalVote": {
            "@id": "CIP136:internalVote",
            "@context": {
                "constitutional": "CIP136:constitutional",
                "unconstitutional": "CIP136:unconstitutional",
                "abstain": "CIP136:abstain",
                "didNotVote": "CIP136:didNotVote"
            }
        }
    }
    terms.update(extra_terms)
    return {"@id": "CIP136:body", "@context": terms}


_AUTHORS_CONTEXT = {
    "@id": "CIP100:authors",
    "@container": "@set",
    "@context": {
        "did": "@id",
        "name": "http://xmlns.com/foaf/0.1/name",
        "witness": {
            "@id": "CIP100:witness",
            "@context": {
                "witnessAlgorithm": "CIP100:witnessAlgorithm",
                "publicKey": "CIP100:publicKey",
                "signature": "CIP100:signature"
            }
        }
    }
}


class SchemaProfile(ABC):
    """
    Abstract base class for schema profiles.

    Subclasses define the identifier field, the JSON-LD context and the
    top-level layout of the document.
    """

    name: str = ""
    identifier_field: str = ""
    default_identifier: str = ""
    # Top-level key holding the generation timestamp, if the profile has one
    timestamp_key: Optional[str] = None

    @abstractmethod
    def context(self) -> Dict[str, Any]:
        """Return a fresh ``@context`` descriptor."""
        pass

    @abstractmethod
    def assemble(self, parts: DocumentParts, published_at: Optional[str] = None) -> Dict[str, Any]:
        """
        Lay out the final document.

        Args:
            parts: Pieces built from the working record
            published_at: ISO-8601 timestamp, used by profiles with a
                ``timestamp_key``

        Returns:
            New document dictionary
        """
        pass


class HashAlgorithmProfile(SchemaProfile):
    """CIP-136 reference layout keyed on ``hashAlgorithm``."""

    name = "hash-algorithm"
    identifier_field = HASH_ALGORITHM
    default_identifier = Config.DEFAULT_HASH_ALGORITHM

    def context(self) -> Dict[str, Any]:
        return {
            "@language": "en-us",
            "CIP100": CIP100,
            "CIP136": CIP136,
            "hashAlgorithm": "CIP100:hashAlgorithm",
            "body": _body_context({}),
            "authors": copy.deepcopy(_AUTHORS_CONTEXT),
        }

    def assemble(self, parts: DocumentParts, published_at: Optional[str] = None) -> Dict[str, Any]:
        body = dict(parts.body)
        references = [
            ref.to_dict(REFERENCE_TYPE_OTHER)
            for ref in parts.relevant_articles + parts.other_references
        ]
        if references:
            body["references"] = references

        return {
            "@context": self.context(),
            "hashAlgorithm": parts.identifier or self.default_identifier,
            "body": body,
            "authors": [author.to_dict() for author in parts.authors],
        }


class SubjectProfile(SchemaProfile):
    """
    Layout keyed on ``subject`` with a top-level ``publishedAt``.

    Relevant articles get their own body list instead of being merged
    into ``references``.
    """

    name = "subject"
    identifier_field = SUBJECT
    default_identifier = ""
    timestamp_key = "publishedAt"

    def context(self) -> Dict[str, Any]:
        return {
            "@language": "en-us",
            "CIP100": CIP100,
            "CIP136": CIP136,
            "subject": "CIP136:subject",
            "publishedAt": "CIP100:publishedAt",
            "body": _body_context({
                "relevantArticles": {
                    "@id": "CIP136:relevantArticles",
                    "@container": "@set"
                }
            }),
            "authors": copy.deepcopy(_AUTHORS_CONTEXT),
        }

    def assemble(self, parts: DocumentParts, published_at: Optional[str] = None) -> Dict[str, Any]:
        body = dict(parts.body)
        if parts.relevant_articles:
            body["relevantArticles"] = [
                ref.to_dict(REFERENCE_TYPE_RELEVANT_ARTICLES) for ref in parts.relevant_articles
            ]
        if parts.other_references:
            body["references"] = [
                ref.to_dict(REFERENCE_TYPE_OTHER) for ref in parts.other_references
            ]

        return {
            "@context": self.context(),
            "subject": parts.identifier or self.default_identifier,
            "publishedAt": published_at,
            "authors": [author.to_dict() for author in parts.authors],
            "body": body,
        }


class SchemaProfileRegistry:
    """
    Registry of schema profiles, looked up by name.
    """

    def __init__(self):
        self._profiles: Dict[str, SchemaProfile] = {}
        self._register_default_profiles()

    def _register_default_profiles(self):
        self.register_profile(HashAlgorithmProfile())
        self.register_profile(SubjectProfile())

    def register_profile(self, profile: SchemaProfile):
        self._profiles[profile.name.lower()] = profile

    def get_profile(self, name: str) -> Optional[SchemaProfile]:
        return self._profiles.get(name.lower())

    def get_available_profiles(self) -> List[str]:
        return list(self._profiles.keys())


_registry = SchemaProfileRegistry()


def get_schema_profile(name: Optional[str] = None) -> SchemaProfile:
    """
    Resolve a profile by name (defaults to ``Config.SCHEMA_PROFILE``).

    Raises:
        ValueError: if no profile is registered under that name
    """
    name = name or Config.SCHEMA_PROFILE
    profile = _registry.get_profile(name)
    if profile is None:
        available = ", ".join(_registry.get_available_profiles())
        raise ValueError(f"Unknown schema profile '{name}' (available: {available})")
    return profile
