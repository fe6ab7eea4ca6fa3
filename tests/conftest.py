# -*- coding: utf-8 -*-
"""
Shared fixtures for the rationale wizard tests.
"""

import os

# Must be set before Qt and app.config are imported
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest

from models.working_record import WorkingRecord
from services.document.schema_profiles import HashAlgorithmProfile, SubjectProfile
from services.wizard.step_definitions import build_step_definitions


@pytest.fixture
def hash_profile():
    return HashAlgorithmProfile()


@pytest.fixture
def subject_profile():
    return SubjectProfile()


@pytest.fixture
def steps():
    """Step definitions for the default (hash-algorithm) profile."""
    return build_step_definitions("hashAlgorithm")


@pytest.fixture
def valid_inputs():
    """Raw form values that pass validation on every step."""
    return {
        "hashAlgorithm": "blake2b-256",
        "authors": "Alice Smith; Bob Jones\nCarol Lee",
        "summary": "The action is constitutional.",
        "rationaleStatement": "Article III permits this treasury withdrawal.",
        "precedentDiscussion": "",
        "counterargumentDiscussion": "Some members read Article IV differently.",
        "conclusion": "  ",
        "internal_constitutional_votes": "5",
        "internal_unconstitutional_votes": "",
        "internal_abstain_votes": "abc",
        "internal_did_not_vote": "0",
        "relevantArticles": "Article 1 | https://example.org/1\nArticle 2",
        "otherReferences": "Forum thread | https://forum.example.org/t/42",
    }


@pytest.fixture
def complete_record():
    """Working record as collected from the valid inputs."""
    return WorkingRecord({
        "hashAlgorithm": "blake2b-256",
        "authors": "Alice Smith; Bob Jones\nCarol Lee",
        "summary": "The action is constitutional.",
        "rationaleStatement": "Article III permits this treasury withdrawal.",
        "precedentDiscussion": "",
        "counterargumentDiscussion": "Some members read Article IV differently.",
        "conclusion": "",
        "internal_constitutional_votes": 5,
        "internal_unconstitutional_votes": None,
        "internal_abstain_votes": None,
        "internal_did_not_vote": 0,
        "relevantArticles": "Article 1 | https://example.org/1\nArticle 2",
        "otherReferences": "Forum thread | https://forum.example.org/t/42",
    })
