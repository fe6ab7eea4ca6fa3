# -*- coding: utf-8 -*-
"""
Tests for StepNavigator - wizard state machine without widgets.
"""

import json

import pytest

from services.document.metadata_generator import MetadataGenerator
from services.wizard.field_collector import DictInputSource
from ui.wizards.framework import StepNavigator, WizardContext


class SignalRecorder:
    """Collects emissions of the navigator signals."""

    def __init__(self, navigator):
        self.steps = []
        self.failures = []
        self.reviews = []
        self.generation_errors = []
        self.generated = []
        navigator.step_changed.connect(lambda old, new: self.steps.append((old, new)))
        navigator.validation_failed.connect(self.failures.append)
        navigator.review_ready.connect(self.reviews.append)
        navigator.generation_failed.connect(self.generation_errors.append)
        navigator.document_generated.connect(self.generated.append)


@pytest.fixture
def source():
    return DictInputSource()


@pytest.fixture
def navigator(steps, source):
    return StepNavigator(WizardContext(), steps, source)


@pytest.fixture
def recorder(navigator):
    return SignalRecorder(navigator)


def walk_to_review(navigator, source, inputs):
    source.update(inputs)
    while not navigator.is_review_step():
        assert navigator.advance() is True


class TestAdvance:
    """Test forward navigation."""

    def test_initial_state(self, navigator):
        assert navigator.current_step == 1
        assert navigator.total_steps == 6
        assert navigator.can_go_previous() is False
        assert navigator.get_progress_percentage() == 0.0

    def test_invalid_step_blocks_and_collects_nothing(self, navigator, source, recorder):
        """Test a failed advance leaves the step and the record untouched."""
        source.update({"hashAlgorithm": "sha256", "authors": "   "})

        assert navigator.advance() is False

        assert navigator.current_step == 1
        assert len(navigator.context.record) == 0
        assert recorder.steps == []
        assert len(recorder.failures) == 1
        assert recorder.failures[0].field == "authors"

    def test_valid_step_collects_and_moves(self, navigator, source, recorder):
        source.update({"hashAlgorithm": " sha256 ", "authors": "Alice; Bob"})

        assert navigator.advance() is True

        assert navigator.current_step == 2
        assert navigator.context.record.snapshot() == {"hashAlgorithm": "sha256", "authors": "Alice; Bob"}
        assert navigator.context.is_step_completed(1)
        assert recorder.steps == [(1, 2)]
        assert recorder.failures == []

    def test_overlong_summary_blocks_step2(self, navigator, source, recorder):
        source.update({"hashAlgorithm": "sha256", "authors": "Alice"})
        navigator.advance()
        source.update({"summary": "x" * 301, "rationaleStatement": "r"})

        assert navigator.advance() is False
        assert navigator.current_step == 2
        assert "summary" not in navigator.context.record
        assert recorder.failures[-1].first_failure.kind == "LengthExceeded"

    def test_tallies_collected_as_integers(self, navigator, source, valid_inputs):
        walk_to_review(navigator, source, valid_inputs)
        record = navigator.context.record

        assert record.get("internal_constitutional_votes") == 5
        assert record.get("internal_unconstitutional_votes") is None
        assert record.get("internal_abstain_votes") is None
        assert record.get("internal_did_not_vote") == 0

    def test_advance_at_review_does_not_move(self, navigator, source, valid_inputs, recorder):
        walk_to_review(navigator, source, valid_inputs)

        assert navigator.advance() is False
        assert navigator.current_step == 6


class TestRetreat:
    """Test backward navigation."""

    def test_retreat_collects_without_validating(self, navigator, source):
        source.update({"hashAlgorithm": "sha256", "authors": "Alice"})
        navigator.advance()
        source.update({"summary": "x" * 400, "rationaleStatement": ""})

        assert navigator.retreat() is True

        assert navigator.current_step == 1
        assert navigator.context.record.get("summary") == "x" * 400
        assert navigator.context.record.get("rationaleStatement") == ""

    def test_retreat_at_first_step_still_collects(self, navigator, source, recorder):
        source.update({"hashAlgorithm": "", "authors": "Draft author"})

        assert navigator.retreat() is False

        assert navigator.current_step == 1
        assert navigator.context.record.get("authors") == "Draft author"
        assert recorder.failures == []

    def test_retreat_from_review_keeps_record(self, navigator, source, valid_inputs):
        walk_to_review(navigator, source, valid_inputs)
        before = navigator.context.record.snapshot()

        assert navigator.retreat() is True

        assert navigator.current_step == 5
        assert navigator.context.record.snapshot() == before


class TestReview:
    """Test entering the review step."""

    def test_review_built_on_entry(self, navigator, source, valid_inputs, recorder):
        walk_to_review(navigator, source, valid_inputs)

        assert len(recorder.reviews) == 1
        assert navigator.context.review is recorder.reviews[0]
        assert "Internal Votes" in recorder.reviews[0].titles()

    def test_enter_review_with_empty_record(self, navigator, recorder):
        assert navigator.enter(6) is True
        assert recorder.reviews[0].is_empty is True
        assert recorder.steps == [(1, 6)]

    def test_review_rebuilt_on_each_entry(self, navigator, source, valid_inputs, recorder):
        walk_to_review(navigator, source, valid_inputs)
        navigator.enter(2)
        navigator.enter(6)
        assert len(recorder.reviews) == 2

    @pytest.mark.parametrize("step", [0, 7])
    def test_enter_out_of_range(self, navigator, recorder, step):
        assert navigator.enter(step) is False
        assert navigator.current_step == 1
        assert recorder.steps == []


class TestGenerate:
    """Test generation from the review step."""

    def test_success(self, navigator, source, valid_inputs, recorder, hash_profile, tmp_path):
        walk_to_review(navigator, source, valid_inputs)
        output = tmp_path / "rationale.json"

        result = navigator.generate(MetadataGenerator(hash_profile), output)

        assert result is not None
        assert recorder.generated == [str(output)]
        assert recorder.generation_errors == []
        assert json.loads(output.read_text(encoding="utf-8"))["authors"][2] == {"name": "Carol Lee"}
        assert navigator.current_step == 6

    def test_missing_field_redirects(self, navigator, source, valid_inputs, recorder,
                                     hash_profile, tmp_path):
        walk_to_review(navigator, source, valid_inputs)
        navigator.context.merge({"authors": ""})

        result = navigator.generate(MetadataGenerator(hash_profile), tmp_path / "out.json")

        assert result is None
        assert navigator.current_step == 1
        assert recorder.generation_errors == [
            "Error: Please ensure Authors is filled in before generating."
        ]
        assert not (tmp_path / "out.json").exists()

    def test_invalid_record_redirects_to_owning_step(self, navigator, source, valid_inputs,
                                                     recorder, hash_profile, tmp_path):
        walk_to_review(navigator, source, valid_inputs)
        navigator.context.merge({"summary": "y" * 301})

        assert navigator.generate(MetadataGenerator(hash_profile), tmp_path / "out.json") is None
        assert navigator.current_step == 2
        assert recorder.generation_errors == ["Summary must not exceed 300 characters."]

    def test_write_failure_stays_on_review(self, navigator, source, valid_inputs, recorder,
                                           hash_profile, tmp_path):
        walk_to_review(navigator, source, valid_inputs)
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        assert navigator.generate(MetadataGenerator(hash_profile), blocker / "out.json") is None
        assert navigator.current_step == 6
        assert recorder.generation_errors[0].startswith("Error generating JSON:")


class TestReset:
    """Test discarding the session."""

    def test_reset(self, navigator, source, valid_inputs, recorder):
        walk_to_review(navigator, source, valid_inputs)

        navigator.reset()

        assert navigator.current_step == 1
        assert len(navigator.context.record) == 0
        assert navigator.get_completed_steps_count() == 0
        assert navigator.context.review is None
        assert recorder.steps[-1] == (6, 1)

    def test_progress_at_review(self, navigator, source, valid_inputs):
        walk_to_review(navigator, source, valid_inputs)
        assert navigator.get_progress_percentage() == 100.0
        assert navigator.get_completed_steps_count() == 5
