# -*- coding: utf-8 -*-
"""
Tests for RationaleWizard - the desktop wizard end to end.
"""

import json

import pytest

from services.document.metadata_generator import MetadataGenerator
from services.document.schema_profiles import SubjectProfile
from ui.error_handler import ErrorHandler
from ui.wizards.rationale.rationale_wizard import RationaleWizard
from ui.wizards.rationale.steps.review_step import render_section_html
from services.wizard.review_projection import ReviewItem, ReviewSection


@pytest.fixture
def dialogs(monkeypatch):
    """Capture message boxes instead of showing them."""
    shown = []

    def capture(kind):
        def show(parent, message, title=None):
            shown.append((kind, message))
        return staticmethod(show)

    monkeypatch.setattr(ErrorHandler, "show_warning", capture("warning"))
    monkeypatch.setattr(ErrorHandler, "show_error", capture("error"))
    monkeypatch.setattr(ErrorHandler, "show_success", capture("success"))
    return shown


@pytest.fixture
def output_path(monkeypatch, tmp_path):
    path = tmp_path / "rationale.json"
    monkeypatch.setattr(RationaleWizard, "choose_output_path", lambda self: path)
    return path


@pytest.fixture
def wizard(qtbot, dialogs, hash_profile):
    w = RationaleWizard(profile=hash_profile)
    qtbot.addWidget(w)
    return w


def fill_current(wizard, inputs):
    page = wizard.current_page()
    for field_id in page.inputs:
        if field_id in inputs:
            page.set_value(field_id, inputs[field_id])


def walk_to_review(wizard, inputs):
    while not wizard.navigator.is_review_step():
        fill_current(wizard, inputs)
        wizard.btn_next.click()


class TestRationaleWizardSetup:
    """Test initial state of the wizard."""

    def test_initial_state(self, wizard):
        assert wizard.navigator.current_step == 1
        assert wizard.progress_label.text() == "Step 1 of 6"
        assert wizard.btn_previous.isEnabled() is False
        assert wizard.btn_next.text() == "Next"
        assert wizard.step_container.count() == 6

    def test_hash_algorithm_prefilled(self, wizard):
        assert wizard.get_page(1).get_value("hashAlgorithm") == "blake2b-256"

    def test_subject_profile_asks_for_subject(self, qtbot, dialogs):
        w = RationaleWizard(profile=SubjectProfile())
        qtbot.addWidget(w)

        page = w.get_page(1)
        assert "subject" in page.inputs
        assert "hashAlgorithm" not in page.inputs

    def test_summary_counter(self, wizard):
        page = wizard.get_page(2)
        assert page.counter_text("summary") == "0 / 300"

        page.set_value("summary", "x" * 301)
        assert page.counter_text("summary") == "301 / 300"

    def test_context_reference_prefix(self, wizard):
        assert wizard.context.reference_number.startswith("RAT-")
        assert wizard.context.to_dict()["schema_profile"] == "hash-algorithm"


class TestRationaleWizardNavigation:
    """Test navigation through the pages."""

    def test_required_field_warning(self, wizard, dialogs):
        wizard.get_page(1).set_value("authors", "")

        wizard.btn_next.click()

        assert wizard.navigator.current_step == 1
        assert dialogs == [("warning", "Please fill in the required field: Authors")]

    def test_next_and_previous(self, wizard, valid_inputs):
        fill_current(wizard, valid_inputs)
        wizard.btn_next.click()

        assert wizard.navigator.current_step == 2
        assert wizard.step_container.currentWidget() is wizard.get_page(2)
        assert wizard.btn_previous.isEnabled() is True

        wizard.btn_previous.click()
        assert wizard.navigator.current_step == 1
        assert wizard.progress_label.text() == "Step 1 of 6"

    def test_review_step(self, wizard, valid_inputs):
        walk_to_review(wizard, valid_inputs)

        assert wizard.btn_next.text() == "Generate JSON"
        assert wizard.step_container.currentWidget() is wizard.review_step
        assert wizard.review_step.projection.titles() == [
            "Basic Information",
            "Core Rationale",
            "Supporting Discussion",
            "Internal Votes",
            "References",
        ]

    def test_review_html_is_escaped(self):
        section = ReviewSection("Core Rationale", [ReviewItem("Summary", "<b>x</b> & y", block=True)])
        rendered = render_section_html(section)
        assert "&lt;b&gt;x&lt;/b&gt; &amp; y" in rendered
        assert "<pre>" in rendered


class TestRationaleWizardGenerate:
    """Test the generate action on the review page."""

    def test_generates_file(self, qtbot, wizard, valid_inputs, output_path, dialogs):
        walk_to_review(wizard, valid_inputs)

        with qtbot.waitSignal(wizard.wizard_completed, timeout=1000) as blocker:
            wizard.btn_next.click()

        assert blocker.args == [str(output_path)]
        assert wizard.context.last_output_path == str(output_path)
        assert dialogs[-1][0] == "success"

        document = json.loads(output_path.read_text(encoding="utf-8"))
        assert document["hashAlgorithm"] == "blake2b-256"
        assert document["body"]["summary"] == "The action is constitutional."
        assert "conclusion" not in document["body"]

    def test_cancelled_save_dialog(self, wizard, valid_inputs, monkeypatch, tmp_path, dialogs):
        monkeypatch.setattr(RationaleWizard, "choose_output_path", lambda self: None)
        walk_to_review(wizard, valid_inputs)

        assert wizard.on_submit() is None
        assert wizard.navigator.current_step == 6
        assert list(tmp_path.iterdir()) == []
        assert dialogs == []

    def test_missing_data_redirects(self, wizard, valid_inputs, output_path, dialogs):
        walk_to_review(wizard, valid_inputs)
        wizard.context.merge({"rationaleStatement": ""})

        wizard.btn_next.click()

        assert wizard.navigator.current_step == 2
        assert wizard.step_container.currentWidget() is wizard.get_page(2)
        assert dialogs[-1] == (
            "error",
            "Error: Please ensure Rationale Statement is filled in before generating."
        )
        assert wizard.review_step.error_message().startswith("Error:")
        assert not output_path.exists()

    def test_unexpected_error_is_contained(self, qtbot, dialogs, hash_profile, valid_inputs,
                                           output_path):
        class BrokenGenerator(MetadataGenerator):
            def generate(self, record, output_path=None):
                raise RuntimeError("disk on fire")

        w = RationaleWizard(profile=hash_profile, generator=BrokenGenerator(hash_profile))
        qtbot.addWidget(w)
        walk_to_review(w, valid_inputs)

        assert w.on_submit() is None
        assert w.navigator.current_step == 6
        assert dialogs[-1] == (
            "error", "Error generating JSON. Please review your input and try again."
        )
