"""Tests for the dashboard session state."""

import pytest
from pydantic import ValidationError

from allocation_categorizer.state.session import SessionState


class TestSessionState:
    """Tests for SessionState transitions."""

    def test_initial_state(self):
        """Test the empty initial state."""
        state = SessionState()

        assert state.raw_input == ""
        assert state.lines_detected == 0
        assert not state.can_process
        assert not state.has_results

    def test_edit_updates_line_count_without_processing(self, sample_raw_input):
        """Test that editing updates the line count only."""
        state = SessionState().edit(sample_raw_input)

        assert state.lines_detected == 4
        assert state.can_process
        assert not state.has_results

    def test_edit_returns_new_object(self):
        """Test that editing leaves the original state untouched."""
        original = SessionState()
        edited = original.edit("a 1GB")

        assert edited is not original
        assert original.raw_input == ""

    def test_process_publishes_summary(self, sample_raw_input, sample_summary):
        """Test that processing publishes a summary."""
        state = SessionState().edit(sample_raw_input).process()

        assert state.has_results
        assert state.summary == sample_summary
        assert state.summary.total_entries == 4

    def test_process_is_inert_for_blank_input(self):
        """Test that processing blank input is a no-op."""
        state = SessionState().edit("  \n\t ")

        assert state.process() is state

    def test_separator_control_input_can_be_processed(self):
        """Test that separator control input is processable."""
        state = SessionState().edit("\x1c")

        assert state.can_process
        assert state.process().summary.labels() == ["Unknown"]

    def test_byte_order_mark_alone_is_blank(self):
        """Test that a byte order mark alone counts as blank input."""
        state = SessionState().edit("\ufeff\n ")

        assert not state.can_process
        assert state.lines_detected == 0

    def test_edit_keeps_previous_summary(self, sample_raw_input, sample_summary):
        """Test that editing keeps the last published summary."""
        state = SessionState().edit(sample_raw_input).process().edit("x 99GB")

        assert state.summary == sample_summary
        assert state.lines_detected == 1

    def test_reprocess_replaces_summary(self, sample_raw_input):
        """Test that reprocessing replaces the summary."""
        state = SessionState().edit(sample_raw_input).process()
        state = state.edit("x 99GB\ny 99GB").process()

        assert state.summary.labels() == ["99 GB"]
        assert state.summary.total_entries == 2

    def test_state_is_frozen(self):
        """Test that state objects are immutable."""
        state = SessionState()

        with pytest.raises(ValidationError):
            state.raw_input = "changed"
