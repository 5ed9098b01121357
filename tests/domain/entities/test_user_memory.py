"""Tests for UserMemory entity."""

from kioku.domain.entities import NO_MEMORY_MARKER, describe_summary


class TestDescribeSummary:
    """describe_summary tests."""

    def test_empty_summary_uses_marker(self) -> None:
        """Test that an empty summary is shown as (none)."""
        assert describe_summary("") == NO_MEMORY_MARKER == "(none)"

    def test_summary_is_returned_verbatim(self) -> None:
        """Test that a stored summary is passed through."""
        assert describe_summary("Likes Rust.") == "Likes Rust."
