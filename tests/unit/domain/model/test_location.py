"""Tests for domain/model/location.py."""

import pytest

from ngreflect.domain.model.location import Span


class TestSpanCreation:
    """Tests for valid Span creation."""

    def test_minimal_valid(self) -> None:
        span = Span(start=0, end=0, line=1, column=0)
        assert span.start == 0
        assert span.end == 0
        assert span.line == 1
        assert span.column == 0

    def test_str_is_line_colon_column(self) -> None:
        span = Span(start=10, end=20, line=3, column=4)
        assert str(span) == "3:4"

    def test_is_frozen(self) -> None:
        span = Span(start=0, end=1, line=1, column=0)
        with pytest.raises(AttributeError):
            span.line = 2  # type: ignore[misc]


class TestSpanFailFirst:
    """Tests for FAIL-FIRST validation in Span."""

    def test_negative_start_raises(self) -> None:
        with pytest.raises(ValueError, match="start must be >= 0"):
            Span(start=-1, end=0, line=1, column=0)

    def test_end_before_start_raises(self) -> None:
        with pytest.raises(ValueError, match="must be >= start"):
            Span(start=5, end=4, line=1, column=0)

    def test_line_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be > 0"):
            Span(start=0, end=1, line=0, column=0)

    def test_column_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="column must be >= 0"):
            Span(start=0, end=1, line=1, column=-1)


class TestSpanContains:
    """Tests for Span.contains()."""

    def test_contains_inner(self) -> None:
        outer = Span(start=0, end=100, line=1, column=0)
        inner = Span(start=10, end=20, line=1, column=10)
        assert outer.contains(inner)
        assert not inner.contains(outer)

    def test_contains_self(self) -> None:
        span = Span(start=5, end=9, line=1, column=5)
        assert span.contains(span)

    def test_overlap_is_not_containment(self) -> None:
        a = Span(start=0, end=10, line=1, column=0)
        b = Span(start=5, end=15, line=1, column=5)
        assert not a.contains(b)
