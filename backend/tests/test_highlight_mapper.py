"""Tests for splitting text into highlight spans."""

import pytest

from gramcheck.core.highlight_mapper import partition
from gramcheck.models.grammar import SpanKind, TextError


def _texts(spans):
    return [(s.kind.value, s.text) for s in spans]


class TestPartition:
    def test_no_errors_single_plain_span(self):
        spans = partition("All good here.", [])
        assert _texts(spans) == [("plain", "All good here.")]

    def test_empty_text_no_spans(self):
        assert partition("", []) == []

    def test_error_spans_and_gaps(self, sample_errors):
        spans = partition("I recieve teh package", sample_errors)
        assert _texts(spans) == [
            ("plain", "I "),
            ("error", "recieve"),
            ("plain", " "),
            ("error", "teh"),
            ("plain", " package"),
        ]
        assert spans[1].error is sample_errors[0]

    def test_error_at_start_and_end(self):
        errors = [
            TextError(id="a", start=0, end=3, context="Teh"),
            TextError(id="b", start=8, end=11, context="cat"),
        ]
        spans = partition("Teh big cat", errors)
        assert _texts(spans) == [("error", "Teh"), ("plain", " big "), ("error", "cat")]

    def test_sorted_by_start_not_input_order(self):
        errors = [
            TextError(id="late", start=8, end=11, context="cat"),
            TextError(id="early", start=0, end=3, context="Teh"),
        ]
        spans = partition("Teh big cat", errors)
        assert [s.error.id for s in spans if s.kind == SpanKind.error] == ["early", "late"]

    def test_ineligible_errors_ignored(self):
        errors = [
            TextError(id="a", context="missing"),
            TextError(id="b", context=""),
        ]
        spans = partition("some text", errors)
        assert _texts(spans) == [("plain", "some text")]

    def test_overlapping_error_skipped(self):
        errors = [
            TextError(id="wide", start=0, end=7, context="teh cat"),
            TextError(id="inner", start=4, end=7, context="cat"),
        ]
        spans = partition("teh cat sat", errors)
        assert [s.error.id for s in spans if s.kind == SpanKind.error] == ["wide"]
        assert "".join(s.text for s in spans) == "teh cat sat"

    def test_duplicate_context_anchors_to_next_occurrence(self):
        errors = [
            TextError(id="first", start=0, end=3, context="teh"),
            TextError(id="second", start=8, end=11, context="teh"),
        ]
        spans = partition("teh and teh", errors)
        assert _texts(spans) == [("error", "teh"), ("plain", " and "), ("error", "teh")]

    def test_stale_offsets_still_anchor(self):
        errors = [TextError(id="a", start=40, end=43, context="teh")]
        spans = partition("Oh teh", errors)
        assert _texts(spans) == [("plain", "Oh "), ("error", "teh")]

    @pytest.mark.parametrize(
        "text,contexts",
        [
            ("I recieve teh package", ["teh", "recieve", "package", "zzz"]),
            ("aaaa", ["a", "aa", "a", "aaa"]),
            ("overlap here", ["overlap here", "lap", "here", ""]),
            ("", ["x"]),
        ],
    )
    def test_concatenation_reproduces_text(self, text, contexts):
        errors = [
            TextError(id=str(i), start=i, end=i + len(c), context=c)
            for i, c in enumerate(contexts)
        ]
        spans = partition(text, errors)
        assert "".join(s.text for s in spans) == text
