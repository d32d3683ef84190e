from __future__ import annotations

import pytest

from css_folding.line_index import LineIndex, build_line_starts, line_number_at


def test_empty_source_has_single_line():
    assert build_line_starts("") == [0]


def test_line_starts_follow_each_newline():
    assert build_line_starts("a {\n}\n") == [0, 4, 6]


def test_source_without_trailing_newline():
    assert build_line_starts("a\nb") == [0, 2]


def test_consecutive_newlines_give_empty_lines():
    assert build_line_starts("\n\n\n") == [0, 1, 2, 3]


def test_carriage_return_is_not_a_line_break():
    assert build_line_starts("a\rb\r\nc") == [0, 5]


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (0, 0),
        (3, 0),  # the newline itself belongs to the line it ends
        (4, 1),
        (5, 1),
        (6, 2),
        (100, 2),
    ],
)
def test_line_number_at(offset: int, expected: int):
    assert line_number_at([0, 4, 6], offset) == expected


def test_line_index_from_source():
    index = LineIndex.from_source("body {\n    margin: 0;\n}\n")

    assert index.line_starts == (0, 7, 22, 24)
    assert index.line_count == 4
    assert index.line_of(5) == 0
    assert index.line_of(22) == 2


def test_line_index_counts_characters_not_bytes():
    source = "/* é */ a {\nb }"
    index = LineIndex.from_source(source)

    assert index.line_of(source.index("{")) == 0
    assert index.line_of(source.index("}")) == 1


def test_line_index_is_read_only():
    index = LineIndex.from_source("a\nb")
    with pytest.raises(AttributeError):
        index.line_starts = (0,)  # type: ignore[misc]
