from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from css_folding.folding import get_folding_ranges
from css_folding.line_index import build_line_starts, line_number_at

# Mostly structural characters so that nesting actually happens
stylesheet_text = st.text(alphabet="{}\n ;:a/*\"", max_size=300) | st.text(max_size=200)


@given(stylesheet_text)
def test_ranges_always_span_several_lines(source: str):
    for folding_range in get_folding_ranges(source):
        assert folding_range.end_line > folding_range.start_line


@given(stylesheet_text)
def test_range_count_bounded_by_brace_counts(source: str):
    folding_ranges = get_folding_ranges(source)

    assert len(folding_ranges) <= source.count("{")
    assert len(folding_ranges) <= source.count("}")


@given(stylesheet_text)
def test_folding_is_deterministic(source: str):
    first = get_folding_ranges(source)
    second = get_folding_ranges(source)

    assert set(first) == set(second)


@given(stylesheet_text)
def test_ranges_stay_within_source_lines(source: str):
    line_count = source.count("\n") + 1
    for folding_range in get_folding_ranges(source):
        assert 0 <= folding_range.start_line < folding_range.end_line < line_count


@given(st.lists(st.integers(min_value=0, max_value=4), min_size=1, max_size=8))
def test_inner_range_is_contained_in_enclosing_range(blank_lines: list[int]):
    # One block per entry, each nested in the previous one, padded with
    # blank lines so that every pair spans several lines.
    opens = "".join("{\n" + "\n" * count for count in blank_lines)
    closes = "".join("}\n" + "\n" * count for count in reversed(blank_lines))

    folding_ranges = get_folding_ranges(opens + closes)

    # Closing order: innermost first, so each range is enclosed by the next
    assert len(folding_ranges) == len(blank_lines)
    for inner, outer in zip(folding_ranges, folding_ranges[1:]):
        assert outer.start_line <= inner.start_line
        assert inner.end_line <= outer.end_line


@given(st.text(max_size=200), st.data())
def test_line_lookup_matches_linear_count(source: str, data):
    offset = data.draw(st.integers(min_value=0, max_value=len(source)))

    assert line_number_at(build_line_starts(source), offset) == source.count("\n", 0, offset)
