import pytest

from css_folding.models import BraceFrame, FoldingRange, FoldingRangeKind, FoldingRangeView


def test_folding_range_kind_members():
    assert [kind.value for kind in FoldingRangeKind] == ["comment", "imports", "region"]


def test_folding_range_defaults():
    folding_range = FoldingRange(start_line=0, end_line=3)

    assert folding_range.start_character is None
    assert folding_range.end_character is None
    assert folding_range.kind is None
    assert folding_range.collapsed_text is None


def test_folding_range_is_frozen():
    folding_range = FoldingRange(start_line=0, end_line=3)
    with pytest.raises(AttributeError):
        folding_range.end_line = 4  # type: ignore[misc]


def test_brace_frame_fields():
    frame = BraceFrame(offset=12, line=2)

    assert frame.offset == 12
    assert frame.line == 2


def test_to_lsp_omits_unset_fields():
    assert FoldingRange(start_line=1, end_line=3).to_lsp() == {"startLine": 1, "endLine": 3}


def test_to_lsp_includes_all_fields():
    folding_range = FoldingRange(
        start_line=1,
        end_line=3,
        start_character=4,
        end_character=0,
        kind=FoldingRangeKind.COMMENT,
        collapsed_text="/* ... */",
    )

    assert folding_range.to_lsp() == {
        "startLine": 1,
        "startCharacter": 4,
        "endLine": 3,
        "endCharacter": 0,
        "kind": "comment",
        "collapsedText": "/* ... */",
    }


def test_view_exposes_every_field():
    view = FoldingRangeView.from_range(
        FoldingRange(
            start_line=2,
            end_line=5,
            start_character=1,
            end_character=7,
            kind=FoldingRangeKind.IMPORTS,
            collapsed_text="@import ...",
        )
    )

    assert view.start_line == 2
    assert view.start_character == 1
    assert view.end_line == 5
    assert view.end_character == 7
    assert view.kind == "imports"
    assert view.collapsed_text == "@import ..."


def test_view_kind_is_none_when_unset():
    assert FoldingRangeView(FoldingRange(start_line=0, end_line=1)).kind is None


def test_view_is_read_only():
    view = FoldingRangeView(FoldingRange(start_line=0, end_line=1))

    with pytest.raises(AttributeError):
        view.start_line = 3  # type: ignore[misc]
    with pytest.raises(AttributeError):
        view.anything = 3  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        del view.start_line


def test_views_compare_by_range():
    first = FoldingRangeView(FoldingRange(start_line=0, end_line=1))
    second = FoldingRangeView(FoldingRange(start_line=0, end_line=1))

    assert first == second
    assert hash(first) == hash(second)
    assert first != FoldingRangeView(FoldingRange(start_line=0, end_line=2))
    assert repr(first) == "FoldingRangeView(start_line=0, end_line=1)"
