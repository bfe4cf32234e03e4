import pytest

from docspell.bandaid import BandAid, LineColumn, Span


def test_on_line_makes_end_inclusive():
    span = Span.on_line(1, 0, 1)
    assert span == Span(LineColumn(1, 0), LineColumn(1, 0))


def test_on_line_multiple_columns():
    span = Span.on_line(1, 1, 3)
    assert span.start == LineColumn(1, 1)
    assert span.end == LineColumn(1, 2)


def test_on_line_rejects_empty_range():
    with pytest.raises(ValueError):
        Span.on_line(2, 4, 4)


def test_on_line_rejects_reversed_range():
    with pytest.raises(ValueError):
        Span.on_line(2, 5, 3)


def test_line_column_ordering():
    assert LineColumn(1, 6) < LineColumn(2, 0)
    assert LineColumn(2, 3) < LineColumn(2, 4)
    assert LineColumn(3, 0) >= LineColumn(3, 0)


def test_span_covers_lines_inclusively():
    span = Span(LineColumn(2, 5), LineColumn(4, 1))
    covered = [line for line in range(1, 7) if span.covers_line(line)]
    assert covered == [2, 3, 4]


def test_single_line_span_covers_only_its_line():
    span = Span.on_line(5, 0, 2)
    assert span.covers_line(5)
    assert not span.covers_line(4)
    assert not span.covers_line(6)


def test_bandaid_covers_line_follows_span():
    span = Span(LineColumn(1, 6), LineColumn(2, 12))
    bandaid = BandAid("& Omega", span)
    for line in range(0, 5):
        assert bandaid.covers_line(line) == span.covers_line(line)


def test_bandaid_equality_and_hash():
    first = BandAid("Y", Span.on_line(1, 0, 1))
    second = BandAid("Y", Span.on_line(1, 0, 1))
    assert first == second
    assert len({first, second}) == 1
    assert first != BandAid("Z", Span.on_line(1, 0, 1))


def test_spans_sort_by_start_position():
    spans = [
        Span.on_line(2, 0, 1),
        Span.on_line(1, 4, 6),
        Span.on_line(1, 0, 2),
    ]
    assert sorted(spans) == [spans[2], spans[1], spans[0]]