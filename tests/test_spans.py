from __future__ import annotations

import pytest

from srcdiag import BufferResolutionFailure, Position, SourceBuffer, SourceRange


def test_decompose_position() -> None:
    buf = SourceBuffer("x.rb", "ab\ncd")
    assert buf.line_count == 2
    assert buf.decompose_position(0) == Position(line=1, column=0)
    assert buf.decompose_position(2) == Position(line=1, column=2)
    assert buf.decompose_position(3) == Position(line=2, column=0)
    assert buf.decompose_position(5) == Position(line=2, column=2)
    with pytest.raises(BufferResolutionFailure):
        buf.decompose_position(6)
    with pytest.raises(BufferResolutionFailure):
        buf.decompose_position(-1)


def test_line_range_excludes_terminator() -> None:
    buf = SourceBuffer("x.rb", "ab\ncd\n")
    assert buf.line_range(1) == SourceRange(buf, 0, 2)
    assert buf.line_range(2) == SourceRange(buf, 3, 5)
    assert buf.line_range(3) == SourceRange(buf, 6, 6)
    assert buf.source_line(2) == "cd"
    with pytest.raises(BufferResolutionFailure):
        buf.line_range(4)
    with pytest.raises(BufferResolutionFailure):
        buf.line_range(0)


def test_range_accessors() -> None:
    buf = SourceBuffer("x.rb", "def foo\n  bar\n")
    r = SourceRange(buf, 4, 13)
    assert (r.line, r.column) == (1, 4)
    assert (r.last_line, r.last_column) == (2, 5)
    assert r.size == 9
    assert r.source == "foo\n  bar"
    assert r.source_line == "def foo"
    assert str(r) == "x.rb:1:5"
    with pytest.raises(ValueError):
        r.column_range
    assert SourceRange(buf, 4, 7).column_range == range(4, 7)


def test_range_rejects_bad_offsets() -> None:
    buf = SourceBuffer("x.rb", "abc")
    with pytest.raises(ValueError):
        SourceRange(buf, 2, 1)
    with pytest.raises(ValueError):
        SourceRange(buf, -1, 1)
    with pytest.raises(BufferResolutionFailure):
        SourceRange(buf, 1, 9).source


def test_intersect() -> None:
    buf = SourceBuffer("x.rb", "0123456789")
    r = SourceRange(buf, 2, 6)
    assert r.intersect(SourceRange(buf, 4, 9)) == SourceRange(buf, 4, 6)
    assert r.intersect(SourceRange(buf, 0, 10)) == r
    assert r.intersect(SourceRange(buf, 6, 8)) is None
    assert r.intersect(SourceRange(buf, 0, 2)) is None
    assert r.intersect(SourceRange(buf, 3, 3)) == SourceRange(buf, 3, 3)
    assert r.intersect(SourceRange(buf, 2, 2)) is None
    empty = SourceRange(buf, 5, 5)
    assert empty.intersect(SourceRange(buf, 5, 5)) == empty
    assert empty.intersect(SourceRange(buf, 4, 4)) is None


def test_resize_and_with() -> None:
    buf = SourceBuffer("x.rb", "0123456789")
    r = SourceRange(buf, 2, 6)
    assert r.resize(1) == SourceRange(buf, 2, 3)
    assert r.with_(begin_pos=4) == SourceRange(buf, 4, 6)
    assert r.with_(end_pos=9) == SourceRange(buf, 2, 9)
    assert r.is_empty() is False
    assert r.resize(0).is_empty()


def test_position_unpacks() -> None:
    buf = SourceBuffer("x.rb", "ab\ncd")
    line, column = buf.decompose_position(4)
    assert (line, column) == (2, 1)


def test_ranges_in_different_buffers_never_intersect() -> None:
    a = SourceBuffer("a.rb", "0123456789")
    b = SourceBuffer("b.rb", "0123456789")
    assert SourceRange(a, 2, 6).intersect(SourceRange(b, 0, 10)) is None
    assert SourceRange(a, 2, 6).is_disjoint(SourceRange(b, 3, 4))
    same = SourceBuffer("a.rb", "0123456789")
    assert SourceRange(a, 2, 6).intersect(SourceRange(same, 4, 9)) == SourceRange(a, 4, 6)
