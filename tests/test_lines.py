import io

import pytest

from pushswap.libft.lines import LineReader


class _FailingStream:
    def __init__(self, chunks):
        self._chunks = list(chunks)

    def read(self, size):
        if self._chunks:
            return self._chunks.pop(0)
        raise OSError("read failed")


@pytest.mark.parametrize("buffer_size", [1, 2, 4, 5, 100])
def test_lines_keep_newlines(buffer_size):
    reader = LineReader(io.StringIO("hello\nworld\n"), buffer_size)
    assert reader.next_line() == "hello\n"
    assert reader.next_line() == "world\n"
    assert reader.next_line() is None


@pytest.mark.parametrize("buffer_size", [1, 3, 4, 7])
def test_last_line_without_newline(buffer_size):
    reader = LineReader(io.StringIO("abc\ndefgh"), buffer_size)
    assert list(reader) == ["abc\n", "defgh"]


def test_empty_stream_gives_none():
    reader = LineReader(io.StringIO(""))
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_blank_lines_are_returned():
    reader = LineReader(io.StringIO("\n\nx\n"))
    assert list(reader) == ["\n", "\n", "x\n"]


@pytest.mark.parametrize(
    "text",
    ["", "a", "a\n", "one\ntwo\nthree", "\n\n\n", "long line without break" * 3],
)
@pytest.mark.parametrize("buffer_size", [1, 2, 4, 9])
def test_lines_rebuild_the_text(text, buffer_size):
    lines = list(LineReader(io.StringIO(text), buffer_size))
    assert "".join(lines) == text
    assert all(line.count("\n") == 1 and line.endswith("\n") for line in lines[:-1])


def test_bytes_stream():
    reader = LineReader(io.BytesIO(b"ab\ncd"), 4)
    assert reader.next_line() == b"ab\n"
    assert reader.next_line() == b"cd"
    assert reader.next_line() is None


def test_exhausted_reader_stays_exhausted():
    reader = LineReader(io.StringIO("x\n"))
    assert list(reader) == ["x\n"]
    assert list(reader) == []


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_non_positive_buffer_size_rejected(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), buffer_size)


def test_read_error_propagates_and_drops_partial_line():
    reader = LineReader(_FailingStream(["ab\nc"]), 4)
    assert reader.next_line() == "ab\n"
    with pytest.raises(OSError):
        reader.next_line()
    with pytest.raises(OSError):
        reader.next_line()


def test_stream_growing_after_eof_is_read_again():
    stream = io.StringIO()
    reader = LineReader(stream)
    assert reader.next_line() is None
    stream.write("new\n")
    stream.seek(0)
    assert reader.next_line() == "new\n"