"""Reading a stream one line at a time through a small read buffer."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

Text = Union[str, bytes]

BUFFER_SIZE = 4


class LineReader:
    """Hand out the lines of ``stream`` one by one.

    The stream only needs a ``read(size)`` method returning ``str`` or
    ``bytes``; it is read ``buffer_size`` units at a time. Each line keeps
    its trailing newline. A last line without a newline is returned as it
    is, and once nothing is left ``next_line`` returns ``None``.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[Text] = None

    @staticmethod
    def _newline(data: Text) -> Text:
        return b"\n" if isinstance(data, (bytes, bytearray)) else "\n"

    def _take_line(self) -> Optional[Text]:
        if not self._pending:
            return None
        position = self._pending.find(self._newline(self._pending))
        if position < 0:
            return None
        line = self._pending[: position + 1]
        self._pending = self._pending[position + 1 :]
        return line

    def next_line(self) -> Optional[Text]:
        """The next line of the stream, or ``None`` when it is exhausted.

        A read error discards any partial line held back and propagates.
        """
        while True:
            line = self._take_line()
            if line is not None:
                return line
            try:
                chunk = self.stream.read(self.buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                rest, self._pending = self._pending, None
                return rest if rest else None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[Text]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line