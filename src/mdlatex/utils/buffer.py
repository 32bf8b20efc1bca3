#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/utils/buffer.py
"""Append-only output buffer used during a render pass."""

from __future__ import annotations


class OutputBuffer:
    r"""Append-only text sink.

    Emission rules only ever append; there is no way to rewrite or truncate
    what has been written, so after each rule returns the buffer holds a
    valid prefix of the final document.

    Examples
    --------
        >>> out = OutputBuffer()
        >>> out.put("\\begin{quotation}")
        >>> out.putc("\n")
        >>> len(out)
        18
        >>> out.getvalue()
        '\\begin{quotation}\n'

    """

    __slots__ = ("_chunks", "_size")

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self._size = 0

    def put(self, text: str) -> None:
        """Append a run of text."""
        if text:
            self._chunks.append(text)
            self._size += len(text)

    def putc(self, char: str) -> None:
        """Append a single character."""
        self._chunks.append(char)
        self._size += 1

    def getvalue(self) -> str:
        """Return everything appended so far."""
        if len(self._chunks) > 1:
            self._chunks = ["".join(self._chunks)]
        return self._chunks[0] if self._chunks else ""

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0
