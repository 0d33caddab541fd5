"""Line lookup over a source text, for rendering diagnostics."""

from __future__ import annotations


class SourceFile:
    """A named source text with a precomputed line-start table."""

    def __init__(self, name: str, text: str) -> None:
        self.name = name
        self.text = text
        # Offsets following every newline; line N starts at _line_starts[N - 1].
        self._line_starts: list[int] = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self._line_starts.append(i + 1)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_text(self, line: int) -> str:
        """Return the text of 1-indexed *line* without its line terminator."""
        if not 1 <= line <= self.line_count:
            return ""
        start = self._line_starts[line - 1]
        end = self._line_starts[line] - 1 if line < self.line_count else len(self.text)
        return self.text[start:end].rstrip("\r")
