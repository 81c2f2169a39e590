"""
Line oriented tokenizer for SWC content. Skips comments and blank lines, and hands out
integers and floats while keeping track of the line number for diagnostics.
"""

import re

from .exceptions import EarlyEndOfFileError, LineNonParsableError

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_NUMBER_START = frozenset("0123456789+-.")
_WHITESPACE = " \t\r"


class SwcTokenizer:
    def __init__(self, contents, path=None):
        self._contents = contents
        self._path = path or ""
        self._pos = 0
        self._line = 1

    @property
    def line_number(self):
        return self._line

    def done(self):
        return self._pos >= len(self._contents)

    def where(self, line=None):
        line = self._line if line is None else line
        return f"{self._path}:{line}: " if self._path else f"line {line}: "

    def advance_to_number(self):
        """
        Move the cursor to the start of the next number, across whitespace, comments and
        blank lines.
        """
        while not self.done() and self.consume_line_and_trailing_comments():
            pass
        if self.done():
            raise EarlyEndOfFileError(
                self.where() + "Hit end of file while consuming a line.",
                self._path,
                (self._line,),
            )
        if self._contents[self._pos] not in _NUMBER_START:
            raise LineNonParsableError(
                self.where() + "Unable to parse this line.", self._path, (self._line,)
            )

    def read_int(self):
        return int(self._read(_INT))

    def read_float(self):
        return float(self._read(_FLOAT))

    def _read(self, pattern):
        self.advance_to_number()
        match = pattern.match(self._contents, self._pos)
        if match is None:
            raise LineNonParsableError(
                self.where() + "Unable to parse this line.", self._path, (self._line,)
            )
        self._pos = match.end()
        return match.group()

    def _advance_to_non_whitespace(self):
        contents = self._contents
        while self._pos < len(contents) and contents[self._pos] in _WHITESPACE:
            self._pos += 1

    def consume_line_and_trailing_comments(self):
        """
        Skip the rest of the current line, and any comment or blank lines that follow.

        :returns: Whether a newline was crossed, or the end of the content was reached.
        :rtype: bool
        """
        found_newline = False
        contents = self._contents
        self._advance_to_non_whitespace()
        while not self.done() and contents[self._pos] in "#\n":
            if contents[self._pos] == "#":
                eol = contents.find("\n", self._pos)
                self._pos = len(contents) if eol == -1 else eol
            else:
                self._line += 1
                self._pos += 1
                found_newline = True
            self._advance_to_non_whitespace()
        return found_newline or self.done()


__all__ = ["SwcTokenizer"]
