""" Lazy unescaping of a whole string.

The text is split on backslashes. Each part after a backslash starts
with an escape sequence, which is decoded with
:func:`unescaper.sequence.decode_escape`. Whatever the escape sequence
leaves of its part is pending raw text, which is handed out before
splitting continues.
"""

import logging

from .common import UnescapeError, IncompleteSequence
from .fragment import Raw, Escaped
from .sequence import decode_escape


class Unescaped:
    """ An iterator producing the unescaped characters of a string.

    Use :meth:`next_fragment` to retrieve whole runs of raw text instead
    of single characters. Once an error is raised, or the end of the
    text is reached, the iterator stays exhausted.

    .. doctest::

        >>> from unescaper import Unescaped
        >>> list(Unescaped(r'a\\tb'))
        ['a', '\\t', 'b']

    """
    logger = logging.getLogger('unescaper.scanner')

    def __init__(self, text: str):
        self._text = text
        self._pos = 0  # start of the next part, None when split is done
        self._pending = None  # (start, end) of raw text to hand out
        self._done = False
        first = self._next_part()
        if first[0] < first[1]:
            self._pending = first

    def __iter__(self):
        return self

    def __next__(self):
        if self._done:
            raise StopIteration

        if self._pending:
            start, end = self._pending
            if start < end:
                self._pending = (start + 1, end)
                return self._text[start]
            self._pending = None

        part = self._next_part()
        if part is None:
            self._done = True
            raise StopIteration

        start, end = part
        if start == end:
            # Two backslashes in a row, or one at the end of the text
            follow = self._next_part()
            if follow is None:
                self._fail(IncompleteSequence(), start - 1)
            if follow[0] < follow[1]:
                self._pending = follow
            return '\\'

        try:
            char, pos = decode_escape(self._text, start, end)
        except UnescapeError as error:
            self._fail(error, start - 1)

        if pos < end:
            self._pending = (pos, end)
        return char

    def next_fragment(self):
        """ Get the next string fragment rather than just the next
        character. Returns None at the end of the text. """
        if self._pending:
            start, end = self._pending
            self._pending = None
            if start < end:
                return Raw(self._text[start:end])

        char = next(self, None)
        if char is None:
            return None
        return Escaped(char)

    def fragments(self):
        """ Generate all remaining string fragments """
        fragment = self.next_fragment()
        while fragment is not None:
            yield fragment
            fragment = self.next_fragment()

    def _next_part(self):
        """ Split off the text up to the next backslash """
        if self._pos is None:
            return None

        start = self._pos
        end = self._text.find('\\', start)
        if end == -1:
            end = len(self._text)
            self._pos = None
        else:
            self._pos = end + 1
        return start, end

    def _fail(self, error, offset):
        self._done = True
        error.offset = offset
        self.logger.debug('%s at offset %s', error.msg, offset)
        raise error
