""" Small library to unescape strings, mainly C-style escape sequences.

Supported escape sequences:

* ``\\a`` to a bell character.
* ``\\b`` to a backspace.
* ``\\f`` to a form feed.
* ``\\n`` to a line feed.
* ``\\r`` to a carriage return.
* ``\\t`` to a (horizontal) tab.
* ``\\v`` to a vertical tab.
* ``\\\\`` to a backslash.
* ``\\'`` to a single quote.
* ``\\"`` to a double quote.
* ``\\/`` to a slash.
* ``\\`` followed by a new line keeps the same new line.
* ``\\xNN`` to the Unicode character in the two hex digits.
* ``\\uNNNN`` as above, but with four hex digits.
* ``\\UNNNNNNNN`` as above, but with eight hex digits.
* ``\\u{NN...}`` as above, but with a variable amount of hex digits.
* up to three octal digits to the Unicode character.

Example usage:

>>> from unescaper import unescape
>>> unescape(r'\\x48ello\\041')
'Hello!'

"""

from .api import unescape, escape_default
from .common import UnescapeError, IncompleteSequence, IncompleteUnicode
from .common import InvalidUnicode, UnknownSequence, ParseIntError
from .fragment import StringFragment, Raw, Escaped
from .scanner import Unescaped
from .sequence import escape_sequence, decode_escape

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))

__all__ = [
    'unescape', 'escape_default', 'Unescaped', 'escape_sequence',
    'decode_escape', 'StringFragment', 'Raw', 'Escaped', 'UnescapeError',
    'IncompleteSequence', 'IncompleteUnicode', 'InvalidUnicode',
    'UnknownSequence', 'ParseIntError',
]
