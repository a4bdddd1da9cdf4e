""" Convenience functions to unescape and escape complete strings. """

import logging

from .fragment import Escaped
from .scanner import Unescaped


logger = logging.getLogger('unescaper')


def unescape(text: str) -> str:
    """ Unescape the given text.

    When the text contains no escape sequences, the very same string
    object is returned. On the first invalid escape sequence an
    :class:`unescaper.UnescapeError` is raised.

    .. doctest::

        >>> from unescaper import unescape
        >>> unescape(r'tab\\there \\u{1F40D}')
        'tab\\there 🐍'

    """
    parts = []
    escapes = 0
    for fragment in Unescaped(text).fragments():
        if isinstance(fragment, Escaped):
            escapes += 1
        parts.append(fragment.value)

    if not escapes:
        # Nothing was decoded, so the text is unchanged
        return text

    logger.debug('Decoded %s escape sequences', escapes)
    return ''.join(parts)


def escape_default(text: str) -> str:
    """ Escape the given text, such that :func:`unescape` restores it.

    Tab, carriage return and line feed become ``\\t``, ``\\r`` and
    ``\\n``, backslash and quotes get a backslash, printable ascii is
    kept and all other characters are written as ``\\u{...}``.

    .. doctest::

        >>> from unescaper import escape_default
        >>> print(escape_default('"caf\\xe9"\\n'))
        \\"caf\\u{e9}\\"\\n

    """
    parts = []
    for char in text:
        if char in special_escapes:
            parts.append(special_escapes[char])
        elif ' ' <= char <= '~':
            parts.append(char)
        else:
            parts.append('\\u{{{:x}}}'.format(ord(char)))
    return ''.join(parts)


special_escapes = {
    '\t': '\\t',
    '\r': '\\r',
    '\n': '\\n',
    '\\': '\\\\',
    "'": "\\'",
    '"': '\\"',
}
