""" Decoding of a single escape sequence.

The functions in this module are called right after a backslash was
encountered. They interpret the text following the backslash and
return the decoded character.
"""

from .common import IncompleteSequence, IncompleteUnicode, InvalidUnicode
from .common import UnknownSequence, ParseIntError


control_characters = {
    'a': '\a',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
}

# Characters which stand for themselves after a backslash. A newline
# after a backslash keeps the newline.
literal_characters = '\\\'"/\r\n'

octal_numbers = '01234567'
hex_numbers = '0123456789abcdefABCDEF'
digit_sets = {8: octal_numbers, 16: hex_numbers}


def parse_digits(txt: str, base: int) -> int:
    """ Parse the digits as an unsigned 32 bits number.

    Only plain digits of the given base are accepted, no signs, spaces
    or underscores.
    """
    if not txt:
        raise ParseIntError(ParseIntError.EMPTY)

    valid = digit_sets[base]
    for char in txt:
        if char not in valid:
            raise ParseIntError(ParseIntError.INVALID_DIGIT)

    num = int(txt, base)
    if num > 0xFFFFFFFF:
        raise ParseIntError(ParseIntError.POS_OVERFLOW)
    return num


def code_point(num: int) -> str:
    """ Get the character for the given unicode scalar value """
    if num > 0x10FFFF or 0xD800 <= num <= 0xDFFF:
        raise InvalidUnicode(num)
    return chr(num)


def _unicode_char(txt, start, end, size):
    """ Decode exactly size hex digits """
    if end - start < size:
        raise IncompleteUnicode()
    num = parse_digits(txt[start:start + size], 16)
    return code_point(num), start + size


def _braced_unicode_char(txt, start, end):
    """ Decode hex digits up to a closing brace, as in \\u{1F600} """
    close = txt.find('}', start, end)
    if close == -1:
        raise IncompleteUnicode()
    num = parse_digits(txt[start:close], 16)
    return code_point(num), close + 1


def decode_escape(txt: str, start=0, end=None):
    """ Decode the escape sequence in txt[start:end].

    The text must start right after the backslash. Returns a tuple
    with the decoded character and the index just after the escape
    sequence.
    """
    if end is None:
        end = len(txt)

    if start >= end:
        raise IncompleteSequence()

    char = txt[start]
    pos = start + 1
    if char in control_characters:
        return control_characters[char], pos
    elif char in literal_characters:
        return char, pos
    elif char == 'x':
        return _unicode_char(txt, pos, end, 2)
    elif char == 'u':
        if pos < end and txt[pos] == '{':
            return _braced_unicode_char(txt, pos + 1, end)
        else:
            return _unicode_char(txt, pos, end, 4)
    elif char == 'U':
        return _unicode_char(txt, pos, end, 8)
    elif char in octal_numbers:
        # Take at most three octal digits:
        while pos < end and pos - start < 3 and txt[pos] in octal_numbers:
            pos += 1
        num = parse_digits(txt[start:pos], 8)
        return code_point(num), pos
    else:
        raise UnknownSequence(char)


def escape_sequence(txt: str):
    """ Decode the escape sequence at the start of the given text.

    Returns the decoded character and the rest of the text.

    .. doctest::

        >>> from unescaper.sequence import escape_sequence
        >>> escape_sequence('x41BC')
        ('A', 'BC')
        >>> escape_sequence('101')
        ('A', '')

    """
    char, pos = decode_escape(txt)
    return char, txt[pos:]
