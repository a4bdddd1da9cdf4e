"""
   Error handling routines

   All errors raised while unescaping derive from :class:`UnescapeError`.
"""


class UnescapeError(Exception):
    """ Base class for errors raised when decoding escape sequences.

    The offset is the index of the backslash which started the failing
    escape sequence, when known.
    """
    def __init__(self, msg, offset=None):
        super().__init__(msg)
        self.msg = msg
        self.offset = offset

    def __str__(self):
        return self.msg

    def __repr__(self):
        return '{}({})'.format(
            type(self).__name__, ', '.join(map(repr, self.payload())))

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.payload() == other.payload()

    def __hash__(self):
        return hash((type(self), self.payload()))

    def payload(self):
        """ The values identifying this error, excluding its location """
        return ()

    def print(self, text=None, file=None):
        """ Print the error, with a marker below the offending escape
        when the text and offset are available """
        if text is None or self.offset is None:
            print('Error: {}'.format(self.msg), file=file)
            return

        # Show the line holding the escape:
        line_start = text.rfind('\n', 0, self.offset) + 1
        line_end = text.find('\n', self.offset)
        if line_end == -1:
            line_end = len(text)
        column = self.offset - line_start
        print(text[line_start:line_end], file=file)
        print(' ' * column + '^ Error: {}'.format(self.msg), file=file)


class IncompleteSequence(UnescapeError):
    """ The text ends in a backslash without a following escape sequence """
    def __init__(self, offset=None):
        super().__init__('unexpected end of string after `\\`', offset)


class IncompleteUnicode(UnescapeError):
    """ A Unicode escape sequence (e.g. ``\\x``) lacks hex digits """
    def __init__(self, offset=None):
        super().__init__(
            'unexpected end of string in Unicode escape sequence', offset)


class InvalidUnicode(UnescapeError):
    """ A Unicode escape sequence without a valid character code """
    def __init__(self, code, offset=None):
        super().__init__(
            'invalid Unicode character code {}'.format(code), offset)
        self.code = code

    def payload(self):
        return (self.code,)


class UnknownSequence(UnescapeError):
    """ An escape sequence starting with an unknown character """
    def __init__(self, char, offset=None):
        super().__init__(
            'unknown escape sequence starting with `{}`'.format(char), offset)
        self.char = char

    def payload(self):
        return (self.char,)


class ParseIntError(UnescapeError):
    """ The digits of a numeric escape could not be parsed """
    EMPTY = 'cannot parse integer from empty string'
    INVALID_DIGIT = 'invalid digit found in string'
    POS_OVERFLOW = 'number too large to fit in target type'

    def __init__(self, reason, offset=None):
        super().__init__('error parsing integer: {}'.format(reason), offset)
        self.reason = reason

    def payload(self):
        return (self.reason,)
