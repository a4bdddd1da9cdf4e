""" Fragments of unescaped text.

A string is decoded into a sequence of fragments. A fragment is either a
run of text without escape sequences, or a single character produced by
an escape sequence.
"""


class StringFragment:
    """ A piece of unescaped text """

    __slots__ = ['value']

    def __init__(self, value):
        assert isinstance(value, str)
        self.value = value

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self.value)

    def __str__(self):
        return self.value

    def __eq__(self, other):
        if not isinstance(other, StringFragment):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((type(self), self.value))


class Raw(StringFragment):
    """ The largest run of text before the next escape sequence """

    __slots__ = []

    def __init__(self, value):
        assert value, 'Raw fragments are never empty'
        super().__init__(value)


class Escaped(StringFragment):
    """ A single character decoded from an escape sequence """

    __slots__ = []

    def __init__(self, value):
        assert len(value) == 1
        super().__init__(value)
