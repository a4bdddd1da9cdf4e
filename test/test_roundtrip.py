""" Property based tests, using hypothesis to generate the strings. """

import unittest
from hypothesis import given, strategies as st
from unescaper import unescape, escape_default, Unescaped


class RoundTripTestCase(unittest.TestCase):
    @given(st.text())
    def test_inverts_escape_default(self, txt):
        self.assertEqual(txt, unescape(escape_default(txt)))

    @given(st.text().filter(lambda t: '\\' not in t))
    def test_borrow_without_backslash(self, txt):
        self.assertIs(txt, unescape(txt))

    @given(st.text())
    def test_characters_match_fragments(self, txt):
        """ Character and fragment iteration give the same text """
        escaped = escape_default(txt)
        characters = ''.join(Unescaped(escaped))
        fragments = ''.join(f.value for f in Unescaped(escaped).fragments())
        self.assertEqual(characters, fragments)
        self.assertEqual(txt, characters)


if __name__ == '__main__':
    unittest.main()
