import doctest
import unescaper
from unescaper import api, scanner, sequence


def load_tests(loader, tests, ignore):
    for module in (unescaper, api, scanner, sequence):
        tests.addTests(doctest.DocTestSuite(module))
    return tests
