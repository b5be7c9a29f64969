"""
Test cases for value kinds.
"""

import unittest

from jsonrevive import parse
from jsonrevive.core.values import ValueKind, kind_of


class TestKindOf(unittest.TestCase):
    """Test kind_of classification."""

    def test_parsed_values(self):
        """Every parsed variant maps to its kind."""
        cases = [
            ("null", ValueKind.NULL),
            ("true", ValueKind.BOOLEAN),
            ("false", ValueKind.BOOLEAN),
            ("1.5", ValueKind.NUMBER),
            ('"s"', ValueKind.TEXT),
            ("[]", ValueKind.ARRAY),
            ("{}", ValueKind.OBJECT),
        ]
        for text, kind in cases:
            with self.subTest(text=text):
                self.assertIs(kind_of(parse(text)), kind)

    def test_bool_is_not_a_number(self):
        """bool is classified before int."""
        self.assertIs(kind_of(True), ValueKind.BOOLEAN)
        self.assertIs(kind_of(3), ValueKind.NUMBER)

    def test_foreign_values(self):
        """Non-JSON objects have no kind."""
        self.assertIsNone(kind_of(object()))
        self.assertIsNone(kind_of((1, 2)))

    def test_is_container(self):
        """Only arrays and objects are containers."""
        containers = {kind for kind in ValueKind if kind.is_container}
        self.assertEqual(containers, {ValueKind.ARRAY, ValueKind.OBJECT})


if __name__ == "__main__":
    unittest.main()
