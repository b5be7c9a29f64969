"""
Test cases comparing jsonrevive against the standard json module.

Valid documents must decode to values equal to json.loads(); numbers compare
equal because integers and their float form are equal in Python.
"""

import json
import logging
import math
import unittest

import jsonrevive


DOCUMENTS = [
    "0",
    "-12.5e-3",
    '"plain"',
    '"esc \\" \\\\ \\/ \\b \\f \\n \\r \\t \\u00fc"',
    "[]",
    "{}",
    "[1, [2, [3, [4]]]]",
    '{"test": "value"}',
    '{"nested": {"array": [1, 2, {"deep": true}]}}',
    '{"number": 123, "float": 45.67, "bool": false, "null": null}',
    '{"unicode": "caf\\u00e9 \\u4e2d\\u6587", "empty": ""}',
    '[{"id": 1, "tags": ["a", "b"]}, {"id": 2, "tags": []}]',
]


class TestStdlibCompatibility(unittest.TestCase):
    """Valid documents match json.loads()."""

    def test_documents_match_stdlib(self):
        for text in DOCUMENTS:
            with self.subTest(text=text):
                self.assertEqual(jsonrevive.parse(text), json.loads(text))

    def test_round_trip_of_stdlib_output(self):
        """Text produced by json.dumps parses back to the same value."""
        value = {
            "name": "widget",
            "sizes": [1, 2.5, -3e-4],
            "meta": {"active": True, "owner": None, "quote": 'say "hi"'},
        }
        for indent in (None, 2):
            with self.subTest(indent=indent):
                self.assertEqual(jsonrevive.parse(json.dumps(value, indent=indent)), value)

    def test_overflowing_numbers_become_infinity(self):
        self.assertTrue(math.isinf(jsonrevive.parse("1e999")))


class TestWhitespaceInsensitivity(unittest.TestCase):
    """Whitespace between tokens never changes the result."""

    TOKENS = ['{', '"a"', ':', '[', '1', ',', '"x"', ',', 'true', ']', ',',
              '"b"', ':', '{', '"c"', ':', 'null', '}', '}']

    def test_whitespace_runs_between_tokens(self):
        expected = jsonrevive.parse("".join(self.TOKENS))
        for separator in [" ", "\t", "\n", "\r\n", " \t \n\r  "]:
            with self.subTest(separator=repr(separator)):
                text = separator + separator.join(self.TOKENS) + separator
                self.assertEqual(jsonrevive.parse(text), expected)


class TestDocumentsWithReviver(unittest.TestCase):
    """End-to-end reviver usage on realistic documents."""

    def test_rebuild_typed_records(self):
        text = """
        {
            "users": [
                {"name": "ada", "age": 36, "password": "x"},
                {"name": "alan", "age": 41, "password": "y"}
            ]
        }
        """

        def reviver(key, value):
            if key == "password":
                return jsonrevive.ABSENT
            if key == "age":
                return int(value)
            return value

        result = jsonrevive.parse(text, reviver)
        self.assertEqual(
            result,
            {"users": [{"name": "ada", "age": 36}, {"name": "alan", "age": 41}]},
        )
        self.assertIsInstance(result["users"][0]["age"], int)


class TestLogging(unittest.TestCase):
    """Debug records are emitted through the module logger."""

    def test_debug_records(self):
        with self.assertLogs("jsonrevive.core.engine", level=logging.DEBUG) as cm:
            jsonrevive.parse("[1]", lambda k, v: v)
        output = "\n".join(cm.output)
        self.assertIn("Parsing 3 characters", output)
        self.assertIn("Applying reviver", output)

    def test_configured_logger(self):
        logger = logging.getLogger("jsonrevive.tests.custom")
        config = jsonrevive.ParseConfig(logger=logger)
        with self.assertLogs(logger, level=logging.DEBUG) as cm:
            jsonrevive.parse("{}", config=config)
        self.assertIn("Parsing 2 characters", cm.output[0])


if __name__ == "__main__":
    unittest.main()
