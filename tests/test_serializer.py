"""
Tests for serializing and deserializing options.
"""

import unittest

import yaml

from ConfigOptions import (
    DeserializationError,
    OptionFileCache,
    Options,
    OptionsError,
    SerializationError,
    parse_options,
    serialize,
)


class TestSerializer(unittest.TestCase):
    """Test cases for serialize(), parse_options() and deserialize()."""

    def setUp(self):
        """Set up a container holding nested values."""
        self.cache = OptionFileCache()
        self.options = Options({
            "name": "myapp",
            "count": 3,
            "ratio": 0.5,
            "enabled": True,
            "nothing": None,
            "plugins": ["spell", "grammar", ["nested", 1]],
            "database": {"host": "localhost", "ports": [5432, 5433], "pool": {"size": 4}},
            "sub": Options({"moods": ["happy"]}, cache=self.cache),
        }, cache=self.cache)

    def test_round_trip(self):
        """Deserializing serialized options gives equal options."""
        text = self.options.serialize()
        restored = Options(cache=self.cache).deserialize(text)

        self.assertEqual(restored, self.options)
        self.assertEqual(restored["sub"], {"moods": ["happy"]})
        self.assertIsInstance(restored["database"]["pool"], dict)

    def test_serialize_is_plain_yaml(self):
        """The text is a YAML mapping with no Python-specific tags."""
        text = serialize(self.options)
        self.assertNotIn("!!python", text)
        self.assertIsInstance(yaml.safe_load(text), dict)

    def test_tuples_become_lists(self):
        """Tuples are written as sequences."""
        text = serialize({"pair": (1, 2)})
        self.assertEqual(parse_options(text), {"pair": [1, 2]})

    def test_shared_values_are_expanded(self):
        """A value referenced twice is written out twice, not aliased."""
        shared = ["a", "b"]
        text = serialize({"first": shared, "second": shared})

        self.assertNotIn("&id", text)
        parsed = parse_options(text)
        self.assertEqual(parsed["first"], parsed["second"])
        self.assertIsNot(parsed["first"], parsed["second"])

    def test_cycle_is_representable(self):
        """A list that contains itself is written with an anchor."""
        loop = [1]
        loop.append(loop)
        text = serialize({"loop": loop})

        self.assertIn("&id001", text)
        parsed = parse_options(text)
        self.assertIs(parsed["loop"][1], parsed["loop"])

    def test_unrepresentable_value(self):
        """Values YAML cannot write raise SerializationError."""
        self.options["handle"] = object()
        with self.assertRaises(SerializationError):
            self.options.serialize()

    def test_deserialize_merges_shallow(self):
        """deserialize() merges like merge(), replacing lists."""
        result = self.options.deserialize("plugins: [other]\nstyle: poor\n")

        self.assertIs(result, self.options)
        self.assertEqual(self.options["plugins"], ["other"])
        self.assertEqual(self.options["style"], "poor")
        self.assertEqual(self.options["name"], "myapp")

    def test_deserialize_json(self):
        """JSON documents are accepted."""
        self.options.deserialize('{"mood": "sardonic", "moods": ["a", "b"]}')
        self.assertEqual(self.options["mood"], "sardonic")
        self.assertEqual(self.options["moods"], ["a", "b"])

    def test_deserialize_empty_text(self):
        """Empty text merges nothing."""
        before = self.options.as_dict()
        self.options.deserialize("")
        self.assertEqual(self.options.as_dict(), before)

    def test_invalid_text_raises_with_source(self):
        """Unparseable text raises DeserializationError naming the source."""
        with self.assertRaises(DeserializationError) as cm:
            self.options.deserialize("plugins: [unclosed\n", "Options File: site.yml")

        error = cm.exception
        self.assertIn("Options File: site.yml", str(error))
        self.assertEqual(error.source, "Options File: site.yml")
        self.assertTrue(error.detail)
        self.assertIsInstance(error, SerializationError)
        self.assertIsInstance(error, OptionsError)
        self.assertEqual(self.options["plugins"], ["spell", "grammar", ["nested", 1]])

    def test_invalid_text_default_source(self):
        """Without a source the generic label is used."""
        with self.assertRaises(DeserializationError) as cm:
            parse_options("a: b: c")
        self.assertIn("<string>", str(cm.exception))

    def test_non_mapping_root_raises(self):
        """A document whose root is not a mapping is rejected."""
        for text in ("- a\n- b\n", "just text", "42"):
            with self.assertRaises(DeserializationError) as cm:
                parse_options(text, "buffer")
            self.assertIn("buffer", str(cm.exception))

    def test_code_is_not_evaluated(self):
        """Python object tags are refused instead of executed."""
        with self.assertRaises(DeserializationError):
            parse_options("cmd: !!python/object/apply:os.system ['true']\n")

    def test_error_to_dict(self):
        """Errors render to a dict with technical details in debug mode."""
        error = DeserializationError("buffer", "bad syntax", context={"debug": True})
        data = error.to_dict()

        self.assertEqual(data["error_code"], "CO-SER-2001")
        self.assertEqual(data["message"], DeserializationError.user_message)
        self.assertEqual(data["technical_details"]["context"]["source"], "buffer")

        quiet = DeserializationError("buffer", "bad syntax").to_dict()
        self.assertNotIn("technical_details", quiet)


if __name__ == "__main__":
    unittest.main()
