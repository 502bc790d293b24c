import json
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_fit.keywords.tiers import (  # noqa: E402
    LegacyKeywordPayload,
    TieredKeywordPayload,
    decode_keyword_payload,
    parse_keywords_flat,
    parse_tiered_keywords,
    serialize_tiered_keywords,
)


class TieredKeywordParserTests(unittest.TestCase):
    def test_null_empty_and_garbage_return_none(self):
        self.assertIsNone(parse_tiered_keywords(None))
        self.assertIsNone(parse_tiered_keywords(""))
        self.assertIsNone(parse_tiered_keywords("not json"))
        self.assertIsNone(parse_tiered_keywords("42"))
        self.assertIsNone(parse_tiered_keywords('{"foo": ["a"]}'))
        self.assertIsNone(parse_tiered_keywords("[]"))
        self.assertIsNone(parse_tiered_keywords('{"keywords": [], "primary": ["a"]}'))

    def test_deeply_nested_payloads_return_none(self):
        self.assertIsNone(parse_tiered_keywords("[" * 100000))
        nested = '{"keywords": ' + "[" * 5000 + "]" * 5000 + "}"
        self.assertIsNone(parse_tiered_keywords(nested))
        self.assertIsNone(parse_keywords_flat(nested))
        self.assertIsNone(decode_keyword_payload("[" * 3000 + "]" * 3000))

    def test_legacy_array(self):
        tiered = parse_tiered_keywords('["a","b"]')
        self.assertEqual(tiered.model_dump(), {"all": ["a", "b"], "primary": [], "secondary": ["a", "b"]})

    def test_legacy_array_drops_non_strings(self):
        tiered = parse_tiered_keywords('["a", 1, null, "b"]')
        self.assertEqual(tiered.all, ["a", "b"])
        self.assertIsNone(parse_tiered_keywords("[1, 2, 3]"))

    def test_tiered_object_drops_unknown_primary(self):
        tiered = parse_tiered_keywords('{"keywords":["a","b","c"],"primary":["b","z"]}')
        self.assertEqual(tiered.model_dump(), {"all": ["a", "b", "c"], "primary": ["b"], "secondary": ["a", "c"]})

    def test_tiered_object_without_primary_list(self):
        tiered = parse_tiered_keywords('{"keywords":["a","b"],"primary":"a"}')
        self.assertEqual(tiered.primary, [])
        self.assertEqual(tiered.secondary, ["a", "b"])

    def test_flat_accessor_understands_both_shapes(self):
        self.assertEqual(parse_keywords_flat('["x","y"]'), ["x", "y"])
        self.assertEqual(parse_keywords_flat('{"keywords":["a","b","c"],"primary":["b"]}'), ["a", "b", "c"])
        self.assertIsNone(parse_keywords_flat(None))
        self.assertIsNone(parse_keywords_flat("{broken"))
        self.assertIsNone(parse_keywords_flat('{"keywords": "a"}'))

    def test_decode_tags_variants(self):
        self.assertIsInstance(decode_keyword_payload('["a"]'), LegacyKeywordPayload)
        decoded = decode_keyword_payload('{"keywords":["a"],"primary":["a"]}')
        self.assertIsInstance(decoded, TieredKeywordPayload)
        self.assertEqual(decoded.kind, "tiered")
        self.assertEqual(decoded.primary, ["a"])

    def test_serialize_payload_for_storage(self):
        raw = serialize_tiered_keywords(["Python", "AWS", ""], ["AWS", "Go"])
        self.assertEqual(json.loads(raw), {"keywords": ["Python", "AWS"], "primary": ["AWS"]})
        tiered = parse_tiered_keywords(raw)
        self.assertEqual(tiered.primary, ["AWS"])
        self.assertEqual(tiered.secondary, ["Python"])
        self.assertIsNone(serialize_tiered_keywords([]))


if __name__ == "__main__":
    unittest.main()
