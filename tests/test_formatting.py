"""
Tests for plain-text and JSON rendering of results.
"""
import json
import unittest

from vlasisku.formatting import NO_RESULTS, format_record, format_results, results_to_json
from vlasisku.records import DecompositionResult
from vlasisku.resolver import Resolver

from sample_lexicon import make_lexicon


class TestFormatRecord(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.lexicon = make_lexicon()
        cls.resolver = Resolver(cls.lexicon)

    def test_gismu(self):
        text = format_record(self.lexicon.gismu("klama"))
        self.assertEqual(text, "gismu: klama\n  x1 comes/goes to destination x2 from origin x3.")

    def test_cmavo_keeps_marker_in_name(self):
        text = format_record(self.lexicon.cmavo("i"))
        self.assertTrue(text.startswith("cmavo: .i\n"))

    def test_rafsi_nests_its_word(self):
        text = format_record(self.lexicon.rafsi("kla"))
        self.assertEqual(text.splitlines(), [
            "rafsi: kla",
            "  gismu: klama",
            "    x1 comes/goes to destination x2 from origin x3.",
        ])

    def test_gloss_lists_words(self):
        text = format_record(self.lexicon.gloss("dog"))
        self.assertEqual(text.splitlines()[:2], ["gloss: dog", "  gismu: gerku"])

    def test_selmaho_lists_members(self):
        text = format_record(self.lexicon.selmaho("KOhA"))
        self.assertEqual(text.splitlines(), [
            "selmaho: KOhA",
            "  mi: me",
            "  do: you",
            "  ko'a: it-1",
        ])

    def test_lujvo_lists_parts(self):
        (lujvo,) = self.resolver.query("lojbangu")
        lines = format_record(lujvo).splitlines()
        self.assertEqual(lines[0], "lujvo: lojbangu")
        self.assertEqual(lines[1], "  loj:")
        self.assertEqual(lines[2], "    gismu: lojbo")
        self.assertIn("  bangu:", lines)

    def test_empty_lujvo_has_header_only(self):
        (lujvo,) = self.resolver.query("yy")
        self.assertEqual(format_record(lujvo), "lujvo: yy")

    def test_lujvo_defaults_to_no_parts(self):
        lujvo = DecompositionResult(word="yy")
        self.assertEqual(lujvo.parts, ())
        self.assertEqual(lujvo.rafsis, ())
        self.assertEqual(format_record(lujvo), "lujvo: yy")


class TestFormatResults(unittest.TestCase):

    def setUp(self):
        self.resolver = Resolver(make_lexicon())

    def test_no_results(self):
        self.assertEqual(format_results("qwerty", []), f'"qwerty":\n  {NO_RESULTS}')

    def test_results_separated_by_blank_line(self):
        text = format_results("nun", self.resolver.query("nun"))
        self.assertTrue(text.startswith('"nun":\n  rafsi: nun'))
        self.assertIn("\n\n  gloss: nun", text)

    def test_json(self):
        payload = json.loads(results_to_json(self.resolver.query("lojbangu")))
        self.assertEqual(payload[0]["kind"], "lujvo")
        self.assertEqual([p["rafsi"] for p in payload[0]["parts"]], ["loj", "bangu"])
        self.assertEqual(payload[0]["parts"][0]["word"]["word"], "lojbo")

    def test_json_keeps_apostrophes(self):
        text = results_to_json(self.resolver.query("KOhA"))
        self.assertIn("ko'a", text)


if __name__ == "__main__":
    unittest.main()
