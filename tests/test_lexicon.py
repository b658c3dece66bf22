"""
Tests for building the lexicon index.
"""
import dataclasses
import io
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from vlasisku import lexicon as lexicon_module
from vlasisku.lexicon import (
    CMAVO_FILE,
    GISMU_FILE,
    RAFSI_FILE,
    LexiconIndex,
    MissingOwnerError,
    get_lexicon,
    reset_lexicon,
)
from vlasisku.records import WordKind

from sample_lexicon import CMAVO, GISMU, RAFSI, make_lexicon


class TestLexiconTables(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.lexicon = make_lexicon()

    def test_gismu_rafsi_split_on_whitespace(self):
        bangu = self.lexicon.gismu("bangu")
        self.assertEqual(bangu.rafsis, ("ban", "bau"))
        self.assertEqual(bangu.gloss, "language")

    def test_gismu_without_rafsi(self):
        self.assertEqual(self.lexicon.gismu("nunbi").rafsis, ())

    def test_gismu_rafsi_not_extended_from_rafsi_table(self):
        """'bang' is in rafsi.dat for bangu but not in its own row."""
        self.assertNotIn("bang", self.lexicon.gismu("bangu").rafsis)
        self.assertEqual(self.lexicon.rafsi("bang").word, self.lexicon.gismu("bangu"))

    def test_cmavo_keyed_without_pause_marker(self):
        particle = self.lexicon.cmavo("i")
        self.assertIsNotNone(particle)
        self.assertEqual(particle.word, ".i")
        self.assertIsNone(self.lexicon.cmavo(".i"))

    def test_cmavo_rafsi_filled_from_rafsi_table_in_order(self):
        self.assertEqual(self.lexicon.cmavo("do").rafsis, ("don", "doi"))
        self.assertEqual(self.lexicon.cmavo("mi").rafsis, ("mib",))
        self.assertEqual(self.lexicon.cmavo("ko'a").rafsis, ())

    def test_cmavo_rafsi_match_rafsi_rows(self):
        """Every cmavo's rafsi are exactly the rafsi rows naming it."""
        for key, particle in self.lexicon.cmavo_table.items():
            expected = tuple(
                line.split("\t")[0] for line in RAFSI.splitlines()
                if line and line.split("\t")[1] == key
            )
            with self.subTest(cmavo=key):
                self.assertEqual(particle.rafsis, expected)

    def test_rafsi_points_at_finalized_cmavo(self):
        fragment = self.lexicon.rafsi("nun")
        self.assertEqual(fragment.word.kind, WordKind.CMAVO)
        self.assertIs(fragment.word, self.lexicon.cmavo("nu"))
        self.assertEqual(fragment.word.rafsis, ("nun",))

    def test_rafsi_points_at_gismu(self):
        fragment = self.lexicon.rafsi("kla")
        self.assertEqual(fragment.word.kind, WordKind.GISMU)
        self.assertIs(fragment.word, self.lexicon.gismu("klama"))

    def test_selmaho_groups_in_load_order(self):
        group = self.lexicon.selmaho("KOhA")
        self.assertEqual([p.word for p in group.words], ["mi", "do", "ko'a"])
        self.assertEqual(list(self.lexicon.selmaho_table), ["I", "KOhA", "NU", "UI"])

    def test_selmaho_members_are_finalized(self):
        group = self.lexicon.selmaho("KOhA")
        self.assertIs(group.words[0], self.lexicon.cmavo("mi"))

    def test_gloss_groups_gismu_before_cmavo(self):
        gismu = "dunda\t\tthing\tx1 is a gismu.\n"
        cmavo = "ti\tKOhA\tthing\tthis here.\nta\tKOhA\tthing\tthat there.\n"
        lexicon = LexiconIndex(io.StringIO(gismu), io.StringIO(cmavo), io.StringIO(""))

        group = lexicon.gloss("thing")
        self.assertEqual([w.word for w in group.words], ["dunda", "ti", "ta"])
        self.assertEqual([w.kind for w in group.words], [WordKind.GISMU, WordKind.CMAVO, WordKind.CMAVO])

    def test_empty_gloss_not_indexed(self):
        lexicon = LexiconIndex(io.StringIO(""), io.StringIO("zo'u\tZOhU\t\ttopic marker.\n"), io.StringIO(""))
        self.assertIsNone(lexicon.gloss(""))

    def test_lookups_are_exact(self):
        self.assertIsNone(self.lexicon.gismu("Klama"))
        self.assertIsNone(self.lexicon.selmaho("koha"))
        self.assertIsNone(self.lexicon.gloss("Dog"))
        self.assertIsNone(self.lexicon.rafsi("kl"))

    def test_stats(self):
        self.assertEqual(self.lexicon.stats(), {
            "gismu": 7,
            "cmavo": 7,
            "rafsi": 16,
            "selmaho": 4,
            "glosses": 14,
        })


class TestLexiconImmutability(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.lexicon = make_lexicon()

    def test_records_are_frozen(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.lexicon.gismu("klama").gloss = "walk"
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.lexicon.cmavo("mi").rafsis = ()

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            self.lexicon.gismu_table["klama"] = None
        with self.assertRaises(TypeError):
            self.lexicon.rafsi_table["xyz"] = None


class TestLexiconErrors(unittest.TestCase):

    def test_dangling_rafsi_owner_fails(self):
        rafsi = RAFSI + "zzz\tzasti\n"
        with self.assertRaises(MissingOwnerError) as ctx:
            make_lexicon(rafsi=rafsi)
        self.assertEqual(ctx.exception.rafsi, "zzz")
        self.assertEqual(ctx.exception.word, "zasti")
        self.assertIn("zasti", str(ctx.exception))

    def test_missing_owner_is_value_error(self):
        self.assertTrue(issubclass(MissingOwnerError, ValueError))

    def test_rafsi_owner_with_pause_marker(self):
        lexicon = make_lexicon(rafsi=RAFSI + "ibu\t.i\n")
        self.assertEqual(lexicon.cmavo("i").rafsis, ("ibu",))

    def test_duplicate_gismu_keeps_later_row(self):
        gismu = GISMU + "klama\tkla\twalk\tx1 walks.\n"
        with self.assertLogs("vlasisku.lexicon", level="WARNING") as logs:
            lexicon = make_lexicon(gismu=gismu)
        self.assertEqual(lexicon.gismu("klama").gloss, "walk")
        self.assertTrue(any("klama" in line for line in logs.output))


class TestLexiconFromDirectory(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.test_path = Path(self.test_dir)
        (self.test_path / GISMU_FILE).write_text(GISMU, encoding='utf-8')
        (self.test_path / CMAVO_FILE).write_text(CMAVO, encoding='utf-8')
        (self.test_path / RAFSI_FILE).write_text(RAFSI, encoding='utf-8')
        reset_lexicon()

    def tearDown(self):
        reset_lexicon()
        shutil.rmtree(self.test_dir)

    def test_loads_tables_from_directory(self):
        lexicon = LexiconIndex.from_directory(self.test_path)
        self.assertEqual(lexicon.stats(), make_lexicon().stats())

    def test_quote_characters_are_literal(self):
        (self.test_path / GISMU_FILE).write_text(
            'citka\tcit\teat\tx1 eats "food" x2.\n', encoding='utf-8'
        )
        (self.test_path / RAFSI_FILE).write_text("", encoding='utf-8')
        lexicon = LexiconIndex.from_directory(self.test_path)
        self.assertEqual(lexicon.gismu("citka").definition, 'x1 eats "food" x2.')

    def test_missing_table_raises(self):
        (self.test_path / RAFSI_FILE).unlink()
        with self.assertRaises(FileNotFoundError) as ctx:
            LexiconIndex.from_directory(self.test_path)
        self.assertIn(RAFSI_FILE, str(ctx.exception))

    def test_get_lexicon_is_singleton(self):
        first = get_lexicon(self.test_path)
        second = get_lexicon()
        self.assertIs(first, second)

    def test_get_lexicon_uses_default_directory(self):
        with patch.object(lexicon_module, "DEFAULT_DATA_DIR", self.test_path):
            lexicon = get_lexicon()
        self.assertIsNotNone(lexicon.gismu("klama"))


if __name__ == '__main__':
    unittest.main()
