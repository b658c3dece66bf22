"""
Query resolution: decide what kind of query a string is and look it up.

- "/..."        definition search (not implemented, always empty)
- "KOhA", "MI"  selmaho query (anything starting with an uppercase letter)
- anything else word query: gismu, cmavo, rafsi, gloss, then lujvo analysis
"""
import logging
from typing import List, Optional

from vlasisku.decomposer import decompose
from vlasisku.lexicon import LexiconIndex
from vlasisku.records import (
    DecompositionResult,
    GrammaticalGroup,
    Result,
    strip_marker,
)

logger = logging.getLogger(__name__)

REGEX_PREFIX = "/"
APOSTROPHE = "'"
# Selmaho names write the apostrophe as a lowercase "h" (KOhA, BAhE)
SELMAHO_APOSTROPHE = "h"


def normalize_selmaho(text: str) -> str:
    """'ko'a' / 'KOHA' / 'KO'A' -> 'KOhA'."""
    return text.upper().replace(APOSTROPHE, SELMAHO_APOSTROPHE).replace("H", SELMAHO_APOSTROPHE)


def normalize_word(text: str) -> str:
    """Lowercase and drop one leading pause marker ('.i' -> 'i')."""
    return strip_marker(text.lower())


def _is_selmaho_query(text: str) -> bool:
    return "A" <= text[0] <= "Z"


class Resolver:
    """Answers queries against one lexicon."""

    def __init__(self, lexicon: LexiconIndex):
        self.lexicon = lexicon

    def query(self, text: str) -> List[Result]:
        """
        Look up a raw query string.

        Args:
            text: Query as typed by the user

        Returns:
            Matching records in a fixed order; empty when nothing matches
        """
        text = text.strip()
        if not text:
            return []

        if text.startswith(REGEX_PREFIX):
            return self.query_definition_regex(text[len(REGEX_PREFIX):])
        if _is_selmaho_query(text):
            return self.query_selmaho(text)
        return self.query_word(text)

    def query_definition_regex(self, pattern: str) -> List[Result]:
        # Definition search is not supported; the prefix is reserved for it.
        logger.info(f"Definition search is not available (pattern {pattern!r})")
        return []

    def query_selmaho(self, text: str) -> List[Result]:
        """
        Look up a selmaho by name, or the selmaho of a cmavo.

        "KOhA", "KO'A" and "KOHA" all name the same selmaho. If no selmaho
        has that name, "MI" is read as the cmavo "mi" and its selmaho is
        returned.
        """
        name = normalize_selmaho(text)
        group = self.lexicon.selmaho(name)
        if group is None:
            group = self._selmaho_of_cmavo(name)
        return [group] if group is not None else []

    def _selmaho_of_cmavo(self, name: str) -> Optional[GrammaticalGroup]:
        word = name.lower().replace(SELMAHO_APOSTROPHE, APOSTROPHE)
        particle = self.lexicon.cmavo(word)
        if particle is None:
            return None
        return self.lexicon.selmaho(particle.selmaho)

    def query_word(self, text: str) -> List[Result]:
        """
        Look up a word in every table, falling back to lujvo analysis.

        Direct hits come back as gismu, cmavo, rafsi, gloss (in that order);
        one string can be e.g. both a rafsi and a gloss.
        """
        word = normalize_word(text)
        if not word:
            return []

        hits = [
            self.lexicon.gismu(word),
            self.lexicon.cmavo(word),
            self.lexicon.rafsi(word),
            self.lexicon.gloss(word),
        ]
        results: List[Result] = [hit for hit in hits if hit is not None]
        if results:
            return results

        lujvo = self.query_lujvo(word)
        return [lujvo] if lujvo is not None else []

    def query_lujvo(self, word: str) -> Optional[DecompositionResult]:
        """Analyze a word as a lujvo; None if it is not one."""
        parts = decompose(word, self.lexicon)
        if parts is None:
            return None
        return DecompositionResult(word=word, parts=parts)
