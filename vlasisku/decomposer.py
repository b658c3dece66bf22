"""
Lujvo decomposition.

A lujvo (compound word) is a chain of rafsi, optionally ending in a full
gismu, with two kinds of filler letters that carry no meaning:
- "y" separates rafsi and is dropped everywhere before matching
- "r" and "n" are hyphens that keep rafsi boundaries unambiguous

The search is leftmost, longest-first and backtracking: at each position a
4-letter rafsi is tried before a 3-letter one, and a rafsi that leaves an
unanalyzable remainder is given up in favour of the next option.
The first complete analysis found wins. Remainders that failed once are
remembered, so each suffix of the word is analyzed at most once.
"""
import logging
from typing import Optional, Set, Tuple

from vlasisku.lexicon import LexiconIndex
from vlasisku.logging_config import log_with_context
from vlasisku.records import Word

logger = logging.getLogger(__name__)

ELISION_LETTER = "y"
HYPHEN_LETTERS = ("r", "n")
RAFSI_LENGTHS = (4, 3)
MIN_LENGTH = 3
# Longest input (after dropping "y") that is analyzed at all
MAX_LENGTH = 100

Parts = Tuple[Tuple[str, Word], ...]


def decompose(word: str, lexicon: LexiconIndex) -> Optional[Parts]:
    """
    Split a lujvo into its rafsi.

    Args:
        word: Lowercased candidate lujvo
        lexicon: Index providing the rafsi and gismu tables

    Returns:
        (rafsi, word) pairs covering the input, or None if it is not a
        valid lujvo. An input with nothing left after dropping "y" gives
        an empty tuple. Inputs longer than MAX_LENGTH letters are never
        lujvo.
    """
    letters = word.replace(ELISION_LETTER, "")
    if len(letters) > MAX_LENGTH:
        parts = None
    else:
        parts = _decompose(letters, lexicon, set())
    log_with_context(
        f"Decomposed {word!r}" if parts is not None else f"No decomposition for {word!r}",
        {"rafsi": [rafsi for rafsi, _ in parts]} if parts else None,
        logger=logger,
    )
    return parts


def _decompose(remaining: str, lexicon: LexiconIndex, dead_ends: Set[str]) -> Optional[Parts]:
    # Suffixes in dead_ends are already known to have no analysis
    tried = []
    while remaining not in dead_ends:
        if not remaining:
            return ()
        if len(remaining) < MIN_LENGTH:
            break

        # A full gismu can only close the word
        gismu = lexicon.gismu(remaining)
        if gismu is not None:
            return ((remaining, gismu),)

        for length in RAFSI_LENGTHS:
            if len(remaining) < length:
                continue
            fragment = lexicon.rafsi(remaining[:length])
            if fragment is None:
                continue

            head = ((fragment.rafsi, fragment.word),)
            if len(remaining) == length:
                return head

            rest = _decompose(remaining[length:], lexicon, dead_ends)
            if rest is not None:
                return head + rest

        tried.append(remaining)
        if remaining[0] not in HYPHEN_LETTERS:
            break
        remaining = remaining[1:]

    dead_ends.update(tried)
    return None
