"""
The lexicon index: every gismu, cmavo, rafsi, selmaho and gloss, keyed for
exact lookup.

The index is built once from three tables and never changes afterwards:
- gismu.dat: word, rafsi list, gloss, definition
- cmavo.dat: word, selmaho, gloss, definition
- rafsi.dat: rafsi, word

cmavo.dat carries no rafsi, so the cmavo rafsi lists are filled in from
rafsi.dat. That happens in two phases: draft cmavo records are read first,
then finalized records with their rafsi are built, and only the finalized
records end up in the index.

Usage:
    from vlasisku.lexicon import get_lexicon

    lexicon = get_lexicon()
    lexicon.gismu("klama")
"""

import dataclasses
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, TypeVar

from vlasisku.logging_config import log_with_context
from vlasisku.records import (
    Fragment,
    GlossGroup,
    GrammaticalGroup,
    Particle,
    RootWord,
    Word,
    WordKind,
    strip_marker,
)
from vlasisku.tables import (
    CMAVO_COLUMNS,
    GISMU_COLUMNS,
    RAFSI_COLUMNS,
    Source,
    read_table,
)

logger = logging.getLogger(__name__)

# Default paths
DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"
GISMU_FILE = "gismu.dat"
CMAVO_FILE = "cmavo.dat"
RAFSI_FILE = "rafsi.dat"

# Singleton instance
_lexicon_instance: Optional["LexiconIndex"] = None

T = TypeVar("T")


class MissingOwnerError(ValueError):
    """A rafsi row names a word that is neither a gismu nor a cmavo."""

    def __init__(self, rafsi: str, word: str):
        self.rafsi = rafsi
        self.word = word
        super().__init__(f"Unable to find word {word!r} for rafsi {rafsi!r}")


def _group_in_order(pairs: Iterable[Tuple[str, T]]) -> Dict[str, List[T]]:
    """Group items by key, keeping first-seen key order and item order."""
    groups: Dict[str, List[T]] = {}
    for key, item in pairs:
        members = groups.get(key)
        if members is None:
            members = []
            groups[key] = members
        members.append(item)
    return groups


def _load_gismu(source: Source, progress: bool) -> Dict[str, RootWord]:
    gismu: Dict[str, RootWord] = {}
    for row in read_table(source, GISMU_COLUMNS, progress=progress):
        record = RootWord(
            word=row["word"],
            rafsis=tuple(row["rafsis"].split()),
            gloss=row["gloss"],
            definition=row["definition"],
        )
        if record.word in gismu:
            logger.warning(f"Duplicate gismu {record.word!r}, keeping the later row")
        gismu[record.word] = record
    return gismu


def _load_cmavo_drafts(source: Source, progress: bool) -> Dict[str, Particle]:
    drafts: Dict[str, Particle] = {}
    for row in read_table(source, CMAVO_COLUMNS, progress=progress):
        record = Particle(
            word=row["word"],
            selmaho=row["selmaho"],
            gloss=row["gloss"],
            definition=row["definition"],
        )
        if record.key in drafts:
            logger.warning(f"Duplicate cmavo {record.key!r}, keeping the later row")
        drafts[record.key] = record
    return drafts


def _read_rafsi_owners(
    source: Source,
    gismu: Mapping[str, RootWord],
    cmavo: Mapping[str, Particle],
    progress: bool,
) -> List[Tuple[str, WordKind, str]]:
    """
    Resolve the owner of every rafsi row, gismu first, then cmavo.

    Returns:
        (rafsi, owner kind, owner key) in table order

    Raises:
        MissingOwnerError: If a row names an unknown word
    """
    owners: List[Tuple[str, WordKind, str]] = []
    for row in read_table(source, RAFSI_COLUMNS, progress=progress):
        rafsi, word = row["rafsi"], row["word"]
        if word in gismu:
            owners.append((rafsi, WordKind.GISMU, word))
        elif strip_marker(word) in cmavo:
            owners.append((rafsi, WordKind.CMAVO, strip_marker(word)))
        else:
            raise MissingOwnerError(rafsi, word)
    return owners


class LexiconIndex:
    """
    Read-only lookup tables over the whole lexicon.

    All lookups are exact and case-sensitive. Callers normalize queries
    themselves (see `vlasisku.resolver`).
    """

    def __init__(
        self,
        gismu_source: Source,
        cmavo_source: Source,
        rafsi_source: Source,
        progress: bool = False,
    ):
        """
        Build the index. Nothing is kept if any step fails.

        Args:
            gismu_source: gismu table, as a path or open text stream
            cmavo_source: cmavo table, as a path or open text stream
            rafsi_source: rafsi table, as a path or open text stream
            progress: Show tqdm progress bars while reading

        Raises:
            MissingOwnerError: If a rafsi row names an unknown word
            FileNotFoundError: If a table path does not exist
        """
        gismu = _load_gismu(gismu_source, progress)
        drafts = _load_cmavo_drafts(cmavo_source, progress)
        owners = _read_rafsi_owners(rafsi_source, gismu, drafts, progress)

        # Phase 2: finalize cmavo with the rafsi that name them.
        # gismu rafsi come only from gismu.dat and are left alone.
        cmavo_rafsis = _group_in_order(
            (key, rafsi) for rafsi, kind, key in owners if kind is WordKind.CMAVO
        )
        cmavo = {
            key: dataclasses.replace(draft, rafsis=tuple(cmavo_rafsis.get(key, ())))
            for key, draft in drafts.items()
        }

        rafsi_table: Dict[str, Fragment] = {}
        for rafsi, kind, key in owners:
            if kind is WordKind.GISMU:
                owner: Word = gismu[key]
            else:
                owner = cmavo[key]
            if rafsi in rafsi_table:
                logger.warning(f"Duplicate rafsi {rafsi!r}, keeping the later row")
            rafsi_table[rafsi] = Fragment(rafsi=rafsi, word=owner)

        selmaho_table = {
            name: GrammaticalGroup(selmaho=name, words=tuple(words))
            for name, words in _group_in_order(
                (particle.selmaho, particle) for particle in cmavo.values()
            ).items()
        }

        all_words: List[Word] = [*gismu.values(), *cmavo.values()]
        gloss_table = {
            text: GlossGroup(gloss=text, words=tuple(words))
            for text, words in _group_in_order(
                (word.gloss, word) for word in all_words if word.gloss
            ).items()
        }

        self._gismu = MappingProxyType(gismu)
        self._cmavo = MappingProxyType(cmavo)
        self._rafsi = MappingProxyType(rafsi_table)
        self._selmaho = MappingProxyType(selmaho_table)
        self._glosses = MappingProxyType(gloss_table)

        log_with_context("Lexicon loaded", self.stats(), level=logging.INFO, logger=logger)

    @classmethod
    def from_directory(cls, directory=None, progress: bool = False) -> "LexiconIndex":
        """
        Load gismu.dat, cmavo.dat and rafsi.dat from one directory.

        Args:
            directory: Directory holding the tables (default: DEFAULT_DATA_DIR)
            progress: Show tqdm progress bars while reading
        """
        directory = Path(directory) if directory is not None else DEFAULT_DATA_DIR
        logger.info(f"Loading lexicon from {directory}")
        return cls(
            directory / GISMU_FILE,
            directory / CMAVO_FILE,
            directory / RAFSI_FILE,
            progress=progress,
        )

    # --- Lookups ---

    def gismu(self, word: str) -> Optional[RootWord]:
        return self._gismu.get(word)

    def cmavo(self, word: str) -> Optional[Particle]:
        return self._cmavo.get(word)

    def rafsi(self, form: str) -> Optional[Fragment]:
        return self._rafsi.get(form)

    def selmaho(self, name: str) -> Optional[GrammaticalGroup]:
        return self._selmaho.get(name)

    def gloss(self, text: str) -> Optional[GlossGroup]:
        return self._glosses.get(text)

    # --- Read-only views ---

    @property
    def gismu_table(self) -> Mapping[str, RootWord]:
        return self._gismu

    @property
    def cmavo_table(self) -> Mapping[str, Particle]:
        return self._cmavo

    @property
    def rafsi_table(self) -> Mapping[str, Fragment]:
        return self._rafsi

    @property
    def selmaho_table(self) -> Mapping[str, GrammaticalGroup]:
        return self._selmaho

    @property
    def gloss_table(self) -> Mapping[str, GlossGroup]:
        return self._glosses

    def stats(self) -> Dict[str, int]:
        """Number of entries in each table."""
        return {
            "gismu": len(self._gismu),
            "cmavo": len(self._cmavo),
            "rafsi": len(self._rafsi),
            "selmaho": len(self._selmaho),
            "glosses": len(self._glosses),
        }


def get_lexicon(directory=None) -> LexiconIndex:
    """
    Get the process-wide lexicon, loading it on first use.

    The directory is only consulted on the first call.
    """
    global _lexicon_instance

    if _lexicon_instance is None:
        _lexicon_instance = LexiconIndex.from_directory(directory)

    return _lexicon_instance


def reset_lexicon():
    """Reset singleton (mainly for testing)."""
    global _lexicon_instance
    _lexicon_instance = None
