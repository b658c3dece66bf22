"""
Immutable records for the Lojban lexicon.

The lexicon knows four kinds of entries:
- gismu: root words, each with its own rafsi (short combining forms)
- cmavo: particles, grouped by selmaho (grammatical class)
- rafsi: 3-4 letter fragments that stand for a gismu or cmavo inside a lujvo
- glosses: short English keywords shared by related words

Every record that can be returned from a query exposes the same small
contract: `kind`, `name`, `format_content()` and `to_dict()`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

# Leading marker written before some cmavo in the source tables (".i", ".e").
PAUSE_MARKER = "."


class WordKind(Enum):
    """Variant tag for the two kinds of words a rafsi or gloss can point to."""
    GISMU = "gismu"
    CMAVO = "cmavo"


class ResultKind(Enum):
    """Variant tag for query results. The value is the display label."""
    GISMU = "gismu"
    CMAVO = "cmavo"
    RAFSI = "rafsi"
    GLOSS = "gloss"
    SELMAHO = "selmaho"
    LUJVO = "lujvo"


def strip_marker(word: str) -> str:
    """Drop one leading pause marker, if present."""
    if word.startswith(PAUSE_MARKER):
        return word[len(PAUSE_MARKER):]
    return word


@dataclass(frozen=True)
class RootWord:
    """A gismu: a full content word with its rafsi."""

    word: str
    rafsis: Tuple[str, ...]
    gloss: str
    definition: str

    kind = WordKind.GISMU
    result_kind = ResultKind.GISMU

    @property
    def name(self) -> str:
        return self.word

    def format_content(self) -> str:
        return self.definition

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.result_kind.value,
            "word": self.word,
            "rafsi": list(self.rafsis),
            "gloss": self.gloss,
            "definition": self.definition,
        }


@dataclass(frozen=True)
class Particle:
    """
    A cmavo: a structure word belonging to one selmaho.

    `word` is kept exactly as written in the source table, so it may start
    with the pause marker; `key` is the form the lexicon indexes it by.
    """

    word: str
    selmaho: str
    gloss: str
    definition: str
    rafsis: Tuple[str, ...] = ()

    kind = WordKind.CMAVO
    result_kind = ResultKind.CMAVO

    @property
    def key(self) -> str:
        return strip_marker(self.word)

    @property
    def name(self) -> str:
        return self.word

    def format_content(self) -> str:
        return self.definition

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.result_kind.value,
            "word": self.word,
            "selmaho": self.selmaho,
            "rafsi": list(self.rafsis),
            "gloss": self.gloss,
            "definition": self.definition,
        }


# A rafsi or gloss points at either kind of word; dispatch on `.kind`.
Word = Union[RootWord, Particle]


@dataclass(frozen=True)
class Fragment:
    """A rafsi and the word it stands for."""

    rafsi: str
    word: Word

    result_kind = ResultKind.RAFSI

    @property
    def name(self) -> str:
        return self.rafsi

    def format_content(self) -> str:
        from vlasisku.formatting import format_record
        return format_record(self.word)

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.result_kind.value,
            "rafsi": self.rafsi,
            "word": self.word.to_dict(),
        }


@dataclass(frozen=True)
class GrammaticalGroup:
    """A selmaho and its member cmavo, in load order."""

    selmaho: str
    words: Tuple[Particle, ...]

    result_kind = ResultKind.SELMAHO

    @property
    def name(self) -> str:
        return self.selmaho

    def format_content(self) -> str:
        return "\n".join(f"{word.word}: {word.gloss}" for word in self.words)

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.result_kind.value,
            "selmaho": self.selmaho,
            "words": [word.to_dict() for word in self.words],
        }


@dataclass(frozen=True)
class GlossGroup:
    """All words sharing one gloss, gismu first, in load order."""

    gloss: str
    words: Tuple[Word, ...]

    result_kind = ResultKind.GLOSS

    @property
    def name(self) -> str:
        return self.gloss

    def format_content(self) -> str:
        from vlasisku.formatting import format_record
        return "\n".join(format_record(word) for word in self.words)

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.result_kind.value,
            "gloss": self.gloss,
            "words": [word.to_dict() for word in self.words],
        }


@dataclass(frozen=True)
class DecompositionResult:
    """
    A lujvo analysis.

    Attributes:
        word: The query exactly as it was decomposed
        parts: (rafsi, word) pairs in order; a trailing full gismu appears
            as (gismu, gismu record)
    """

    word: str
    parts: Tuple[Tuple[str, Word], ...] = ()

    result_kind = ResultKind.LUJVO

    @property
    def name(self) -> str:
        return self.word

    @property
    def rafsis(self) -> Tuple[str, ...]:
        return tuple(rafsi for rafsi, _ in self.parts)

    def format_content(self) -> str:
        from vlasisku.formatting import format_part
        return "\n".join(format_part(rafsi, word) for rafsi, word in self.parts)

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.result_kind.value,
            "word": self.word,
            "parts": [
                {"rafsi": rafsi, "word": word.to_dict()}
                for rafsi, word in self.parts
            ],
        }


Result = Union[RootWord, Particle, Fragment, GlossGroup, GrammaticalGroup, DecompositionResult]
