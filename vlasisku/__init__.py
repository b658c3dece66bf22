# This file makes the 'vlasisku' directory a Python package.

from vlasisku.records import (
    DecompositionResult,
    Fragment,
    GlossGroup,
    GrammaticalGroup,
    Particle,
    ResultKind,
    RootWord,
    WordKind,
)
from vlasisku.lexicon import LexiconIndex, MissingOwnerError, get_lexicon, reset_lexicon
from vlasisku.decomposer import decompose
from vlasisku.resolver import Resolver

__version__ = "0.1.0"

__all__ = [
    'RootWord',
    'Particle',
    'Fragment',
    'GrammaticalGroup',
    'GlossGroup',
    'DecompositionResult',
    'WordKind',
    'ResultKind',
    'LexiconIndex',
    'MissingOwnerError',
    'get_lexicon',
    'reset_lexicon',
    'decompose',
    'Resolver',
]
