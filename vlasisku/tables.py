"""
Reader for the tab-separated lexicon tables.

The tables are exported with no quoting at all: a `"` inside a definition is
just a character. Each row is returned as a dict keyed by column name.
Short rows are padded with empty strings; extra columns are ignored.
"""
import csv
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Sequence, TextIO, Union

from tqdm import tqdm

logger = logging.getLogger(__name__)

Source = Union[str, Path, TextIO]

GISMU_COLUMNS = ("word", "rafsis", "gloss", "definition")
CMAVO_COLUMNS = ("word", "selmaho", "gloss", "definition")
RAFSI_COLUMNS = ("rafsi", "word")


@contextmanager
def _open_source(source: Source):
    """Yield a text stream for a path or pass an already-open stream through."""
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            stream = open(path, "r", encoding="utf-8", newline="")
        except FileNotFoundError as e:
            raise FileNotFoundError(f"Lexicon table not found at {path}") from e
        with stream:
            yield stream
    else:
        yield source


def _source_name(source: Source) -> str:
    if isinstance(source, (str, Path)):
        return Path(source).name
    return getattr(source, "name", "<stream>")


def read_table(
    source: Source,
    columns: Sequence[str],
    progress: bool = False,
) -> Iterator[Dict[str, str]]:
    """
    Read rows from a tab-separated table.

    Args:
        source: Path to the table, or an open text stream
        columns: Column names, in file order
        progress: Show a tqdm progress bar while reading

    Yields:
        One dict per non-blank row, mapping column name to field text
    """
    name = _source_name(source)
    count = 0
    with _open_source(source) as stream:
        reader = csv.reader(stream, delimiter="\t", quoting=csv.QUOTE_NONE)
        for raw_row in tqdm(reader, desc=f"Reading {name}", unit=" rows", disable=not progress):
            if not raw_row:
                continue
            padded = list(raw_row[:len(columns)])
            padded.extend([""] * (len(columns) - len(padded)))
            count += 1
            yield dict(zip(columns, padded))
    logger.debug(f"Read {count} rows from {name}")
