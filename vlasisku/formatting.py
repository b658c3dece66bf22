"""
Plain-text and JSON rendering of query results.

Every record renders as a "label: name" header followed by its content,
indented one level. Records that wrap other records (a rafsi and its word,
a gloss and its words, a lujvo and its parts) nest the inner rendering one
level deeper.
"""
import json
import textwrap
from typing import Iterable, List, Sequence

INDENT = "  "
NO_RESULTS = "No results found"


def _indent(text: str) -> str:
    return textwrap.indent(text, INDENT)


def format_record(record) -> str:
    """Render one record (any result kind, or a bare gismu/cmavo)."""
    header = f"{record.result_kind.value}: {record.name}"
    content = record.format_content()
    if not content:
        return header
    return f"{header}\n{_indent(content)}"


def format_part(rafsi: str, word) -> str:
    """Render one lujvo component: the rafsi, then the word it stands for."""
    return f"{rafsi}:\n{_indent(format_record(word))}"


def format_results(query: str, results: Sequence) -> str:
    """
    Render everything returned for a query.

    Args:
        query: The raw query, shown as a header
        results: Records returned by the resolver

    Returns:
        Header line plus each result indented, separated by blank lines
    """
    if not results:
        body = NO_RESULTS
    else:
        body = "\n\n".join(format_record(result) for result in results)
    return f"{json.dumps(query, ensure_ascii=False)}:\n{_indent(body)}"


def results_to_json(results: Iterable, indent: int = 2) -> str:
    """Serialize results as a JSON array of record dicts."""
    payload: List[dict] = [result.to_dict() for result in results]
    return json.dumps(payload, indent=indent, ensure_ascii=False)
