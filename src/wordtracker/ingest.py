"""Tokenize text files and record each word occurrence in the index."""

from collections.abc import Iterable, Iterator
from pathlib import Path
import re

from wordtracker.data_models.occurrence_record import OccurrenceRecord
from wordtracker.index.ordered_index_tree import OrderedIndexTree

# Anything other than ASCII letters, digits and spaces separates words
_NON_WORD_RE = re.compile(r"[^a-zA-Z0-9 ]")


def tokenize(line: str) -> list[str]:
    return _NON_WORD_RE.sub(" ", line).lower().split()


def iter_occurrences(
    lines: Iterable[str], source: str
) -> Iterator[tuple[str, str, int]]:
    """Yield (word, source, line_number) with 1-based line numbers."""
    for line_number, line in enumerate(lines, start=1):
        for word in tokenize(line):
            yield word, source, line_number


def record_occurrence(
    tree: OrderedIndexTree, word: str, source: str, line: int
) -> None:
    existing = tree.search(word)
    if existing is not None:
        existing.add_occurrence(source, line)
        return
    record = OccurrenceRecord(word=word)
    record.add_occurrence(source, line)
    tree.insert(record)


def index_file(tree: OrderedIndexTree, path: Path, source: str | None = None) -> int:
    """Index every word in a text file; return the number of occurrences."""
    name = source if source is not None else str(path)
    n = 0
    # undecodable bytes become U+FFFD, which the tokenizer treats as a separator
    with path.open(encoding="utf-8", errors="replace") as f:
        for word, src, line in iter_occurrences(f, name):
            record_occurrence(tree, word, src, line)
            n += 1
    return n
