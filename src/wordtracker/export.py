"""Flatten the index into a polars occurrence table."""

import polars as pl

from wordtracker.index.ordered_index_tree import OrderedIndexTree

_SCHEMA = {
    "word": pl.String,
    "file": pl.String,
    "line": pl.Int64,
}


def to_polars(tree: OrderedIndexTree) -> pl.DataFrame:
    """One row per occurrence, in word order, then first-seen file order."""
    rows = [
        (record.word, file, line)
        for record in tree.inorder()
        for file, lines in record.locations.items()
        for line in lines
    ]
    if not rows:
        return pl.DataFrame(schema=_SCHEMA)
    return pl.DataFrame(rows, schema=_SCHEMA, orient="row")
