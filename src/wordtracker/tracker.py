"""Index a text file into the persistent word repository and print a report.

Usage:
    python -m wordtracker input.txt -pf|-pl|-po [-f output.txt] \\
        [--repository repository.ser] [--export occurrences.parquet]

Each run adds the input file's words to the repository, so reports cover
every file indexed so far.
"""

import argparse
from pathlib import Path
import sys

from wordtracker.export import to_polars
from wordtracker.index.ordered_index_tree import OrderedIndexTree
from wordtracker.ingest import index_file
from wordtracker.report import ReportFormat, render_report
from wordtracker.snapshot.codec import CorruptSnapshotError
from wordtracker.snapshot.store import SnapshotStore

DEFAULT_REPOSITORY = "repository.ser"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordtracker", description="Track word locations across text files"
    )
    parser.add_argument("input", help="Text file to index")
    fmt = parser.add_mutually_exclusive_group(required=True)
    fmt.add_argument(
        "-pf",
        dest="fmt",
        action="store_const",
        const=ReportFormat.files,
        help="Print each word with the files it occurs in",
    )
    fmt.add_argument(
        "-pl",
        dest="fmt",
        action="store_const",
        const=ReportFormat.lines,
        help="Print each word with files and line numbers",
    )
    fmt.add_argument(
        "-po",
        dest="fmt",
        action="store_const",
        const=ReportFormat.frequency,
        help="Print files, line numbers and total frequency",
    )
    parser.add_argument("-f", dest="output", default=None, help="Write report here")
    parser.add_argument(
        "--repository",
        default=DEFAULT_REPOSITORY,
        help=f"Path to the persisted index (default: {DEFAULT_REPOSITORY})",
    )
    parser.add_argument(
        "--export", default=None, help="Also write all occurrences to this parquet"
    )
    return parser


def load_or_empty(store: SnapshotStore) -> OrderedIndexTree:
    try:
        return store.load_tree()
    except CorruptSnapshotError as e:
        print(
            f"Warning: could not load {store.path} ({e}); starting a new index.",
            file=sys.stderr,
        )
        return OrderedIndexTree()


def publish(
    tree: OrderedIndexTree,
    fmt: ReportFormat,
    output: Path | None = None,
    export: Path | None = None,
) -> str:
    """Render the in-order report, writing it and the parquet export if asked."""
    report = render_report(tree.inorder(), fmt)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report)
    if export is not None:
        export.parent.mkdir(parents=True, exist_ok=True)
        to_polars(tree).write_parquet(export)
    return report


def run(
    input_path: Path,
    fmt: ReportFormat,
    store: SnapshotStore,
    output: Path | None = None,
    export: Path | None = None,
) -> str:
    """Index input_path into the stored tree, save it, and return the report."""
    tree = load_or_empty(store)
    index_file(tree, input_path)
    store.save_tree(tree)
    return publish(tree, fmt, output, export)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    input_path = Path(args.input)
    output = Path(args.output) if args.output else None
    export = Path(args.export) if args.export else None
    store = SnapshotStore(Path(args.repository))

    tree = load_or_empty(store)
    try:
        index_file(tree, input_path)
    except FileNotFoundError:
        print(
            f"Error: input file '{input_path}' not found. Repository unchanged.",
            file=sys.stderr,
        )
        sys.exit(1)
    except OSError as e:
        print(
            f"Error reading {input_path}: {e}. Repository unchanged.", file=sys.stderr
        )
        sys.exit(1)

    try:
        store.save_tree(tree)
        report = publish(tree, args.fmt, output, export)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if output is None:
        print(report, end="")
    else:
        print(f"Wrote report → {output}")
    if export is not None:
        print(f"Wrote occurrences → {export}")


if __name__ == "__main__":
    main()
