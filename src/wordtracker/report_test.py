import pytest

from wordtracker.data_models.occurrence_record import OccurrenceRecord
from wordtracker.index.ordered_index_tree import OrderedIndexTree
from wordtracker.report import (
    ReportFormat,
    format_files,
    format_frequency,
    format_lines,
    format_record,
    render_report,
)


def _echo() -> OccurrenceRecord:
    record = OccurrenceRecord(word="echo")
    record.add_occurrence("a.txt", 2)
    record.add_occurrence("b.txt", 9)
    record.add_occurrence("a.txt", 5)
    return record


def test_format_files():
    assert format_files(_echo()) == "echo: a.txt b.txt"


def test_format_lines():
    assert format_lines(_echo()) == "echo: a.txt[2, 5] b.txt[9]"


def test_format_frequency():
    assert format_frequency(_echo()) == "echo: a.txt[2, 5] b.txt[9] (freq = 3)"


def test_formats_without_occurrences():
    record = OccurrenceRecord(word="ghost")
    assert format_files(record) == "ghost:"
    assert format_lines(record) == "ghost:"
    assert format_frequency(record) == "ghost: (freq = 0)"


@pytest.mark.parametrize(
    "fmt, expected",
    [
        (ReportFormat.files, "echo: a.txt b.txt"),
        (ReportFormat.lines, "echo: a.txt[2, 5] b.txt[9]"),
        (ReportFormat.frequency, "echo: a.txt[2, 5] b.txt[9] (freq = 3)"),
    ],
)
def test_format_record_dispatch(fmt: ReportFormat, expected: str):
    assert format_record(_echo(), fmt) == expected


def test_report_format_from_flag():
    assert ReportFormat("po") is ReportFormat.frequency


def test_render_report_in_order():
    tree = OrderedIndexTree()
    for line, word in enumerate(["dog", "cat", "ant"], start=1):
        record = OccurrenceRecord(word=word)
        record.add_occurrence("a.txt", line)
        tree.insert(record)
    report = render_report(tree.inorder(), ReportFormat.lines)
    assert report == "ant: a.txt[3]\ncat: a.txt[2]\ndog: a.txt[1]\n"


def test_render_empty_report():
    assert render_report(OrderedIndexTree().inorder(), ReportFormat.files) == ""
