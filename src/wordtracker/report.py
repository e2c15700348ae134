from collections.abc import Iterable
from enum import Enum

from wordtracker.data_models.occurrence_record import OccurrenceRecord


class ReportFormat(str, Enum):
    files = "pf"  # word: a.txt b.txt
    lines = "pl"  # word: a.txt[1, 2] b.txt[3]
    frequency = "po"  # word: a.txt[1, 2] b.txt[3] (freq = 3)


def format_files(record: OccurrenceRecord) -> str:
    return f"{record.word}: {' '.join(record.files_seen())}".rstrip()


def _file_lines(record: OccurrenceRecord) -> str:
    return " ".join(
        f"{file}[{', '.join(str(n) for n in lines)}]"
        for file, lines in record.locations.items()
    )


def format_lines(record: OccurrenceRecord) -> str:
    return f"{record.word}: {_file_lines(record)}".rstrip()


def format_frequency(record: OccurrenceRecord) -> str:
    body = _file_lines(record)
    sep = " " if body else ""
    return f"{record.word}: {body}{sep}(freq = {record.total_frequency()})"


_FORMATTERS = {
    ReportFormat.files: format_files,
    ReportFormat.lines: format_lines,
    ReportFormat.frequency: format_frequency,
}


def format_record(record: OccurrenceRecord, fmt: ReportFormat) -> str:
    return _FORMATTERS[fmt](record)


def render_report(records: Iterable[OccurrenceRecord], fmt: ReportFormat) -> str:
    """One formatted line per record, each newline-terminated."""
    return "".join(format_record(record, fmt) + "\n" for record in records)
