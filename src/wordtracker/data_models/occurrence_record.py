from typing import Annotated

from pydantic import BaseModel, Field, PositiveInt

# A file is only listed once it has at least one recorded line
LineNumbers = Annotated[list[PositiveInt], Field(min_length=1)]


class OccurrenceRecord(BaseModel):
    """A single indexed word: file name → line numbers where it occurs."""

    word: str = Field(frozen=True)
    # dict insertion order doubles as first-seen file order
    locations: dict[str, LineNumbers] = {}

    def add_occurrence(self, file: str, line: int) -> None:
        if line < 1:
            raise ValueError(f"Line numbers start at 1, got {line} for {self.word!r}")
        self.locations.setdefault(file, []).append(line)

    def total_frequency(self) -> int:
        return sum(len(lines) for lines in self.locations.values())

    def files_seen(self) -> list[str]:
        return list(self.locations)

    def line_numbers(self, file: str) -> list[int]:
        return list(self.locations.get(file, []))
