"""Parser for the flat, delimiter-separated training plan import format."""

from dataclasses import dataclass, field
from typing import Dict, List

from fitpoints.exceptions import SchemaError

REQUIRED_COLUMNS = (
    "plan_id",
    "subject_email",
    "day",
    "exercise",
    "sets",
    "reps",
    "rest",
    "intensity",
)
OPTIONAL_COLUMNS = ("video_url",)


@dataclass(frozen=True)
class ImportRow:
    """One data line of an import file, fields still as raw text."""
    line_number: int
    plan_id: str
    subject_email: str
    day: str
    exercise: str
    sets: str = ""
    reps: str = ""
    rest: str = ""
    intensity: str = ""
    video_url: str = ""

    @classmethod
    def from_fields(cls, line_number: int, fields: Dict[str, str]) -> "ImportRow":
        return cls(
            line_number=line_number,
            **{name: fields.get(name, "") for name in REQUIRED_COLUMNS + OPTIONAL_COLUMNS},
        )


@dataclass
class ParsedTable:
    rows: List[ImportRow] = field(default_factory=list)
    skipped: int = 0  # Data lines with fewer fields than required columns


def split_line(line: str, delimiter: str) -> List[str]:
    """Split on the delimiter and trim each field. No quoting is recognised."""
    return [value.strip() for value in line.split(delimiter)]


def parse_plan_table(text: str, delimiter: str = ",") -> ParsedTable:
    """
    Parse an import payload into rows.
    
    The first line is the header. Every required column must be present
    there, otherwise SchemaError lists all the missing ones and no data
    line is looked at. Blank lines are ignored; lines with fewer fields
    than there are required columns are counted as skipped.
    
    Raises:
        SchemaError: header lacks at least one required column.
    """
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
    
    lines = text.split("\n")
    headers = split_line(lines[0], delimiter)
    
    missing = [column for column in REQUIRED_COLUMNS if column not in headers]
    if missing:
        raise SchemaError(missing)
    
    parsed = ParsedTable()
    for line_number, raw_line in enumerate(lines[1:], start=2):
        line = raw_line.strip()
        if not line:
            continue
        
        values = split_line(line, delimiter)
        if len(values) < len(REQUIRED_COLUMNS):
            parsed.skipped += 1
            continue
        
        fields = {
            header: values[index] if index < len(values) else ""
            for index, header in enumerate(headers)
        }
        parsed.rows.append(ImportRow.from_fields(line_number, fields))
    
    return parsed
