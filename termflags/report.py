"""Assemble and render the decoded view of a terminal attributes snapshot."""

from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin
from rich.console import Console
from rich.table import Table

from . import tables
from .decoder import decode_control_mask, decode_mask, resolve_speed
from .types import Field, TerminalAttributes

# Output order is part of the text format and must not change
FIELD_ORDER = (
    Field.IFLAG,
    Field.OFLAG,
    Field.CFLAG,
    Field.LFLAG,
    Field.CC,
    Field.ISPEED,
    Field.OSPEED,
)


@dataclass
class ReportLine(DataClassJsonMixin):
    """One decoded field.

    raw holds the undecoded integer, or None for the control characters.
    """

    label: str
    value: str
    raw: int | None


@dataclass
class Report(DataClassJsonMixin):
    """Decoded fields in output order."""

    lines: list[ReportLine]

    def __getitem__(self, label: str) -> str:
        for line in self.lines:
            if line.label == label:
                return line.value
        raise KeyError(label)


def _decode_field(field: Field, attrs: TerminalAttributes) -> str:
    if field == Field.CC:
        return ",".join(str(c) for c in attrs.cc)
    if field in (Field.ISPEED, Field.OSPEED):
        return resolve_speed(attrs.mask(field), tables.speeds(), strip=1)
    if field == Field.CFLAG:
        result = decode_control_mask(
            attrs.cflag, tables.control_modes(), tables.speeds(), tables.speed_mask()
        )
        return str(result)
    return str(decode_mask(attrs.mask(field), tables.mode_table(field)))


def build_report(attrs: TerminalAttributes) -> Report:
    """Decode every field of attrs."""
    lines = []
    for field in FIELD_ORDER:
        raw = None if field == Field.CC else attrs.mask(field)
        lines.append(ReportLine(label=str(field), value=_decode_field(field, attrs), raw=raw))
    return Report(lines=lines)


def render_text(report: Report) -> str:
    """Render one ``label<TAB>value`` line per field."""
    return "".join(f"{line.label}\t{line.value}\n" for line in report.lines)


def render_json(report: Report) -> str:
    return report.to_json(indent=2)


def render_table(report: Report, console: Console | None = None) -> None:
    """Print the report as a rich table."""
    console = console or Console()

    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_column("Raw", style="dim", justify="right")

    for line in report.lines:
        raw = "" if line.raw is None else f"{line.raw:#x}"
        table.add_row(line.label, line.value, raw)

    console.print(table)
