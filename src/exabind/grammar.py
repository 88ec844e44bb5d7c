"""Line grammar of the kglobalshortcutsrc format.

A document is a sequence of records separated by blank lines::

    [kwin]
    _k_friendly_name=KWin
    Expose=Ctrl+F9,Ctrl+F9,Toggle Present Windows (Current desktop)

Section headers may be chained on one line (``[services][org.kde.konsole.desktop]``);
each bracket group is its own header. Every other non-blank line must be a
friendly name or an ``id=shortcut,default,label`` record, otherwise parsing
fails for the whole document.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

FRIENDLY_NAME_KEY = "_k_friendly_name="
SECTION_OPEN = "["
SECTION_CLOSE = "]"
FIELD_SEPARATOR = ","


class KeymapParseError(ValueError):
    """Raised when a shortcuts document does not follow the grammar."""

    def __init__(self, message: str, *, line_number: int, line: str = "") -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number
        self.line = line


@dataclass(frozen=True)
class SectionHeader:
    name: str
    line_number: int = 0


@dataclass(frozen=True)
class SectionFriendlyName:
    name: str
    line_number: int = 0


@dataclass(frozen=True)
class ShortcutRecord:
    """One ``id=shortcut,default,label`` entry."""

    id: str
    shortcut_field: str
    default_field: str
    label: str
    line_number: int = 0


LineRecord = SectionHeader | SectionFriendlyName | ShortcutRecord


def parse_lines(text: str) -> list[LineRecord]:
    """Parse a whole document into line records, failing on the first bad line."""
    records: list[LineRecord] = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line.strip():
            continue
        records.extend(parse_line(line, line_number=line_number))
    return records


def parse_line(line: str, *, line_number: int = 0) -> list[LineRecord]:
    if line.startswith(SECTION_OPEN):
        return list(_parse_section_headers(line, line_number))
    if line.startswith(FRIENDLY_NAME_KEY):
        return [SectionFriendlyName(line[len(FRIENDLY_NAME_KEY) :], line_number)]
    return [_parse_shortcut_record(line, line_number)]


def resolve_categories(records: Iterable[LineRecord]) -> Iterator[tuple[str, ShortcutRecord]]:
    """Pair every shortcut record with the category label governing it.

    A section runs from one header to the next. Its label is the last
    friendly name inside it, wherever that appears, or else the header.
    """
    label: str | None = None
    pending: list[ShortcutRecord] = []
    for record in records:
        if isinstance(record, SectionHeader):
            if label is not None:
                yield from ((label, item) for item in pending)
            label, pending = record.name, []
        elif isinstance(record, SectionFriendlyName):
            if label is not None:
                label = record.name
        else:
            if label is None:
                raise KeymapParseError(
                    f"shortcut {record.id!r} precedes any section header",
                    line_number=record.line_number,
                )
            pending.append(record)

    if label is not None:
        yield from ((label, item) for item in pending)


def _parse_section_headers(line: str, line_number: int) -> Iterator[SectionHeader]:
    rest = line
    while rest:
        if not rest.startswith(SECTION_OPEN):
            raise KeymapParseError(
                "unexpected text after section header", line_number=line_number, line=line
            )
        end = rest.find(SECTION_CLOSE)
        if end < 0:
            raise KeymapParseError(
                "unterminated section header", line_number=line_number, line=line
            )
        yield SectionHeader(rest[1:end], line_number)
        rest = rest[end + 1 :]


def _parse_shortcut_record(line: str, line_number: int) -> ShortcutRecord:
    id_, sep, rest = line.partition("=")
    if not sep:
        raise KeymapParseError("expected 'id=' in shortcut entry", line_number=line_number, line=line)

    fields = rest.split(FIELD_SEPARATOR, 2)
    if len(fields) != 3:
        raise KeymapParseError(
            "expected 'shortcut,default,label' in shortcut entry",
            line_number=line_number,
            line=line,
        )

    shortcut_field, default_field, label = fields
    return ShortcutRecord(
        id=id_,
        shortcut_field=shortcut_field,
        default_field=default_field,
        label=label,
        line_number=line_number,
    )
