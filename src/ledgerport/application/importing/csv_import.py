"""Application importing – CsvImporter.

Parsing is a single pass with one character of lookahead:

* ``""`` inside a quoted field emits a literal ``"``;
* any other ``"`` toggles quoted/unquoted and emits nothing;
* ``,`` outside quotes closes the field;
* everything else is appended to the current field.

Physical lines are joined while a quoted field opened at the start of a
field is still open, so values containing newlines survive an export/import
round trip. A joined record that still fails to parse is retried line by
line, so one stray quote costs only its own row.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from ledgerport.application.importing.result import ImportResult
from ledgerport.kernel.errors import CsvParseError, FileReadError
from ledgerport.observability.logging import get_logger

__all__ = ["CsvImporter", "parse_csv_line", "read_file_as_text", "split_records"]

TOO_SHORT = "File must contain at least a header row and one data row"
UNPARSEABLE = "Failed to parse CSV file"

_log = get_logger(__name__)


def parse_csv_line(line: str) -> list[str]:
    """Split one logical record into raw (untrimmed) field values."""
    fields: list[str] = []
    current: list[str] = []
    quoted = False
    i = 0
    length = len(line)
    while i < length:
        char = line[i]
        if char == '"' and quoted and i + 1 < length and line[i + 1] == '"':
            current.append('"')
            i += 2
            continue
        if char == '"':
            quoted = not quoted
        elif char == "," and not quoted:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    if quoted:
        raise CsvParseError("Unterminated quoted field", record=line)
    fields.append("".join(current))
    return fields


def _still_quoted(line: str, quoted: bool) -> bool:
    """Whether a quoted field is open at the end of *line*.

    Only a ``"`` at the start of a field (leading blanks allowed) opens one;
    a quote in the middle of an unquoted value is ordinary text here.
    """
    field_start = not quoted
    i = 0
    length = len(line)
    while i < length:
        char = line[i]
        if quoted:
            if char == '"':
                if i + 1 < length and line[i + 1] == '"':
                    i += 2
                    continue
                quoted = False
            field_start = False
        elif char == '"' and field_start:
            quoted = True
            field_start = False
        else:
            field_start = char == "," or (field_start and char in " \t")
        i += 1
    return quoted


def split_records(text: str) -> Iterator[str]:
    """Yield non-blank logical records.

    A record continues onto the next physical line while a quoted field is
    open; an unterminated one runs to the end of the text.
    """
    pending: list[str] = []
    quoted = False
    for line in text.split("\n"):
        if not pending and not line.strip():
            continue
        pending.append(line)
        quoted = _still_quoted(line, quoted)
        if not quoted:
            yield "\n".join(pending)
            pending = []
    if pending:
        yield "\n".join(pending)


def _parse_records(records: Iterable[str]) -> Iterator[list[str] | CsvParseError]:
    """Fields per row, or the error for a row that could not be split."""
    for record in records:
        try:
            fields = parse_csv_line(record)
        except CsvParseError as exc:
            lines = [line for line in record.split("\n") if line.strip()]
            if len(lines) > 1:
                yield from _parse_lines(lines)
            else:
                yield exc
            continue
        yield fields


def _parse_lines(lines: Iterable[str]) -> Iterator[list[str] | CsvParseError]:
    for line in lines:
        try:
            yield parse_csv_line(line)
        except CsvParseError as exc:
            yield exc


def read_file_as_text(path: str | Path, encoding: str = "utf-8-sig") -> str:
    """Read an import file; a UTF-8 BOM is dropped."""
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(str(path), cause=exc) from exc


class CsvImporter:
    """Decodes delimited text into header-keyed rows.

    Rows that cannot be parsed are reported as ``Error parsing row N`` (the
    header is row 1) and skipped; they never abort the import.
    """

    def decode(self, text: str) -> ImportResult:
        parsed = list(_parse_records(split_records(text.removeprefix("\ufeff"))))
        if len(parsed) < 2:
            return ImportResult.fail(TOO_SHORT)

        header = parsed[0]
        if isinstance(header, CsvParseError):
            _log.warning("import.header_failed", **header.log_fields())
            return ImportResult.fail(UNPARSEABLE)
        headers = [name.strip() for name in header]

        data: list[dict[str, str]] = []
        errors: list[str] = []
        for number, values in enumerate(parsed[1:], start=2):
            if isinstance(values, CsvParseError):
                errors.append(f"Error parsing row {number}")
                _log.warning("import.row_failed", row=number, **values.log_fields())
                continue
            data.append({
                name: values[index].strip() if index < len(values) else ""
                for index, name in enumerate(headers)
            })

        _log.info("import.decoded", row_count=len(data), error_count=len(errors))
        return ImportResult.ok(data, errors)

    def import_file(self, path: str | Path) -> ImportResult:
        return self.decode(read_file_as_text(path))
