from __future__ import annotations

import csv
import io
import logging
import sys
from pathlib import Path
from typing import TextIO, Union

from ..errors import ParseError, ReadError

log = logging.getLogger(__name__)

Record = Union[list[str], dict[str, str]]


def read_input(path: str | Path | None = None, stdin: TextIO | None = None) -> str:
    """Return the raw CSV text from ``path`` or, without one, from stdin.

    The file wins when both are available.
    """
    if path is not None:
        log.debug("Reading CSV from %s", path)
        try:
            return Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"Could not read {path}: {e}") from e

    stream = stdin if stdin is not None else io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8")
    log.debug("Reading CSV from standard input")
    try:
        return "".join(chunk for chunk in stream)
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"Could not read standard input: {e}") from e


def _is_blank(row: list[str]) -> bool:
    return not row or (len(row) == 1 and not row[0].strip())


def parse_records(text: str, delimiter: str = ",", header: bool = False) -> list[Record]:
    """Parse CSV text into records.

    Without a header every record is the list of its fields. With a header the
    first row names the columns and every later row becomes a dict keyed by
    those names; its field count must match the header.

    Fields are trimmed, including around quoted values, and blank lines are
    skipped. Any malformed input fails the whole parse.
    """
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ParseError(f"Delimiter must be a single character, got {delimiter!r}")

    # Quotes always come in pairs (an escaped quote is doubled).
    if text.count('"') % 2:
        raise ParseError("Malformed CSV: unbalanced quotes")

    reader = csv.reader(io.StringIO(text), delimiter=delimiter, skipinitialspace=True)
    columns: list[str] | None = None
    records: list[Record] = []

    try:
        for row in reader:
            if _is_blank(row):
                continue
            fields = [f.strip() for f in row]

            if not header:
                records.append(fields)
                continue

            if columns is None:
                columns = fields
                continue

            if len(fields) != len(columns):
                raise ParseError(
                    f"Invalid record length on line {reader.line_num}: "
                    f"expected {len(columns)} fields, got {len(fields)}"
                )
            records.append(dict(zip(columns, fields)))
    except csv.Error as e:
        raise ParseError(f"Malformed CSV on line {reader.line_num}: {e}") from e

    return records
