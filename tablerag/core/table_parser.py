"""
Delimited table parsing.
Comma separated text with double-quote quoting becomes header-keyed records.
"""

from typing import Dict, List

Record = Dict[str, str]

DELIMITER = ","
QUOTE = '"'


class EmptyTableError(ValueError):
    """Raised when a table holds no rows at all, not even a header."""
    pass


def _split_rows(text: str) -> List[List[str]]:
    """Split raw text into rows of raw field values.

    A doubled quote inside a quoted field is a literal quote. Outside quotes,
    ``\\n``, ``\\r\\n`` and a bare ``\\r`` all end the row.
    """
    rows: List[List[str]] = []
    row: List[str] = []
    field: List[str] = []
    in_quotes = False
    i = 0
    n = len(text)

    while i < n:
        c = text[i]

        if c == QUOTE:
            if in_quotes and i + 1 < n and text[i + 1] == QUOTE:
                field.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
            i += 1
            continue

        if not in_quotes and c == DELIMITER:
            row.append("".join(field))
            field = []
            i += 1
            continue

        if not in_quotes and c in "\r\n":
            if c == "\r" and i + 1 < n and text[i + 1] == "\n":
                i += 1
            row.append("".join(field))
            rows.append(row)
            field, row = [], []
            i += 1
            continue

        field.append(c)
        i += 1

    # Last row without a trailing line terminator
    if field or row:
        row.append("".join(field))
        rows.append(row)

    return rows


def parse_table(text: str) -> List[Record]:
    """
    Parse delimited table text into records keyed by the header row.

    The first row is always the header. Data rows whose fields are all blank
    are skipped, short rows are padded with empty strings and extra trailing
    fields are dropped. Values are trimmed.

    Args:
        text: Raw table text

    Returns:
        List of records in table order

    Raises:
        EmptyTableError: If the text contains no rows
    """
    rows = _split_rows(text or "")
    if not rows:
        raise EmptyTableError("table contains no rows")

    header = [h.strip() for h in rows[0]]

    records: List[Record] = []
    for raw in rows[1:]:
        if not any(value.strip() for value in raw):
            continue
        record: Record = {}
        for idx, name in enumerate(header):
            record[name] = raw[idx].strip() if idx < len(raw) else ""
        records.append(record)

    return records
