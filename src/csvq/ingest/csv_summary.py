"""CSV acquisition and compact textual summary.

The summary is the only view of the data the question generator sees:
row/column counts, headers, a bounded sample of rows and a per-column type
guess taken from the first data row.

``parse_csv_row`` is a best-effort line tokenizer.  Escaped quotes, quoted
newlines and unbalanced quotes are not handled.
"""
from __future__ import annotations

import logging
import re
from enum import Enum

import httpx
from pydantic import BaseModel, ConfigDict

from csvq.config import settings
from csvq.domain.exceptions import EmptyContentError, InvalidInputError, NoRowsError
from csvq.infra.http import fetch_csv_text

logger = logging.getLogger(__name__)

# Decimal literals only; "Infinity" and hex such as "0x1A" stay text.
_NUMERIC_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
# Checked with re.match, so every alternative is anchored at the start.
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}|\d{2}/\d{2}/\d{4}|\d{2}-\d{2}-\d{4}")
_BOOLEAN_WORDS = frozenset({"true", "false", "yes", "no"})


class TypeTag(str, Enum):
    EMPTY = "empty"
    INTEGER = "integer"
    DECIMAL = "decimal"
    DATE = "date"
    BOOLEAN = "boolean"
    TEXT = "text"


class CsvSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_row_count: int
    column_count: int
    header_names: tuple[str, ...]
    sample_rows: tuple[tuple[str, ...], ...]
    inferred_column_types: tuple[tuple[str, TypeTag], ...]
    text: str


def parse_csv_row(row: str) -> list[str]:
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in row:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def infer_type(value: str) -> TypeTag:
    """Classify a single sample value.  Numeric wins over date and boolean."""
    if not value or not value.strip():
        return TypeTag.EMPTY

    stripped = value.strip()
    if _NUMERIC_RE.fullmatch(stripped):
        return TypeTag.INTEGER if float(stripped).is_integer() else TypeTag.DECIMAL

    if _DATE_RE.match(value):
        return TypeTag.DATE

    if value.lower() in _BOOLEAN_WORDS:
        return TypeTag.BOOLEAN

    return TypeTag.TEXT


def summarize_csv_text(csv_text: str, *, sample_limit: int | None = None) -> CsvSummary:
    """Build a :class:`CsvSummary` from raw CSV text."""
    limit = sample_limit if sample_limit is not None else settings.SAMPLE_ROW_LIMIT

    if not csv_text or not csv_text.strip():
        raise EmptyContentError("CSV file is empty")

    lines = [line.strip() for line in csv_text.split("\n")]
    lines = [line for line in lines if line]
    row_count = len(lines)
    if row_count == 0:
        raise NoRowsError("CSV has no valid rows")

    headers = parse_csv_row(lines[0])
    column_count = len(headers)
    sample_count = min(limit, row_count)
    sample_rows = [parse_csv_row(line) for line in lines[1:sample_count]]

    inferred: list[tuple[str, TypeTag]] = []
    if row_count > 1:
        first_data_row = sample_rows[0] if sample_rows else parse_csv_row(lines[1])
        for index, header in enumerate(headers):
            value = first_data_row[index] if index < len(first_data_row) else ""
            inferred.append((header, infer_type(value)))

    out = [
        "CSV Data Analysis:",
        f"- Total Rows: {row_count}",
        f"- Total Columns: {column_count}",
        f"- Column Headers: {', '.join(headers)}",
        "",
        f"Sample Data (first {sample_count} rows):",
        f"Headers: {' | '.join(headers)}",
    ]
    for i, row in enumerate(sample_rows, start=1):
        out.append(f"Row {i}: {' | '.join(row)}")

    if row_count > limit:
        out.append("")
        out.append(f"... and {row_count - limit} more rows")

    if inferred:
        out.append("")
        out.append("Data Analysis:")
        for header, tag in inferred:
            out.append(f"- {header}: {tag.value}")

    return CsvSummary(
        raw_row_count=row_count,
        column_count=column_count,
        header_names=tuple(headers),
        sample_rows=tuple(tuple(r) for r in sample_rows),
        inferred_column_types=tuple(inferred),
        text="\n".join(out) + "\n",
    )


async def summarize_csv_url(
    csv_url: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> CsvSummary:
    """Fetch *csv_url* and summarize it.  All failures raise."""
    if not csv_url or not csv_url.strip():
        raise InvalidInputError("Invalid CSV URL: empty or null")

    logger.info("Fetching CSV from URL: %s", csv_url)
    csv_text = await fetch_csv_text(csv_url, client=client)
    logger.info("Processing CSV with %d characters", len(csv_text))

    summary = summarize_csv_text(csv_text)
    logger.info(
        "Parsed CSV with %d rows and %d columns",
        summary.raw_row_count,
        summary.column_count,
    )
    return summary
