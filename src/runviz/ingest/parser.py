"""
Delimited table parser.

The first non-blank row is the header; values are associated with columns by
name. Blank rows are skipped silently and rows whose field count differs from
the header's are skipped and reported in the result.
"""

from __future__ import annotations

import csv
import io

from pydantic import BaseModel, Field

from runviz.config import get_settings
from runviz.exceptions import FormatError
from runviz.logger import logger
from runviz.models import MeasurementRecord

__all__ = ["REQUIRED_COLUMNS", "ParseResult", "decode_upload", "parse", "parse_text"]

REQUIRED_COLUMNS = ("experiment_id", "metric_name", "step", "value")

_BOM = "\ufeff"


class ParseResult(BaseModel):
    """Records parsed from one table plus the lines that were skipped."""

    records: list[MeasurementRecord] = Field(default_factory=list)
    skipped_lines: list[int] = Field(default_factory=list, description="1-based lines of malformed rows")


def _is_blank(row: list[str]) -> bool:
    return all(not field.strip() for field in row)


def _locate_columns(header: list[str]) -> dict[str, int]:
    """Map each required column to its position in the header.

    Raises:
        FormatError: If any required column is missing
    """
    names = [name.strip() for name in header]
    if names:
        names[0] = names[0].lstrip(_BOM).strip()

    positions: dict[str, int] = {}
    for i, name in enumerate(names):
        # First occurrence wins for duplicated names
        positions.setdefault(name, i)

    missing = [column for column in REQUIRED_COLUMNS if column not in positions]
    if missing:
        raise FormatError(f"Header is missing required columns: {', '.join(missing)}")
    return {column: positions[column] for column in REQUIRED_COLUMNS}


def parse_text(raw_text: str, delimiter: str | None = None) -> ParseResult:
    """Parse delimited text into measurement records.

    Args:
        raw_text: Table text with exactly one header row
        delimiter: Field delimiter. Defaults to the configured delimiter.

    Returns:
        ParseResult with records in input order and skipped malformed lines

    Raises:
        FormatError: If no header row can be located
    """
    settings = get_settings()
    if delimiter is None:
        delimiter = settings.delimiter

    # A single field may be as long as the whole upload
    csv.field_size_limit(settings.max_upload_size)

    reader = csv.reader(io.StringIO(raw_text), delimiter=delimiter)
    result = ParseResult()
    columns: dict[str, int] | None = None
    width = 0

    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            if columns is None:
                raise FormatError(f"Unreadable table near line {reader.line_num}: {e}") from e
            logger.debug(f"Skipping unreadable row on line {reader.line_num}: {e}")
            result.skipped_lines.append(reader.line_num)
            continue

        if _is_blank(row):
            continue

        if columns is None:
            columns = _locate_columns(row)
            width = len(row)
            continue

        if len(row) != width:
            logger.debug(f"Skipping malformed row on line {reader.line_num}: expected {width} fields, got {len(row)}")
            result.skipped_lines.append(reader.line_num)
            continue

        result.records.append(
            MeasurementRecord(
                experiment_id=row[columns["experiment_id"]],
                metric_name=row[columns["metric_name"]],
                step=row[columns["step"]],
                value=row[columns["value"]],
                line=reader.line_num,
            )
        )

    if columns is None:
        raise FormatError("No header row found: input is empty")

    if result.skipped_lines:
        logger.info(f"Skipped {len(result.skipped_lines)} malformed row(s)")
    return result


def parse(raw_text: str, delimiter: str | None = None) -> list[MeasurementRecord]:
    """Parse delimited text into measurement records.

    Same as parse_text, without the skipped line report.

    Raises:
        FormatError: If no header row can be located
    """
    return parse_text(raw_text, delimiter=delimiter).records


def decode_upload(data: bytes) -> str:
    """Decode uploaded bytes as UTF-8 text.

    A leading byte order mark is dropped.

    Raises:
        FormatError: If the bytes are not valid UTF-8
    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FormatError(f"Upload is not UTF-8 text: {e.reason} at byte {e.start}") from e
