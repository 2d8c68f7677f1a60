"""
Ingestion of uploaded metric tables.

Turns raw delimited text into a flat list of MeasurementRecord.
"""

from .parser import REQUIRED_COLUMNS, ParseResult, decode_upload, parse, parse_text

__all__ = ["REQUIRED_COLUMNS", "ParseResult", "decode_upload", "parse", "parse_text"]
