"""
Runviz exceptions module.

Contains exception classes shared by ingestion, aggregation and the presentation layers.
"""


class RunvizError(Exception):
    """Base class for errors raised by runviz."""

    pass


class FormatError(RunvizError):
    """Exception raised when input text has no recognizable header."""

    pass


class InvalidNumberError(RunvizError, ValueError):
    """Exception raised when a step or value is not numeric under the strict policy."""

    def __init__(self, text: str, field: str, line: int | None = None) -> None:
        self.text = text
        self.field = field
        self.line = line
        location = f" on line {line}" if line is not None else ""
        super().__init__(f"Invalid {field} {text!r}{location}: not a number")
