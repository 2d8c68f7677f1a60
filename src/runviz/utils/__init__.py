"""Utility modules for runviz."""

from runviz.utils.numbers import format_step, parse_number

__all__ = ["format_step", "parse_number"]
