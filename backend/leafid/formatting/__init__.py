"""Analysis text formatting."""

from leafid.formatting.formatter import format_analysis, format_line

__all__ = ["format_analysis", "format_line"]
