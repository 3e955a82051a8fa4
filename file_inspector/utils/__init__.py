"""Utility modules for file inspection."""

from .formatters import scale_size, format_size, format_date, format_report

__all__ = ["scale_size", "format_size", "format_date", "format_report"]
