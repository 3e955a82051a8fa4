"""Formatting utilities for metadata reports."""

import json
from datetime import datetime
from typing import Any, Dict, List

from ..core.models import MetadataReport
from ..core.sizes import scale_size


def format_size(size_bytes: int, style: str = 'long') -> str:
    """Format file size in human readable format, e.g. '1.5 megabytes'."""
    return str(scale_size(size_bytes, style))


def format_date(dt: datetime) -> str:
    """Format datetime as YYYY-MM-DD HH:MM:SS."""
    return dt.strftime('%Y-%m-%d %H:%M:%S')


def format_yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def format_report(report: MetadataReport, units: str = 'long', show_name: bool = True,
                  show_symlink: bool = True, show_platform: bool = False) -> str:
    """Render a report as the multi-line text block printed by the CLI.

    Args:
        report: Report to render.
        units: Unit style passed to scale_size.
        show_name: Include the Name line.
        show_symlink: Include the Is a symlink line.
        show_platform: Include Windows attributes when the report has them.

    Returns:
        Report text, starting with an empty line.
    """
    lines: List[str] = [""]

    if show_name:
        lines.append(f"Name: {report.display_name}")
    lines.append(f"Type: {report.entry_kind.label}")
    lines.append(f"Size: {format_size(report.size_bytes, units)}")
    lines.append(f"Last Modified: {format_date(report.last_modified)}")
    if show_symlink:
        lines.append(f"Is a symlink: {format_yes_no(report.is_symlink)}")

    if show_platform and report.platform:
        attrs = report.platform
        lines.append(f"Read-only: {format_yes_no(attrs.read_only)}")
        lines.append(f"Hidden: {format_yes_no(attrs.hidden)}")
        lines.append(f"System: {format_yes_no(attrs.system)}")
        lines.append(f"Archive: {format_yes_no(attrs.archive)}")

    return "\n".join(lines)


def report_to_dict(report: MetadataReport, units: str = 'long', show_name: bool = True,
                   show_symlink: bool = True, show_platform: bool = False) -> Dict[str, Any]:
    """Convert a report to a JSON-serializable dictionary."""
    scaled = report.scaled_size(units)
    data: Dict[str, Any] = {}

    if show_name:
        data['name'] = report.display_name
    data['path'] = report.path
    data['type'] = report.entry_kind.label
    data['size_bytes'] = report.size_bytes
    data['size'] = {'magnitude': scaled.magnitude, 'unit': scaled.unit}
    data['last_modified'] = format_date(report.last_modified)
    if show_symlink:
        data['is_symlink'] = report.is_symlink

    if show_platform and report.platform:
        attrs = report.platform
        data['platform'] = {
            'attributes': attrs.raw,
            'read_only': attrs.read_only,
            'hidden': attrs.hidden,
            'system': attrs.system,
            'archive': attrs.archive
        }

    return data


def format_report_json(report: MetadataReport, **options) -> str:
    return json.dumps(report_to_dict(report, **options), indent=2)
