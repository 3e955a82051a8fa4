"""Tests for size, date and report formatting."""

import json
from datetime import datetime

import pytest

from file_inspector.core.models import EntryKind, MetadataReport, PlatformAttributes
from file_inspector.core.sizes import ScaledSize, scale_size
from file_inspector.utils.formatters import (
    format_size,
    format_date,
    format_report,
    format_report_json,
    report_to_dict,
)


def make_report(**overrides):
    fields = dict(
        path='/tmp/report.txt',
        display_name='report.txt',
        entry_kind=EntryKind.FILE,
        size_bytes=1_500_000,
        last_modified=datetime(2024, 3, 1, 12, 30, 45),
        is_symlink=False,
    )
    fields.update(overrides)
    return MetadataReport(**fields)


@pytest.mark.parametrize('size, expected', [
    (0, ScaledSize(0.0, 'bytes')),
    (999, ScaledSize(999.0, 'bytes')),
    (1_000, ScaledSize(1_000.0, 'bytes')),
    (999_999, ScaledSize(999_999.0, 'bytes')),
    (1_000_000, ScaledSize(1.0, 'megabytes')),
    (999_999_999, ScaledSize(999.999999, 'megabytes')),
    (1_000_000_000, ScaledSize(1.0, 'gigabytes')),
    (2_500_000_000, ScaledSize(2.5, 'gigabytes')),
])
def test_scale_size_long(size, expected):
    assert scale_size(size) == expected


@pytest.mark.parametrize('size, expected', [
    (999, ScaledSize(999.0, 'bytes')),
    (1_000, ScaledSize(1.0, 'KB')),
    (1_500, ScaledSize(1.5, 'KB')),
    (999_999_999, ScaledSize(999.999999, 'MB')),
    (1_000_000_000, ScaledSize(1.0, 'GB')),
])
def test_scale_size_short(size, expected):
    assert scale_size(size, 'short') == expected


def test_scale_size_unknown_style():
    with pytest.raises(ValueError):
        scale_size(10, 'binary')


def test_format_size_renders_whole_values_without_fraction():
    assert format_size(0) == '0 bytes'
    assert format_size(1_500_000) == '1.5 megabytes'
    assert format_size(2_000_000_000) == '2 gigabytes'
    assert format_size(1_234, 'short') == '1.234 KB'


def test_format_date():
    assert format_date(datetime(2024, 3, 1, 9, 5, 7)) == '2024-03-01 09:05:07'


def test_format_report_field_order():
    text = format_report(make_report())

    assert text.split('\n') == [
        '',
        'Name: report.txt',
        'Type: File',
        'Size: 1.5 megabytes',
        'Last Modified: 2024-03-01 12:30:45',
        'Is a symlink: No',
    ]


def test_format_report_optional_fields_hidden():
    text = format_report(make_report(is_symlink=True), show_name=False, show_symlink=False)

    assert 'Name:' not in text
    assert 'Is a symlink' not in text
    assert text.split('\n')[1] == 'Type: File'


def test_format_report_folder():
    report = make_report(display_name='data', entry_kind=EntryKind.DIRECTORY, size_bytes=0)
    text = format_report(report)

    assert 'Type: Folder' in text
    assert 'Size: 0 bytes' in text


def test_format_report_platform_attributes():
    attrs = PlatformAttributes(raw=0x21, read_only=True, hidden=False, system=False, archive=True)
    report = make_report(platform=attrs)

    assert 'Read-only' not in format_report(report)

    text = format_report(report, show_platform=True)
    assert 'Read-only: Yes' in text
    assert 'Hidden: No' in text
    assert 'Archive: Yes' in text


def test_report_to_dict():
    data = report_to_dict(make_report(), units='short')

    assert data['name'] == 'report.txt'
    assert data['type'] == 'File'
    assert data['size_bytes'] == 1_500_000
    assert data['size'] == {'magnitude': 1.5, 'unit': 'MB'}
    assert data['last_modified'] == '2024-03-01 12:30:45'
    assert data['is_symlink'] is False
    assert 'platform' not in data


def test_format_report_json_is_valid():
    data = json.loads(format_report_json(make_report(), show_name=False))

    assert 'name' not in data
    assert data['path'] == '/tmp/report.txt'
