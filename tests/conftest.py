"""Shared pytest fixtures for all tests."""

import logging
import os
import sys
import pytest


@pytest.fixture
def fixed_mtime():
    """Modification timestamp applied to created files (2024-03-01 12:30:45 UTC)."""
    return 1709296245


@pytest.fixture
def report_file(tmp_path, fixed_mtime):
    """
    Create report.txt with 1,500,000 bytes and a fixed modification time.

    Returns:
        Path to the file
    """
    path = tmp_path / 'report.txt'
    with open(path, 'wb') as f:
        f.truncate(1_500_000)
    os.utime(path, (fixed_mtime, fixed_mtime))
    return path


@pytest.fixture
def empty_dir(tmp_path):
    """Create an empty data/ directory."""
    path = tmp_path / 'data'
    path.mkdir()
    return path


@pytest.fixture
def small_file(tmp_path):
    path = tmp_path / 'notes.md'
    path.write_bytes(b'x' * 42)
    return path


@pytest.fixture
def symlinks_supported():
    if sys.platform == 'win32':
        pytest.skip("creating symlinks needs privileges on Windows")


@pytest.fixture
def file_link(tmp_path, report_file, symlinks_supported):
    """Symlink pointing at report.txt."""
    link = tmp_path / 'report-link'
    link.symlink_to(report_file)
    return link


@pytest.fixture
def dir_link(tmp_path, empty_dir, symlinks_supported):
    """Symlink pointing at the data/ directory."""
    link = tmp_path / 'data-link'
    link.symlink_to(empty_dir, target_is_directory=True)
    return link


@pytest.fixture
def dangling_link(tmp_path, symlinks_supported):
    link = tmp_path / 'gone-link'
    link.symlink_to(tmp_path / 'missing')
    return link


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers and level installed by setup_logging during a test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
