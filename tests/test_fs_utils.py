"""
Tests for fs_utils module.
"""

import os

import pytest

from template_sync.errors import FileIOError
from template_sync.fs_utils import copy_file, mkdirp

from conftest import write_file


class TestMkdirp:
    """Test recursive directory creation."""

    def test_creates_all_missing_segments(self, temp_dir):
        """Test that every missing ancestor is created."""
        path = os.path.join(temp_dir, 'a', 'b', 'c')
        mkdirp(path)
        assert os.path.isdir(path)

    def test_existing_path_is_noop(self, temp_dir):
        """Test that an existing directory is left alone without error."""
        path = os.path.join(temp_dir, 'a')
        os.makedirs(path)
        write_file(os.path.join(path, 'keep.txt'), 'keep')

        mkdirp(path)
        mkdirp(path)

        assert os.listdir(path) == ['keep.txt']

    def test_file_in_the_way_raises(self, temp_dir):
        """Test that a regular file blocking a segment is a FileIOError."""
        write_file(os.path.join(temp_dir, 'blocker'), 'x')
        with pytest.raises(FileIOError):
            mkdirp(os.path.join(temp_dir, 'blocker', 'child'))


class TestCopyFile:
    """Test file copying."""

    def test_copies_into_new_directories(self, temp_dir):
        """Test that parents of the destination are created."""
        source = os.path.join(temp_dir, 'src.txt')
        destination = os.path.join(temp_dir, 'x', 'y', 'dst.txt')
        write_file(source, 'hello')

        copy_file(source, destination)

        with open(destination, encoding='utf-8') as f:
            assert f.read() == 'hello'

    def test_overwrites_existing(self, temp_dir):
        """Test that an existing destination is replaced."""
        source = os.path.join(temp_dir, 'src.txt')
        destination = os.path.join(temp_dir, 'dst.txt')
        write_file(source, 'new')
        write_file(destination, 'old')

        copy_file(source, destination)

        with open(destination, encoding='utf-8') as f:
            assert f.read() == 'new'

    def test_missing_source_raises(self, temp_dir):
        """Test that a copy failure is a FileIOError."""
        with pytest.raises(FileIOError):
            copy_file(os.path.join(temp_dir, 'missing'), os.path.join(temp_dir, 'dst'))
