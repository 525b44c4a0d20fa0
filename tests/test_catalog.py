"""Test cases for the file catalog."""

import os

import pytest
from utils.catalog import build_catalog
from utils.errors import DiscoveryError


def test_catalog_orders_by_most_recent(project):
    """Test that files come back newest first."""
    names = [entry.filename for entry in build_catalog(str(project))]
    assert names == ["A.cs", "C.cs", "B.cs"]


def test_catalog_only_matches_pattern(project):
    """Test that non C# files are ignored."""
    (project / "Runtime" / "notes.txt").write_text("hi")
    (project / "Runtime" / "Data.cs.meta").write_text("guid")
    names = {entry.filename for entry in build_catalog(str(project))}
    assert names == {"A.cs", "B.cs", "C.cs"}


def test_catalog_paths_are_absolute(project):
    """Test that entries carry absolute paths."""
    for entry in build_catalog(str(project)):
        assert os.path.isabs(entry.path)
        assert os.path.isfile(entry.path)


def test_catalog_is_stable(project):
    """Test that equal modification times keep a repeatable order."""
    for name in ("A.cs", "B.cs", "C.cs"):
        path = next(project.rglob(name))
        os.utime(path, (500, 500))

    first = build_catalog(str(project))
    second = build_catalog(str(project))
    assert first == second
    assert len({entry.path for entry in first}) == 3


def test_catalog_missing_root(tmp_path):
    """Test that a missing root raises DiscoveryError."""
    with pytest.raises(DiscoveryError) as excinfo:
        build_catalog(str(tmp_path / "missing"))
    assert "No such directory" in str(excinfo.value)


def test_catalog_empty_directory(tmp_path):
    """Test that an empty directory gives an empty catalog."""
    assert build_catalog(str(tmp_path)) == []
