"""Test cases for the format session actions."""

import os

import pytest
from conftest import FakeExecutor
from utils.errors import ConfigMissingError
from utils.session import FormatSession, default_options_file
from utils.settings import ASTYLE_PATH_KEY, InMemorySettingsStore


def make_session(project, executor=None, settings=None, confirm=None, refresh=None):
    return FormatSession(
        root=str(project),
        options_file=None,
        settings=settings or InMemorySettingsStore(),
        executor=executor or FakeExecutor(),
        confirm=confirm,
        refresh=refresh,
    )


def test_default_options_file(project):
    """Test that the options file defaults to the UniFmt folder."""
    session = make_session(project)
    assert session.options_file == default_options_file(str(project))
    assert session.options_file.endswith("csfmt.txt")


def test_astyle_path_default_and_persisted(project):
    """Test reading and updating the astyle path setting."""
    settings = InMemorySettingsStore()
    session = make_session(project, settings=settings)
    assert session.astyle_path == "astyle"

    assert session.update_path("/opt/astyle/bin/astyle")
    assert settings.get(ASTYLE_PATH_KEY) == "/opt/astyle/bin/astyle"
    assert not session.update_path("/opt/astyle/bin/astyle")

    assert make_session(project, settings=settings).astyle_path == "/opt/astyle/bin/astyle"


def test_refresh_and_filter(project):
    """Test the end-to-end list and search flow."""
    session = make_session(project)
    assert [e.filename for e in session.refresh_catalog()] == ["A.cs", "C.cs", "B.cs"]

    session.update_search("B")
    assert [e.filename for e in session.filtered()] == ["B.cs"]

    session.update_search("")
    session.update_mask(True, "Runtime")
    assert [e.filename for e in session.filtered()] == ["C.cs", "B.cs"]


def test_update_search_keeps_mask(project):
    """Test that changing one criterion keeps the other."""
    session = make_session(project)
    session.update_mask(True, "Editor")
    criteria = session.update_search("A")
    assert criteria.mask_enabled
    assert criteria.mask_substring == "Editor"
    assert criteria.search_substring == "A"


def test_format_all_runs_catalog(project):
    """Test formatting the whole catalog with a single refresh."""
    executor = FakeExecutor()
    refreshes = []
    session = make_session(project, executor=executor, refresh=refreshes.append)
    session.refresh_catalog()

    results = session.format_all()

    assert len(results) == 3
    assert [os.path.basename(call[-1]) for call in executor.calls] == ["A.cs", "C.cs", "B.cs"]
    assert executor.calls[0][1] == f"--options={session.options_file}"
    assert len(refreshes) == 1


def test_format_filtered_runs_subset(project):
    """Test that only filtered files are formatted."""
    executor = FakeExecutor()
    session = make_session(project, executor=executor)
    session.refresh_catalog()
    session.update_mask(True, "Editor")

    results = session.format_filtered()

    assert len(results) == 1
    assert executor.calls[0][-1].endswith("A.cs")


def test_declined_confirmation_does_nothing(project):
    """Test that answering no runs nothing and skips the refresh."""
    executor = FakeExecutor()
    refreshes = []
    session = make_session(
        project, executor=executor, confirm=lambda message: False, refresh=refreshes.append
    )
    session.refresh_catalog()

    assert session.format_all() == []
    assert executor.calls == []
    assert refreshes == []


def test_confirmation_message_is_passed(project):
    """Test that the prompt text reaches the confirm callback."""
    prompts = []
    session = make_session(project, confirm=lambda message: prompts.append(message) or True)
    session.refresh_catalog()
    session.format_filtered("Really?")
    assert prompts == ["Really?"]


def test_format_one_skips_confirmation(project):
    """Test formatting a single file."""
    executor = FakeExecutor()
    refreshes = []
    session = make_session(
        project, executor=executor, confirm=lambda message: False, refresh=refreshes.append
    )
    target = str(project / "Runtime" / "B.cs")

    result = session.format_one(target)

    assert result.launched
    assert executor.calls == [["astyle", f"--options={session.options_file}", target]]
    assert len(refreshes) == 1


def test_missing_options_file_blocks_formatting(project):
    """Test that no formatting happens without an options file."""
    (project / "UniFmt" / "Editor" / "csfmt.txt").unlink()
    executor = FakeExecutor()
    session = make_session(project, executor=executor)
    session.refresh_catalog()

    with pytest.raises(ConfigMissingError) as excinfo:
        session.format_all()
    with pytest.raises(ConfigMissingError):
        session.format_one(str(project / "Editor" / "A.cs"))

    assert "csfmt.txt: No such file." in str(excinfo.value)
    assert executor.calls == []


def test_catalog_rebuilt_after_batch(project):
    """Test that the catalog reflects files changed by the batch."""
    session = make_session(project)
    session.refresh_catalog()
    (project / "Runtime" / "D.cs").write_text("class D {}\n")

    session.format_all()

    assert "D.cs" in [entry.filename for entry in session.catalog]


def test_astyle_path_expands_home(project, tmp_path, monkeypatch):
    """Test that a stored ~/ astyle path is expanded before running."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    executor = FakeExecutor()
    settings = InMemorySettingsStore({ASTYLE_PATH_KEY: "~/bin/astyle"})
    session = make_session(project, executor=executor, settings=settings)

    session.format_one(str(project / "Editor" / "A.cs"))

    assert executor.calls[0][0] == os.path.join(str(tmp_path), "bin", "astyle")
    assert session.astyle_path == "~/bin/astyle"
