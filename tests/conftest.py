"""Shared fixtures for the unifmt tests."""

import os

import pytest
from loguru import logger
from utils.errors import ProcessLaunchError
from utils.executor import CommandExecutor
from utils.settings import InMemorySettingsStore


class FakeExecutor(CommandExecutor):
    """Records every invocation instead of starting a shell."""

    def __init__(self, stdout="", stderr="", fail_on=()):
        self.calls = []
        self.stdout = stdout
        self.stderr = stderr
        self.fail_on = set(fail_on)

    def join(self, args):
        return " ".join(args)

    def execute(self, args):
        self.calls.append(list(args))
        if args[-1] in self.fail_on:
            raise ProcessLaunchError(self.join(args), "No such file or directory")
        return self.stdout, self.stderr, 0


@pytest.fixture
def fake_executor():
    return FakeExecutor()


@pytest.fixture
def settings():
    return InMemorySettingsStore()


@pytest.fixture
def log_messages():
    """Capture loguru records as (level, message) tuples."""
    messages = []
    logger.remove()
    handler_id = logger.add(
        lambda msg: messages.append((msg.record["level"].name, msg.record["message"])),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def project(tmp_path):
    """A small Unity-like project with three C# files and an options file."""
    assets = tmp_path / "Assets"
    files = {
        "A.cs": ("Editor", 3000),
        "B.cs": ("Runtime", 1000),
        "C.cs": ("Runtime", 2000),
    }
    for name, (folder, mtime) in files.items():
        path = assets / folder / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("class X {}\n")
        os.utime(path, (mtime, mtime))

    options = assets / "UniFmt" / "Editor" / "csfmt.txt"
    options.parent.mkdir(parents=True)
    options.write_text("mode=cs\n")
    return assets


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop loguru handlers bound to a CliRunner stream after each test."""
    yield
    logger.remove()


@pytest.fixture
def cli_obj(settings, fake_executor):
    """Context object injected into the CLI in place of the user's settings."""
    return {"settings": settings, "executor": fake_executor}
