"""Shared fixtures for just-shell tests."""

import os

import pytest


@pytest.fixture
def make_executable():
    """Create an executable shell script at directory/name."""

    def _make(directory, name, body="#!/bin/sh\nexit 0\n", mode=0o755):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(body)
        os.chmod(path, mode)
        return path

    return _make


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside a fresh directory; the original cwd is restored."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def test_env(tmp_path):
    """A minimal environment with a predictable PATH and HOME."""
    home = tmp_path / "home"
    home.mkdir()
    return {
        "PATH": os.pathsep.join(["/usr/local/bin", "/usr/bin", "/bin"]),
        "HOME": str(home),
    }
