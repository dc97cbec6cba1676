"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path

import pytest

from envmerge import Store


@pytest.fixture(scope="session")
def data_dir():
    """Directory holding the sample settings files."""
    return Path(__file__).parent / "data"


@pytest.fixture
def env_options(data_dir):
    """Raw definition exported by data/env_options.py."""
    from envmerge.loader import load_settings_file

    return load_settings_file(str(data_dir / "env_options.py"))


class FakeFiles:
    """In-memory stand-in for the directory lister and file loader."""

    def __init__(self, files):
        self.files = dict(files)
        self.loaded = []

    def list_dir(self, path):
        if path not in self.files:
            raise FileNotFoundError(path)
        return list(self.files[path])

    def load(self, path):
        directory, filename = os.path.split(path)
        try:
            definition = self.files[directory][filename]
        except KeyError:
            raise FileNotFoundError(path) from None
        self.loaded.append(path)
        return definition


@pytest.fixture
def fake_files():
    return FakeFiles({
        "conf": {
            "db-settings.py": {
                "common": {"host": "localhost", "pool": {"min": 1, "max": 5}},
                "test": {"pool": {"max": 2}},
            },
            "features.py": ["alpha", "beta"],
            "README.md": "not a settings file",
            "plain.py": {"level": "debug"},
        },
    })


@pytest.fixture
def fake_store(fake_files):
    return Store("test", lister=fake_files.list_dir, loader=fake_files.load)
