"""Shared test fixtures."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

MANIFEST_DEFAULTS = {
    "author": "Jane Doe",
    "maintainer": "Jane Doe <jane@example.com>",
    "sentence": "A test library.",
    "paragraph": "Used by the test suite.",
    "url": "http://example.com/lib",
    "category": "Other",
    "architectures": "*",
}


def _write_manifest(folder: Path, name: str, version: str, **fields: str) -> Path:
    """Write a library.properties file into folder."""
    folder.mkdir(parents=True, exist_ok=True)
    props = {"name": name, "version": version, **MANIFEST_DEFAULTS, **fields}
    lines = [f"{key}={value}" for key, value in props.items() if value is not None]
    manifest = folder / "library.properties"
    manifest.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return manifest


@pytest.fixture
def make_library() -> Callable[..., Path]:
    """Factory creating a library folder, modern when a version is given."""

    def _make(root: Path, folder_name: str, version: str | None = None, **fields: str) -> Path:
        folder = root / folder_name
        folder.mkdir(parents=True, exist_ok=True)
        (folder / f"{folder_name}.h").write_text("// header\n")
        if version is not None:
            name = fields.pop("name", folder_name)
            _write_manifest(folder, name, version, **fields)
        return folder

    return _make


@pytest.fixture
def index_data() -> dict:
    """Sample index document."""
    return {
        "libraries": [
            {
                "name": "Servo",
                "version": "1.0.0",
                "author": "Arduino",
                "maintainer": "Arduino <info@arduino.cc>",
                "sentence": "Controls servo motors.",
                "category": "Device Control",
                "url": "http://downloads.example.com/Servo-1.0.0.zip",
                "archiveFileName": "Servo-1.0.0.zip",
                "size": 12345,
                "checksum": "SHA-256:abc",
                "architectures": ["avr", "sam"],
                "types": ["Arduino"],
            },
            {
                "name": "Servo",
                "version": "1.1.0",
                "category": "Device Control",
                "architectures": "*",
            },
            {
                "name": "Bounce",
                "version": "2.1",
                "category": "Signal Input/Output",
                "dependencies": {"name": "Servo", "version": "1.0.0"},
            },
            {"name": "Widget", "version": "0.1"},
        ]
    }


@pytest.fixture
def preferences(tmp_path: Path, index_data: dict) -> Path:
    """Preferences folder holding a library_index.json."""
    prefs = tmp_path / "prefs"
    prefs.mkdir()
    (prefs / "library_index.json").write_text(json.dumps(index_data), encoding="utf-8")
    return prefs


@pytest.fixture
def sketchbook(tmp_path: Path) -> Path:
    """The user's writable libraries folder."""
    folder = tmp_path / "sketchbook" / "libraries"
    folder.mkdir(parents=True)
    return folder


@pytest.fixture
def builtin(tmp_path: Path) -> Path:
    """A bundled, read-only libraries folder."""
    folder = tmp_path / "ide" / "libraries"
    folder.mkdir(parents=True)
    return folder


@pytest.fixture
def write_manifest() -> Callable[..., Path]:
    """Write a library.properties file; pass a key as None to leave it out."""
    return _write_manifest
