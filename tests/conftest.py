"""Shared fixtures for ccnudge tests."""

import dataclasses
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from ccnudge.manager import ConfigManager
from ccnudge.platforms.platform import LINUX, Platform


@pytest.fixture
def tmpdir_path() -> Generator[Path, None, None]:
    """Provide a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def claude_dir(tmpdir_path: Path) -> Path:
    """A not-yet-created ~/.claude directory."""
    return tmpdir_path / "home" / ".claude"


@pytest.fixture
def test_platform(tmpdir_path: Path) -> Platform:
    """Linux templates with the sounds directory inside tmpdir."""
    sounds_dir = tmpdir_path / "sounds"
    sounds_dir.mkdir()
    for name in ("complete", "bell"):
        (sounds_dir / f"{name}.oga").write_bytes(b"")

    return dataclasses.replace(
        LINUX,
        default_sound=str(sounds_dir / "complete.oga"),
        sounds_dir=str(sounds_dir),
    )


@pytest.fixture
def manager(claude_dir: Path, test_platform: Platform) -> ConfigManager:
    """ConfigManager over a temporary Claude directory."""
    return ConfigManager.for_claude_dir(claude_dir, platform=test_platform)
