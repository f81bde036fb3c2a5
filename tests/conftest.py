"""
Pytest fixtures for envstruct tests.
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

# Add project root to path for envstruct imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Keep user-level configuration out of tests
os.environ["ENVSTRUCT_CONFIG"] = "/tmp/envstruct_test_missing/config.yaml"
os.environ.pop("ENVSTRUCT_DEBUG", None)
os.environ.pop("ENVSTRUCT_LOG_FILE", None)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_go(temp_dir: Path) -> Callable[[str, str], Path]:
    """Write Go source into the temp directory and return its path."""

    def _write(source: str, name: str = "config.go") -> Path:
        file_path = temp_dir / name
        file_path.write_text(source)
        return file_path

    return _write


@pytest.fixture
def sample_go_file(write_go) -> Path:
    """Create a sample Go file with a tagged Config struct."""
    return write_go('''package settings

import (
	"io"
	"time"
)

// Config holds service settings.
type Config struct {
	// Host is the address to bind.
	Host     string `env:"HOST_NAME" json:"host"`
	Port     *int
	Tags     []string
	Timeout  time.Duration `json:"timeout"`
	User, Pass string
	io.Writer
	*Base
	Raw      *[]byte
}

type Base struct {
	ID int `env:"BASE_ID"`
}

type Handler func(string) error
''')
