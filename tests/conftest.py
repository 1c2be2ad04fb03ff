"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from scaffold_files.files import Files
from scaffold_files.filesystem import RealFileSystem
from scaffold_files.memory import MemoryFileSystem
from scaffold_files.protocols import FileSystem


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """Create an empty memory filesystem."""
    return MemoryFileSystem.create()


@pytest.fixture
def real_fs() -> RealFileSystem:
    """Create a real filesystem adapter."""
    return RealFileSystem.create()


# ============================================================================
# Adapter-Agnostic Fixtures
# ============================================================================


@pytest.fixture(params=["memory", "real"])
def filesystem(request: pytest.FixtureRequest) -> FileSystem:
    """Run a test against both adapters."""
    if request.param == "memory":
        return MemoryFileSystem.create()
    return RealFileSystem.create()


@pytest.fixture(params=[True, False], ids=["memory", "real"])
def files(request: pytest.FixtureRequest) -> Files:
    """Create a Files facade over both adapters."""
    return Files.create(memory=request.param)


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Directory the tests work in.

    The memory adapter builds the same absolute path in its own tree.
    """
    return tmp_path.resolve()


# ============================================================================
# Sample Content Fixtures
# ============================================================================


@pytest.fixture
def sample_class_content() -> str:
    """Class with nested configuration and inline blocks."""
    return """class Application
  configure do
    setting :db do
      setting :url
    end
  end

  wrap { |context| }
  wrap { |ctx, env|
    env.each_key do |key|
    end
  }
end
"""


@pytest.fixture
def sample_gemfile_content() -> str:
    """Gemfile with several similar group blocks."""
    return """group :development do
  gem "webconsole"
end

group :development, :test do
  gem "dotenv"
end

group :test do
  gem "rack-test"
end
"""
