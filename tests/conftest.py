"""
mediabrowser Test Configuration

Shared fixtures and configuration for all tests.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import AsyncGenerator, Generator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Add project root to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

import mediabrowser.config as config_module
from mediabrowser.browser import ErrorCode, PlaybackPreparer
from mediabrowser.config import PreparerConfig
from mediabrowser.database import create_engine_for_url, create_session_factory, create_tables
from mediabrowser.playqueue import PlayQueue


# ============ Host Fixtures ============


class RecordingHost:
    """PlaybackHost that records every callback in call order."""

    def __init__(self):
        self.calls: list[tuple] = []

    def set_error(self, message: str, code: ErrorCode) -> None:
        self.calls.append(("set_error", message, code))

    def clear_error(self) -> None:
        self.calls.append(("clear_error",))

    def start_playback(self, queue: PlayQueue, play_when_ready: bool) -> None:
        self.calls.append(("start_playback", queue, play_when_ready))

    def prepare(self, play_when_ready: bool) -> None:
        self.calls.append(("prepare", play_when_ready))

    @property
    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    @property
    def errors(self) -> list[tuple[str, ErrorCode]]:
        return [(call[1], call[2]) for call in self.calls if call[0] == "set_error"]

    @property
    def queues(self) -> list[PlayQueue]:
        return [call[1] for call in self.calls if call[0] == "start_playback"]


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()


# ============ Data Source Fixtures ============


@pytest.fixture
def local_playlists() -> AsyncMock:
    source = AsyncMock()
    source.get_playlist_streams = AsyncMock(return_value=[])
    return source


@pytest.fixture
def remote_playlists() -> AsyncMock:
    source = AsyncMock()
    source.get_playlist = AsyncMock()
    return source


@pytest.fixture
def history() -> AsyncMock:
    source = AsyncMock()
    source.get_history = AsyncMock(return_value=[])
    return source


@pytest.fixture
def metadata() -> AsyncMock:
    source = AsyncMock()
    source.get_stream_info = AsyncMock()
    source.get_playlist_info = AsyncMock()
    source.get_channel_info = AsyncMock()
    return source


@pytest.fixture
def preparer_config() -> PreparerConfig:
    return PreparerConfig()


@pytest.fixture
def preparer(host, local_playlists, remote_playlists, history, metadata, preparer_config):
    """Preparer wired to mocked data sources."""
    preparer = PlaybackPreparer(
        host=host,
        local_playlists=local_playlists,
        remote_playlists=remote_playlists,
        history=history,
        metadata=metadata,
        preparer_config=preparer_config,
    )
    yield preparer
    preparer.dispose()


# ============ Database Fixtures ============


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Session factory over a fresh in-memory database."""
    engine = create_engine_for_url("sqlite:///:memory:")
    await create_tables(engine)
    try:
        yield create_session_factory(engine)
    finally:
        await engine.dispose()


# ============ Temporary File Fixtures ============


@pytest.fixture(scope="function")
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(scope="function")
def temp_config_file(temp_dir: Path) -> Path:
    """Create a temporary config file."""
    config_file = temp_dir / "config.yaml"
    config_content = f"""
database:
  url: "sqlite:///:memory:"

logging:
  level: "DEBUG"
  file: "{(temp_dir / 'mediabrowser.log').as_posix()}"
  console: false
  to_file: false

preparer:
  prepare_error_message: "Playback failed"
"""
    config_file.write_text(config_content)
    return config_file


# ============ Environment Fixtures ============


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean environment variables for each test."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("MEDIABROWSER_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the global configuration between tests."""
    config_module._config = None
    yield
    config_module._config = None


@pytest.fixture
def restore_logging():
    """Restore root logger handlers replaced by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


# ============ Markers ============


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
