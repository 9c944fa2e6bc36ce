"""Shared test fixtures for the imageslots test suite.

Provides sample image payloads, a temporary upload directory, a mock
script runner, and a TestClient wired to all of them.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from imageslots.config.settings import ServerConfig
from imageslots.domain.models import ScriptResult
from imageslots.runner.base import ScriptRunner
from imageslots.server.app import create_app


# ---------------------------------------------------------------------------
# Image payload fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def png_bytes() -> bytes:
    """PNG signature followed by an IHDR chunk header and filler."""
    return b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 64


@pytest.fixture
def jpeg_bytes() -> bytes:
    """JPEG SOI + APP0 marker followed by filler."""
    return b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + b"\x00" * 64


@pytest.fixture
def gif_bytes() -> bytes:
    return b"GIF89a" + b"\x00" * 64


# ---------------------------------------------------------------------------
# Server fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def server_config(upload_dir: Path) -> ServerConfig:
    return ServerConfig(upload_dir=str(upload_dir), script_path="scripts/script.sh")


@pytest.fixture
def mock_runner() -> AsyncMock:
    """A mock ScriptRunner that reports a successful run by default."""
    runner = AsyncMock(spec=ScriptRunner)
    runner.run.return_value = ScriptResult(output=b"hello from script\n")
    return runner


@pytest.fixture
def client(server_config: ServerConfig, mock_runner: AsyncMock) -> TestClient:
    """A test client with a temporary upload dir and a mock runner."""
    app = create_app(config=server_config, runner=mock_runner)
    return TestClient(app)
