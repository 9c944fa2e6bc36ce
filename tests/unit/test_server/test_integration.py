"""End-to-end tests running a real script through the HTTP layer."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from imageslots.config.settings import ServerConfig
from imageslots.server.app import create_app


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A working directory laid out like a deployment."""
    scripts = tmp_path / "scripts"
    scripts.mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _script(workdir: Path, body: str) -> None:
    path = workdir / "scripts" / "script.sh"
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)


def test_script_output_returned(workdir: Path) -> None:
    _script(workdir, "echo stdout line\necho stderr line >&2\n")
    client = TestClient(create_app(config=ServerConfig()))
    resp = client.post("/run-script")
    assert resp.status_code == 200
    assert resp.text == "stdout line\nstderr line\n"


def test_script_failure_returned(workdir: Path) -> None:
    _script(workdir, "echo broken\nexit 1\n")
    client = TestClient(create_app(config=ServerConfig()))
    resp = client.post("/run-script")
    assert resp.status_code == 500
    assert resp.text == "Script failed: exit status 1\nOutput: broken\n"


def test_missing_script_is_500(workdir: Path) -> None:
    client = TestClient(create_app(config=ServerConfig()))
    resp = client.post("/run-script")
    assert resp.status_code == 500
    assert resp.text.startswith("Script failed: ")


def test_default_upload_dir_relative_to_cwd(workdir: Path, png_bytes: bytes) -> None:
    client = TestClient(create_app(config=ServerConfig()))
    resp = client.post(
        "/upload?image=image1",
        files={"image1": ("a.png", png_bytes, "image/png")},
    )
    # follows the redirect back to the form
    assert resp.status_code == 200
    assert "/uploads/image1.png" in resp.text
    assert (workdir / "uploads" / "image1.png").read_bytes() == png_bytes
