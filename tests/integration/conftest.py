from pathlib import Path

import pytest

from app.config.settings import Settings


@pytest.fixture
def container_dir(tmp_path: Path) -> Path:
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def test_settings(container_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.setenv("UPLOAD_CONTAINER_DIR", str(container_dir))
    monkeypatch.setenv("UPLOAD_POLL_INTERVAL_SECONDS", "0")
    return Settings()
