import json
import logging
from pathlib import Path

import pytest

from app.config.settings import Settings
from app.main import main


@pytest.fixture(autouse=True)
def captured_log(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> pytest.LogCaptureFixture:
    """Keep stdout handlers out of the test run; assert on captured records instead."""
    monkeypatch.setattr("app.main.Log.configure", lambda _level: None)
    caplog.set_level(logging.INFO, logger="blobnotify")
    return caplog


class TestPageTimingCommand:
    def test_success_exit_code(self, tmp_path: Path, captured_log: pytest.LogCaptureFixture) -> None:
        record = tmp_path / "timing.json"
        record.write_text(json.dumps({"navigationStart": 1000, "loadEventEnd": 2500}))

        assert main(["page-timing", str(record)]) == 0
        assert "Static website loaded via Azure CDN" in captured_log.text
        assert "Page load time: 1500ms" in captured_log.text

    def test_missing_capability_exit_code(self, tmp_path: Path, captured_log: pytest.LogCaptureFixture) -> None:
        record = tmp_path / "timing.json"
        record.write_text("null")

        assert main(["page-timing", str(record)]) == 1
        assert "Page timing replay failed" in captured_log.text

    def test_malformed_json_exit_code(
        self, tmp_path: Path, captured_log: pytest.LogCaptureFixture
    ) -> None:
        record = tmp_path / "timing.json"
        record.write_text("{not json")

        assert main(["page-timing", str(record)]) == 1
        assert "Cannot read timing record" in captured_log.text

    def test_non_object_record_exit_code(
        self, tmp_path: Path, captured_log: pytest.LogCaptureFixture
    ) -> None:
        record = tmp_path / "timing.json"
        record.write_text("[1000, 2500]")

        assert main(["page-timing", str(record)]) == 1
        assert "must be a JSON object" in captured_log.text

    def test_missing_file_exit_code(
        self, tmp_path: Path, captured_log: pytest.LogCaptureFixture
    ) -> None:
        assert main(["page-timing", str(tmp_path / "absent.json")]) == 1
        assert "Cannot read timing record" in captured_log.text

    def test_non_finite_timing_exit_code(
        self, tmp_path: Path, captured_log: pytest.LogCaptureFixture
    ) -> None:
        record = tmp_path / "timing.json"
        record.write_text('{"navigationStart": NaN, "loadEventEnd": 2500}')

        assert main(["page-timing", str(record)]) == 1
        assert "Page load time unavailable" in captured_log.text

    def test_ready_message_from_env(
        self, tmp_path: Path, captured_log: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PAGE_READY_MESSAGE", "Docs site ready")
        record = tmp_path / "timing.json"
        record.write_text(json.dumps({"timing": {"navigationStart": 5, "loadEventEnd": 5}}))

        assert main(["page-timing", str(record)]) == 0
        assert "Docs site ready" in captured_log.text
        assert "Page load time: 0ms" in captured_log.text


class TestWatchCommand:
    def test_processes_uploads(
        self,
        container_dir: Path,
        test_settings: Settings,
        captured_log: pytest.LogCaptureFixture,
    ) -> None:
        (container_dir / "logo.png").write_bytes(b"\x89PNG")

        assert main(["watch", "--max-files", "1"]) == 0
        assert "Image file detected: logo.png" in captured_log.text

    def test_container_flag_overrides_settings(self, tmp_path: Path, captured_log: pytest.LogCaptureFixture) -> None:
        other = tmp_path / "other"
        other.mkdir()
        (other / "notes.txt").write_bytes(b"hi")

        assert main(["watch", "--container", str(other), "--max-files", "1"]) == 0
        assert "Generic file detected: notes.txt" in captured_log.text
