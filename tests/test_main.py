"""Tests for the metaconvert command line."""

from __future__ import annotations

import io
import json

import pytest

from core.exceptions import InvalidFrameError
from services.metaconvert import MetaConverter, StreamMessageSink
from services.metaconvert import main as cli
from shared.config.logging_config import _parse_size

FRAME = {
    "pts": 1000,
    "regions": [
        {
            "x": 10, "y": 20, "w": 30, "h": 40, "roi_type": "person",
            "params": [
                {
                    "name": "detection",
                    "fields": {
                        "x_min": 0.1, "x_max": 0.5, "y_min": 0.2, "y_max": 0.6,
                        "confidence": 0.9, "label_id": 2,
                    },
                }
            ],
        }
    ],
}


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)


def _write_frames(tmp_path, lines):
    path = tmp_path / "frames.jsonl"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_cli_converts_frames(tmp_path) -> None:
    empty_frame = json.dumps({"pts": 2000})
    input_path = _write_frames(tmp_path, [json.dumps(FRAME), "", empty_frame])
    output_path = tmp_path / "out.jsonl"

    exit_code = cli.main(
        [str(input_path), "-o", str(output_path), "--source", "cam1", "--width", "640", "--height", "480"]
    )

    assert exit_code == 0
    lines = output_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    document = json.loads(lines[0])
    assert document["resolution"] == {"width": 640, "height": 480}
    assert document["timestamp"] == 1000
    assert document["objects"][0]["detection"]["label"] == "person"


def test_cli_continues_after_invalid_frame(tmp_path) -> None:
    input_path = _write_frames(tmp_path, ["{broken", json.dumps(FRAME)])
    output_path = tmp_path / "out.jsonl"

    exit_code = cli.main([str(input_path), "-o", str(output_path), "--source", "cam1"])

    assert exit_code == 1
    assert len(output_path.read_text(encoding="utf-8").splitlines()) == 1


def test_cli_empty_results_and_segment(tmp_path) -> None:
    input_path = _write_frames(tmp_path, [json.dumps({"pts": 1500})])
    output_path = tmp_path / "out.jsonl"

    exit_code = cli.main(
        [str(input_path), "-o", str(output_path), "--add-empty-results", "--segment-start", "500"]
    )

    assert exit_code == 0
    assert json.loads(output_path.read_text(encoding="utf-8")) == {"timestamp": 1000}


def test_width_without_height_is_rejected(tmp_path) -> None:
    input_path = _write_frames(tmp_path, [json.dumps(FRAME)])
    with pytest.raises(SystemExit):
        cli.main([str(input_path), "--width", "640"])


def test_parse_frame_reports_line_number() -> None:
    with pytest.raises(InvalidFrameError) as excinfo:
        cli.parse_frame('{"regions": [{"x": -5, "y": 0, "w": 1, "h": 1}]}', line_number=3)
    assert excinfo.value.line_number == 3
    assert "line 3" in str(excinfo.value)


def test_service_counts_frames() -> None:
    output = io.StringIO()
    service = cli.MetaConvertService(MetaConverter(source="cam1", sink=StreamMessageSink(output)))
    ok = service.run(io.StringIO(json.dumps(FRAME) + "\n[]\n"))

    assert ok is False
    assert service.get_stats() == {"processed_count": 1, "failed_count": 1}
    assert len(output.getvalue().splitlines()) == 1


def test_log_size_parsing() -> None:
    assert _parse_size("100MB") == 100 * 1024 * 1024
    assert _parse_size("2kb") == 2048
    assert _parse_size("512") == 512
