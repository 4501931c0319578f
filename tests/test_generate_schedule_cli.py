"""Tests for study_schedule.cli.generate_schedule."""
import json
from pathlib import Path

from study_schedule.cli.generate_schedule import main


def test_invalid_days_exit_code(capsys) -> None:
    assert main(["Python", "400"]) == 1
    assert "Please enter a valid number of days (1-365)" in capsys.readouterr().out


def test_blank_topic_exit_code(capsys) -> None:
    assert main(["   ", "10"]) == 1
    assert "Please fill in all fields" in capsys.readouterr().out


def test_table_output(capsys) -> None:
    assert main(["Guitar", "4"]) == 0
    out = capsys.readouterr().out
    assert "Phase Summary" in out
    assert "Your 4-Day Learning Plan" in out


def test_save_json(tmp_path: Path) -> None:
    out_path = tmp_path / "guitar.json"
    assert main(["Guitar", "4", "--format", "json", "--out", str(out_path)]) == 0
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert len(data["days"]) == 4


def test_save_to_default_dir(tmp_path: Path, monkeypatch) -> None:
    from study_schedule import config

    monkeypatch.setattr(config, "SCHEDULE_OUTPUT_DIR", str(tmp_path))
    monkeypatch.setattr(config, "SCHEDULE_EXPORT_FORMAT", "markdown")
    assert main(["Spanish", "1", "--save"]) == 0
    assert (tmp_path / "spanish_1_days.md").exists()


def test_save_flag_before_positionals(tmp_path: Path, monkeypatch) -> None:
    from study_schedule import config

    monkeypatch.setattr(config, "SCHEDULE_OUTPUT_DIR", str(tmp_path))
    monkeypatch.setattr(config, "SCHEDULE_EXPORT_FORMAT", "csv")
    assert main(["--save", "Guitar", "4"]) == 0
    assert (tmp_path / "guitar_4_days.csv").exists()


def test_bad_env_format_rejected_before_rendering(tmp_path: Path, monkeypatch, capsys) -> None:
    from study_schedule import config

    monkeypatch.setattr(config, "SCHEDULE_OUTPUT_DIR", str(tmp_path))
    monkeypatch.setattr(config, "SCHEDULE_EXPORT_FORMAT", "pdf")
    assert main(["Guitar", "4", "--save"]) == 1

    out = capsys.readouterr().out
    assert "Unknown export format in SCHEDULE_EXPORT_FORMAT: pdf" in out
    assert "Phase Summary" not in out
    assert list(tmp_path.iterdir()) == []
