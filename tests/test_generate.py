"""Tests for the end-to-end visa matrix generation run."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

import main as cli
from visa_guide.generate import DatasetDownloadError, fetch_text, run_generation
from visa_guide.loader import load_rule_file
from visa_guide.matrix import DatasetFormatError
from visa_guide.merge import AUTO_END, AUTO_START, MarkerError
from visa_guide.models import GenerationSummary, VisaRule


DATA_URL = "https://example.com/passport-index-tidy-iso2.csv"

SAMPLE_CSV = (
    "passport,destination,requirement\n"
    "FR,US,90\n"
    "US,FR,visa free\n"
    "FR,FR,-1\n"
    "US,JP,90\n"
)


def _sample_rules_root(tmp_path, *codes):
    root = tmp_path / "rules"
    for code in codes:
        (root / code).mkdir(parents=True)
    return root


def _run(root, csv_text=SAMPLE_CSV):
    with patch("visa_guide.generate.fetch_text", return_value=csv_text) as mock_fetch:
        summary = run_generation(DATA_URL, root)
    mock_fetch.assert_called_once()
    return summary


def test_run_generation_builds_example_matrices(tmp_path):
    root = _sample_rules_root(tmp_path, "US", "FR")

    summary = _run(root)

    assert summary == GenerationSummary(updated=2, total=2)
    us = load_rule_file(root / "US" / "rules.py", "US")
    fr = load_rule_file(root / "FR" / "rules.py", "FR")
    assert us.visa_matrix == {"FR": VisaRule(category="visa_free", max_stay_days=90)}
    assert fr.visa_matrix == {"US": VisaRule(category="visa_free")}


def test_run_generation_second_run_writes_nothing(tmp_path):
    root = _sample_rules_root(tmp_path, "US", "FR")
    _run(root)
    before = {path: path.read_text(encoding="utf-8") for path in root.glob("*/rules.py")}

    with patch("pathlib.Path.write_text") as mock_write:
        summary = _run(root)

    assert summary == GenerationSummary(updated=0, total=2)
    mock_write.assert_not_called()
    assert before == {path: path.read_text(encoding="utf-8") for path in root.glob("*/rules.py")}


def test_run_generation_skips_destinations_without_directory(tmp_path):
    root = _sample_rules_root(tmp_path, "US")

    summary = _run(root)

    assert summary.total == 1
    assert not (root / "JP").exists()
    assert not (root / "FR").exists()


def test_run_generation_keeps_hand_written_content(tmp_path):
    root = _sample_rules_root(tmp_path, "us")
    path = root / "us" / "rules.py"
    prelude = '"""US entry rules."""\n\nchecklist = ["Passport"]\n\n'
    epilogue = "\n# reviewed by hand\n"
    path.write_text(
        f"{prelude}{AUTO_START}\nvisa_matrix = {{}}\n{AUTO_END}{epilogue}", encoding="utf-8"
    )

    summary = _run(root)

    content = path.read_text(encoding="utf-8")
    assert summary == GenerationSummary(updated=1, total=1)
    assert content.startswith(prelude + AUTO_START)
    assert content.endswith(AUTO_END + epilogue)
    assert '"FR": {"category": "visa_free", "max_stay_days": 90}' in content


def test_run_generation_counts_empty_destination_scaffold(tmp_path):
    root = _sample_rules_root(tmp_path, "DE")

    summary = _run(root)

    assert summary == GenerationSummary(updated=1, total=1)
    assert load_rule_file(root / "DE" / "rules.py", "DE").visa_matrix == {}
    assert _run(root) == GenerationSummary(updated=0, total=1)


def test_run_generation_aborts_on_misordered_markers(tmp_path):
    root = _sample_rules_root(tmp_path, "FR", "US")
    path = root / "US" / "rules.py"
    path.write_text(f"{AUTO_END}\n{AUTO_START}\n", encoding="utf-8")

    with pytest.raises(MarkerError):
        _run(root)
    assert path.read_text(encoding="utf-8") == f"{AUTO_END}\n{AUTO_START}\n"


def test_run_generation_aborts_before_writing_on_bad_header(tmp_path):
    root = _sample_rules_root(tmp_path, "US")

    with pytest.raises(DatasetFormatError):
        _run(root, csv_text="country,requirement\nFR,90\n")
    assert not (root / "US" / "rules.py").exists()


def test_run_generation_aborts_when_download_fails(tmp_path):
    root = _sample_rules_root(tmp_path, "US")

    with patch(
        "visa_guide.generate.fetch_text", side_effect=DatasetDownloadError("boom")
    ):
        with pytest.raises(DatasetDownloadError):
            run_generation(DATA_URL, root)
    assert not (root / "US" / "rules.py").exists()


def test_fetch_text_raises_on_error_status():
    response = httpx.Response(404, request=httpx.Request("GET", DATA_URL))
    with patch("visa_guide.generate.httpx.get", return_value=response):
        with pytest.raises(DatasetDownloadError):
            fetch_text(DATA_URL)


def test_fetch_text_wraps_transport_errors():
    error = httpx.ConnectError("unreachable", request=httpx.Request("GET", DATA_URL))
    with patch("visa_guide.generate.httpx.get", side_effect=error):
        with pytest.raises(DatasetDownloadError):
            fetch_text(DATA_URL)


def test_fetch_text_returns_body():
    response = httpx.Response(200, text=SAMPLE_CSV, request=httpx.Request("GET", DATA_URL))
    with patch("visa_guide.generate.httpx.get", return_value=response) as mock_get:
        assert fetch_text(DATA_URL, timeout=5.0) == SAMPLE_CSV
    mock_get.assert_called_once_with(DATA_URL, timeout=5.0, follow_redirects=True)


def test_cli_prints_summary(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["main.py", "--rules-root", str(tmp_path)])
    with patch.object(cli, "run_generation", return_value=GenerationSummary(3, 5)):
        assert cli.main() == 0
    assert "Updated 3/5 destination rule files." in capsys.readouterr().out


def test_cli_exits_non_zero_on_failure(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["main.py", "--rules-root", str(tmp_path)])
    with patch.object(cli, "run_generation", side_effect=MarkerError("corrupt")):
        assert cli.main() == 1


def test_run_generation_keeps_non_ascii_raw_text(tmp_path):
    root = _sample_rules_root(tmp_path, "US")
    csv_text = "passport,destination,requirement\nFR,US,closed \U0001F6AB\nDE,US,Einreise prüfen\n"

    _run(root, csv_text=csv_text)

    matrix = load_rule_file(root / "US" / "rules.py", "US").visa_matrix
    assert matrix["FR"] == VisaRule(category="unknown", raw="closed \U0001F6AB")
    assert matrix["DE"] == VisaRule(category="unknown", raw="Einreise prüfen")
    assert _run(root, csv_text=csv_text) == GenerationSummary(updated=0, total=1)


def test_run_generation_rejects_orphan_end_marker(tmp_path):
    root = _sample_rules_root(tmp_path, "US")
    path = root / "US" / "rules.py"
    path.write_text(f"rules = []\n{AUTO_END}\n", encoding="utf-8")

    with pytest.raises(MarkerError):
        _run(root)
    content = path.read_text(encoding="utf-8")
    assert content.startswith(f"rules = []\n{AUTO_END}\n")
    assert content.count(AUTO_START) == 1


def test_cli_script_is_not_installed_as_a_module():
    tomllib = pytest.importorskip("tomllib")
    pyproject = Path(cli.__file__).resolve().parent / "pyproject.toml"
    setuptools_config = tomllib.loads(pyproject.read_text(encoding="utf-8"))["tool"]["setuptools"]

    assert setuptools_config["packages"] == ["visa_guide"]
    assert "py-modules" not in setuptools_config
