import csv
import json
from pathlib import Path

from apps.cli import play, run


def _words(tmp_path: Path) -> Path:
    p = tmp_path / "words.txt"
    p.write_text("bat\ncat\ncar\ncan\ncrane\nraise\nstare\n", encoding="utf-8")
    return p


def test_play_cli(tmp_path: Path, monkeypatch, capsys):
    answers = iter(["a 2", "t", "n 3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert play.main(["3", "-f", str(_words(tmp_path))]) == 0
    out = capsys.readouterr().out
    assert "Loaded 7 words" in out
    assert "Final guess: can" in out


def test_play_cli_reports_contradiction(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "z 1")
    assert play.main(["3", "-f", str(_words(tmp_path))]) == 1
    assert "No possible words left" in capsys.readouterr().err


def test_play_cli_no_words_of_length(tmp_path: Path, capsys):
    assert play.main(["9", "-f", str(_words(tmp_path))]) == 1
    assert "No 9-letter words" in capsys.readouterr().err


def test_run_cli(tmp_path: Path, capsys):
    outdir = tmp_path / "reports"
    rc = run.main(["-f", str(_words(tmp_path)), "--length", "3",
                   "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0

    csvs = list(outdir.glob("run_*.csv"))
    manifests = list(outdir.glob("run_*_manifest.json"))
    assert len(csvs) == 1 and len(manifests) == 1

    with csvs[0].open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert sorted(r["word"] for r in rows) == ["bat", "can", "car", "cat"]

    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["summary"]["solved"] == 4
    assert "solved 4/4" in capsys.readouterr().out


def test_cli_reports_undecodable_dictionary(tmp_path: Path, capsys):
    bad = tmp_path / "words.txt"
    bad.write_bytes(b"bat\n\xff\xfecat\n")
    assert run.main(["-f", str(bad), "--progress", "off"]) == 1
    assert capsys.readouterr().err.startswith("Error:")
    assert play.main(["3", "-f", str(bad)]) == 1
    assert capsys.readouterr().err.startswith("Error:")
