import json
from pathlib import Path

import pytest
from apps.cli.run import main


@pytest.fixture
def data(tmp_path: Path):
    corpus = tmp_path / "word-counts.txt"
    answers = tmp_path / "answers.txt"
    corpus.write_text("tares 100\ngiven 90\nmodel 80\nchief 70\nislet 60\n", encoding="utf-8")
    answers.write_text("islet\ngiven\n", encoding="utf-8")
    return tmp_path, answers, corpus


def test_cli_end_to_end(data, capsys):
    tmp_path, answers, corpus = data
    outdir = tmp_path / "reports"
    rc = main(["--answers", str(answers), "--corpus", str(corpus),
               "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0

    out = capsys.readouterr().out
    assert "islet in 2" in out
    assert "given in 2" in out
    assert "average score: 2.0000" in out
    assert "missed words: 0" in out

    manifests = list(outdir.glob("run_*_manifest.json"))
    assert len(manifests) == 1
    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["ranker_id"] == "frequency"
    assert manifest["summary"]["solved"] == 2
    assert list(outdir.glob("run_*.csv"))


def test_cli_strict_stops_on_bad_wordlists(data, capsys):
    tmp_path, answers, corpus = data
    answers.write_text("islet\nzebra\n", encoding="utf-8")
    rc = main(["--answers", str(answers), "--corpus", str(corpus), "--strict",
               "--outdir", str(tmp_path / "r"), "--progress", "off"])
    assert rc == 1
    assert "FAIL" in capsys.readouterr().out


def test_cli_rejects_unknown_ranker(data):
    tmp_path, answers, corpus = data
    rc = main(["--answers", str(answers), "--corpus", str(corpus), "--ranker", "entropy",
               "--outdir", str(tmp_path / "r"), "--progress", "off", "--quiet"])
    assert rc == 2


def test_cli_rejects_bad_round_budget(data):
    tmp_path, answers, corpus = data
    with pytest.raises(SystemExit):
        main(["--answers", str(answers), "--corpus", str(corpus), "--max-rounds", "9"])


def test_cli_has_no_seed_flag(data):
    tmp_path, answers, corpus = data
    with pytest.raises(SystemExit):
        main(["--answers", str(answers), "--corpus", str(corpus), "--seed", "1"])
