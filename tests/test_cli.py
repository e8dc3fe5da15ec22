import json
from pathlib import Path

import pytest

from apps.cli.run import main


def _dataset(tmp_path: Path, dictionary_lines, answers):
    dic = tmp_path / "dictionary.txt"
    ans = tmp_path / "answers.txt"
    dic.write_text("\n".join(dictionary_lines) + "\n", encoding="utf-8")
    ans.write_text(" ".join(answers) + "\n", encoding="utf-8")
    return str(dic), str(ans)


def test_cli_plays_and_reports(tmp_path: Path, capsys):
    dic, ans = _dataset(tmp_path, ["aaaab 1", "aaaac 1", "aaaad 1", "bcdxy 1"],
                        ["aaaad", "bcdxy", "aaaab"])
    outdir = tmp_path / "reports"
    rc = main(["--dictionary", dic, "--answers", ans, "--opening", "none",
               "--progress", "off", "--max", "2", "--outdir", str(outdir)])
    assert rc == 0

    out = capsys.readouterr().out
    assert "Guessed aaaad in 2" in out
    assert "Guessed bcdxy in 1" in out
    assert "Guessed aaaab" not in out  # --max 2
    assert "Solved 2/2" in out

    manifests = list(outdir.glob("run_*_manifest.json"))
    assert len(manifests) == 1
    m = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert m["num_games"] == 2 and m["solver_id"] == "expected_information"


def test_cli_reports_failures_on_stderr(tmp_path: Path, capsys):
    dic, ans = _dataset(tmp_path, ["aaaab 1", "aaaac 1", "aaaad 1", "bcdxy 1"], ["aaaad"])
    rc = main(["--dictionary", dic, "--answers", ans, "--opening", "none",
               "--solver", "frequency_entropy", "--max-turns", "2", "--progress", "off"])
    assert rc == 0
    captured = capsys.readouterr()
    assert "failed to guess aaaad" in captured.err
    assert "Solved 0/1" in captured.out


def test_cli_rejects_malformed_dictionary(tmp_path: Path, capsys):
    dic, ans = _dataset(tmp_path, ["aaaab 1", "aaaac"], ["aaaab"])
    rc = main(["--dictionary", dic, "--answers", ans, "--progress", "off"])
    assert rc == 1
    assert "cannot load dataset" in capsys.readouterr().err


@pytest.mark.parametrize("bad", ["-1", "-5", "two"])
def test_cli_rejects_bad_max(tmp_path: Path, capsys, bad):
    dic, ans = _dataset(tmp_path, ["aaaab 1", "aaaac 1"], ["aaaab", "aaaac"])
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", dic, "--answers", ans, "--progress", "off", "--max", bad])
    assert exc.value.code == 2
    assert "--max" in capsys.readouterr().err


def test_cli_max_zero_plays_nothing(tmp_path: Path, capsys):
    dic, ans = _dataset(tmp_path, ["aaaab 1", "aaaac 1"], ["aaaab", "aaaac"])
    rc = main(["--dictionary", dic, "--answers", ans, "--opening", "none",
               "--progress", "off", "--max", "0"])
    assert rc == 0
    assert "Solved 0/0" in capsys.readouterr().out
