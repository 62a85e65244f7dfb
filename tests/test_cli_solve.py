import json

from apps.cli import solve


def _lists(tmp_path):
    dic = tmp_path / "words.txt"
    sol = tmp_path / "solutions.txt"
    dic.write_text("dusky\ndusty\ndumpy\ndaisy\n", encoding="utf-8")
    sol.write_text("dusty\n", encoding="utf-8")
    return ["--dictionary", str(dic), "--solutions", str(sol)]


def test_missing_word_list_exits_cleanly(tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")
    assert solve.main(["--dictionary", missing, "--solutions", missing]) == 2
    assert "word list not found" in capsys.readouterr().err


def test_solve_prints_ranked_candidates(tmp_path, capsys):
    assert solve.main(_lists(tmp_path) + ["--guess", "daisy", "GXXYG"]) == 0
    assert capsys.readouterr().out.splitlines() == ["dusty (19)", "dusky (9)"]


def test_solve_rejects_bad_pattern(tmp_path, capsys):
    assert solve.main(_lists(tmp_path) + ["--guess", "daisy", "GXQYG"]) == 2
    assert "'Q'" in capsys.readouterr().err


def test_solve_writes_event_log(tmp_path):
    log_path = tmp_path / "events.jsonl"
    args = _lists(tmp_path) + ["--guess", "daisy", "GXXYG", "--events", str(log_path)]
    assert solve.main(args) == 0
    records = [json.loads(line) for line in log_path.read_text(encoding="utf-8").splitlines()]
    assert [r["type"] for r in records] == ["session_started", "guess_committed", "session_completed"]
    assert records[1]["labels"] == ["green", "gray", "gray", "yellow", "green"]
