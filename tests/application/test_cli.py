import json
import logging
import re

import pytest

from application import cli


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    yield
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])


def test_score_simple(capsys):
    assert cli.main(["score", "Analyst upgrade", "strong growth", "--simple", "-s", "Reuters"]) == 0
    out = capsys.readouterr().out
    assert "sentiment=0.80" in out
    assert "trust=0.90" in out


def test_score_contextual(capsys):
    assert cli.main(["score", "Acme wins regulatory approval", "-s", "reuters.com", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "score=" in out
    assert "trust=0.90" in out


def test_rank_top_picks(tmp_path, capsys):
    signals = [
        {"symbol": f"S{i}", "price": 10.0 + i, "fundamental_score": 40.0 + 5 * i,
         "short_term_sentiment": 50.0, "long_term_sentiment": 40.0 + 5 * i}
        for i in range(7)
    ]
    signals.append({"symbol": "BAD", "price": 0.0, "fundamental_score": 90.0,
                    "short_term_sentiment": 90.0, "long_term_sentiment": 90.0})
    path = tmp_path / "signals.json"
    path.write_text(json.dumps(signals))

    assert cli.main(["rank", str(path), "--top-picks"]) == 0
    captured = capsys.readouterr()
    lines = captured.out.strip().splitlines()
    assert len(lines) == 5
    assert all(re.match(r"\s*\d+\. ", line) for line in lines)
    assert lines[0].split()[1] == "S6"
    assert all("BAD" not in line for line in lines)
    # the skipped signal is logged to stderr, away from the listing
    assert "Skipping BAD" in captured.err


def test_rank_invalid_file(tmp_path, capsys):
    path = tmp_path / "signals.json"
    path.write_text(json.dumps([{"symbol": "X"}]))
    assert cli.main(["rank", str(path)]) == 2
    assert "Invalid signals file" in capsys.readouterr().err


def test_rank_missing_file(tmp_path, capsys):
    assert cli.main(["rank", str(tmp_path / "absent.json")]) == 2
    assert "Invalid signals file" in capsys.readouterr().err


@pytest.mark.parametrize("content", [
    "{not json",
    json.dumps({"symbol": "AAPL", "price": 12.5}),
    json.dumps([["AAPL", 12.5]]),
    json.dumps([{"symbol": "AAPL", "price": "12.5", "fundamental_score": 60,
                 "short_term_sentiment": 50, "long_term_sentiment": 60}]),
])
def test_rank_malformed_content(tmp_path, capsys, content):
    path = tmp_path / "signals.json"
    path.write_text(content)
    assert cli.main(["rank", str(path)]) == 2
    assert "Invalid signals file" in capsys.readouterr().err
