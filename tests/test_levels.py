"""
Level loader and batch runner tests

Usage:
    pytest tests/test_levels.py
"""

import json
import sys
import threading
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.levels import LevelFormatError, PuzzleDefinition, load_levels, parse_levels
from src.settings import DEFAULT_SETTINGS, load_settings, save_settings
from src.solver_worker import SolverWorker, run_levels
from main import main

LEVELS_CSV = """level,sentence,type,row,col
2,ab cd,Word,0,0
2,ab cd,Word,3,3
1,the red fox,Word,0,0
1,the red fox,Word,4,4
1,the red fox,Word,2,1
1,the red fox,Wall,1,1
"""


def test_load_levels(tmp_path):
    path = tmp_path / "levels.csv"
    path.write_text(LEVELS_CSV, encoding="utf-8")

    levels = load_levels(path, grid_rows=5, grid_cols=5)

    assert [d.level_id for d in levels] == [1, 2]
    first = levels[0]
    assert first.words == ["the", "red", "fox"]
    assert first.piece_positions == [(0, 0), (4, 4), (2, 1)]
    assert first.wall_positions == [(1, 1)]

    state = first.to_state()
    assert state.rows == 5 and state.cols == 5
    assert state.level_id == 1
    assert state.reversed_sentence == "fox red the"
    assert (1, 1) in state.walls


def test_default_grid_size():
    levels = parse_levels(LEVELS_CSV.splitlines())
    assert levels[0].grid_rows == 8
    assert levels[0].grid_cols == 8


def test_rejects_word_count_mismatch():
    lines = ["level,sentence,type,row,col", "1,ab cd,Word,0,0"]
    with pytest.raises(LevelFormatError):
        parse_levels(lines)


def test_rejects_piece_on_wall():
    lines = [
        "level,sentence,type,row,col",
        "1,ab cd,Word,0,0",
        "1,ab cd,Word,0,1",
        "1,ab cd,Wall,0,1",
    ]
    with pytest.raises(LevelFormatError):
        parse_levels(lines)


def test_rejects_out_of_bounds_and_bad_numbers():
    with pytest.raises(LevelFormatError):
        parse_levels(["level,sentence,type,row,col", "1,ab,Word,9,0"])
    with pytest.raises(LevelFormatError):
        parse_levels(["level,sentence,type,row,col", "1,ab,Word,x,0"])
    with pytest.raises(LevelFormatError):
        parse_levels([])


def test_duplicate_pieces_rejected_by_model():
    with pytest.raises(ValueError):
        PuzzleDefinition(
            level_id=1,
            target_sentence="ab cd",
            piece_positions=[(0, 0), (0, 0)],
        )


def test_solver_worker_single_level():
    definition = PuzzleDefinition(
        level_id=5, target_sentence="ab cd",
        piece_positions=[(0, 0), (3, 3)], grid_rows=4, grid_cols=4,
    )
    printed = []
    worker = SolverWorker(definition, "bfs", threading.Lock(), printer=printed.append)
    report = worker.run()

    assert report is worker.report
    assert report.found
    assert report.error is None
    assert report.moves == [(0, "down"), (0, "right")]
    assert printed == [report]


def test_solver_worker_failure_still_reports():
    definition = PuzzleDefinition(
        level_id=7, target_sentence="ab cd",
        piece_positions=[(0, 0), (3, 3)], grid_rows=4, grid_cols=4,
    )
    printed = []
    report = SolverWorker(
        definition, "no_such_strategy", threading.Lock(), printer=printed.append
    ).run()

    assert report.level_id == 7
    assert not report.found
    assert "no_such_strategy" in report.error
    assert printed == [report]
    assert report.summary_lines()[-1].startswith("Error solving Level 7")


@pytest.mark.parametrize("max_workers", [0, 1])
def test_run_levels(max_workers):
    levels = parse_levels(LEVELS_CSV.splitlines(), grid_rows=5, grid_cols=5)
    printed = []

    reports = run_levels(
        levels, "bfs", printer=printed.append,
        max_workers=max_workers, max_states=100_000,
    )

    assert [r.level_id for r in reports] == [1, 2]
    assert all(r.found for r in reports)
    assert all(r.strategy_used == "bfs" for r in reports)
    assert len(printed) == 2


def test_run_levels_keeps_order_and_threads():
    levels = parse_levels(LEVELS_CSV.splitlines(), grid_rows=5, grid_cols=5)
    seen_threads = []

    def printer(report):
        seen_threads.append(threading.current_thread().name)

    reports = run_levels(list(reversed(levels)), "bfs", printer=printer, max_workers=2)

    assert [r.level_id for r in reports] == [2, 1]
    assert all(name.startswith("level") for name in seen_threads)


def test_run_levels_unknown_strategy_does_not_drop_reports():
    levels = parse_levels(LEVELS_CSV.splitlines(), grid_rows=5, grid_cols=5)
    reports = run_levels(levels, "no_such_strategy")

    assert [r.level_id for r in reports] == [1, 2]
    for report in reports:
        assert report is not None
        assert not report.found
        assert report.error


def test_run_levels_reports_budget_exhaustion():
    levels = parse_levels(LEVELS_CSV.splitlines(), grid_rows=5, grid_cols=5)
    reports = run_levels(levels, "bidirectional", max_states=1)

    for report in reports:
        assert not report.found
        assert report.moves == []
        assert report.states_explored == 1


def test_settings_roundtrip(tmp_path):
    path = tmp_path / "config.json"
    assert load_settings(path) == DEFAULT_SETTINGS

    settings = load_settings(path)
    settings["strategy_name"] = "astar"
    save_settings(settings, path)
    assert load_settings(path)["strategy_name"] == "astar"


def test_settings_invalid_json_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_main_rejects_unknown_configured_strategy(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.json").write_text('{"strategy_name": "nope"}', encoding="utf-8")
    (tmp_path / "levels.csv").write_text(LEVELS_CSV, encoding="utf-8")

    assert main(["levels.csv"]) == 1


def test_main_json_output(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.json").write_text(
        '{"grid_rows": 5, "grid_cols": 5}', encoding="utf-8"
    )
    (tmp_path / "levels.csv").write_text(LEVELS_CSV, encoding="utf-8")

    assert main(["levels.csv", "--strategy", "bfs", "--level", "2", "--json"]) == 0

    reports = json.loads(capsys.readouterr().out)
    assert [r["level_id"] for r in reports] == [2]
    assert reports[0]["found"] is True
    assert reports[0]["error"] is None
