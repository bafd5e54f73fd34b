import io
import random

import pytest

from learnbench.scoring import (
    MAX_SCORE,
    MIN_SCORE,
    Player,
    ScoringSystem,
    format_players,
    trimmed_average,
)


def _system(tmp_path, seed=1):
    return ScoringSystem(tmp_path / "heima" / "data.csv", random.Random(seed))


def test_trimmed_average_constant_scores():
    assert trimmed_average([70] * 10) == 70


def test_trimmed_average_ignores_extremes():
    assert trimmed_average([0, 60, 60, 60, 1000]) == 60


def test_trimmed_average_needs_three_scores():
    with pytest.raises(ValueError):
        trimmed_average([1, 2])


def test_format_players():
    assert format_players([Player("A", 80)]) == "姓名     分数\nA         80\n"


def test_init_players_names(tmp_path):
    players = _system(tmp_path).init_players(4)
    assert sorted(p.name for p in players) == ["A", "B", "C", "D"]
    assert all(p.score == 0 for p in players)


@pytest.mark.parametrize("num", [0, 11])
def test_init_players_rejects_bad_count(tmp_path, num):
    with pytest.raises(ValueError):
        _system(tmp_path).init_players(num)


def test_competition_round(tmp_path):
    system = _system(tmp_path)
    players = system.init_players(4)
    out = io.StringIO()
    advancing = system.competition(players, 1, out)
    assert len(advancing) == 3
    scores = [p.score for p in advancing]
    assert scores == sorted(scores, reverse=True)
    assert all(MIN_SCORE <= p.score <= MAX_SCORE for p in players)
    assert min(scores) >= max(p.score for p in players if p not in advancing)
    log = out.getvalue()
    assert log.startswith("========第1轮比赛=======\n")
    assert "晋级选手名单\n" in log


def test_two_players_leave_one(tmp_path):
    system = _system(tmp_path)
    advancing = system.competition(system.init_players(2), 3, io.StringIO())
    assert len(advancing) == 1


def test_run_competition_records_and_clears(tmp_path):
    system = _system(tmp_path, seed=7)
    players = system.init_players(10)
    winner = system.run_competition(players)
    assert winner.name in {p.name for p in players}
    record = system.previous_grades()
    assert "========第1轮比赛=======" in record
    assert f"选手[{winner.name}], 得分{winner.score}" in record
    system.clear_records()
    assert system.previous_grades() == ""


def test_run_competition_is_reproducible(tmp_path):
    first = _system(tmp_path / "a", seed=3)
    second = _system(tmp_path / "b", seed=3)
    assert first.run_competition(first.init_players(5)) == second.run_competition(
        second.init_players(5)
    )
    assert first.previous_grades() == second.previous_grades()


def test_run_competition_needs_players(tmp_path):
    with pytest.raises(ValueError):
        _system(tmp_path).run_competition([])