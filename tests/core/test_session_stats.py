"""
test_session_stats.py
---------------------
Unit tests for the cross-run session statistics.
"""

from survival.core.runtime.session_stats import SessionStats
from survival.systems.simulation import FrameSnapshot


def snapshot(score):
    return FrameSnapshot(player_pos=(0.0, 0.0), health=100, enemies=(),
                         lasers=(), score=score, game_over=False)


def test_record_tracks_high_score():
    stats = SessionStats()
    stats.record(snapshot(30), kills=3, run_time=12.5)
    stats.record(snapshot(50), kills=5, run_time=20.0)

    assert stats.score == 50
    assert stats.high_score == 50
    assert stats.enemies_killed == 5
    assert stats.run_time == 20.0


def test_reset_keeps_high_score():
    stats = SessionStats()
    stats.record(snapshot(80), kills=8, run_time=30.0)

    stats.reset()
    stats.record(snapshot(10), kills=1, run_time=2.0)

    assert stats.score == 10
    assert stats.high_score == 80
    assert stats.runs == 2


def test_summary_reports_current_run():
    stats = SessionStats()
    stats.record(snapshot(40), kills=4, run_time=17.26)
    stats.reset()
    stats.record(snapshot(20), kills=2, run_time=9.04)

    assert stats.summary() == "Run 2: 2 kills in 9.0s"
