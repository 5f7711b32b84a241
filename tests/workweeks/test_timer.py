from datetime import datetime, timedelta

from timerwork.core.enums import WorkWeekStatus
from timerwork.workweeks.model import WorkWeek
from timerwork.workweeks.timer import elapsed_seconds, history_work_minutes, pause_duration, whole_minutes

T0 = datetime(2025, 1, 6, 8, 0, 0)


def _week(**overrides) -> WorkWeek:
    data = dict(
        work_week_id=1,
        user_id=1,
        week_start=T0,
        week_end=None,
        last_update_time=T0,
        status=WorkWeekStatus.RUNNING,
        pause_start=None,
        total_pause_time=0,
        week_goal_minutes=2400,
    )
    data.update(overrides)
    return WorkWeek(**data)


def test_stopped_week_subtracts_committed_pauses():
    week = _week(
        status=WorkWeekStatus.STOPPED,
        week_end=T0 + timedelta(seconds=3600),
        last_update_time=T0 + timedelta(seconds=3600),
        total_pause_time=600,
    )

    assert elapsed_seconds(week, now=T0 + timedelta(days=3)) == 3000


def test_running_week_counts_up_to_now():
    now = datetime.now()
    week = _week(week_start=now - timedelta(seconds=120), last_update_time=now - timedelta(seconds=120))

    assert abs(elapsed_seconds(week, now=datetime.now()) - 120) <= 2


def test_paused_week_subtracts_pause_in_progress_live():
    paused_at = T0 + timedelta(minutes=30)
    week = _week(
        status=WorkWeekStatus.PAUSED,
        last_update_time=paused_at,
        pause_start=paused_at,
        total_pause_time=60,
    )

    # (30 min - 60s) minus the 10 minutes the pause has been running
    assert elapsed_seconds(week, now=paused_at + timedelta(minutes=10)) == 1800 - 60 - 600


def test_paused_week_without_pause_start_falls_back_to_last_update():
    week = _week(status=WorkWeekStatus.PAUSED, last_update_time=T0 + timedelta(seconds=500))

    assert elapsed_seconds(week, now=T0 + timedelta(hours=5)) == 500


def test_stopped_status_without_end_uses_last_update_time():
    week = _week(status=WorkWeekStatus.STOPPED, last_update_time=T0 + timedelta(seconds=90), total_pause_time=30)

    assert elapsed_seconds(week, now=T0 + timedelta(hours=1)) == 60


def test_elapsed_is_not_clamped_when_pauses_exceed_wall_time():
    week = _week(
        status=WorkWeekStatus.STOPPED,
        week_end=T0 + timedelta(seconds=100),
        total_pause_time=400,
    )

    assert elapsed_seconds(week, now=T0) == -300


def test_history_minutes_for_finished_running_and_paused_weeks():
    now = T0 + timedelta(hours=2)
    finished = _week(status=WorkWeekStatus.STOPPED, week_end=T0 + timedelta(minutes=95), total_pause_time=300)
    running = _week(total_pause_time=600)
    first_pause = _week(status=WorkWeekStatus.PAUSED, pause_start=T0 + timedelta(hours=1))
    second_pause = _week(status=WorkWeekStatus.PAUSED, pause_start=T0 + timedelta(hours=1), total_pause_time=150)

    assert history_work_minutes(finished, now) == 90
    assert history_work_minutes(running, now) == 110
    assert history_work_minutes(first_pause, now) == 0
    assert history_work_minutes(second_pause, now) == -2


def test_whole_minutes_truncates_toward_zero():
    assert whole_minutes(119) == 1
    assert whole_minutes(-119) == -1
    assert whole_minutes(0) == 0


def test_pause_duration_is_zero_without_pause_start():
    assert pause_duration(_week(status=WorkWeekStatus.PAUSED), now=T0 + timedelta(hours=1)) == 0
    assert pause_duration(_week(pause_start=T0), now=T0 + timedelta(seconds=45)) == 45


def test_unknown_status_is_measured_up_to_last_update():
    week = _week(status=WorkWeekStatus.UNKNOWN, last_update_time=T0 + timedelta(minutes=10), total_pause_time=60)

    assert elapsed_seconds(week, now=T0 + timedelta(hours=3)) == 540
    assert history_work_minutes(week, T0 + timedelta(hours=3)) == 0


def test_status_parse_maps_unrecognised_values_to_unknown():
    assert WorkWeekStatus.parse("paused") is WorkWeekStatus.PAUSED
    assert WorkWeekStatus.parse("archived") is WorkWeekStatus.UNKNOWN
    assert WorkWeekStatus.parse(None) is WorkWeekStatus.UNKNOWN
