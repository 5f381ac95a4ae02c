from datetime import datetime, timedelta

import pytest

from pollverify.core.analytics import (
    count_special_cases,
    metric_accuracy,
    prediction_accuracy,
    queue_stats,
    resolution_minutes,
    round_half_up,
    start_of_day,
    summarize_stats,
    sunday_first_weekday,
)
from pollverify.schemas import QueueItemResponse, StatResponse

NOW = datetime(2024, 11, 5, 14, 30)


def queue_item(item_id, status="waiting", item_type="standard"):
    return QueueItemResponse(
        id=item_id,
        voter_id=None,
        number=item_id,
        status=status,
        type=item_type,
        wait_time_minutes=None,
        entered_at=NOW,
        processed_at=None,
        processed_by=None,
    )


def stat(stat_id, hour, voters_processed, processing=None, wait=None, throughput=None):
    return StatResponse(
        id=stat_id,
        date=NOW,
        hour=hour,
        voters_processed=voters_processed,
        average_processing_time=processing,
        wait_time=wait,
        throughput=throughput,
    )


@pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (-0.5, 0), (2.4, 2)])
def test_round_half_up_rounds_halves_upward(value, expected):
    assert round_half_up(value) == expected


def test_prediction_accuracy_example():
    assert metric_accuracy(20, 22) == 90
    assert metric_accuracy(10, 9) == 90
    assert prediction_accuracy(20, 22, 10, 9) == 90


def test_zero_or_missing_prediction_scores_zero():
    assert metric_accuracy(0, 12) == 0
    assert metric_accuracy(None, 12) == 0
    assert prediction_accuracy(0, 12, 10, 10) == 50


def test_accuracy_goes_negative_for_large_misses():
    assert metric_accuracy(10, 25) == -50


def test_resolution_minutes_floors():
    assert resolution_minutes(NOW, NOW + timedelta(milliseconds=125000)) == 2
    assert resolution_minutes(NOW, NOW + timedelta(seconds=59)) == 0


def test_queue_stats_counts_match_filters():
    items = [
        queue_item(1),
        queue_item(2, "in_progress"),
        queue_item(3, "completed"),
        queue_item(4, "completed"),
        queue_item(5, "issue"),
        queue_item(6, "special_assistance"),
    ]
    result = queue_stats(items)
    assert (result.waiting, result.in_progress, result.completed) == (1, 1, 2)
    others = sum(1 for item in items if item.status not in ("waiting", "in_progress", "completed"))
    assert result.waiting + result.in_progress + result.completed + others == len(items)


def test_special_cases_counts_statuses_and_types():
    items = [
        queue_item(1),
        queue_item(2, "issue"),
        queue_item(3, "special_assistance"),
        queue_item(4, "waiting", "special_assistance"),
        queue_item(5, "completed", "provisional"),
    ]
    assert count_special_cases(items) == 3


def test_summarize_stats():
    rows = [
        stat(1, 9, 10, processing=120, wait=8, throughput=5),
        stat(2, 10, 15, processing=180, throughput=6),
        stat(3, 11, 15, wait=12),
    ]
    summary = summarize_stats(rows, special_cases=2)
    assert summary.total_voters_processed == 40
    assert summary.avg_processing_time == 2.5
    assert summary.current_wait_time == 12
    assert summary.current_throughput == 6
    assert summary.peak_hour == "10:00"
    assert summary.special_cases == 2


def test_summarize_no_stats():
    summary = summarize_stats([])
    assert summary.total_voters_processed == 0
    assert summary.avg_processing_time == 0
    assert summary.peak_hour == "0:00"


def test_sunday_first_weekday():
    assert sunday_first_weekday(NOW) == 2
    assert sunday_first_weekday(datetime(2024, 11, 3)) == 0
    assert sunday_first_weekday(datetime(2024, 11, 9)) == 6


def test_start_of_day():
    assert start_of_day(NOW) == datetime(2024, 11, 5)
