"""
Derived-state computations layered on the store.

Pure functions over plain values and response schemas so they can be
exercised without a store.
"""
import math
from datetime import datetime
from typing import Iterable, Optional, Sequence

from pollverify.models.queue import QueueStatus, QueueType
from pollverify.schemas.queue import QueueItemResponse, QueueStats
from pollverify.schemas.stat import StatResponse, StatsSummary


def round_half_up(value: float) -> int:
    """Round .5 upward (toward +inf), unlike the built-in banker's rounding"""
    return math.floor(value + 0.5)


def metric_accuracy(predicted: Optional[int], actual: int) -> int:
    """
    Accuracy of one prediction as a percentage.

    A missing or zero prediction scores 0 rather than dividing by zero. The
    score goes negative once the miss is larger than the prediction itself.
    """
    if not predicted:
        return 0
    return round_half_up((1 - abs(predicted - actual) / predicted) * 100)


def prediction_accuracy(
    predicted_volume: Optional[int],
    actual_volume: int,
    predicted_wait: Optional[int],
    actual_wait: int,
) -> int:
    """Overall accuracy: mean of the volume and wait time accuracies"""
    volume_accuracy = metric_accuracy(predicted_volume, actual_volume)
    wait_accuracy = metric_accuracy(predicted_wait, actual_wait)
    return round_half_up((volume_accuracy + wait_accuracy) / 2)


def resolution_minutes(reported_at: datetime, resolved_at: datetime) -> int:
    """Whole minutes between report and resolution"""
    elapsed_ms = (resolved_at - reported_at).total_seconds() * 1000
    return math.floor(elapsed_ms / 60000)


def queue_stats(items: Iterable[QueueItemResponse]) -> QueueStats:
    """Count waiting, in-progress and completed queue entries"""
    waiting = in_progress = completed = 0
    for item in items:
        if item.status == QueueStatus.WAITING.value:
            waiting += 1
        elif item.status == QueueStatus.IN_PROGRESS.value:
            in_progress += 1
        elif item.status == QueueStatus.COMPLETED.value:
            completed += 1
    return QueueStats(waiting=waiting, in_progress=in_progress, completed=completed)


def count_special_cases(items: Iterable[QueueItemResponse]) -> int:
    """Queue entries that needed more than a standard check-in"""
    special_statuses = (QueueStatus.ISSUE.value, QueueStatus.SPECIAL_ASSISTANCE.value)
    return sum(
        1 for item in items
        if item.status in special_statuses or item.type == QueueType.SPECIAL_ASSISTANCE.value
    )


def summarize_stats(stats: Sequence[StatResponse], special_cases: int = 0) -> StatsSummary:
    """
    Roll today's hourly rows up into the dashboard summary.

    Processing time is stored in seconds and reported in minutes with one
    decimal. Wait time and throughput report the latest hour that has a value.
    The peak hour is the first hour with the highest processed count.
    """
    total_voters_processed = sum(stat.voters_processed for stat in stats)

    processing_times = [s.average_processing_time for s in stats if s.average_processing_time is not None]
    avg_processing_time = sum(processing_times) / len(processing_times) if processing_times else 0

    wait_times = [s.wait_time for s in stats if s.wait_time is not None]
    current_wait_time = wait_times[-1] if wait_times else 0

    throughputs = [s.throughput for s in stats if s.throughput is not None]
    current_throughput = throughputs[-1] if throughputs else 0

    peak_hour = 0
    max_voters = 0
    for stat in stats:
        if stat.voters_processed > max_voters:
            max_voters = stat.voters_processed
            peak_hour = stat.hour

    return StatsSummary(
        total_voters_processed=total_voters_processed,
        avg_processing_time=round_half_up(avg_processing_time / 60 * 10) / 10,
        current_wait_time=current_wait_time,
        current_throughput=current_throughput,
        peak_hour=f"{peak_hour}:00",
        special_cases=special_cases,
    )


def sunday_first_weekday(moment: datetime) -> int:
    """Day of week counted from Sunday = 0"""
    return (moment.weekday() + 1) % 7


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)
