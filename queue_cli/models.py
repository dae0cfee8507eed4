from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Process:
    """
    One simulated job in the single-server queue.

    Records are immutable; build them with ``next_process`` so that arrival,
    completion and wait times are always threaded from the previous record.
    """

    process_id: int
    execution_time: float
    interval_time: float
    time_entered: float
    time_complete: float
    wait_time: float = 0.0

    @property
    def service_start(self) -> float:
        return self.time_complete - self.execution_time

    def __str__(self) -> str:
        return (
            f"Process(ProcessID:{self.process_id}, ExecutionTime:{self.execution_time}, "
            f"IntervalTime:{self.interval_time}, TimeEntered:{self.time_entered}, "
            f"TimeComplete:{self.time_complete}, WaitTime:{self.wait_time})"
        )


def next_process(previous: Optional[Process], execution_time: float, interval_time: float) -> Process:
    """
    Build the record that follows ``previous`` (or the first record when it is None).
    """
    if previous is None:
        time_entered = interval_time
        return Process(
            process_id=0,
            execution_time=execution_time,
            interval_time=interval_time,
            time_entered=time_entered,
            time_complete=time_entered + execution_time,
            wait_time=0.0,
        )

    time_entered = previous.time_entered + interval_time
    # Service starts once the server is free and the process has arrived.
    time_complete = max(previous.time_complete, time_entered) + execution_time
    # Clamp tiny negative values left by float rounding.
    wait_time = max(time_complete - execution_time - time_entered, 0.0)

    return Process(
        process_id=previous.process_id + 1,
        execution_time=execution_time,
        interval_time=interval_time,
        time_entered=time_entered,
        time_complete=time_complete,
        wait_time=wait_time,
    )
