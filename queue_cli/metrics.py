from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence

from .models import Process


def median(values: Sequence[float]) -> Optional[float]:
    if not values:
        return None

    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2.0
    return ordered[middle]


def standard_deviation(values: Sequence[float]) -> Optional[float]:
    """
    Population standard deviation (divides by N, not N - 1).
    """
    if not values:
        return None

    mean = sum(values) / len(values)
    squared = sum((v - mean) ** 2 for v in values)
    return math.sqrt(squared / len(values))


def compute_statistics(processes: Sequence[Process]) -> Dict[str, Optional[float]]:
    """
    Summarize the wait times of a queue.

    Keys come back in report order. Every value except ``Count`` and
    ``Total Wait Time`` is None for an empty queue.
    """
    wait_times: List[float] = [p.wait_time for p in processes]
    n = len(wait_times)

    return {
        "Count": n,
        "Minimum": min(wait_times) if wait_times else None,
        "Maximum": max(wait_times) if wait_times else None,
        "Average": sum(wait_times) / n if n else None,
        "Median": median(wait_times),
        "Total Wait Time": float(sum(wait_times)),
        "Standard Deviation": standard_deviation(wait_times),
    }


def compute_line_length(processes: Sequence[Process]) -> Dict[int, int]:
    """
    For each process index, count the processes still ahead of it in line when it arrived.

    The scan walks back from the process itself and stops at the first
    record whose service had already started by that arrival; since service
    start times never decrease along the queue, every earlier record has
    started too.
    """
    if not processes:
        return {}

    line_lengths: Dict[int, int] = {0: 0}
    for index in range(1, len(processes)):
        arrival = processes[index].time_entered
        count = 0
        for check in range(index, -1, -1):
            if processes[check].service_start > arrival:
                count += 1
            else:
                break
        line_lengths[index] = count

    return line_lengths
