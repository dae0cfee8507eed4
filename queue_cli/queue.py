from __future__ import annotations

import logging
import math
import random
from typing import Dict, Iterator, List, Optional, Tuple

from .metrics import compute_line_length, compute_statistics
from .models import Process, next_process
from .random_source import RandomSource, weighted_random

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 10
DEFAULT_PROCESS_WEIGHT = 3.0
DEFAULT_INTERVAL_WEIGHT = 5.0


class ProcessQueue:
    """
    Append-only FIFO queue of simulated processes served by a single server.

    ``process_weight`` and ``interval_weight`` are the mean execution time and
    mean gap between arrivals. Pass a seeded ``random.Random`` as ``rng`` for
    a reproducible queue.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        process_weight: float = DEFAULT_PROCESS_WEIGHT,
        interval_weight: float = DEFAULT_INTERVAL_WEIGHT,
        rng: Optional[RandomSource] = None,
    ) -> None:
        if size < 0:
            raise ValueError(f"Queue size must be non-negative, got {size!r}")
        if not math.isfinite(process_weight) or process_weight <= 0:
            raise ValueError(f"Process weight must be a positive finite number, got {process_weight!r}")
        if not math.isfinite(interval_weight) or interval_weight <= 0:
            raise ValueError(f"Interval weight must be a positive finite number, got {interval_weight!r}")

        self.process_weight = process_weight
        self.interval_weight = interval_weight
        self._rng = rng if rng is not None else random.Random()
        self._processes: List[Process] = []

        for _ in range(size):
            self.append()

    def append(self) -> Process:
        """
        Draw a new execution time and arrival gap and add one process to the end.
        """
        execution_time = weighted_random(self.process_weight, self._rng)
        interval_time = weighted_random(self.interval_weight, self._rng)

        previous = self._processes[-1] if self._processes else None
        process = next_process(previous, execution_time, interval_time)
        self._processes.append(process)

        logger.debug("Appended %s", process)
        return process

    @property
    def processes(self) -> Tuple[Process, ...]:
        return tuple(self._processes)

    def compute_statistics(self) -> Dict[str, Optional[float]]:
        return compute_statistics(self._processes)

    def compute_line_length(self) -> Dict[int, int]:
        return compute_line_length(self._processes)

    def __len__(self) -> int:
        return len(self._processes)

    def __iter__(self) -> Iterator[Process]:
        return iter(self._processes)

    def __getitem__(self, index: int) -> Process:
        return self._processes[index]
