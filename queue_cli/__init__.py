"""
Queue CLI package.

Simulates a single-server FIFO process queue and reports wait-time
statistics and how many processes were ahead of each arrival.
"""

from .metrics import compute_line_length, compute_statistics
from .models import Process, next_process
from .queue import ProcessQueue

__all__ = [
    "cli",
    "Process",
    "ProcessQueue",
    "compute_line_length",
    "compute_statistics",
    "next_process",
]
