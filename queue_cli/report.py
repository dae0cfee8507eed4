from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from rich import box
from rich.table import Table

from .models import Process


def format_statistics(stats: Mapping[str, Optional[float]]) -> List[str]:
    """
    Render the statistics mapping as ``Key: Value`` lines, in mapping order.
    """
    return [f"{key}: {value}" for key, value in stats.items()]


def format_line_lengths(line_lengths: Dict[int, int]) -> List[str]:
    lines: List[str] = []
    for index in sorted(line_lengths):
        count = line_lengths[index]
        if count <= 0:
            continue
        noun = "process" if count == 1 else "processes"
        lines.append(f"Process {index} had to wait for {count} {noun}.")
    return lines


def build_process_table(processes: Sequence[Process]) -> Table:
    """
    Build a Rich table with one row per process record.
    """
    headers = ["ID", "Execution", "Interval", "Entered", "Start", "Complete", "Wait"]

    table = Table(title="Processes", box=box.SIMPLE_HEAVY)
    for h in headers:
        justify = "center" if h == "ID" else "right"
        table.add_column(h, justify=justify)

    for p in processes:
        table.add_row(
            str(p.process_id),
            f"{p.execution_time:.3f}",
            f"{p.interval_time:.3f}",
            f"{p.time_entered:.3f}",
            f"{p.service_start:.3f}",
            f"{p.time_complete:.3f}",
            f"{p.wait_time:.3f}",
        )

    return table
