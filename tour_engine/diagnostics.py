"""Memory statistics reported when a search runs out of memory."""

from typing import List

import psutil

OOM_ADVICE = "Error: Ran out of memory. Please try a smaller board size or a different search method."


def _mb(n: int) -> int:
    return n // 1024 // 1024


def memory_report_lines() -> List[str]:
    vm = psutil.virtual_memory()
    rss = psutil.Process().memory_info().rss
    return [
        "Out of Memory Error occurred.",
        f"Maximum memory: {_mb(vm.available)} MB",
        f"Total memory: {_mb(vm.total)} MB",
        f"Free memory: {_mb(vm.free)} MB",
        f"Used memory: {_mb(rss)} MB",
        OOM_ADVICE,
    ]
