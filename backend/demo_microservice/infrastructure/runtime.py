"""Runtime Introspection — reads processor and memory figures from the host via psutil.

Invariants:
    - available_processors is os.cpu_count() (host view, never affinity-filtered)
    - max_memory is the address-space soft limit when finite, else total physical memory
    - total_memory is the current process RSS; free_memory is host-available memory

Design Decisions:
    - psutil over /proc parsing: portable across Linux/macOS containers
    - Returns core.RuntimeStats so payload builders stay free of IO
"""

import os
import platform

import psutil

from demo_microservice.core.domain_types import RuntimeStats


def _max_memory(process: psutil.Process, physical_total: int) -> int:
    # RLIMIT_AS is only exposed on Linux
    if hasattr(psutil, "RLIMIT_AS"):
        soft, _hard = process.rlimit(psutil.RLIMIT_AS)
        if soft != psutil.RLIM_INFINITY and soft > 0:
            return soft
    return physical_total


def read_runtime_stats() -> RuntimeStats:
    """Snapshot the current interpreter and host resources."""
    process = psutil.Process()
    memory = psutil.virtual_memory()
    return RuntimeStats(
        runtime_version=platform.python_version(),
        available_processors=os.cpu_count() or 1,
        max_memory=_max_memory(process, memory.total),
        total_memory=process.memory_info().rss,
        free_memory=memory.available,
    )
