"""Runtime Introspection — psutil-backed snapshot of the host."""

import os
import platform

import psutil

from demo_microservice.infrastructure import runtime
from demo_microservice.infrastructure.runtime import read_runtime_stats


def test_snapshot_matches_host():
    stats = read_runtime_stats()
    assert stats.runtime_version == platform.python_version()
    assert stats.available_processors == os.cpu_count()
    assert stats.total_memory > 0
    assert stats.free_memory > 0
    assert stats.max_memory > 0


def test_max_memory_falls_back_to_physical_total(monkeypatch):
    monkeypatch.delattr(psutil, "RLIMIT_AS", raising=False)
    assert runtime._max_memory(psutil.Process(), 12345) == 12345
