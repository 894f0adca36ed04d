from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from time import perf_counter
from typing import Dict, Iterator, Optional

logger = logging.getLogger("prospection.workers")


@dataclass
class WorkerStats:
    processed: int = 0
    ok: int = 0
    failed: int = 0
    skipped: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {"processed": self.processed, "ok": self.ok, "failed": self.failed}


def log_info(worker: str, message: str) -> None:
    logger.info("[%s] %s", worker, message)


def log_error(worker: str, item: str, error: Exception) -> None:
    logger.error("[%s] ERROR %s: %s", worker, item, error)


def log_summary(worker: str, stats: WorkerStats) -> None:
    parts = [f"processed={stats.processed}", f"ok={stats.ok}", f"failed={stats.failed}"]
    if stats.skipped:
        parts.append(f"skipped={stats.skipped}")
    log_info(worker, "result: " + " ".join(parts))


@contextmanager
def worker_session(worker: str, *, limit: Optional[int] = None) -> Iterator[WorkerStats]:
    """Time a worker run and log its counters when it ends."""
    start = perf_counter()
    stats = WorkerStats()
    limit_note = f" (limit={limit})" if limit is not None else ""
    log_info(worker, f"start{limit_note}")
    try:
        yield stats
    finally:
        log_summary(worker, stats)
        elapsed = perf_counter() - start
        log_info(worker, f"finished in {elapsed:.2f}s")


__all__ = ["WorkerStats", "log_error", "log_info", "log_summary", "worker_session"]
