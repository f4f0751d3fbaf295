"""
Timeout guards for store calls.

The session builder's fallback path only bounds latency if a misbehaving
store errors out; a store that hangs would stall the session. These wrappers
run each call on a worker thread and turn an overrun into StoreTimeoutError.
The abandoned call keeps running in the background until the backend gives up.
"""
from __future__ import annotations

from collections.abc import Callable, Collection, Sequence
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from functools import lru_cache
from typing import TypeVar

from loguru import logger

from olympiad.core.errors import StoreTimeoutError
from olympiad.core.models import AnswerHistoryEntry, CuratedRow, Level, Subject
from olympiad.stores.base import CuratedStore, HistoryStore

T = TypeVar("T")

DEFAULT_MAX_WORKERS = 8


@lru_cache(maxsize=1)
def shared_executor() -> ThreadPoolExecutor:
    """Process-wide worker pool used by every guard that is not given its own."""
    return ThreadPoolExecutor(max_workers=DEFAULT_MAX_WORKERS, thread_name_prefix="store-guard")


class _TimeoutGuard:
    def __init__(self, timeout: float, executor: ThreadPoolExecutor | None = None):
        self.timeout = timeout
        self.executor = executor or shared_executor()

    def _call(self, label: str, fn: Callable[..., T], *args) -> T:
        future = self.executor.submit(fn, *args)
        try:
            return future.result(timeout=self.timeout)
        except FutureTimeout as e:
            future.cancel()
            logger.warning(f"{label} exceeded {self.timeout:.1f}s")
            raise StoreTimeoutError(f"{label} timed out after {self.timeout}s") from e


class TimeoutGuardedHistoryStore(_TimeoutGuard):
    """HistoryStore wrapper with a hard per-call timeout."""

    def __init__(self, inner: HistoryStore, timeout: float, executor: ThreadPoolExecutor | None = None):
        super().__init__(timeout, executor)
        self.inner = inner

    def fetch_history(self, user_id: str) -> Sequence[AnswerHistoryEntry]:
        return self._call("fetch_history", self.inner.fetch_history, user_id)

    def record_answer(self, entry: AnswerHistoryEntry) -> None:
        self._call("record_answer", self.inner.record_answer, entry)


class TimeoutGuardedCuratedStore(_TimeoutGuard):
    """CuratedStore wrapper with a hard per-call timeout."""

    def __init__(self, inner: CuratedStore, timeout: float, executor: ThreadPoolExecutor | None = None):
        super().__init__(timeout, executor)
        self.inner = inner

    def query_active_questions(
        self,
        level: Level,
        subject: Subject,
        exclude_ids: Collection[str],
        limit: int,
    ) -> Sequence[CuratedRow]:
        return self._call(
            "query_active_questions",
            self.inner.query_active_questions,
            level,
            subject,
            exclude_ids,
            limit,
        )
