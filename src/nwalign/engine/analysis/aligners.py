import asyncio
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from contextlib import AbstractContextManager
from typing import Any, Union
from queue import Empty, Queue

from nwalign.engine.analysis.needleman_wunsch import align
from nwalign.engine.exceptions.alignment import AlignmentEngineNotStartedException
from nwalign.engine.structures.alignment import AlignmentParams, AlignmentResult

logger = logging.getLogger(__name__)

class AsyncAlignmentEngine(AbstractContextManager):
    def __enter__(self):
        self._thread_pool = ThreadPoolExecutor(self._max_threads, thread_name_prefix="async-global-alignment")
        return self

    def __init__(self, max_threads: int = 4, poll_interval: float = 0.005):
        self._max_threads = max_threads
        self._poll_interval = poll_interval
        self._thread_pool: Union[ThreadPoolExecutor, None] = None
        self._work_left = 0
        self._work_complete: Queue[Future] = Queue()

    def align(self, params: AlignmentParams, **associated_data):
        if self._thread_pool is None:
            raise AlignmentEngineNotStartedException()
        work = self._thread_pool.submit(
            self.work, params, **associated_data)
        self._work_left += 1
        work.add_done_callback(self._work_complete.put)
        logger.debug("Submitted alignment (%d outstanding).", self._work_left)

    def work(self, params: AlignmentParams, **associated_data) -> tuple[AlignmentResult, dict[str, Any]]:
        return align(params), associated_data

    async def next_completed(self) -> Union[tuple[AlignmentResult, dict[str, Any]], None]:
        if self._work_left <= 0:
            return None
        # cancelling a wait never consumes a result
        while True:
            try:
                future_now = self._work_complete.get_nowait()
            except Empty:
                await asyncio.sleep(self._poll_interval)
                continue
            self._work_left -= 1
            return future_now.result()

    def __exit__(self, exc_type, exc_value, traceback):
        self.shutdown()

    def __aiter__(self):
        return self

    async def __anext__(self):
        result = await self.next_completed()
        if result is None:
            raise StopAsyncIteration
        return result

    def shutdown(self):
        if self._thread_pool is None:
            return
        logger.debug("Shutting down alignment thread pool with %d results unconsumed.", self._work_left)
        self._thread_pool.shutdown(wait=True, cancel_futures=True)
        self._thread_pool = None
