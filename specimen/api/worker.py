"""
Background generation with latest-request-wins delivery.

Each ``submit`` starts the generation on its own daemon thread and gets a
request id. A finished job publishes its result only if no newer request
has been submitted since; stale results are dropped when they arrive.
In-flight jobs are never cancelled.
"""

from dataclasses import dataclass
from typing import Optional, Callable, Any
import threading
import logging

from ..core.types import SpecimenParams
from .generate import generate_specimen

logger = logging.getLogger(__name__)


@dataclass
class WorkerResult:
    """A published result, or the error raised by its request."""
    request_id: int
    params: SpecimenParams
    result: Any = None
    error: Optional[BaseException] = None

    @property
    def success(self) -> bool:
        return self.error is None


class GenerationWorker:
    """
    Run specimen generation off the calling thread.

    Parameters
    ----------
    generate_fn : Callable, optional
        Called as ``generate_fn(params, **kwargs)``; defaults to
        ``generate_specimen``
    on_result : Callable, optional
        Receives each published ``WorkerResult``. It is called with the
        worker lock held, so callbacks arrive in request order; it may call
        ``submit`` but should return quickly.
    """

    def __init__(
        self,
        generate_fn: Optional[Callable[..., Any]] = None,
        on_result: Optional[Callable[[WorkerResult], None]] = None,
    ):
        self.generate_fn = generate_fn or generate_specimen
        self.on_result = on_result
        self.latest_result: Optional[WorkerResult] = None

        self._lock = threading.RLock()
        self._next_id = 0
        self._latest_id = 0
        self._threads = []
        self._dropped = 0

    @property
    def latest_request_id(self) -> int:
        return self._latest_id

    @property
    def dropped_count(self) -> int:
        """Number of finished requests discarded as superseded."""
        return self._dropped

    def submit(self, params: SpecimenParams, **kwargs: Any) -> int:
        """Start generation for ``params`` and return its request id."""
        with self._lock:
            self._next_id += 1
            request_id = self._next_id
            self._latest_id = request_id

        thread = threading.Thread(
            target=self._run,
            args=(request_id, params, kwargs),
            name=f"specimen-generation-{request_id}",
            daemon=True,
        )
        self._threads.append(thread)
        thread.start()
        logger.debug(f"Submitted generation request {request_id}")
        return request_id

    def _run(self, request_id: int, params: SpecimenParams, kwargs: dict) -> None:
        try:
            outcome = WorkerResult(request_id, params, result=self.generate_fn(params, **kwargs))
        except Exception as e:
            logger.exception(f"Generation request {request_id} failed: {e}")
            outcome = WorkerResult(request_id, params, error=e)

        with self._lock:
            if request_id != self._latest_id:
                self._dropped += 1
                logger.debug(
                    f"Dropping result of request {request_id} "
                    f"(superseded by {self._latest_id})"
                )
                return
            self.latest_result = outcome
            if self.on_result is not None:
                self.on_result(outcome)

    def wait(self, timeout: Optional[float] = None) -> None:
        """Join every thread started so far."""
        for thread in list(self._threads):
            thread.join(timeout)
        self._threads = [t for t in self._threads if t.is_alive()]


__all__ = [
    "WorkerResult",
    "GenerationWorker",
]
