"""
Test background generation with latest-request-wins delivery.
"""

import threading

import pytest

from specimen.core.types import SpecimenParams
from specimen.api.worker import GenerationWorker, WorkerResult


class TestGenerationWorker:
    """Only the newest request's result is published."""

    def test_stale_result_is_dropped(self):
        """A slow first request finishing after a second one is discarded."""
        release_first = threading.Event()
        published = []

        def fake_generate(params, **kwargs):
            if params.gauge_length == 1.0:
                release_first.wait(timeout=5.0)
            return params.gauge_length

        worker = GenerationWorker(generate_fn=fake_generate, on_result=published.append)

        first = worker.submit(SpecimenParams(gauge_length=1.0))
        second = worker.submit(SpecimenParams(gauge_length=2.0))
        worker._threads[1].join(timeout=5.0)
        release_first.set()
        worker.wait(timeout=5.0)

        assert (first, second) == (1, 2)
        assert worker.latest_request_id == 2
        assert worker.dropped_count == 1
        assert len(published) == 1
        assert published[0].request_id == 2
        assert published[0].result == 2.0
        assert worker.latest_result is published[0]

    def test_sequential_requests_all_published(self):
        """Requests that finish in order are each published."""
        published = []
        worker = GenerationWorker(generate_fn=lambda params: params.gauge_diameter,
                                  on_result=published.append)

        worker.submit(SpecimenParams(gauge_diameter=6.0))
        worker.wait(timeout=5.0)
        worker.submit(SpecimenParams(gauge_diameter=7.0))
        worker.wait(timeout=5.0)

        assert [r.result for r in published] == [6.0, 7.0]
        assert worker.dropped_count == 0

    def test_error_is_published_not_raised(self):
        """A raising generation becomes a failed WorkerResult."""
        def failing(params):
            raise RuntimeError("backend exploded")

        worker = GenerationWorker(generate_fn=failing)
        worker.submit(SpecimenParams())
        worker.wait(timeout=5.0)

        result = worker.latest_result
        assert isinstance(result, WorkerResult)
        assert result.success is False
        assert isinstance(result.error, RuntimeError)

    def test_kwargs_forwarded(self):
        """Keyword arguments reach the generation function."""
        seen = {}

        def capture(params, **kwargs):
            seen.update(kwargs)
            return None

        worker = GenerationWorker(generate_fn=capture)
        worker.submit(SpecimenParams(), standard="E606")
        worker.wait(timeout=5.0)

        assert seen == {"standard": "E606"}
        assert worker.latest_result.success


class _PausingLock:
    """Lock that stalls one named thread right after it releases."""

    def __init__(self, thread_name, released, resume):
        self._inner = threading.RLock()
        self._thread_name = thread_name
        self._released = released
        self._resume = resume

    def __enter__(self):
        self._inner.acquire()
        return self

    def __exit__(self, *exc_info):
        self._inner.release()
        if threading.current_thread().name == self._thread_name:
            self._released.set()
            self._resume.wait(timeout=2.0)
        return False


class TestCallbackOrdering:
    """Callbacks reach the consumer in request order."""

    def test_callback_delivered_before_newer_request_publishes(self):
        """A request stalled after publishing cannot deliver after a newer one."""
        first_released = threading.Event()
        second_delivered = threading.Event()
        delivered = []

        def on_result(outcome):
            delivered.append(outcome.request_id)
            if outcome.request_id == 2:
                second_delivered.set()

        worker = GenerationWorker(generate_fn=lambda params: params.gauge_length,
                                  on_result=on_result)
        worker._lock = _PausingLock("specimen-generation-1", first_released, second_delivered)

        worker.submit(SpecimenParams(gauge_length=1.0))
        assert first_released.wait(timeout=5.0)
        worker.submit(SpecimenParams(gauge_length=2.0))
        worker.wait(timeout=5.0)

        assert delivered == [1, 2]
        assert worker.latest_result.request_id == 2
        assert worker.dropped_count == 0
