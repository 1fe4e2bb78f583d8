"""
Background producer that turns a paginator into a stream of records.

Each call to `produce` starts exactly one daemon thread that drives the
paginator and hands records to the consumer one at a time. After each hand-off
the producer waits until the consumer has taken the record before it advances
the paginator, so it is never more than one record ahead and a slow consumer
throttles page fetching. The stream ends after the last item, or
immediately after the first error record.

Streams are cancellable: `stop()` (or leaving a `with` block) wakes the
producer, which then stops fetching and exits instead of staying blocked on a
consumer that went away.
"""

import queue
import threading
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from covalent_sdk.utils.logger import get_logger
from covalent_sdk.utils.sentry import capture_exception

logger = get_logger(__name__)

T = TypeVar("T")

# Marks the end of the stream on the hand-off queue
_CLOSED = object()


@dataclass(frozen=True)
class StreamRecord(Generic[T]):
    """
    One delivered item: either a value or the error that ended the stream.

    Attributes:
        value (Optional[T]): The item, when `error` is None.
        error (Optional[Exception]): The terminal error, if any.
    """
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        :return: The value.
        :raises Exception: The record's error, if it carries one.
        """
        if self.error is not None:
            raise self.error
        return self.value


class RecordStream(Generic[T]):
    """
    A single-pass, ordered stream of `StreamRecord`s fed by a background thread.

    Attributes:
        name (str): Name of the producer thread.
        poll_interval (float): How often blocked calls re-check for cancellation.
    """

    poll_interval = 0.1

    def __init__(self, source: Iterable[T], name: str = "covalent-stream"):
        """
        Starts the producer thread.

        :param source: A paginator or any iterable of items.
        :param name: Name of the producer thread.
        """
        self.name = name
        self._source = source
        self._queue: "queue.Queue" = queue.Queue(maxsize=1)
        self._stop_event = threading.Event()
        self._taken = threading.Event()
        self._finished = False
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()

    @property
    def running(self) -> bool:
        return self._thread.is_alive()

    def __iter__(self) -> "RecordStream[T]":
        return self

    def __next__(self) -> StreamRecord[T]:
        if self._finished:
            raise StopIteration

        while True:
            try:
                record = self._queue.get(timeout=self.poll_interval)
                break
            except queue.Empty:
                if self._stop_event.is_set():
                    self._finished = True
                    raise StopIteration

        self._taken.set()

        if record is _CLOSED:
            self._finished = True
            raise StopIteration
        if record.error is not None:
            self._finished = True
        return record

    def values(self) -> Iterator[T]:
        """
        Yields plain values.

        :raises Exception: The error carried by the terminal error record.
        """
        for record in self:
            yield record.unwrap()

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        """
        Cancels the stream and waits for the producer thread to exit.

        :param timeout: Seconds to wait for the thread; None waits indefinitely.
        """
        if not self._stop_event.is_set():
            logger.debug(f"Stopping stream {self.name}")
        self._stop_event.set()
        self._finished = True

        # Unblock a producer waiting on a full queue
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break

        if threading.current_thread() is not self._thread:
            self._thread.join(timeout)

    def __enter__(self) -> "RecordStream[T]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()

    def _run(self) -> None:
        iterator = None
        try:
            iterator = iter(self._source)
            for item in iterator:
                if not self._put(StreamRecord(value=item)):
                    logger.debug(f"Stream {self.name} cancelled by consumer")
                    return
        except Exception as e:
            # Any failure ends the stream as an error record
            logger.error(f"Stream {self.name} terminated: {type(e).__name__}: {e}")
            capture_exception(e, stream_name=self.name)
            self._put(StreamRecord(error=e))
        finally:
            close = getattr(iterator, "close", None)
            if close is not None:
                close()
            self._put(_CLOSED, wait_until_taken=False)

    def _put(self, record: object, wait_until_taken: bool = True) -> bool:
        """
        Hands one record to the consumer.

        :return: False if the stream was stopped before the consumer took the record.
        """
        self._taken.clear()
        while True:
            if self._stop_event.is_set():
                return False
            try:
                self._queue.put(record, timeout=self.poll_interval)
                break
            except queue.Full:
                continue

        if not wait_until_taken:
            return True
        while not self._taken.wait(self.poll_interval):
            if self._stop_event.is_set():
                return False
        return not self._stop_event.is_set()


def produce(source: Iterable[T], name: Optional[str] = None) -> RecordStream[T]:
    """
    Starts streaming `source` in a background thread.

    :param source: A paginator or any iterable of items.
    :param name: Optional thread name, useful in logs.
    :return: The running stream.
    """
    return RecordStream(source, name=name or f"covalent-stream-{type(source).__name__}")
