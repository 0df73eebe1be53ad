"""Run callables periodically, each on its own worker thread."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Callable, Optional, TextIO


class Scheduler:
    """Runs scheduled tasks at fixed frequencies until descheduled or shut down."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next_id = 0
        self._tasks: dict[int, threading.Event] = {}
        self._threads: list[threading.Thread] = []
        self._shut_down = False

    def schedule(self, task: Callable[[], None], freq_hz: float) -> int:
        """Start calling task freq_hz times per second; return its id."""
        if freq_hz <= 0:
            raise ValueError("freq_hz must be positive")
        period = 1.0 / freq_hz
        with self._lock:
            if self._shut_down:
                raise RuntimeError("scheduler has been shut down")
            self._next_id += 1
            task_id = self._next_id
            stop = threading.Event()
            thread = threading.Thread(
                target=self._run,
                args=(task, period, stop),
                name=f"scheduler-task-{task_id}",
                daemon=True,
            )
            self._tasks[task_id] = stop
            self._threads.append(thread)
            thread.start()
        return task_id

    @staticmethod
    def _run(task: Callable[[], None], period: float, stop: threading.Event) -> None:
        while not stop.is_set():
            task()
            if stop.wait(period):
                break

    def deschedule(self, task_id: int) -> Optional[int]:
        """Stop a task; return its id, or None if no such task is scheduled."""
        with self._lock:
            stop = self._tasks.pop(task_id, None)
        if stop is None:
            return None
        stop.set()
        return task_id

    def shutdown(self) -> None:
        """Stop every task and wait for the worker threads to finish."""
        with self._lock:
            self._shut_down = True
            stops = list(self._tasks.values())
            self._tasks.clear()
            threads = list(self._threads)
            self._threads.clear()
        for stop in stops:
            stop.set()
        current = threading.current_thread()
        for thread in threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> "Scheduler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


def _announcer(message: str, stream: Optional[TextIO] = None) -> Callable[[], None]:
    """Return a task that writes message as a line to stream and flushes it."""
    out = stream if stream is not None else sys.stdout
    lock = threading.Lock()

    def announce() -> None:
        with lock:
            out.write(f"{message}\n")
            out.flush()

    return announce


def main(argv=None) -> int:
    """Print "func" periodically for a while, then stop."""
    parser = argparse.ArgumentParser(description="Run a periodic task for a while.")
    parser.add_argument("--frequency", type=float, default=2.0)
    parser.add_argument("--duration", type=float, default=5.0)
    args = parser.parse_args(argv)

    with Scheduler() as scheduler:
        scheduler.schedule(_announcer("func"), args.frequency)
        time.sleep(args.duration)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())