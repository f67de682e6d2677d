"""Watch mode: poll the input file and rerun the pipeline on change.

Runs for one file never overlap. A change seen while a run is in flight
queues exactly one follow-up run; further changes fold into it.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from chaincss.pipeline import Pipeline

logger = logging.getLogger(__name__)


class RunQueue:
    """Single-flight job runner with one coalesced rerun."""

    def __init__(self, job: Callable[[], object], *, name: str = "chaincss-run") -> None:
        self._job = job
        self._name = name
        self._lock = threading.Lock()
        self._running = False
        self._pending = False
        self._idle = threading.Event()
        self._idle.set()

    @property
    def running(self) -> bool:
        with self._lock:
            return self._running

    def request(self) -> None:
        """Ask for a run. Returns immediately."""
        with self._lock:
            if self._running:
                self._pending = True
                return
            self._running = True
            self._idle.clear()
        threading.Thread(target=self._drain, name=self._name, daemon=True).start()

    def wait_idle(self, timeout: float | None = None) -> bool:
        return self._idle.wait(timeout)

    def _drain(self) -> None:
        while True:
            try:
                self._job()
            except Exception:
                logger.exception("Watch run failed")
            with self._lock:
                if not self._pending:
                    self._running = False
                    self._idle.set()
                    return
                self._pending = False


class Watcher:
    """Polls *input_file* and recompiles it into *output_file* on change."""

    def __init__(
        self,
        input_file: str | Path,
        output_file: str | Path,
        pipeline: Pipeline,
        *,
        interval: float = 0.5,
    ) -> None:
        self.input_path = Path(input_file)
        self.output_path = Path(output_file)
        self.pipeline = pipeline
        self.interval = interval
        self.queue = RunQueue(self._rebuild, name=f"chaincss-watch:{self.input_path.name}")
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._signature = self._stat()

    def _stat(self) -> tuple[int, int] | None:
        try:
            st = self.input_path.stat()
        except FileNotFoundError:
            return None
        return (st.st_mtime_ns, st.st_size)

    def _rebuild(self) -> None:
        logger.info("File changed: %s", self.input_path)
        self.pipeline.run(self.input_path, self.output_path)
        logger.info("Rebuilt %s", self.output_path)

    def check(self) -> bool:
        """Poll once; request a rebuild and return ``True`` if the file changed."""
        signature = self._stat()
        if signature == self._signature:
            return False
        self._signature = signature
        if signature is None:
            logger.warning("Watched file disappeared: %s", self.input_path)
            return False
        self.queue.request()
        return True

    def _loop(self) -> None:
        while not self._stop.wait(self.interval):
            self.check()

    def start(self) -> None:
        logger.info("Watching for changes in %s...", self.input_path)
        self._thread = threading.Thread(target=self._loop, name="chaincss-watcher", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
        self.queue.wait_idle(timeout)

    def wait(self) -> None:
        """Block until :meth:`stop` is called (e.g. from a signal handler)."""
        self._stop.wait()
