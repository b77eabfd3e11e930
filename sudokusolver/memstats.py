#!/usr/bin/env python

"""
sudokusolver/memstats.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

Periodic memory reporting, in the background, while a solve runs.

It only looks at the process (via :mod:`tracemalloc` and :mod:`gc`), never at
the board.

"""

import gc
import logging
import threading
import tracemalloc
from typing import Optional

log = logging.getLogger(__name__)


def b_to_kib(b: int) -> int:
    return b // 1024


class MemStatsReporter(object):
    """
    Logs memory use every ``interval`` seconds from a daemon thread.

    .. code-block:: python

        with MemStatsReporter(interval=0.5):
            solve(grid)
    """
    def __init__(self, interval: float = 1.0) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive; was {interval}")
        self.interval = interval
        self.n_reports = 0
        self._stop = threading.Event()
        self._thread = None  # type: Optional[threading.Thread]
        self._started_tracing = False

    def __enter__(self) -> "MemStatsReporter":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()

    def start(self) -> None:
        if self._thread is not None:
            return
        if not tracemalloc.is_tracing():
            tracemalloc.start()
            self._started_tracing = True
        self._stop.clear()
        self._thread = threading.Thread(target=self._run,
                                        name="memstats", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        if self._started_tracing:
            tracemalloc.stop()
            self._started_tracing = False

    def report(self) -> str:
        """
        Logs, and returns, one line of statistics.
        """
        current, peak = tracemalloc.get_traced_memory()
        n_collections = sum(s["collections"] for s in gc.get_stats())
        msg = (f"Alloc = {b_to_kib(current)} KiB\t"
               f"Peak = {b_to_kib(peak)} KiB\t"
               f"NumGC = {n_collections}")
        log.info(msg)
        self.n_reports += 1
        return msg

    def _run(self) -> None:
        self.report()
        while not self._stop.wait(self.interval):
            self.report()
