"""Wall-clock timers for quick profiling, with a global named registry."""

from __future__ import annotations

import atexit
import time


class TicToc:
    """Pausable timer that accumulates elapsed time."""

    def __init__(self, name: str = "Time duration", start: bool = True) -> None:
        self._name = name
        self._is_working = False
        self._tp = time.perf_counter()
        self._dur = 0.0
        if start:
            self.tic()

    @property
    def name(self) -> str:
        return self._name

    def init(self) -> None:
        """Reset accumulated time without changing the running state."""
        self._dur = 0.0
        self._tp = time.perf_counter()

    def tic(self) -> None:
        """Start or resume the timer."""
        if not self._is_working:
            self._is_working = True
            self._tp = time.perf_counter()

    def toc(self) -> None:
        """Pause the timer."""
        if self._is_working:
            self._is_working = False
            self._dur += time.perf_counter() - self._tp

    def report(self) -> None:
        """Print the elapsed time to standard output."""
        value = format(self.elapsed(), ".3g")
        print(f"{self._name:>10}:  {value:0<5} sec")

    def fintoc(self) -> None:
        """Stop the timer and report."""
        self.toc()
        self.report()

    def elapsed(self) -> float:
        """Elapsed time in seconds, including the running interval."""
        if not self._is_working:
            return self._dur
        return self._dur + (time.perf_counter() - self._tp)


_timers: dict[str, TicToc] = {}


def _get(name: str) -> TicToc:
    timer = _timers.get(name)
    if timer is None:
        timer = _timers[name] = TicToc(name, False)
    return timer


def tic(s: str = "") -> None:
    """Start a global timer; an empty name picks the first free 'TimerN'."""
    if not s:
        for i in range(99999):
            name = f"Timer{i}"
            if name not in _timers:
                tic(name)
                return
    else:
        _get(s).tic()


def tic1(s: str = "") -> None:
    """Stop all global timers and start the given one."""
    toc()
    tic(s)


def toc(s: str = "") -> None:
    """Stop the named global timer, or all of them if the name is empty."""
    if not s:
        for key in sorted(_timers):
            toc(key)
    elif s in _timers:
        _timers[s].toc()


def report(s: str = "") -> None:
    """Print the named global timer, or all of them if the name is empty."""
    if not s:
        for key in sorted(_timers):
            report(key)
    elif s in _timers:
        _timers[s].report()


def fin_report(s: str = "") -> None:
    """Stop, report and remove the named timer, or all of them, longest first."""
    if not s:
        toc()
        for key in sorted(_timers, key=lambda k: _timers[k].elapsed(), reverse=True):
            fin_report(key)
    else:
        timer = _timers.pop(s, None)
        if timer is not None:
            timer.fintoc()


atexit.register(fin_report)