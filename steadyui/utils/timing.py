# steadyui/utils/timing.py
from __future__ import annotations

"""Clock helpers
----------------
Integer milliseconds from the monotonic clock. The wait engine compares
elapsed time against timeouts with these, so comparisons are exact.
"""

import functools
import time
from dataclasses import dataclass
from typing import Callable, Optional, ParamSpec, TypeVar

from steadyui.utils.logger import get_logger

P = ParamSpec("P")
T = TypeVar("T")


def now_ms() -> int:
    return time.monotonic_ns() // 1_000_000


def sleep_ms(ms: int) -> None:
    """Block for `ms` milliseconds; zero or negative returns at once."""
    if ms > 0:
        time.sleep(ms / 1000)


@dataclass
class Stopwatch:
    """Elapsed milliseconds since `start()` or since entering the `with` block."""

    started_at: Optional[int] = None

    def start(self) -> "Stopwatch":
        self.started_at = now_ms()
        return self

    def elapsed_ms(self) -> int:
        if self.started_at is None:
            return 0
        return max(0, now_ms() - self.started_at)

    def __enter__(self) -> "Stopwatch":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        return None


def measure(label: str = "", level: str = "DEBUG") -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Log how long each call took, failed calls included.
    Browser actions use it as `@measure("click")`.
    """
    log = get_logger(__name__)
    emit = getattr(log, level.lower(), log.debug)

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        name = label or func.__name__

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            with Stopwatch() as sw:
                try:
                    return func(*args, **kwargs)
                finally:
                    ms = sw.elapsed_ms()
                    emit(f"{name} took {ms} ms" if ms < 1000 else f"{name} took {ms / 1000:.3f} s")
        return wrapper
    return decorator
