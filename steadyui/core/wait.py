# steadyui/core/wait.py
from __future__ import annotations

"""Wait engine
--------------
Bounded-time polling. A probe returns WaitSuccess or WaitFailure; the loop
re-probes on a fixed cadence until success or until the timeout has elapsed,
then raises the last failure's own error.

State lives in locals only, so concurrent waits on different sessions never
interfere.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from steadyui.utils.logger import get_logger
from steadyui.utils.timing import now_ms, sleep_ms

T = TypeVar("T")

POLL_INTERVAL_MS = 1000

log = get_logger(__name__)


@dataclass(frozen=True)
class WaitSuccess(Generic[T]):
    value: T


@dataclass(frozen=True)
class WaitFailure:
    error: BaseException


WaitResult = Union[WaitSuccess[T], WaitFailure]
Probe = Callable[[], WaitResult[T]]


def attempt(fn: Callable[[], T]) -> WaitResult[T]:
    """Run `fn` once; its return value is a success, any exception a failure."""
    try:
        return WaitSuccess(fn())
    except Exception as exc:
        return WaitFailure(exc)


def wait(timeout_ms: int, probe: Probe[T], *, interval_ms: int = POLL_INTERVAL_MS) -> T:
    """
    Poll `probe` until it succeeds or `timeout_ms` has elapsed.

    The first probe runs immediately. Elapsed time is measured from the start
    of the wait, so a probe that always fails gets roughly
    timeout_ms / interval_ms + 1 invocations.

    Returns:
        The value of the first successful probe.

    Raises:
        The error carried by the last failed probe, unchanged.
    """
    started = now_ms()
    attempt_no = 0

    while True:
        attempt_no += 1
        probed_at = now_ms()
        result = probe()
        if isinstance(result, WaitSuccess):
            return result.value

        elapsed = now_ms() - started
        if elapsed >= timeout_ms:
            log.debug(f"Gave up after {attempt_no} attempt(s) in {elapsed} ms: {result.error!r}")
            raise result.error

        delay = max(0, interval_ms - (now_ms() - probed_at))
        log.debug(f"Attempt {attempt_no} failed ({elapsed}/{timeout_ms} ms): {result.error!r}; next in {delay} ms")
        sleep_ms(delay)


__all__ = [
    "POLL_INTERVAL_MS",
    "WaitSuccess",
    "WaitFailure",
    "WaitResult",
    "Probe",
    "attempt",
    "wait",
]
