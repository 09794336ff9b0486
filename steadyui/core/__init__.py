"""
Core package for steady-ui.
Wait engine, error taxonomy and the Browser session built on them.

The polling function itself is not re-exported here so that
`steadyui.core.wait` keeps naming the submodule:
  from steadyui.core.wait import wait, attempt
  from steadyui.core.browser import Browser
"""

from .browser import Browser
from .errors import SteadyUIError, UIAssertionError
from .wait import POLL_INTERVAL_MS, WaitFailure, WaitSuccess, attempt

__all__ = [
    "Browser",
    "SteadyUIError",
    "UIAssertionError",
    "POLL_INTERVAL_MS",
    "WaitSuccess",
    "WaitFailure",
    "attempt",
]
