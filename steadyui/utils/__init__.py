"""
Utils package
-------------
Settings, logging and timing helpers shared by the core and driver packages.
Import submodules directly, e.g. `from steadyui.utils.timing import now_ms`.
"""

__all__: list[str] = []
