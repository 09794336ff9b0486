# steadyui/utils/config.py
from __future__ import annotations

import functools
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ---------- Enums ----------

class BrowserKind(str, Enum):
    chrome = "chrome"
    firefox = "firefox"
    phantomjs = "phantomjs"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# ---------- Session inputs ----------

class BrowserSpec(BaseModel):
    """
    Browser kind plus where its driver executable lives.

    `directory=None` means "use the current working directory", resolved at
    session creation time rather than when the BrowserSpec is built.
    """

    model_config = ConfigDict(frozen=True)

    kind: BrowserKind = BrowserKind.chrome
    directory: Optional[Path] = None

    def resolve_directory(self) -> Path:
        return Path.cwd() if self.directory is None else self.directory


class SessionConfig(BaseModel):
    """Immutable input to `Browser.create`."""

    model_config = ConfigDict(frozen=True)

    browser: BrowserSpec = Field(default_factory=BrowserSpec)
    element_timeout_ms: int = Field(default=10000, ge=0)
    assertion_timeout_ms: int = Field(default=10000, ge=0)


# ---------- Settings ----------

class Settings(BaseSettings):
    """
    Central configuration for steady-ui.

    Values load in this order of precedence:
      1) Environment variables (prefixed STEADYUI_)
      2) .env file in the working directory
      3) Defaults below
    """

    # ---- Browser ----
    BROWSER: BrowserKind = Field(default=BrowserKind.chrome, description="Driver to launch")
    DRIVER_DIR: Optional[Path] = Field(default=None, description="Directory holding the driver executable; unset = CWD")

    # ---- Timeouts ----
    ELEMENT_TIMEOUT_MS: int = Field(default=10000, ge=0)
    ASSERTION_TIMEOUT_MS: int = Field(default=10000, ge=0)

    # ---- Logging ----
    LOG_LEVEL: LogLevel = Field(default=LogLevel.INFO)
    LOG_TO_FILE: bool = Field(default=False)
    LOG_FILE: Path = Field(default=Path("./steadyui.log"))
    COLORIZED_OUTPUT: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_prefix="STEADYUI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # An empty STEADYUI_DRIVER_DIR= in .env means "current directory"
    @field_validator("DRIVER_DIR", mode="before")
    @classmethod
    def _blank_driver_dir(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v if isinstance(v, Path) else Path(str(v))

    @field_validator("LOG_FILE", mode="after")
    @classmethod
    def _absolutize_log_file(cls, v: Path):
        return v if v.is_absolute() else Path.cwd() / v

    def ensure_dirs(self) -> None:
        """Create the log directory when file logging is on (idempotent)."""
        if self.LOG_TO_FILE:
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    # Convenience: session inputs
    def session_config(self) -> SessionConfig:
        return SessionConfig(
            browser=BrowserSpec(kind=self.BROWSER, directory=self.DRIVER_DIR),
            element_timeout_ms=self.ELEMENT_TIMEOUT_MS,
            assertion_timeout_ms=self.ASSERTION_TIMEOUT_MS,
        )


# --------- Public accessor (memoized) ---------

@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and cache settings once per process.
    Call `get_settings.cache_clear()` if you need to reload after changing env.
    """
    s = Settings()
    s.ensure_dirs()
    return s
