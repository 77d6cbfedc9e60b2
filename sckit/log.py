"""A two-file logger with per-thread request context and persistent log ids."""

from __future__ import annotations

import atexit
import os
import sys
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Any, Optional, Union

from sckit.common import ScError, now_string

__all__ = [
    "Logger",
    "LOG_NAME",
    "WF_LOG_NAME",
    "LOGID_NAME",
    "MAX_LINE",
]

LOG_NAME = "sc.log"
WF_LOG_NAME = "sc.log.wf"
LOGID_NAME = "__lid__"
MAX_LINE = 1024 << 3

_FATAL = "FATAL"
_WARNING = "WARNING"
_NOTICE = "NOTICE"
_INFO = "INFO"
_TRACE = "TRACE"
_DEBUG = "DEBUG"
_WF_LEVELS = frozenset({_FATAL, _WARNING})


@dataclass
class _Context:
    logid: int
    mod: str
    reqip: str
    started: int = field(default_factory=time.perf_counter_ns)


class Logger:
    """Writes every record to ``sc.log`` and FATAL/WARNING records also to ``sc.log.wf``."""

    def __init__(self, directory: Union[str, "os.PathLike[str]"] = "log", verbose: bool = False) -> None:
        self.directory = Path(directory)
        self.verbose = verbose
        self._log: Optional[IO[str]] = None
        self._wf: Optional[IO[str]] = None
        self._logid = 0
        self._id_lock = threading.Lock()
        self._io_lock = threading.Lock()
        self._local = threading.local()
        self._exit_registered = False

    @property
    def _logid_path(self) -> Path:
        return self.directory / LOGID_NAME

    def start(self) -> None:
        """Create the directory, open the log files and bind the calling thread."""
        self.directory.mkdir(parents=True, exist_ok=True)
        with self._io_lock:
            if self._log is None:
                self._log = open(self.directory / LOG_NAME, "a+", encoding="utf-8")
            if self._wf is None:
                try:
                    self._wf = open(self.directory / WF_LOG_NAME, "a+", encoding="utf-8")
                except OSError:
                    self._log.close()
                    self._log = None
                    raise
        try:
            text = self._logid_path.read_text(encoding="ascii").strip()
        except OSError:
            text = ""
        if text.isdigit():
            with self._id_lock:
                self._logid = int(text) & 0xFFFFFFFF
        self.bind("main thread", "0.0.0.0")
        if not self._exit_registered:
            atexit.register(self.close)
            self._exit_registered = True

    def bind(self, mod: str, reqip: str) -> int:
        """Give the calling thread a module name, request ip and a fresh log id; return the id."""
        with self._id_lock:
            self._logid = (self._logid + 1) & 0xFFFFFFFF
            logid = self._logid
        self._local.context = _Context(logid, mod, reqip)
        return logid

    def reset_timer(self) -> None:
        """Restart the elapsed-time clock of the calling thread."""
        context: Optional[_Context] = getattr(self._local, "context", None)
        if context is None:
            raise ScError("the calling thread is not bound to the logger")
        context.started = time.perf_counter_ns()

    def _write(self, level: str, message: str, args: tuple[Any, ...]) -> None:
        if self._log is None:
            raise ScError(f"logger is not started: {self.directory / LOG_NAME}")
        if args:
            message = message % args
        caller = sys._getframe(2)
        context: Optional[_Context] = getattr(self._local, "context", None)
        if context is None:
            elapsed, logid, reqip, mod = "", 0, "", ""
        else:
            micros = (time.perf_counter_ns() - context.started) // 1000
            elapsed = str(micros & 0xFFFFFFFF)
            logid, reqip, mod = context.logid, context.reqip, context.mod
        line = (
            f"[{now_string()} {elapsed}][{level}]"
            f"[{os.path.basename(caller.f_code.co_filename)}:{caller.f_lineno}:{caller.f_code.co_name}]"
            f"[logid:{logid}][reqip:{reqip}][mod:{mod}]{message}\n"
        )[: MAX_LINE - 1]
        with self._io_lock:
            if self._log is None or self._wf is None:
                raise ScError(f"logger is not started: {self.directory / LOG_NAME}")
            self._log.write(line)
            self._log.flush()
            if level in _WF_LEVELS:
                self._wf.write(line)
                self._wf.flush()

    def fatal(self, message: str, *args: Any) -> None:
        """Log a back-end error."""
        self._write(_FATAL, message, args)

    def warning(self, message: str, *args: Any) -> None:
        """Log a front-end error."""
        self._write(_WARNING, message, args)

    def notice(self, message: str, *args: Any) -> None:
        """Log a system record, such as the end of a request."""
        self._write(_NOTICE, message, args)

    def info(self, message: str, *args: Any) -> None:
        """Log an ordinary record."""
        self._write(_INFO, message, args)

    def trace(self, message: str, *args: Any) -> None:
        """Log a trace record; ignored unless the logger is verbose."""
        if self.verbose:
            self._write(_TRACE, message, args)

    def debug(self, message: str, *args: Any) -> None:
        """Log a debug record; ignored unless the logger is verbose."""
        if self.verbose:
            self._write(_DEBUG, message, args)

    def close(self) -> None:
        """Close the files, persist the last log id and unbind the calling thread."""
        with self._io_lock:
            if self._log is None:
                return
            self._log.close()
            if self._wf is not None:
                self._wf.close()
            self._log = None
            self._wf = None
        with self._id_lock:
            logid = self._logid
        try:
            self._logid_path.write_text(str(logid), encoding="ascii")
        except OSError:
            pass
        self._local.context = None

    def __enter__(self) -> Logger:
        self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()