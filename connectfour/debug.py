"""
debug.py - Debug and logging functionality for the Connect Four engine

One DebugManager instance sits on top of the "connectfour" logger. Every
message carries a component tag so that output can be narrowed to the part
of the engine under investigation:

    board   drops and wins on the Board
    ai      per-pass candidate scores and the final pick
    game    session events (first mover, moves, results)
    cli     command dispatch and benchmark timings
"""

import logging
import sys
import time
from contextlib import contextmanager
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Set

COMPONENTS = ("board", "ai", "game", "cli", "debug")

LOGGER_NAME = "connectfour"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# logging has no TRACE level, so it sits just below DEBUG
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 1,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG - 5,
}


class DebugManager:
    """
    Level, component and file settings for the engine's log output.

    Console output goes to stderr so log lines never interleave with the
    board drawn on stdout. The default level is WARNING, which keeps
    interactive play quiet.
    """

    def __init__(self, level: DebugLevel = DebugLevel.WARNING, name: str = LOGGER_NAME):
        """
        Args:
            level: Most detailed level to emit
            name: Logger to drive. Managers under other names never touch
                the level of the package logger used by `debug`.
        """
        self._level = level
        self._enabled = True
        self._log_file: Optional[str] = None
        self._components: Set[str] = set()  # empty means every component
        self._timers: Dict[str, float] = {}
        self._logger = logging.getLogger(name)
        self._logger.setLevel(LEVEL_MAP[level])
        self._attach_console()

    def _attach_console(self) -> None:
        # Child loggers reach the package console through propagation
        if self._logger.name != LOGGER_NAME:
            return
        if any(getattr(h, "_connectfour_console", False) for h in self._logger.handlers):
            return
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
        handler._connectfour_console = True
        self._logger.addHandler(handler)

    def _replace_file_handler(self, path: str) -> None:
        for handler in self._logger.handlers[:]:
            if isinstance(handler, logging.FileHandler):
                self._logger.removeHandler(handler)
                handler.close()

        self._log_file = path or None
        if self._log_file:
            handler = logging.FileHandler(self._log_file)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
            self._logger.addHandler(handler)

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def log_file(self) -> Optional[str]:
        return self._log_file

    def configure(self, level: DebugLevel = None,
                  enabled: bool = None,
                  log_file: str = None,
                  components: Iterable[str] = None):
        """
        Change any subset of the settings; arguments left as None keep their value.

        Args:
            level: Most detailed level to emit
            enabled: Master switch for all output
            log_file: Also write to this file; "" closes the current one
            components: Only emit messages tagged with these (empty for all)

        Raises:
            ValueError: If a component name is unknown
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if enabled is not None:
            self._enabled = enabled

        if log_file is not None:
            self._replace_file_handler(log_file)

        if components is not None:
            components = set(components)
            unknown = components.difference(COMPONENTS)
            if unknown:
                raise ValueError(f"Unknown log components: {', '.join(sorted(unknown))}")
            self._components = components

    def enabled_for(self, level: DebugLevel, component: str = None) -> bool:
        """
        Check whether a message would be emitted.

        Callers use this to skip building expensive messages, such as the
        per-pass score maps logged at TRACE.
        """
        if not self._enabled or level == DebugLevel.NONE:
            return False
        if level.value > self._level.value:
            return False
        return not (component and self._components and component not in self._components)

    def log(self, level: DebugLevel, message: str, component: str = None):
        """
        Emit a message, tagged with its component, if the settings allow it.

        Args:
            level: Level of the message
            message: Text to log
            component: One of COMPONENTS, or None for untagged messages
        """
        if not self.enabled_for(level, component):
            return

        if component:
            message = f"[{component}] {message}"
        if level == DebugLevel.TRACE:
            message = f"TRACE: {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: str = None):
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: str = None):
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: str = None):
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: str = None):
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: str = None):
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, marker_name: str):
        """Start (or restart) a named timer."""
        self._timers[marker_name] = time.perf_counter()

    def end_timer(self, marker_name: str, component: str = None) -> Optional[float]:
        """
        Stop a named timer and log the elapsed time at DEBUG.

        Returns:
            Elapsed seconds, or None if the timer was never started
        """
        started = self._timers.pop(marker_name, None)
        if started is None:
            self.warning(f"Timer '{marker_name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.debug(f"Performance [{marker_name}]: {elapsed:.6f} seconds", component)
        return elapsed

    @contextmanager
    def timer(self, marker_name: str, component: str = None) -> Iterator[None]:
        """Time the body of a with-block."""
        self.start_timer(marker_name)
        try:
            yield
        finally:
            self.end_timer(marker_name, component)

    def set_from_string(self, level_str: str):
        """Set the level from its name, as given on the command line."""
        try:
            level = DebugLevel[level_str.upper()]
        except KeyError:
            self.warning(f"Unknown debug level: {level_str}")
            return

        self.configure(level=level)
        self.info(f"Debug level set to {level.name}")


debug = DebugManager()
