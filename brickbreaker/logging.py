"""
BrickBreaker Logging

Per-module log levels plus structured record sinks for session replays.

Usage:
    from brickbreaker.logging import get_logger

    log = get_logger('session')
    log.debug("Collision pass")
    log.info("Game started")

    # Structured records (state transitions, etc.)
    from brickbreaker.logging import emit_record
    emit_record('session', {'type': 'transition', 'state': 'won'})

Configuration:
    Environment variables:
        BRICKBREAKER_LOG_LEVEL=DEBUG        # Global default level
        BRICKBREAKER_LOG_COLLISION=TRACE    # Module-specific level
        BRICKBREAKER_LOG_DIR=/tmp/logs      # Where FileSink writes

    Or programmatically:
        from brickbreaker.logging import configure_logging
        configure_logging(level='DEBUG', modules={'collision': 'INFO'})
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

ENV_PREFIX = 'BRICKBREAKER_LOG_'


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-frame detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


# =============================================================================
# Structured record sinks
# =============================================================================

class LogSink(ABC):
    """
    Abstract base class for structured record sinks.

    Sinks receive JSON-serializable records and write them somewhere.
    """

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """
        Emit a structured log record.

        Args:
            module: Module name (e.g., 'session')
            record: Structured data to log (must be JSON-serializable)
        """

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""

    def __enter__(self) -> 'LogSink':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class FileSink(LogSink):
    """
    Writes structured records to one JSONL file per module.

    Args:
        log_dir: Directory for log files (default: from get_log_dir())
        session_name: Identifier used in file names (default: timestamp)
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        session_name: Optional[str] = None,
    ):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, Any] = {}

    def _ensure_dir(self) -> Path:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        self._log_dir.mkdir(parents=True, exist_ok=True)
        return self._log_dir

    def path_for(self, module: str) -> Path:
        """Get the JSONL path used for a module."""
        return self._ensure_dir() / f"{self._session_name}_{module}.jsonl"

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Append record to the module's JSONL file."""
        if module not in self._files:
            self._files[module] = open(self.path_for(module), 'a')
        if 'wall_time' not in record:
            record = {'wall_time': time.time(), **record}
        self._files[module].write(json.dumps(record) + "\n")
        self._files[module].flush()

    def close(self) -> None:
        """Close all open files."""
        for f in self._files.values():
            f.close()
        self._files.clear()


class NullSink(LogSink):
    """No-op sink when record logging is disabled."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Register a sink for a specific module."""
    _sinks[module] = sink


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Emit a structured record to the module's sink.

    Returns:
        True if record was emitted, False if no sink is registered
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister all sinks."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


# =============================================================================
# Level configuration
# =============================================================================

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,
}


def get_log_dir() -> str:
    """Get the log directory.

    Priority:
    1. Configured log_dir (BRICKBREAKER_LOG_DIR)
    2. ~/.local/share/brickbreaker/logs (or XDG_DATA_HOME)
    """
    if _config.get('log_dir'):
        return str(Path(_config['log_dir']).expanduser())

    xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
    return str(Path(xdg_data) / 'brickbreaker' / 'logs')


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel, defaulting to INFO."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)


def _load_env_config() -> None:
    """Load levels from BRICKBREAKER_LOG_* environment variables."""
    level_key = ENV_PREFIX + 'LEVEL'
    dir_key = ENV_PREFIX + 'DIR'

    if level_key in os.environ:
        _config['default_level'] = _level_from_string(os.environ[level_key])
    if dir_key in os.environ:
        _config['log_dir'] = os.environ[dir_key]

    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX) and key not in (level_key, dir_key):
            module_name = key[len(ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


_load_env_config()


class GameLogger:
    """Logger for a specific module."""

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_')

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        return _config['module_levels'].get(self._module_key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(f"[{self.module}] {level_name}: {msg}", file=sys.stderr)

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> GameLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') twice returns the
    same instance.
    """
    return GameLogger(module)


def disable_logging() -> None:
    """Disable all logging."""
    _config['default_level'] = LogLevel.OFF
