import os
import threading
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from rich.console import Console
from rich.markup import escape as markup_escape


class LogLevel(Enum):
    """Log levels"""
    DEBUG = 0
    INFO = 1
    SUCCESS = 2
    WARNING = 3
    ERROR = 4


def parse_level(value: Union[str, LogLevel, None], default: LogLevel = LogLevel.WARNING) -> LogLevel:
    """Turn a level name such as "debug" into a LogLevel; unknown names give ``default``."""
    if isinstance(value, LogLevel):
        return value
    if not value:
        return default
    try:
        return LogLevel[str(value).strip().upper()]
    except KeyError:
        return default


class Logger:
    """
    Thread-safe console logger.

    Writes to stderr through rich so stdout only carries converted output.
    The level comes from MD2MRKDWN_LOG_LEVEL and defaults to WARNING.
    """

    def __init__(self, name="md2mrkdwn", level: Optional[LogLevel] = None,
                 console: Optional[Console] = None):
        self.name = name
        self._lock = threading.Lock()
        self.console = console or Console(stderr=True)
        self.level = level or parse_level(os.getenv("MD2MRKDWN_LOG_LEVEL"))

    def set_level(self, level: Union[str, LogLevel]):
        """Set log level"""
        self.level = parse_level(level, default=self.level)

    def _should_log(self, level: LogLevel) -> bool:
        return level.value >= self.level.value

    def _log(self, level: LogLevel, style: str, icon: str, message):
        if not self._should_log(level):
            return

        timestamp = datetime.now().strftime("%H:%M:%S")
        text = markup_escape(str(message))

        with self._lock:
            self.console.print(f"[cyan][{timestamp}][/cyan] [{style}]{icon} {text}[/{style}]")

    def debug(self, message, icon="🔧"):
        """Debug output, shown only at DEBUG level"""
        self._log(LogLevel.DEBUG, "dim", icon, message)

    def info(self, message, icon="ℹ️ "):
        self._log(LogLevel.INFO, "blue", icon, message)

    def success(self, message, icon="✅"):
        self._log(LogLevel.SUCCESS, "green", icon, message)

    def warning(self, message, icon="⚠️ "):
        self._log(LogLevel.WARNING, "yellow", icon, message)

    def error(self, message, icon="❌"):
        self._log(LogLevel.ERROR, "red bold", icon, message)


# Global logger instance
logger = Logger()
