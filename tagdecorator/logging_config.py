"""
Logging configuration for the tag decorator

Includes IndentLogger, which renders the stages of one decoration call as a
small tree. Indentation is tracked per thread since tags are decorated
concurrently.
"""

import io
import logging
import sys
import threading
from contextlib import contextmanager


class ThreadIndent:
    """Per-thread indentation state for tree-style logging"""

    _tree_chars = {
        "pipe": "│",
        "branch": "├──",
    }
    _state = threading.local()

    @classmethod
    def level(cls) -> int:
        """Return the indentation level of the calling thread"""
        return getattr(cls._state, "level", 0)

    @classmethod
    def increase(cls) -> None:
        """Increase indentation level"""
        cls._state.level = cls.level() + 1

    @classmethod
    def decrease(cls) -> None:
        """Decrease indentation level"""
        if cls.level() > 0:
            cls._state.level = cls.level() - 1

    @classmethod
    def reset(cls) -> None:
        """Reset indentation state (useful for tests)"""
        cls._state.level = 0

    @classmethod
    def get_indent(cls) -> str:
        """Get current indentation string with tree characters"""
        level = cls.level()
        if level == 0:
            return ""
        pipes = f"{cls._tree_chars['pipe']}   " * (level - 1)
        return f"{pipes}{cls._tree_chars['branch']} "


class IndentLogger:
    """Logger wrapper that prefixes messages with the current indentation"""

    def __init__(self, base_logger: logging.Logger) -> None:
        self._logger = base_logger

    def debug(self, msg: str, *args, **kwargs) -> None:
        """Log debug message with indentation"""
        self._logger.debug(f"{self.indent}{msg}", *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        """Log info message with indentation"""
        self._logger.info(f"{self.indent}{msg}", *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        """Log warning message with indentation"""
        self._logger.warning(f"{self.indent}{msg}", *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        """Log error message with indentation"""
        self._logger.error(f"{self.indent}{msg}", *args, **kwargs)

    @property
    def indent(self) -> str:
        """Get current indentation string"""
        return ThreadIndent.get_indent()

    @contextmanager
    def indent_block(self, initial_message: str | None = None):
        """
        Context manager for handling indentation blocks

        Args:
            initial_message: Optional message to log at block start
        """
        if initial_message:
            self.debug(initial_message)
        ThreadIndent.increase()
        try:
            yield
        finally:
            ThreadIndent.decrease()


# UTF-8 wrappers around stdout buffers, kept alive so that a replaced
# handler never closes the underlying buffer when it is collected
_utf8_streams: dict[int, io.TextIOWrapper] = {}


def _utf8_stdout() -> io.TextIOWrapper:
    """Return the shared UTF-8 wrapper for the current stdout buffer"""
    buffer = sys.stdout.buffer
    stream = _utf8_streams.get(id(buffer))
    if stream is None:
        # UTF-8 so tree characters survive non-UTF-8 consoles
        stream = io.TextIOWrapper(buffer, encoding="utf-8", errors="replace")
        _utf8_streams[id(buffer)] = stream
    return stream


def setup_logging(level=logging.INFO):
    """
    Configure logging for the tag decorator

    Args:
        level: Logging level (default: INFO)

    Returns:
        IndentLogger: Configured logger with indentation support
    """
    base_logger = logging.getLogger("tagdecorator")
    base_logger.setLevel(level)

    # Remove existing handlers
    base_logger.handlers = []

    handler = logging.StreamHandler(_utf8_stdout())
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)8s %(message)s"))
    base_logger.addHandler(handler)

    return IndentLogger(base_logger)


logger = IndentLogger(logging.getLogger("tagdecorator"))
