"""JSON Logger Adapter - Outputs structured log lines for CI collectors."""
import json
import sys
from datetime import datetime, timezone
from typing import Any, TextIO


class JsonLogger:
    """
    Implementation of LoggerPort that writes one JSON object per line.

    Used when the deployment runs in a pipeline whose log collector
    indexes JSON fields (service, stage, outcome, ...). ERROR entries go to
    stderr so a pipeline can tell them apart without parsing.
    """

    LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

    def __init__(
        self,
        level: str = "INFO",
        context: dict | None = None,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
    ):
        """
        Initialize the JSON logger.

        Args:
            level: Minimum log level to output
            context: Additional fields included in every log entry
            stream: Destination for non-error entries (stdout by default)
            error_stream: Destination for ERROR entries (stderr by default)
        """
        self._level = self.LEVELS.get(level.upper(), 20)
        self._context = context or {}
        self._stream = stream or sys.stdout
        self._error_stream = error_stream or sys.stderr

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, exception: Exception | None = None, **kwargs: Any) -> None:
        """Log an error message, optionally with exception details."""
        if exception:
            kwargs["error"] = str(exception)
            kwargs["error_type"] = type(exception).__name__
        self._log("ERROR", message, **kwargs)

    def set_level(self, level: str) -> None:
        """Set the logging level."""
        self._level = self.LEVELS.get(level.upper(), 20)

    def set_context(self, **kwargs: Any) -> None:
        """Add fields (service, stage, ...) to every following log entry."""
        self._context.update(kwargs)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        level_value = self.LEVELS.get(level, 20)
        if level_value < self._level:
            return

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "message": message.strip(),
            **self._context,
            **kwargs,
        }

        target = self._error_stream if level == "ERROR" else self._stream
        print(json.dumps(log_entry, default=str), file=target)
