"""Event logging for the solvers.

Solvers report through a :class:`Logger`, which has one method per level.
:class:`StdLogger` prints each event on one line. In text mode values use
their ``repr`` so that ``'1'`` and ``1`` stay distinguishable as vertex ids.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol

from .exceptions import ConfigError


class Logger(Protocol):
    """What a solver needs from a logger."""

    def debug(self, event: str, **fields: Any) -> None:
        """Per-edge detail, e.g. a skipped dangling edge."""
        ...

    def info(self, event: str, **fields: Any) -> None:
        """One line per finished solve."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Input problems: dangling edges found in strict mode or skipped in lenient mode."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        return


class StdLogger:
    """Writes each event as one ``level event key=value`` line or a JSON object.

    Args:
        level: Lowest level written (``"debug"``, ``"info"`` or ``"warning"``).
        json_fmt: Emit JSON objects instead of plain text.
        stream: Destination stream, ``sys.stderr`` when omitted.

    Raises:
        ConfigError: If ``level`` is not one of the names above.
    """

    LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: Any | None = None,
    ) -> None:
        if level not in self.LEVELS:
            raise ConfigError(f"log level must be one of {sorted(self.LEVELS)}, got {level!r}")
        self.threshold = self.LEVELS[level]
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def _format(self, level: str, event: str, fields: Dict[str, Any]) -> str:
        if self.json_fmt:
            return json.dumps({"level": level, "event": event, **fields}, default=repr)
        parts = [level, event] + [f"{k}={v!r}" for k, v in fields.items()]
        return " ".join(parts)

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` if it passes the threshold."""
        if self.LEVELS[level] < self.threshold:
            return
        self.stream.write(self._format(level, event, fields) + "\n")

    def debug(self, event: str, **fields: Any) -> None:
        self.log("debug", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self.log("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self.log("warning", event, **fields)


__all__ = ["Logger", "NoopLogger", "StdLogger"]
