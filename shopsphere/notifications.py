from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Literal

logger = logging.getLogger(__name__)

ToastLevel = Literal["success", "info", "error"]


@dataclass(frozen=True)
class Toast:
    level: ToastLevel
    message: str
    position: str = "bottom-right"
    auto_close_ms: int = 2000


class NotificationCenter:
    """Queue of toasts waiting to be shown by the view."""

    def __init__(self, auto_close_ms: int = 2000) -> None:
        self.auto_close_ms = auto_close_ms
        self._queue: List[Toast] = []

    def push(self, level: ToastLevel, message: str) -> Toast:
        toast = Toast(level=level, message=message, auto_close_ms=self.auto_close_ms)
        self._queue.append(toast)
        logger.info("Toast [%s] %s", level, message)
        return toast

    def success(self, message: str) -> Toast:
        return self.push("success", message)

    def info(self, message: str) -> Toast:
        return self.push("info", message)

    def error(self, message: str) -> Toast:
        return self.push("error", message)

    def drain(self) -> List[Dict[str, object]]:
        """Return pending toasts as dicts and empty the queue."""

        pending, self._queue = self._queue, []
        return [asdict(t) for t in pending]
