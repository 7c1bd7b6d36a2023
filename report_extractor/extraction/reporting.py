"""Step-by-step JSONL reporting for extraction runs."""
from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

from .. import PROJECT_ROOT

DEFAULT_BASE_DIR = Path("logs/extraction")


def _utcnow() -> str:
    """Return an ISO8601 timestamp in UTC."""

    return datetime.now(timezone.utc).isoformat()


class ExtractionReporter:
    """Persist an event log for one extraction run.

    Events are appended under a lock, so workers processing segments in
    parallel may share a single reporter.
    """

    def __init__(
        self,
        *,
        base_dir: Path | str | None = None,
        run_id: Optional[str] = None,
        enabled: bool = True,
    ) -> None:
        self.enabled = enabled
        self.run_id = run_id or uuid4().hex
        self._lock = threading.Lock()
        self._path: Optional[Path] = None
        if not enabled:
            return

        directory = Path(base_dir) if base_dir is not None else DEFAULT_BASE_DIR
        if not directory.is_absolute():
            directory = PROJECT_ROOT / directory
        directory.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        self._path = directory / f"{stamp}_{self.run_id}.jsonl"

    @classmethod
    def disabled(cls) -> "ExtractionReporter":
        """Return a reporter instance that drops all events."""

        return cls(enabled=False)

    @property
    def log_path(self) -> Optional[str]:
        if not self.enabled or self._path is None:
            return None
        return str(self._path)

    def _append(self, payload: Dict[str, Any]) -> None:
        if not self.enabled or self._path is None:
            return
        entry = json.dumps(payload, ensure_ascii=False, default=str)
        with self._lock:
            with self._path.open("a", encoding="utf-8") as handle:
                handle.write(entry)
                handle.write("\n")

    def log(self, event: str, **details: Any) -> None:
        """Record an intermediate event."""

        if not self.enabled:
            return
        payload: Dict[str, Any] = {
            "timestamp": _utcnow(),
            "event": event,
        }
        if details:
            payload["details"] = details
        self._append(payload)

    def finalize(self, status: str, **details: Any) -> Optional[str]:
        """Record the terminal state and return the log path."""

        if not self.enabled:
            return None
        self._append(
            {
                "timestamp": _utcnow(),
                "event": "pipeline.complete",
                "details": {"status": status, **details},
            }
        )
        return self.log_path


__all__ = ["ExtractionReporter"]
