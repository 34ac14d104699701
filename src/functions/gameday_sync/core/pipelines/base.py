"""Common pipeline primitives for snapshot ingestion and emission."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol


class Writer(Protocol):
    """Protocol describing objects that can persist finished snapshots.

    ``documents`` maps an output name (e.g. ``weather-current.json``) to a
    JSON-serializable payload.
    """

    def write(self, documents: Mapping[str, Dict[str, Any]]) -> "PipelineResult":
        ...


@dataclass
class PipelineResult:
    """Aggregated outcome from running a sync pipeline."""

    success: bool
    processed: int
    written: int = 0
    messages: List[str] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a dictionary representation for CLI and HTTP consumers."""
        payload: Dict[str, Any] = {
            "success": self.success,
            "records_processed": self.processed,
            "files_written": self.written,
        }
        if self.messages:
            payload["messages"] = list(self.messages)
        if self.error:
            payload["error"] = self.error
        return payload
