"""Writer implementations for sync pipelines."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping

from src.shared.utils.logging import get_logger

from .base import PipelineResult


class JsonFileWriter:
    """Persist snapshots as pretty-printed JSON files under ``output_dir``.

    Each file is written to a temporary sibling first and then renamed over
    the target, so readers never observe a partially written snapshot.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)
        self.logger = get_logger(f"JsonFileWriter[{self.output_dir}]")

    def write(self, documents: Mapping[str, Dict[str, Any]]) -> PipelineResult:
        messages: List[str] = []
        self.output_dir.mkdir(parents=True, exist_ok=True)
        for name, payload in documents.items():
            path = self.output_dir / name
            self._write_atomic(path, payload)
            messages.append(f"Wrote {path}")
            self.logger.info("Wrote %s", path)
        return PipelineResult(True, len(documents), written=len(documents), messages=messages)

    def _write_atomic(self, path: Path, payload: Dict[str, Any]) -> None:
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2, ensure_ascii=False)
            temp_path.replace(path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise


class NullWriter:
    """Writer that skips persistence but returns a successful result.
    For dry runs or testing pipelines without filesystem side effects.
    """

    def write(self, documents: Mapping[str, Dict[str, Any]]) -> PipelineResult:
        message = "Writer disabled; skipping persistence"
        return PipelineResult(True, len(documents), messages=[message])
