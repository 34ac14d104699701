"""Base data transformation utilities for upstream payloads."""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd  # type: ignore


def is_missing(value: Any) -> bool:
    """Return ``True`` for ``None`` and pandas missing scalars (``NaN``/``NaT``)."""
    if value is None:
        return True
    if isinstance(value, (dict, list, tuple)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


class BaseDataTransformer:
    """Abstract base class for transforming raw DataFrame rows into records.

    Rows are visited in frame order and never deduplicated, so the output
    order always matches the upstream order.
    """

    required_fields: List[str] = []  # a list of keys that must be present

    def transform(self, df: pd.DataFrame) -> List[Any]:
        """Convert a pandas DataFrame into a list of records."""
        records: List[Any] = []
        for row in df.to_dict(orient="records"):
            record = self.sanitize_record(row)
            if self.validate_record(record):
                records.append(self.build_record(record))
        return records

    def sanitize_record(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Return a cleaned version of ``record``."""
        return record

    def validate_record(self, record: Dict[str, Any]) -> bool:
        """Return ``True`` if ``record`` contains all required fields."""
        for field in self.required_fields:
            value = record.get(field)
            if is_missing(value) or value == "":
                return False
        return True

    def build_record(self, record: Dict[str, Any]) -> Any:
        """Turn a validated record into its output shape."""
        return record
