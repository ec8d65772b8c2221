"""
Extraction result container.

Structured output from a non-raising query run, with telemetry
and an optional table/DataFrame payload.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

import pandas as pd

from .flattener import ResultTable


@dataclass
class ExtractionResult:
    """Result of a single query run.

    Carries the flattened table (and its DataFrame form), telemetry,
    and the error message and kind when the query failed.
    """

    success: bool
    source: str
    url: Optional[str] = None
    records: int = 0
    api_calls: int = 0
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    duration_seconds: float = 0.0
    error: Optional[str] = None
    error_type: Optional[str] = None
    table: Optional[ResultTable] = None
    data: Optional[pd.DataFrame] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-safe dictionary (excludes table and DataFrame)."""
        return {
            "success": self.success,
            "source": self.source,
            "url": self.url,
            "records": self.records,
            "api_calls": self.api_calls,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "duration_seconds": self.duration_seconds,
            "error": self.error,
            "error_type": self.error_type,
        }
