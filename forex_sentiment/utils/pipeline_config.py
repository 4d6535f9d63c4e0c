from __future__ import annotations

import os
from dataclasses import dataclass

GDELT_DOC_API = "https://api.gdeltproject.org/api/v2/doc/doc"


@dataclass(frozen=True, slots=True)
class AnalysisSettings:
    gdelt_base_url: str = GDELT_DOC_API
    timeout_seconds: float = 12.0
    max_records: int = 40
    default_timespan: str = "24h"
    headline_limit: int = 10

    @classmethod
    def from_env(cls) -> "AnalysisSettings":
        return cls(
            gdelt_base_url=os.getenv("GDELT_BASE_URL", GDELT_DOC_API),
            timeout_seconds=float(os.getenv("GDELT_TIMEOUT_SECONDS", "12")),
            max_records=int(os.getenv("GDELT_MAX_RECORDS", "40")),
            default_timespan=os.getenv("DEFAULT_TIMESPAN", "24h"),
            headline_limit=int(os.getenv("HEADLINE_LIMIT", "10")),
        )
