from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True, slots=True)
class Article:
    title: str
    url: str = ""
    description: Optional[str] = None
    domain: str = ""
    source_country: str = ""
    language: str = ""
    seen_at: Optional[datetime] = None

    @property
    def has_text(self) -> bool:
        return bool((self.title or "").strip() or (self.description or "").strip())
