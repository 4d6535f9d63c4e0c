from __future__ import annotations

import os
from typing import Optional

from .base import PolarityBackend


def create_polarity_backend(*, backend: Optional[str] = None) -> PolarityBackend:
    """Create a polarity backend based on POLARITY_BACKEND env or explicit value.

    Supported values: "vader" (default).
    """
    selected = (backend or os.environ.get("POLARITY_BACKEND", "vader")).lower()

    if selected == "vader":
        from .vader import VaderBackend  # lazy import, loads the lexicon

        return VaderBackend()

    raise ValueError(f"Unsupported POLARITY_BACKEND '{selected}'. Use 'vader'.")
