from __future__ import annotations

import html
import re
import unicodedata
from datetime import datetime, timezone
from typing import Optional

from bs4 import BeautifulSoup

_whitespace_re = re.compile(r"\s+")
_control_chars_re = re.compile(r"[\u0000-\u0008\u000B\u000C\u000E-\u001F\u007F]")

_PUNCT_TRANSLATION = {
    ord("\u2018"): "'",  # left single quote
    ord("\u2019"): "'",  # right single quote
    ord("\u201C"): '"',  # left double quote
    ord("\u201D"): '"',  # right double quote
    ord("\u2013"): "-",  # en dash
    ord("\u2014"): "-",  # em dash
    ord("\u00A0"): " ",  # non-breaking space
}

# GDELT reports seendate as e.g. 20240131T154500Z
_SEENDATE_FORMATS = ("%Y%m%dT%H%M%SZ", "%Y%m%d%H%M%S")


def clean_html_to_text(raw_html: str | None) -> str:
    """Strip tags, unescape entities and collapse whitespace."""
    if not raw_html:
        return ""
    if "<" not in raw_html:
        return _whitespace_re.sub(" ", html.unescape(raw_html)).strip()

    soup = BeautifulSoup(raw_html, "html.parser")
    text = html.unescape(soup.get_text(" "))
    return _whitespace_re.sub(" ", text).strip()


def normalize_plain_text(text: str | None) -> str:
    """Normalize headline text before scoring and theme matching.

    - Strip BOM
    - Replace curly quotes/dashes and non-breaking spaces
    - Unicode normalize (NFKC)
    - Remove control characters and collapse whitespace
    """
    if not text:
        return ""

    if text.startswith("\ufeff"):
        text = text.lstrip("\ufeff")

    text = text.translate(_PUNCT_TRANSLATION)
    text = unicodedata.normalize("NFKC", text)
    text = _control_chars_re.sub(" ", text)
    return _whitespace_re.sub(" ", text).strip()


def parse_seendate(value: str | datetime | None) -> Optional[datetime]:
    """Parse a GDELT ``seendate`` (or ISO 8601 string) into an aware UTC datetime.

    Unparseable values yield ``None``; a bad timestamp never rejects an article.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    raw = str(value).strip()
    if not raw:
        return None
    for fmt in _SEENDATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    try:
        dt = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
